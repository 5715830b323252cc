"""Setup configuration for the pricebasket package."""

import os
from setuptools import setup, find_packages

# Read the README
with open("README.md", "r", encoding="utf-8") as fh:
    long_description = fh.read()

# Read version from package
version_file = os.path.join(os.path.dirname(__file__), "pricebasket", "__init__.py")
with open(version_file) as f:
    for line in f:
        if line.startswith("__version__"):
            version = line.split("=")[1].strip().strip('"').strip("'")
            break
    else:
        version = "0.1.0"

setup(
    name="pricebasket",
    version=version,
    author="Rohan Vinaik",
    author_email="rohanpvinaik@gmail.com",
    description="Price a shopping basket against a product catalog and special offers",
    long_description=long_description,
    long_description_content_type="text/markdown",
    packages=find_packages(exclude=["tests", "tests.*"]),
    classifiers=[
        "Development Status :: 4 - Beta",
        "Intended Audience :: Developers",
        "License :: OSI Approved :: MIT License",
        "Programming Language :: Python :: 3",
        "Programming Language :: Python :: 3.10",
        "Programming Language :: Python :: 3.11",
        "Programming Language :: Python :: 3.12",
        "Operating System :: OS Independent",
    ],
    python_requires=">=3.10",
    install_requires=[
        "pyyaml>=6.0",
        "click>=8.0",
        "rich>=13.0",
    ],
    extras_require={
        "dev": [
            "pytest>=7.0",
            "coverage>=6.0",
            "ruff>=0.1",
            "mypy>=1.0",
            "black>=23.0",
            "isort>=5.0",
            "build>=0.10",
            "twine>=4.0",
        ],
    },
    entry_points={
        "console_scripts": [
            "pricebasket=pricebasket.cli:main",
            "price-basket=pricebasket.cli:main",  # Alternative name
        ],
    },
    include_package_data=True,
    package_data={
        "pricebasket": ["py.typed", "defaults/*.list"],
    },
    keywords=[
        "shopping-basket",
        "pricing",
        "special-offers",
        "discounts",
        "checkout",
    ],
)
