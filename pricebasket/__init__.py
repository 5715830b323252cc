"""Price Basket - Price a shopping basket against a catalog and special offers."""

__version__ = "0.1.0"
__author__ = "Rohan Vinaik"
__email__ = "rohanpvinaik@gmail.com"

from .core.basket import Basket
from .core.catalog import Catalog
from .core.items import ItemId
from .core.pricing import Price, PricingEngine, price
from .offers.package import OfferPackage

__all__ = [
    "Basket",
    "Catalog",
    "ItemId",
    "OfferPackage",
    "Price",
    "PricingEngine",
    "price",
    "__version__",
]
