"""
Configuration system for pricebasket.

Settings live in a nested dictionary of defaults that can be overridden by a
YAML or JSON file and by ``PRICEBASKET_*`` environment variables.
"""

import copy
import json
import os
from pathlib import Path
from typing import Any, Dict, Mapping, Optional, Union

import yaml

from .core.errors import ConfigError

CONFIG_FILE_NAMES = [".pricebasket.yml", ".pricebasket.yaml", "pricebasket.yml", "pricebasket.yaml"]

ENV_PREFIX = "PRICEBASKET_"

# Environment variable suffix -> dotted config key
ENV_MAPPINGS = {
    "DATA_DIR": "data.dir",
    "CURRENCY_SYMBOL": "report.currency_symbol",
    "LOG_LEVEL": "logging.level",
    "LOG_FORMAT": "logging.format",
}


class Config:
    """Configuration manager for the basket pricer."""

    DEFAULT_CONFIG = {
        "data": {
            "dir": ".",
            "catalog_file": "catalog.list",
            "offers_file": "offers.list",
            "create_missing": True,
        },
        "offers": {
            "disabled_parsers": [],
            "discover_plugins": True,
        },
        "report": {
            "currency_symbol": "£",
            "minor_unit_suffix": "p",
            "format": "text",  # Options: text, json
        },
        "logging": {
            "level": "WARNING",
            "format": "text",  # Options: text, json
        },
    }

    def __init__(self, config_dict: Optional[Dict] = None, source: Optional[Path] = None):
        """Initialize with optional config dictionary."""
        self.config = self._merge_configs(copy.deepcopy(self.DEFAULT_CONFIG), config_dict or {})
        self.source = source

    @classmethod
    def from_file(cls, path: Union[str, Path]) -> "Config":
        """Load configuration from a file."""
        path = Path(path)
        if not path.exists():
            raise ConfigError(f"Configuration file not found: {path}", {"path": str(path)})

        try:
            with open(path, "r", encoding="utf-8") as f:
                if path.suffix in [".yaml", ".yml"]:
                    data = yaml.safe_load(f) or {}
                elif path.suffix == ".json":
                    data = json.load(f)
                else:
                    raise ConfigError(f"Unsupported config format: {path.suffix}", {"path": str(path)})
        except (yaml.YAMLError, json.JSONDecodeError) as e:
            raise ConfigError(f"Could not parse {path}: {e}", {"path": str(path)}) from e

        if not isinstance(data, dict):
            raise ConfigError(f"Configuration in {path} must be a mapping", {"path": str(path)})

        return cls(data, source=path)

    @classmethod
    def find_and_load(cls, start_path: Union[str, Path]) -> "Config":
        """Find and load configuration from standard locations."""
        # Look for .pricebasket.yml in current and parent directories
        current = Path(start_path).resolve()

        while True:
            for name in CONFIG_FILE_NAMES:
                config_path = current / name
                if config_path.is_file():
                    return cls.from_file(config_path)
            if current == current.parent:
                break
            current = current.parent

        # Return default config if no file found
        return cls()

    def apply_env_overrides(self, environ: Optional[Mapping[str, str]] = None) -> "Config":
        """Apply ``PRICEBASKET_*`` environment variable overrides in place."""
        environ = os.environ if environ is None else environ

        for suffix, key in ENV_MAPPINGS.items():
            value = environ.get(ENV_PREFIX + suffix)
            if value:
                self.set(key, value)

        return self

    def get(self, key: str, default=None):
        """Get configuration value by dot-separated key."""
        keys = key.split(".")
        value = self.config

        for k in keys:
            if isinstance(value, dict):
                value = value.get(k)
                if value is None:
                    return default
            else:
                return default

        return value

    def set(self, key: str, value: Any):
        """Set configuration value by dot-separated key."""
        keys = key.split(".")
        config = self.config

        # Navigate to the parent of the target key
        for k in keys[:-1]:
            if not isinstance(config.get(k), dict):
                config[k] = {}
            config = config[k]

        config[keys[-1]] = value

    def to_dict(self) -> Dict:
        """Convert to dictionary."""
        return copy.deepcopy(self.config)

    def _merge_configs(self, base: Dict, override: Dict) -> Dict:
        """Recursively merge configuration dictionaries."""
        result = base.copy()

        for key, value in override.items():
            if key in result and isinstance(result[key], dict) and isinstance(value, dict):
                result[key] = self._merge_configs(result[key], value)
            else:
                result[key] = value

        return result
