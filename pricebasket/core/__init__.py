"""Core pricing model: items, catalog, basket and pricing."""

from .basket import Basket
from .catalog import Catalog
from .errors import (
    AmbiguousRuleError,
    ConfigError,
    CorruptDataError,
    DataFileNotFoundError,
    DuplicateEntryError,
    InvalidItemError,
    MalformedEntryError,
    MalformedPriceError,
    PriceBasketError,
    UnknownItemError,
    UnsupportedRuleError,
)
from .items import ItemId
from .loader import CATALOG_FILE, OFFERS_FILE, DataReader
from .pricing import Price, PricingEngine, price
from .types import BasketView, OfferParser, OfferRule

__all__ = [
    "AmbiguousRuleError",
    "Basket",
    "BasketView",
    "CATALOG_FILE",
    "Catalog",
    "ConfigError",
    "CorruptDataError",
    "DataFileNotFoundError",
    "DataReader",
    "DuplicateEntryError",
    "InvalidItemError",
    "ItemId",
    "MalformedEntryError",
    "MalformedPriceError",
    "OFFERS_FILE",
    "OfferParser",
    "OfferRule",
    "Price",
    "PriceBasketError",
    "PricingEngine",
    "UnknownItemError",
    "UnsupportedRuleError",
    "price",
]
