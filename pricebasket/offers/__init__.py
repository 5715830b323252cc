"""Special offer rules and the package that holds them."""

from .bundle import BundleOffer, BundleOfferParser
from .discount import DiscountOffer, DiscountOfferParser
from .package import OfferPackage

__all__ = [
    "BundleOffer",
    "BundleOfferParser",
    "DiscountOffer",
    "DiscountOfferParser",
    "OfferPackage",
]
