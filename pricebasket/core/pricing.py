"""Basket pricing."""

from __future__ import annotations

import logging
from dataclasses import dataclass, field
from decimal import Decimal
from types import MappingProxyType
from typing import TYPE_CHECKING, Any, Dict, List, Mapping, Protocol

from .basket import Basket
from .catalog import Catalog
from .money import ZERO, round_money
from .types import BasketView, OfferRule

if TYPE_CHECKING:
    from ..offers.package import OfferPackage

logger = logging.getLogger(__name__)


class OfferSource(Protocol):
    """Anything that can list the offers applicable to a basket."""

    def applicable_offers(self, basket: BasketView) -> List[OfferRule]:
        ...


@dataclass(frozen=True)
class Price:
    """
    Result of pricing a basket.

    Attributes:
        subtotal: Price of the items before any offers
        total: Price after offers, never below zero
        offers: Discount granted by each applied offer, keyed by the offer's
            description and ordered by it
    """

    subtotal: Decimal
    total: Decimal
    offers: Mapping[str, Decimal] = field(default_factory=dict)

    def __post_init__(self):
        ordered = dict(sorted(self.offers.items()))
        object.__setattr__(self, "offers", MappingProxyType(ordered))

    @property
    def discount(self) -> Decimal:
        """Sum of all applied discounts."""
        return round_money(sum(self.offers.values(), ZERO))

    def to_dict(self) -> Dict[str, Any]:
        """Convert to dictionary for JSON serialization (amounts as strings)."""
        return {
            "subtotal": str(self.subtotal),
            "offers": {description: str(amount) for description, amount in self.offers.items()},
            "total": str(self.total),
        }

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, Price):
            return NotImplemented
        return (self.subtotal == other.subtotal
                and self.total == other.total
                and dict(self.offers) == dict(other.offers))

    def __hash__(self) -> int:
        return hash((self.subtotal, self.total, tuple(self.offers.items())))


def price(catalog: Catalog, basket: Basket, offers: OfferSource) -> Price:
    """
    Price a basket.

    The subtotal is the exact sum of unit price times quantity. Every
    applicable offer then contributes its discount; offers that share a
    description have their discounts combined under that description. The
    total is the subtotal minus all discounts, clamped at zero.

    Args:
        catalog: Catalog providing unit prices
        basket: The basket to price
        offers: Source of applicable offers (usually an OfferPackage)

    Returns:
        The pricing result
    """
    subtotal = ZERO
    for item, quantity in basket.items():
        subtotal += catalog.price_for(item) * quantity
    subtotal = round_money(subtotal)

    discounts: Dict[str, Decimal] = {}
    for offer in offers.applicable_offers(basket):
        amount = offer.discount(basket)
        description = offer.description
        discounts[description] = discounts.get(description, ZERO) + amount
        logger.debug(f"Applied offer '{description}': {amount}")

    total = subtotal - sum(discounts.values(), ZERO)
    total = round_money(max(total, ZERO))

    result = Price(subtotal=subtotal, total=total, offers=discounts)
    logger.debug(f"Priced basket: subtotal {result.subtotal}, "
                 f"discount {result.discount}, total {result.total}")
    return result


class PricingEngine:
    """
    Prices baskets against a shared catalog and offer package.

    The catalog and offers are read-only once loaded, so one engine can
    serve any number of baskets, each owned by a single session.
    """

    def __init__(self, catalog: Catalog, offers: "OfferPackage"):
        self.catalog = catalog
        self.offers = offers

    def new_basket(self) -> Basket:
        return Basket(self.catalog)

    def price(self, basket: Basket) -> Price:
        return price(self.catalog, basket, self.offers)
