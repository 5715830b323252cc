"""Bundle offers.

Rule syntax is ``DISCOUNTED AMOUNT per COUNT REQUIRED``: for every
``COUNT`` units of ``REQUIRED`` in the basket, one unit of ``DISCOUNTED``
is discounted by ``AMOUNT``. The discount only applies to units of the
discounted item that are actually in the basket.
"""

from __future__ import annotations

import logging
import re
from dataclasses import dataclass, field
from decimal import Decimal
from typing import Optional

from ..core.catalog import Catalog
from ..core.items import ItemId
from ..core.money import ZERO, parse_amount, round_money
from ..core.reporting import format_item
from ..core.types import BasketView

logger = logging.getLogger(__name__)

RULE_FORMAT = re.compile(
    r"(?P<discounted>.+?)\s+(?P<amount>[0-9]+\.[0-9]+)\s+"
    r"(?i:per)\s+(?P<count>[0-9]+)\s+(?P<required>.+)"
)


@dataclass(frozen=True)
class BundleOffer:
    """Discount on one item for every ``per`` units of another item."""

    catalog: Catalog = field(compare=False, repr=False)
    discounted: ItemId
    required: ItemId
    amount: Decimal
    per: int

    def eligible_units(self, basket: BasketView) -> int:
        """Units of the discounted item that receive the discount."""
        eligible = basket.quantity_of(self.required) // self.per
        return min(eligible, basket.quantity_of(self.discounted))

    def is_applicable(self, basket: BasketView) -> bool:
        return (basket.quantity_of(self.required) >= self.per
                and basket.quantity_of(self.discounted) > 0)

    def discount(self, basket: BasketView) -> Decimal:
        if not self.is_applicable(basket):
            return ZERO
        return round_money(self.amount * self.eligible_units(basket))

    @property
    def description(self) -> str:
        return f"{format_item(self.discounted)} and {format_item(self.required)} bundle"


class BundleOfferParser:
    """
    Parser for bundle rules.

    Rejects (returns None for) unknown items, a required count of zero,
    amounts with more than 2 decimals and amounts above the discounted
    item's price.
    """

    name = "bundle"

    def parse(self, catalog: Catalog, line: str) -> Optional[BundleOffer]:
        match = RULE_FORMAT.fullmatch(line.strip())
        if not match:
            return None

        discounted = ItemId(match.group("discounted"))
        required = ItemId(match.group("required"))
        price = catalog.price_for(discounted)
        if price is None or catalog.price_for(required) is None:
            logger.debug(f"Bundle rule '{line}' names an unknown item")
            return None

        amount = parse_amount(match.group("amount"))
        if amount is None or amount > price:
            logger.debug(f"Bundle rule '{line}' has an invalid amount")
            return None

        try:
            per = int(match.group("count"))
        except ValueError:
            return None
        if per == 0:
            return None

        return BundleOffer(catalog, discounted, required, amount, per)
