"""Direct discount offers.

Rule syntax is ``ITEM DISCOUNT`` where the discount is either a whole
percentage of the item's price (``Apples 10%``) or an absolute amount taken
off every unit (``Milk 0.25``).
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
from ..core.reporting import format_item, format_money
from ..core.types import BasketView

logger = logging.getLogger(__name__)

RULE_FORMAT = re.compile(r"(?P<item>.+?)\s+(?P<discount>[0-9]+%|[0-9]+\.[0-9]+)")


@dataclass(frozen=True)
class DiscountOffer:
    """
    Discount on every unit of a single item.

    Exactly one of ``amount`` (absolute discount per unit) and
    ``percentage`` (whole percent of the unit price) is set.
    """

    catalog: Catalog = field(compare=False, repr=False)
    item: ItemId
    amount: Optional[Decimal] = None
    percentage: Optional[int] = None

    @property
    def is_percentage(self) -> bool:
        return self.percentage is not None

    def unit_discount(self) -> Decimal:
        """Discount granted on a single unit of the item."""
        if self.percentage is None:
            return self.amount
        unit_price = self.catalog.price_for(self.item)
        return round_money(unit_price * self.percentage / 100)

    def is_applicable(self, basket: BasketView) -> bool:
        return basket.quantity_of(self.item) > 0

    def discount(self, basket: BasketView) -> Decimal:
        if not self.is_applicable(basket):
            return ZERO
        return round_money(self.unit_discount() * basket.quantity_of(self.item))

    @property
    def description(self) -> str:
        if self.percentage is None:
            return f"{format_item(self.item)} {format_money(self.amount)} off"
        return f"{format_item(self.item)} {self.percentage}% off"


class DiscountOfferParser:
    """
    Parser for direct discount rules.

    Rejects (returns None for) unknown items, percentages above 100%,
    amounts with more than 2 decimals and amounts above the item's price.
    """

    name = "discount"

    def parse(self, catalog: Catalog, line: str) -> Optional[DiscountOffer]:
        match = RULE_FORMAT.fullmatch(line.strip())
        if not match:
            return None

        item = ItemId(match.group("item"))
        price = catalog.price_for(item)
        if price is None:
            logger.debug(f"Discount rule '{line}' names unknown item {item}")
            return None

        discount = match.group("discount")
        if discount.endswith("%"):
            try:
                percentage = int(discount[:-1])
            except ValueError:
                # digit run too long to convert
                return None
            if percentage > 100:
                return None
            return DiscountOffer(catalog, item, percentage=percentage)

        amount = parse_amount(discount)
        if amount is None or amount > price:
            logger.debug(f"Discount rule '{line}' has an invalid amount")
            return None
        return DiscountOffer(catalog, item, amount=amount)
