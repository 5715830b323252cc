"""Formatting and report generation for pricing results."""

import json
from decimal import Decimal
from typing import Any, Dict, List, Optional, Union

from .items import ItemId
from .money import round_money

DEFAULT_CURRENCY_SYMBOL = "£"
DEFAULT_MINOR_SUFFIX = "p"


def format_money(money: Decimal,
                 symbol: str = DEFAULT_CURRENCY_SYMBOL,
                 minor_suffix: str = DEFAULT_MINOR_SUFFIX) -> str:
    """
    Format an amount of money for display.

    Amounts below one whole unit (but not zero) are shown in minor units
    with a suffix (``0.05`` -> ``5p``); everything else gets the currency
    symbol (``1.25`` -> ``£1.25``, ``0`` -> ``£0.00``).

    Args:
        money: The amount to format
        symbol: Currency symbol prefixed to whole-unit amounts
        minor_suffix: Suffix for amounts below one unit

    Returns:
        The formatted amount
    """
    money = round_money(money)
    if money != 0 and abs(money) < 1:
        return f"{int(money * 100)}{minor_suffix}"
    return f"{symbol}{money}"


def format_item(item: Union[ItemId, str]) -> str:
    """Capitalize every word of an item name (``SUGAR CANE`` -> ``Sugar Cane``)."""
    return " ".join(word.capitalize() for word in str(ItemId.of(item)).split(" "))


class Reporter:
    """Renders pricing results as text receipts or JSON."""

    FORMATS = ("text", "json")

    def __init__(self, config: Optional[Dict[str, Any]] = None):
        """
        Initialize reporter.

        Args:
            config: Configuration dictionary (``report`` section is used)
        """
        report_config = (config or {}).get("report", {}) or {}
        self.symbol = report_config.get("currency_symbol", DEFAULT_CURRENCY_SYMBOL)
        self.minor_suffix = report_config.get("minor_unit_suffix", DEFAULT_MINOR_SUFFIX)
        self.default_format = report_config.get("format", "text")

    def money(self, amount: Decimal) -> str:
        return format_money(amount, self.symbol, self.minor_suffix)

    def render(self, price, fmt: Optional[str] = None) -> str:
        """Render a Price in the requested format."""
        fmt = fmt or self.default_format
        if fmt == "json":
            return self.render_json(price)
        if fmt == "text":
            return self.render_text(price)
        raise ValueError(f"Unsupported report format: {fmt}")

    def render_text(self, price) -> str:
        lines: List[str] = [f"Subtotal: {self.money(price.subtotal)}"]
        if price.offers:
            for description, discount in price.offers.items():
                lines.append(f"{description}: {self.money(discount)}")
        else:
            lines.append("(No offers available)")
        lines.append(f"Total: {self.money(price.total)}")
        return "\n".join(lines)

    def render_json(self, price) -> str:
        return json.dumps(price.to_dict(), indent=2, ensure_ascii=False)
