"""Fixed-point money helpers.

All amounts are ``decimal.Decimal`` values with exactly two fractional
digits. Rounding is always half-to-even.
"""

import re
from decimal import Decimal, InvalidOperation, ROUND_HALF_EVEN
from typing import Optional, Union

CENT = Decimal("0.01")
ZERO = Decimal("0.00")

# Plain decimal literal, optionally with an exponent; no underscores or NaN
AMOUNT_FORMAT = re.compile(r"[+-]?(?:[0-9]+(?:\.[0-9]*)?|\.[0-9]+)(?:[eE][+-]?[0-9]+)?")


def round_money(value: Union[Decimal, int]) -> Decimal:
    """Round a value to 2 decimal places using banker's rounding."""
    return Decimal(value).quantize(CENT, rounding=ROUND_HALF_EVEN)


def parse_amount(text: str) -> Optional[Decimal]:
    """Parse a money literal that already has at most 2 significant decimals.

    Args:
        text: The literal, e.g. ``"1"``, ``"0.80"`` or ``"1.010"``

    Returns:
        The amount scaled to exactly 2 decimals, or None if the literal is
        not a finite number or would need rounding to fit 2 decimals.
    """
    text = text.strip()
    if not AMOUNT_FORMAT.fullmatch(text):
        return None
    try:
        value = Decimal(text)
    except InvalidOperation:
        return None
    if not value.is_finite():
        return None

    try:
        scaled = value.quantize(CENT)
    except InvalidOperation:
        # too many digits for the context precision
        return None
    if scaled != value:
        return None
    return scaled


def is_money(value: Decimal) -> bool:
    """Check that a Decimal is finite and has exactly 2 decimal places."""
    return value.is_finite() and value.as_tuple().exponent == -2
