"""Shared protocols for offer rules and their parsers.

Offer rules are an open set: any object satisfying :class:`OfferRule` can be
priced, and any object satisfying :class:`OfferParser` can be registered to
turn one line of offer text into a rule.
"""

from __future__ import annotations

from decimal import Decimal
from typing import TYPE_CHECKING, Optional, Protocol, runtime_checkable

if TYPE_CHECKING:
    from .catalog import Catalog
    from .items import ItemId


@runtime_checkable
class BasketView(Protocol):
    """The read-only slice of a basket that offer rules consult."""

    def quantity_of(self, item: "ItemId") -> int:
        ...


@runtime_checkable
class OfferRule(Protocol):
    """
    Rule of how to apply a special offer.

    ``description`` is used as the key for the discount in a pricing result,
    so two rules that are not economically identical should describe
    themselves differently.
    """

    @property
    def description(self) -> str:
        ...

    def is_applicable(self, basket: BasketView) -> bool:
        ...

    def discount(self, basket: BasketView) -> Decimal:
        """Total discount (2 decimals, never negative) this rule grants."""
        ...


@runtime_checkable
class OfferParser(Protocol):
    """
    Parser for one kind of offer rule.

    Each parser handles exactly one kind of offer, and each offer must be
    describable in one line of text.
    """

    name: str

    def parse(self, catalog: "Catalog", line: str) -> Optional[OfferRule]:
        """Parse a trimmed rule line, returning None when it isn't supported."""
        ...
