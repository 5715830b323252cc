"""Catalog of all the items sold in the shop."""

from __future__ import annotations

import logging
from decimal import Decimal
from types import MappingProxyType
from typing import TYPE_CHECKING, Dict, FrozenSet, Iterable, Iterator, Mapping, Optional, Union

from .errors import (
    DuplicateEntryError,
    InvalidItemError,
    MalformedEntryError,
    MalformedPriceError,
)
from .items import ItemId
from .loader import CATALOG_FILE, NumberedLine, iter_data_lines, number_lines
from .money import ZERO, is_money, parse_amount

if TYPE_CHECKING:
    from .loader import DataReader

logger = logging.getLogger(__name__)


class Catalog:
    """
    Catalog of every item on sale along with its unit price.

    The catalog data file is plain text where each non-blank, non-comment
    line is an entry: the item name followed by its price. Item names are
    case insensitive and must be unique once normalized.

    A catalog is read-only once built and can be shared by any number of
    baskets and offer rules.
    """

    def __init__(self, prices: Optional[Mapping[Union[ItemId, str], Decimal]] = None):
        """
        Build a catalog from an existing mapping of item to price.

        Args:
            prices: Mapping of item (ItemId or raw name) to unit price

        Raises:
            ValueError: If a price is negative or not exactly 2 decimals
        """
        data: Dict[ItemId, Decimal] = {}
        for item, price in (prices or {}).items():
            item_id = ItemId.of(item)
            if item_id in data:
                raise ValueError(f"Duplicate entry found for {item_id}")
            if not isinstance(price, Decimal) or not is_money(price) or price < ZERO:
                raise ValueError(f"Invalid price for {item_id}: {price!r}")
            data[item_id] = price
        self._data = MappingProxyType(data)

    @classmethod
    def from_lines(cls, lines: Union[str, Iterable[str]], source: Optional[str] = None) -> "Catalog":
        """Parse catalog entries from raw text or an iterable of lines."""
        return cls._parse(number_lines(lines), source)

    @classmethod
    def from_text(cls, text: str, source: Optional[str] = None) -> "Catalog":
        return cls.from_lines(text, source)

    @classmethod
    def load(cls, reader: "DataReader", name: str = CATALOG_FILE) -> "Catalog":
        """Load the catalog data file through a DataReader."""
        catalog = cls._parse(reader.read_lines(name), name)
        logger.info(f"Loaded {len(catalog)} catalog entries from {name}")
        return catalog

    @classmethod
    def _parse(cls, lines: Iterable[NumberedLine], source: Optional[str]) -> "Catalog":
        data: Dict[ItemId, Decimal] = {}

        for line_number, line in iter_data_lines(lines):
            fragments = line.split()
            if len(fragments) < 2:
                raise MalformedEntryError(
                    "Entries must have both the item name and the price",
                    line_number, source
                )

            price = parse_amount(fragments[-1])
            if price is None or price < ZERO:
                raise MalformedPriceError(
                    f"Malformed price '{fragments[-1]}'", line_number, source
                )

            item_id = ItemId(" ".join(fragments[:-1]))

            if item_id in data:
                raise DuplicateEntryError(item_id, line_number, source)
            data[item_id] = price
            logger.debug(f"Catalog entry {item_id} = {price} (line {line_number})")

        return cls(data)

    def price_for(self, item: Union[ItemId, str]) -> Optional[Decimal]:
        """
        Retrieve the unit price of an item, if the catalog has it.

        Args:
            item: The item ID or raw item name to price

        Returns:
            The unit price, or None if no such item exists
        """
        try:
            item_id = ItemId.of(item)
        except InvalidItemError:
            return None
        return self._data.get(item_id)

    def all_items(self) -> FrozenSet[ItemId]:
        """Retrieve the IDs of every item in the catalog."""
        return frozenset(self._data)

    def __contains__(self, item: object) -> bool:
        if not isinstance(item, (ItemId, str)):
            return False
        return self.price_for(item) is not None

    def __len__(self) -> int:
        return len(self._data)

    def __iter__(self) -> Iterator[ItemId]:
        return iter(self._data)

    def __repr__(self) -> str:
        entries = ", ".join(f"{item}: {price}" for item, price in self._data.items())
        return f"Catalog({{{entries}}})"
