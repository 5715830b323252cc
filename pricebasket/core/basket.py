"""Shopping basket."""

from __future__ import annotations

import logging
from typing import Dict, Iterator, Tuple, Union

from .catalog import Catalog
from .errors import UnknownItemError
from .items import ItemId

logger = logging.getLogger(__name__)


class Basket:
    """
    Collection of items a customer wants to purchase.

    Keeps track of each item and how many units of it were added. Items are
    validated against the catalog as they are added; the catalog itself is
    shared, never copied.
    """

    def __init__(self, catalog: Catalog):
        self.catalog = catalog
        self._items: Dict[ItemId, int] = {}

    def add_item(self, name: Union[ItemId, str]) -> ItemId:
        """
        Add one unit of the named item to the basket.

        Args:
            name: The name (or ID) of the item to add

        Returns:
            The normalized ID of the added item

        Raises:
            InvalidItemError: If the name is blank
            UnknownItemError: If the catalog has no such item
        """
        item_id = ItemId.of(name)
        if self.catalog.price_for(item_id) is None:
            raise UnknownItemError(item_id)
        self._items[item_id] = self._items.get(item_id, 0) + 1
        logger.debug(f"Added {item_id} to basket (now {self._items[item_id]})")
        return item_id

    def quantity_of(self, item: Union[ItemId, str]) -> int:
        """Units of an item in the basket, 0 if it was never added."""
        return self._items.get(ItemId.of(item), 0)

    def items(self) -> Iterator[Tuple[ItemId, int]]:
        """Iterate over ``(item, quantity)`` pairs in the order first added."""
        return iter(list(self._items.items()))

    @property
    def is_empty(self) -> bool:
        return not self._items

    def __len__(self) -> int:
        return len(self._items)

    def __repr__(self) -> str:
        contents = ", ".join(f"{item} x{qty}" for item, qty in self._items.items())
        return f"Basket([{contents}])"
