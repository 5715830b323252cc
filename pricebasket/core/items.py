"""Item identity."""

from __future__ import annotations

from dataclasses import dataclass
from typing import Union

from .errors import InvalidItemError


def normalize_name(name: str) -> str:
    """Collapse whitespace runs to single spaces, trim and upper-case."""
    return " ".join(fragment.upper() for fragment in name.split())


@dataclass(frozen=True, order=True)
class ItemId:
    """
    Identifier for an item in the shop.

    Items are identified by their normalized name, so ``ItemId("sugar  cane")``
    and ``ItemId("Sugar Cane")`` are the same item.

    Attributes:
        name: The normalized (upper-cased, single-spaced) item name
    """

    name: str

    def __init__(self, name: str):
        normalized = normalize_name(name)
        if not normalized:
            raise InvalidItemError(name)
        # frozen dataclass, so bypass __setattr__
        object.__setattr__(self, "name", normalized)

    @classmethod
    def of(cls, value: Union["ItemId", str]) -> "ItemId":
        """Coerce a raw name or an existing ItemId into an ItemId."""
        if isinstance(value, ItemId):
            return value
        return cls(value)

    def __str__(self) -> str:
        return self.name

    def __repr__(self) -> str:
        return f"ItemId({self.name!r})"
