"""Shared fixtures for pricebasket tests."""

import logging
from decimal import Decimal
from typing import Dict

import pytest

from pricebasket.core.catalog import Catalog
from pricebasket.core.items import ItemId


class StubBasket:
    """Basket stand-in that reports fixed quantities."""

    def __init__(self, quantities: Dict[str, int] = None):
        self.quantities = {ItemId(name): qty for name, qty in (quantities or {}).items()}

    def quantity_of(self, item) -> int:
        return self.quantities.get(ItemId.of(item), 0)


@pytest.fixture
def catalog():
    """Catalog with APPLES at 1.00 and BANANAS at 0.80."""
    return Catalog({"Apples": Decimal("1.00"), "Bananas": Decimal("0.80")})


@pytest.fixture
def stub_basket():
    """Factory for baskets with fixed quantities."""
    return StubBasket


@pytest.fixture(autouse=True)
def reset_pricebasket_logger():
    """Drop handlers installed by setup_logging so tests don't share streams."""
    yield
    logger = logging.getLogger("pricebasket")
    logger.handlers.clear()
    logger.setLevel(logging.NOTSET)
