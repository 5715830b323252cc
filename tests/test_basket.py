"""Tests for the shopping basket."""

import pytest

from pricebasket.core.basket import Basket
from pricebasket.core.errors import InvalidItemError, UnknownItemError
from pricebasket.core.items import ItemId
from pricebasket.core.types import BasketView


class TestBasket:
    """Test adding items and querying quantities."""

    def test_new_basket_is_empty(self, catalog):
        """Test the initial state."""
        basket = Basket(catalog)
        assert basket.is_empty
        assert len(basket) == 0
        assert list(basket.items()) == []
        assert basket.quantity_of("apples") == 0

    def test_add_item_counts_units(self, catalog):
        """Test that repeated adds increase the quantity."""
        basket = Basket(catalog)
        basket.add_item("apples")
        basket.add_item("APPLES")
        basket.add_item(" Bananas ")

        assert basket.quantity_of("Apples") == 2
        assert basket.quantity_of(ItemId("bananas")) == 1
        assert len(basket) == 2

    def test_add_item_returns_normalized_id(self, catalog):
        """Test the return value of add_item."""
        basket = Basket(catalog)
        assert basket.add_item("  apples ") == ItemId("APPLES")

    def test_items_in_insertion_order(self, catalog):
        """Test iteration order."""
        basket = Basket(catalog)
        for name in ["bananas", "apples", "bananas"]:
            basket.add_item(name)

        assert list(basket.items()) == [(ItemId("bananas"), 2), (ItemId("apples"), 1)]

    def test_unknown_item_leaves_basket_unchanged(self, catalog):
        """Test that a failed add does not modify the basket."""
        basket = Basket(catalog)
        basket.add_item("apples")

        with pytest.raises(UnknownItemError) as exc_info:
            basket.add_item("Cherries")

        assert exc_info.value.item == ItemId("cherries")
        assert "CHERRIES doesn't exist in the catalog" in str(exc_info.value)
        assert list(basket.items()) == [(ItemId("apples"), 1)]

    def test_blank_item_is_invalid(self, catalog):
        """Test that blank names raise InvalidItemError."""
        basket = Basket(catalog)
        with pytest.raises(InvalidItemError):
            basket.add_item("   ")
        assert basket.is_empty

    def test_shares_catalog(self, catalog):
        """Test that the basket holds the catalog itself, not a copy."""
        assert Basket(catalog).catalog is catalog

    def test_satisfies_basket_view(self, catalog):
        """Test that a Basket can be handed to offer rules."""
        assert isinstance(Basket(catalog), BasketView)

    def test_repr(self, catalog):
        """Test the debug representation."""
        basket = Basket(catalog)
        basket.add_item("apples")
        assert repr(basket) == "Basket([APPLES x1])"
