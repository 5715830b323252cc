"""Tests for bundle offers."""

from decimal import Decimal

import pytest

from pricebasket.core.items import ItemId
from pricebasket.offers.bundle import BundleOffer, BundleOfferParser


@pytest.fixture
def parser():
    return BundleOfferParser()


@pytest.fixture
def offer(catalog):
    """0.10 off one apple for every 2 bananas."""
    return BundleOffer(catalog, ItemId("apples"), ItemId("bananas"), Decimal("0.10"), 2)


class TestBundleOfferParser:
    """Test parsing of DISCOUNTED AMOUNT per COUNT REQUIRED rules."""

    def test_parses_rule(self, parser, catalog, offer):
        """Test a well-formed bundle rule."""
        parsed = parser.parse(catalog, "Apples 0.10 per 2 Bananas")

        assert parsed == offer
        assert parsed.description == "Apples and Bananas bundle"

    def test_per_is_case_insensitive(self, parser, catalog):
        """Test PER and Per keywords."""
        assert parser.parse(catalog, "apples 0.10 PER 2 bananas") is not None
        assert parser.parse(catalog, "apples 0.10 Per 2 bananas") is not None

    @pytest.mark.parametrize("line", [
        "Apples 0.10 per 2 Cherries",   # unknown required item
        "Cherries 0.10 per 2 Apples",   # unknown discounted item
        "Apples 1.01 per 2 Bananas",    # more than the price
        "Apples 0.001 per 2 Bananas",   # needs rounding
        "Apples 0.10 per 0 Bananas",    # nothing required
        "Apples 0.10 for 2 Bananas",
        "Apples 10% per 2 Bananas",
        "Apples 0.10",
    ])
    def test_rejected_lines(self, parser, catalog, line):
        """Test lines this parser does not accept."""
        assert parser.parse(catalog, line) is None


class TestBundleOffer:
    """Test applying a bundle to a basket."""

    def test_one_apple_four_bananas(self, offer, stub_basket):
        """Test that the discount is capped by the discounted quantity."""
        basket = stub_basket({"apples": 1, "bananas": 4})

        assert offer.is_applicable(basket)
        assert offer.eligible_units(basket) == 1
        assert offer.discount(basket) == Decimal("0.10")

    def test_several_bundles(self, offer, stub_basket):
        """Test that every COUNT of the required item earns a discount."""
        basket = stub_basket({"apples": 5, "bananas": 7})
        assert offer.discount(basket) == Decimal("0.30")

    @pytest.mark.parametrize("quantities", [
        {"apples": 3, "bananas": 1},
        {"bananas": 6},
        {},
    ])
    def test_not_applicable(self, offer, stub_basket, quantities):
        """Test baskets that do not satisfy the bundle."""
        basket = stub_basket(quantities)
        assert not offer.is_applicable(basket)
        assert offer.discount(basket) == Decimal("0.00")

    def test_same_item_bundle(self, catalog, stub_basket):
        """Test a bundle whose discounted and required items coincide."""
        offer = BundleOffer(catalog, ItemId("apples"), ItemId("apples"), Decimal("1.00"), 3)
        assert offer.discount(stub_basket({"apples": 7})) == Decimal("2.00")

    def test_discount_is_monotonic_and_bounded(self, offer, stub_basket):
        """Test that more items never lower the discount and it stays bounded."""
        for apples in range(6):
            previous = Decimal("0.00")
            for bananas in range(12):
                discount = offer.discount(stub_basket({"apples": apples, "bananas": bananas}))
                assert discount >= previous
                assert discount <= offer.amount * apples
                previous = discount

        for bananas in range(12):
            previous = Decimal("0.00")
            for apples in range(6):
                discount = offer.discount(stub_basket({"apples": apples, "bananas": bananas}))
                assert discount >= previous
                previous = discount
