"""Unit tests for shelf price rating."""

from __future__ import annotations

from decimal import Decimal

import pytest

from price_checker.schemas.enums import Category, PriceSource, Rating
from price_checker.schemas.product import Product
from price_checker.services.pricing.rating import price_position, rate, rate_price


pytestmark = pytest.mark.unit


def _product(low: float, high: float) -> Product:
    return Product(
        id="1",
        name="Tomatoes",
        name_hebrew="עגבניות",
        category=Category.VEGETABLES,
        unit='1 ק"ג',
        average_price=(low + high) / 2,
        low_price=low,
        high_price=high,
        source=PriceSource.FALLBACK,
    )


class TestRatePrice:
    """Tests for rate_price boundaries over the range [0, 100]."""

    @pytest.mark.parametrize(
        ("price", "expected"),
        [
            ("0", Rating.GREAT),
            ("10", Rating.GREAT),
            ("10.01", Rating.GOOD),
            ("35", Rating.GOOD),
            ("35.01", Rating.AVERAGE),
            ("65", Rating.AVERAGE),
            ("65.01", Rating.HIGH),
            ("85", Rating.HIGH),
            ("85.01", Rating.EXPENSIVE),
            ("100", Rating.EXPENSIVE),
        ],
    )
    def test_inclusive_upper_bounds(self, price: str, expected: Rating) -> None:
        """Should treat each band's upper bound as inclusive."""
        assert rate_price(Decimal(price), Decimal(0), Decimal(100)) == expected

    def test_outside_range(self) -> None:
        """Should rate below-range prices great and above-range expensive."""
        assert rate_price(1, 5, 15) == Rating.GREAT
        assert rate_price(20, 5, 15) == Rating.EXPENSIVE

    def test_empty_range_is_average(self) -> None:
        """Should rate everything average when low equals high."""
        assert rate_price(3, 7, 7) == Rating.AVERAGE
        assert rate_price(7, 7, 7) == Rating.AVERAGE

    def test_float_inputs_use_decimal_arithmetic(self) -> None:
        """Should not suffer binary float error at a band boundary."""
        # (5.9 - 5) / (14 - 5) == 0.1 exactly in decimal
        assert rate_price(5.9, 5, 14) == Rating.GREAT


class TestPricePosition:
    """Tests for price_position."""

    def test_position(self) -> None:
        """Should return the relative position within the range."""
        assert price_position(7.5, 5, 10) == Decimal("0.5")

    def test_zero_spread(self) -> None:
        """Should return None for an empty range."""
        assert price_position(1, 2, 2) is None


class TestRate:
    """Tests for rate over a product."""

    def test_uses_product_range(self) -> None:
        """Should rate against the product's low and high prices."""
        product = _product(5.9, 14.9)

        assert rate(Decimal("5.9"), product) == Rating.GREAT
        assert rate(Decimal("14.9"), product) == Rating.EXPENSIVE

    @pytest.mark.parametrize(
        ("price", "expected"),
        [
            ("11", Rating.GREAT),
            ("11.01", Rating.GOOD),
            ("16.5", Rating.AVERAGE),
            ("16.51", Rating.HIGH),
            ("18.5", Rating.HIGH),
            ("18.51", Rating.EXPENSIVE),
        ],
    )
    def test_band_edges_for_ten_to_twenty(self, price: str, expected: Rating) -> None:
        """Should place the documented 10-20 range edges in the right bands."""
        assert rate(Decimal(price), _product(10, 20)) == expected

    def test_severity_never_decreases_as_price_rises(self) -> None:
        """Should give a higher price the same or a worse rating."""
        severity = [
            Rating.GREAT,
            Rating.GOOD,
            Rating.AVERAGE,
            Rating.HIGH,
            Rating.EXPENSIVE,
        ]
        product = _product(10, 20)
        prices = [Decimal(900 + step) / 100 for step in range(1201)]

        ranks = [severity.index(rate(price, product)) for price in prices]

        assert ranks == sorted(ranks)
        assert ranks[0] == 0
        assert ranks[-1] == len(severity) - 1
