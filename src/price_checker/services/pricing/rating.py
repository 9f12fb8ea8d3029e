"""Rate an observed shelf price against a product's market range."""

from __future__ import annotations

from decimal import Decimal
from typing import TYPE_CHECKING

from price_checker.schemas.enums import Rating
from price_checker.services.pricing.constants import (
    AVERAGE_MAX_POSITION,
    GOOD_MAX_POSITION,
    GREAT_MAX_POSITION,
    HIGH_MAX_POSITION,
)


if TYPE_CHECKING:
    from price_checker.schemas.product import Product


def _as_decimal(value: Decimal | float | int | str) -> Decimal:
    return value if isinstance(value, Decimal) else Decimal(str(value))


def price_position(
    price: Decimal | float | int | str,
    low: Decimal | float | int | str,
    high: Decimal | float | int | str,
) -> Decimal | None:
    """Relative position of ``price`` within ``[low, high]``.

    Returns None for an empty range. Values outside the range fall below 0
    or above 1.
    """
    low_d, high_d = _as_decimal(low), _as_decimal(high)
    spread = high_d - low_d
    if spread == 0:
        return None
    return (_as_decimal(price) - low_d) / spread


def rate_price(
    price: Decimal | float | int | str,
    low: Decimal | float | int | str,
    high: Decimal | float | int | str,
) -> Rating:
    """Rate a price against an explicit low/high range."""
    position = price_position(price, low, high)
    if position is None:
        return Rating.AVERAGE
    if position <= GREAT_MAX_POSITION:
        return Rating.GREAT
    if position <= GOOD_MAX_POSITION:
        return Rating.GOOD
    if position <= AVERAGE_MAX_POSITION:
        return Rating.AVERAGE
    if position <= HIGH_MAX_POSITION:
        return Rating.HIGH
    return Rating.EXPENSIVE


def rate(price: Decimal | float | int | str, product: Product) -> Rating:
    """Rate a price against a product's current low/high range.

    Pure function; a product with ``low == high`` always rates average.
    """
    return rate_price(price, product.low_price, product.high_price)
