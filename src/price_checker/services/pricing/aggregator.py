"""Summary statistics over matched price records."""

from __future__ import annotations

from decimal import ROUND_HALF_UP, Decimal
from typing import TYPE_CHECKING

from price_checker.services.pricing.constants import PRICE_PRECISION
from price_checker.services.pricing.models import PriceSummary, RawRecord


if TYPE_CHECKING:
    from collections.abc import Iterable


def round_price(value: Decimal) -> Decimal:
    """Round to one decimal place, halves away from zero."""
    return value.quantize(PRICE_PRECISION, rounding=ROUND_HALF_UP)


def summarize(items: Iterable[RawRecord | Decimal | float | int]) -> PriceSummary:
    """Compute average, low and high over strictly positive prices.

    Args:
        items: Records or bare prices.

    Returns:
        The rounded summary, or the all-zero "no data" summary when no
        positive price is present.
    """
    prices: list[Decimal] = []
    for item in items:
        price = item.price if isinstance(item, RawRecord) else Decimal(str(item))
        if price.is_finite() and price > 0:
            prices.append(price)

    if not prices:
        return PriceSummary.empty()

    average = sum(prices, Decimal(0)) / len(prices)
    return PriceSummary(
        average=round_price(average),
        low=round_price(min(prices)),
        high=round_price(max(prices)),
    )
