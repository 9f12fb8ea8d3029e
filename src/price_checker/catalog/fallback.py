"""Static price estimates used when live data is unavailable.

Values are typical Israeli supermarket prices in ILS, per catalog unit.
"""

from __future__ import annotations

from decimal import Decimal
from types import MappingProxyType
from typing import TYPE_CHECKING, Final

from price_checker.services.pricing.models import PriceSummary


if TYPE_CHECKING:
    from collections.abc import Mapping


def _estimate(average: str, low: str, high: str) -> PriceSummary:
    return PriceSummary(average=Decimal(average), low=Decimal(low), high=Decimal(high))


DEFAULT_FALLBACK_PRICE: Final[PriceSummary] = _estimate("10", "5", "15")

FALLBACK_PRICES: Final[Mapping[str, PriceSummary]] = MappingProxyType(
    {
        "1": _estimate("8.9", "5.9", "14.9"),  # Tomatoes
        "2": _estimate("6.9", "3.9", "9.9"),  # Cucumbers
        "3": _estimate("5.5", "3.5", "8.9"),  # Potatoes
        "4": _estimate("4.9", "2.9", "7.9"),  # Onions
        "5": _estimate("5.9", "3.9", "8.9"),  # Carrots
        "6": _estimate("12.9", "7.9", "19.9"),  # Bell pepper
        "7": _estimate("6.9", "4.9", "9.9"),  # Lettuce
        "8": _estimate("9.9", "6.9", "14.9"),  # Apples
        "9": _estimate("7.9", "5.9", "11.9"),  # Bananas
        "10": _estimate("6.9", "4.9", "9.9"),  # Oranges
        "11": _estimate("19.9", "12.9", "29.9"),  # Grapes
        "12": _estimate("4.9", "2.9", "7.9"),  # Watermelon
        "13": _estimate("6.9", "5.9", "7.9"),  # Milk
        "14": _estimate("23.9", "19.9", "29.9"),  # Eggs
        "15": _estimate("7.9", "5.9", "9.9"),  # Cottage
        "16": _estimate("18.9", "14.9", "24.9"),  # Yellow cheese
        "17": _estimate("12.9", "9.9", "16.9"),  # Butter
        "18": _estimate("8.9", "6.9", "12.9"),  # White bread
        "19": _estimate("7.9", "5.9", "10.9"),  # Pita
        "20": _estimate("14.9", "10.9", "19.9"),  # Challah
        "21": _estimate("39.9", "29.9", "49.9"),  # Chicken breast
        "22": _estimate("54.9", "44.9", "69.9"),  # Ground beef
        "23": _estimate("29.9", "22.9", "39.9"),  # Chicken thighs
        "24": _estimate("89.9", "69.9", "119.9"),  # Salmon
        "25": _estimate("44.9", "34.9", "54.9"),  # Tilapia
        "26": _estimate("9.9", "6.9", "14.9"),  # Tuna
        "27": _estimate("7.9", "4.9", "10.9"),  # Corn
        "28": _estimate("6.9", "4.9", "9.9"),  # Chickpeas
        "29": _estimate("8.9", "5.9", "11.9"),  # Coca Cola
        "30": _estimate("12.9", "9.9", "16.9"),  # Orange juice
        "31": _estimate("4.9", "2.9", "6.9"),  # Water
        "32": _estimate("6.9", "4.9", "8.9"),  # Bamba
        "33": _estimate("6.9", "4.9", "8.9"),  # Bissli
        "34": _estimate("14.9", "9.9", "19.9"),  # Dish soap
        "35": _estimate("39.9", "29.9", "54.9"),  # Laundry detergent
    }
)


def get_fallback_price(product_id: str) -> PriceSummary:
    """Static estimate for a product, or the generic default."""
    return FALLBACK_PRICES.get(product_id, DEFAULT_FALLBACK_PRICE)
