"""Enumeration types shared by the engine and the API schemas."""

from __future__ import annotations

from enum import StrEnum


class Category(StrEnum):
    """Catalog product categories.

    Values are the Hebrew display names used by the presentation layer.
    """

    VEGETABLES = "ירקות"
    FRUITS = "פירות"
    DAIRY_AND_EGGS = "חלב וביצים"
    BREAD_AND_BAKERY = "לחם ומאפים"
    MEAT_AND_POULTRY = "בשר ועוף"
    FISH = "דגים"
    CANNED_GOODS = "שימורים"
    BEVERAGES = "משקאות"
    SNACKS = "חטיפים"
    CLEANING = "ניקיון"


class Rating(StrEnum):
    """How an observed price compares to the market range."""

    GREAT = "great"
    GOOD = "good"
    AVERAGE = "average"
    HIGH = "high"
    EXPENSIVE = "expensive"


class PriceSource(StrEnum):
    """Where a product's price range came from."""

    CRAWLED = "crawled"
    FALLBACK = "fallback"


class CacheStatus(StrEnum):
    """Lifecycle state of the crawled price cache."""

    EMPTY = "empty"
    POPULATED = "populated"
    STALE = "stale"
    REFRESHING = "refreshing"
    DEGRADED = "degraded"
