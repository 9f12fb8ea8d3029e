"""Constants for the price aggregation engine.

Contains:
- HTTP headers for the retailer site
- Price file format details (gzip signature, item tag aliases)
- Rating thresholds
"""

from __future__ import annotations

from decimal import Decimal
from typing import Final


# =============================================================================
# HTTP
# =============================================================================

DEFAULT_HEADERS: Final[dict[str, str]] = {
    "User-Agent": (
        "Mozilla/5.0 (Macintosh; Intel Mac OS X 10_15_7) "
        "AppleWebKit/537.36 (KHTML, like Gecko) "
        "Chrome/120.0.0.0 Safari/537.36"
    ),
    "Accept": "text/html,application/xhtml+xml,application/xml;q=0.9,*/*;q=0.8",
    "Accept-Language": "he-IL,he;q=0.9,en;q=0.8",
}

DOWNLOAD_HEADERS: Final[dict[str, str]] = {
    "Accept": "application/gzip, */*",
}


# =============================================================================
# Price Files
# =============================================================================

GZIP_MAGIC: Final[bytes] = b"\x1f\x8b"

ITEM_TAG: Final[str] = "Item"

# First alias carrying a non-empty value wins.
IDENTIFIER_TAGS: Final[tuple[str, ...]] = ("ItemCode", "ItemId", "Barcode")
NAME_TAGS: Final[tuple[str, ...]] = (
    "ItemName",
    "ItemNm",
    "ManufacturerItemDescription",
)
PRICE_TAGS: Final[tuple[str, ...]] = ("ItemPrice", "Price")
UNIT_OF_MEASURE_TAGS: Final[tuple[str, ...]] = ("UnitOfMeasure", "UnitQty", "Quantity")
QUANTITY_TAGS: Final[tuple[str, ...]] = ("Quantity", "QtyInPackage")
UNIT_PRICE_TAGS: Final[tuple[str, ...]] = ("UnitOfMeasurePrice",)
UPDATE_DATE_TAGS: Final[tuple[str, ...]] = ("PriceUpdateDate", "PriceUpdateTime")


# =============================================================================
# Rating
# =============================================================================

# Inclusive upper bounds of the position within [low, high].
GREAT_MAX_POSITION: Final[Decimal] = Decimal("0.10")
GOOD_MAX_POSITION: Final[Decimal] = Decimal("0.35")
AVERAGE_MAX_POSITION: Final[Decimal] = Decimal("0.65")
HIGH_MAX_POSITION: Final[Decimal] = Decimal("0.85")

PRICE_PRECISION: Final[Decimal] = Decimal("0.1")
