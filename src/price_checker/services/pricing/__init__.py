"""Price aggregation engine.

Discovers and downloads a retailer's price-transparency files, parses item
records, matches them to the catalog and summarizes price ranges. The
orchestrating ``PriceService`` lives in ``price_checker.services.pricing.service``.
"""

from price_checker.services.pricing.exceptions import (
    DiscoveryError,
    DownloadError,
    NoUsableDataError,
    PricingError,
    RecordParseError,
)
from price_checker.services.pricing.models import (
    CrawlReport,
    FileOutcome,
    ParseResult,
    PriceSnapshot,
    PriceSummary,
    RawRecord,
)


__all__ = [
    "CrawlReport",
    "DiscoveryError",
    "DownloadError",
    "FileOutcome",
    "NoUsableDataError",
    "ParseResult",
    "PriceSnapshot",
    "PriceSummary",
    "PricingError",
    "RawRecord",
    "RecordParseError",
]
