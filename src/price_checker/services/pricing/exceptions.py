"""Exceptions for the price aggregation engine.

None of these reach the HTTP boundary: each is converted into a degraded
but normally-shaped result at the seam that owns the unit of work.
"""

from __future__ import annotations


class PricingError(Exception):
    """Base exception for price aggregation errors."""

    def __init__(self, message: str, url: str | None = None) -> None:
        self.url = url
        super().__init__(message)


class DiscoveryError(PricingError):
    """Raised when the price file listing cannot be fetched or read.

    The locator reports this as "no files found" rather than propagating it.
    """


class DownloadError(PricingError):
    """Raised when a single price file cannot be retrieved or decoded.

    Isolated per file - the crawl continues with the remaining files.
    """

    def __init__(
        self,
        message: str,
        url: str | None = None,
        status_code: int | None = None,
    ) -> None:
        self.status_code = status_code
        super().__init__(message, url)


class RecordParseError(PricingError):
    """Raised for a single malformed item block; counted and skipped."""


class NoUsableDataError(PricingError):
    """Raised when a crawl produced no usable price records at all.

    Triggers full fallback for the refresh cycle.
    """
