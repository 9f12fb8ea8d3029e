"""Internal data types for the price aggregation engine.

These are plain frozen dataclasses: they never cross the HTTP boundary
directly (see ``price_checker.schemas.product`` for the public shapes).
"""

from __future__ import annotations

from dataclasses import dataclass, field
from decimal import Decimal
from types import MappingProxyType
from typing import TYPE_CHECKING


if TYPE_CHECKING:
    from collections.abc import Mapping
    from datetime import datetime


ZERO = Decimal(0)


@dataclass(frozen=True, slots=True)
class RawRecord:
    """One item price line parsed from a retailer price file."""

    identifier: str
    name: str
    price: Decimal
    unit_of_measure: str = ""
    quantity: Decimal = Decimal(1)
    unit_price: Decimal | None = None
    price_update_date: str | None = None


@dataclass(frozen=True, slots=True)
class PriceSummary:
    """Average/low/high price statistics, rounded to one decimal place.

    An all-zero summary means "no data" and must never be shown as a price.
    """

    average: Decimal
    low: Decimal
    high: Decimal

    @property
    def has_data(self) -> bool:
        """Whether the summary carries real prices."""
        return self.average > ZERO

    @classmethod
    def empty(cls) -> PriceSummary:
        """Sentinel summary for an empty record set."""
        return cls(average=ZERO, low=ZERO, high=ZERO)


@dataclass(frozen=True, slots=True)
class ParseResult:
    """Outcome of parsing one price file."""

    records: tuple[RawRecord, ...]
    discarded: int = 0


@dataclass(frozen=True, slots=True)
class FileOutcome:
    """Outcome of downloading and parsing one price file.

    Exactly one of ``result`` and ``error`` is set.
    """

    url: str
    store_id: str | None = None
    result: ParseResult | None = None
    error: str | None = None

    @property
    def ok(self) -> bool:
        """Whether the file was downloaded and parsed."""
        return self.error is None and self.result is not None


@dataclass(frozen=True, slots=True)
class CrawlReport:
    """Result of one Locate -> Fetch -> Parse -> Dedupe pass."""

    files_located: int
    outcomes: tuple[FileOutcome, ...]
    records: tuple[RawRecord, ...]
    high_prices: Mapping[str, Decimal] = field(
        default_factory=lambda: MappingProxyType({})
    )

    @property
    def succeeded(self) -> list[FileOutcome]:
        """Files that were downloaded and parsed."""
        return [o for o in self.outcomes if o.ok]

    @property
    def failed(self) -> dict[str, str]:
        """Failure reasons keyed by file URL."""
        return {o.url: o.error for o in self.outcomes if o.error is not None}

    @property
    def discarded_records(self) -> int:
        """Records dropped by the parser across all files."""
        return sum(o.result.discarded for o in self.outcomes if o.result is not None)


@dataclass(frozen=True, slots=True)
class PriceSnapshot:
    """Immutable matched price set produced by one successful crawl."""

    matched: Mapping[str, tuple[RawRecord, ...]]
    high_prices: Mapping[str, Decimal]
    crawled_at: datetime
    files_processed: int = 0
    record_count: int = 0

    def records_for(self, product_id: str) -> tuple[RawRecord, ...]:
        """Records matched to a catalog product (empty if none)."""
        return self.matched.get(product_id, ())
