"""In-memory price cache state.

One ``CacheState`` exists per application. It is created empty by the
lifespan handler and only ``PriceService`` writes to it; readers always see
either the previous or the new snapshot because replacement is a single
reference assignment of an immutable object.
"""

from __future__ import annotations

from dataclasses import dataclass
from datetime import datetime, timedelta

from price_checker.schemas.enums import CacheStatus
from price_checker.services.pricing.models import PriceSnapshot


@dataclass(slots=True)
class CacheState:
    """Latest successful snapshot plus the outcome of the last refresh."""

    snapshot: PriceSnapshot | None = None
    last_successful_crawl: datetime | None = None
    last_failure_at: datetime | None = None
    last_error: str | None = None

    @property
    def is_empty(self) -> bool:
        """Whether no crawl has ever succeeded."""
        return self.snapshot is None

    def replace(self, snapshot: PriceSnapshot) -> None:
        """Install a new snapshot and clear the failure marker."""
        self.snapshot = snapshot
        self.last_successful_crawl = snapshot.crawled_at
        self.last_failure_at = None
        self.last_error = None

    def mark_failed(self, reason: str, at: datetime) -> None:
        """Record a failed refresh; the current snapshot is kept."""
        self.last_failure_at = at
        self.last_error = reason

    def is_fresh(self, now: datetime, ttl: float) -> bool:
        """Whether the snapshot is younger than ``ttl`` seconds."""
        if self.last_successful_crawl is None:
            return False
        return now - self.last_successful_crawl < timedelta(seconds=ttl)

    def in_backoff(self, now: datetime, backoff: float) -> bool:
        """Whether a recent failure should suppress another crawl."""
        if self.last_failure_at is None:
            return False
        return now - self.last_failure_at < timedelta(seconds=backoff)

    def status(
        self,
        now: datetime,
        ttl: float,
        *,
        refreshing: bool = False,
    ) -> CacheStatus:
        """Current lifecycle state of the cache."""
        if refreshing:
            return CacheStatus.REFRESHING
        if self.last_error is not None:
            return CacheStatus.DEGRADED
        if self.snapshot is None:
            return CacheStatus.EMPTY
        if self.is_fresh(now, ttl):
            return CacheStatus.POPULATED
        return CacheStatus.STALE
