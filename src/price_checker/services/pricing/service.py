"""Price service: cache orchestration over the crawl pipeline.

Read policy:
- empty cache: await the single-flight refresh (bounded by
  ``refresh_timeout``); after a failure, serve fallback prices without
  crawling until ``failure_backoff`` has elapsed.
- fresh snapshot: serve it.
- stale snapshot: serve it immediately and refresh in the background.
- failed refresh: keep the previous snapshot, or serve fallback prices.
- refresh cancelled by shutdown: waiting readers get fallback prices.

No pricing error ever escapes ``get_products``.
"""

from __future__ import annotations

import asyncio
import contextlib
from dataclasses import dataclass
from datetime import UTC, datetime
from typing import TYPE_CHECKING

import httpx

from price_checker.catalog import (
    PRODUCT_CATALOG,
    get_catalog_product,
    get_fallback_price,
)
from price_checker.core.config import get_settings
from price_checker.observability.logging import get_logger
from price_checker.schemas.enums import PriceSource
from price_checker.schemas.product import Product, StorePrice
from price_checker.services.pricing.aggregator import summarize
from price_checker.services.pricing.constants import DEFAULT_HEADERS
from price_checker.services.pricing.crawler import PriceCrawler
from price_checker.services.pricing.exceptions import NoUsableDataError
from price_checker.services.pricing.fetcher import PriceFileFetcher
from price_checker.services.pricing.locator import PriceFileLocator
from price_checker.services.pricing.matcher import match_catalog
from price_checker.services.pricing.models import PriceSnapshot, PriceSummary
from price_checker.services.pricing.rating import rate


if TYPE_CHECKING:
    from collections.abc import Callable, Sequence
    from decimal import Decimal

    from price_checker.catalog.models import CatalogProduct
    from price_checker.core.config.settings import PricingSettings
    from price_checker.schemas.enums import CacheStatus, Rating
    from price_checker.services.pricing.cache import CacheState


logger = get_logger(__name__)


def _utcnow() -> datetime:
    return datetime.now(UTC)


@dataclass(frozen=True, slots=True)
class ProductsResult:
    """Products plus where their prices came from."""

    products: list[Product]
    source: PriceSource
    last_updated: datetime | None = None
    message: str | None = None


def build_product(
    product: CatalogProduct,
    summary: PriceSummary,
    source: PriceSource,
    last_updated: datetime | None = None,
    store_prices: list[StorePrice] | None = None,
) -> Product:
    """Join a catalog entry with a price summary."""
    return Product(
        id=product.id,
        name=product.name,
        name_hebrew=product.name_hebrew,
        category=product.category,
        unit=product.unit,
        barcode=product.barcode,
        image=product.image,
        average_price=float(summary.average),
        low_price=float(summary.low),
        high_price=float(summary.high),
        source=source,
        last_updated=last_updated,
        store_prices=store_prices,
    )


def build_fallback_product(product: CatalogProduct) -> Product:
    """Catalog entry priced from the static fallback table."""
    return build_product(product, get_fallback_price(product.id), PriceSource.FALLBACK)


class PriceService:
    """Serves catalog products priced from the freshest crawl available.

    The service owns one HTTP client and one background refresh task at a
    time; every concurrent ``refresh()`` caller shares that task.
    """

    def __init__(
        self,
        cache_state: CacheState,
        settings: PricingSettings | None = None,
        *,
        crawler: PriceCrawler | None = None,
        catalog: Sequence[CatalogProduct] = PRODUCT_CATALOG,
        http_client: httpx.AsyncClient | None = None,
        clock: Callable[[], datetime] = _utcnow,
    ) -> None:
        """Initialize the service.

        Args:
            cache_state: Shared cache state, owned by the application.
            settings: Pricing configuration. Defaults to the loaded settings.
            crawler: Pre-built crawler. Built in ``initialize()`` if omitted.
            catalog: Products to price.
            http_client: Pre-built HTTP client. Created (and owned) in
                ``initialize()`` if omitted.
            clock: Source of the current time.
        """
        self._cache = cache_state
        self._settings = settings or get_settings().pricing
        self._crawler = crawler
        self._catalog = tuple(catalog)
        self._http_client = http_client
        self._owns_http_client = False
        self._clock = clock
        self._refresh_task: asyncio.Task[bool] | None = None

    async def initialize(self) -> None:
        """Create the HTTP client and crawl pipeline."""
        if self._crawler is None:
            if self._http_client is None:
                self._http_client = httpx.AsyncClient(
                    headers=DEFAULT_HEADERS,
                    timeout=httpx.Timeout(self._settings.fetch_timeout),
                    follow_redirects=True,
                )
                self._owns_http_client = True

            locator = PriceFileLocator(
                self._http_client,
                self._settings.listing_url,
                full_catalog_marker=self._settings.full_catalog_marker,
            )
            fetcher = PriceFileFetcher(self._http_client)
            self._crawler = PriceCrawler(locator, fetcher, self._settings)

        logger.info(
            "PriceService initialized",
            retailer=self._settings.retailer_name,
            catalog_size=len(self._catalog),
            cache_ttl=self._settings.cache_ttl,
            max_files=self._settings.max_files,
        )

    async def shutdown(self) -> None:
        """Cancel any running refresh and close the owned HTTP client."""
        task = self._refresh_task
        if task is not None and not task.done():
            task.cancel()
            with contextlib.suppress(asyncio.CancelledError):
                await task
        self._refresh_task = None

        if self._http_client is not None and self._owns_http_client:
            await self._http_client.aclose()
            self._http_client = None
            self._owns_http_client = False
        logger.debug("PriceService shutdown")

    @property
    def cache(self) -> CacheState:
        """The cache this service maintains."""
        return self._cache

    @property
    def is_refreshing(self) -> bool:
        """Whether a crawl is in flight."""
        return self._refresh_task is not None and not self._refresh_task.done()

    @property
    def status(self) -> CacheStatus:
        """Current cache lifecycle state."""
        return self._cache.status(
            self._clock(),
            self._settings.cache_ttl,
            refreshing=self.is_refreshing,
        )

    # =========================================================================
    # Refresh
    # =========================================================================

    def _ensure_refresh_task(self) -> asyncio.Task[bool]:
        if self._crawler is None:
            msg = "PriceService not initialized"
            raise RuntimeError(msg)
        if self._refresh_task is None or self._refresh_task.done():
            self._refresh_task = asyncio.create_task(self._run_refresh(self._crawler))
        return self._refresh_task

    def schedule_refresh(self) -> None:
        """Start a background crawl unless one is already running."""
        self._ensure_refresh_task()

    async def refresh(self) -> bool:
        """Run a crawl, or join the one already in flight.

        Returns:
            True if a new snapshot was installed.
        """
        return await asyncio.shield(self._ensure_refresh_task())

    async def _run_refresh(self, crawler: PriceCrawler) -> bool:
        timeout = self._settings.refresh_timeout
        try:
            async with asyncio.timeout(timeout):
                report = await crawler.crawl()
        except NoUsableDataError as e:
            self._cache.mark_failed(str(e), self._clock())
            logger.warning("Price refresh produced no usable data", error=str(e))
            return False
        except TimeoutError:
            reason = f"Price refresh timed out after {timeout}s"
            self._cache.mark_failed(reason, self._clock())
            logger.warning("Price refresh timed out", timeout=timeout)
            return False
        except Exception as e:
            self._cache.mark_failed(str(e) or repr(e), self._clock())
            logger.exception("Unexpected error during price refresh")
            return False

        snapshot = PriceSnapshot(
            matched=match_catalog(
                self._catalog,
                report.records,
                self._settings.max_fuzzy_matches,
            ),
            high_prices=report.high_prices,
            crawled_at=self._clock(),
            files_processed=len(report.succeeded),
            record_count=len(report.records),
        )
        self._cache.replace(snapshot)

        logger.info(
            "Price snapshot replaced",
            files_processed=snapshot.files_processed,
            records=snapshot.record_count,
            matched_products=sum(1 for r in snapshot.matched.values() if r),
        )
        return True

    # =========================================================================
    # Reads
    # =========================================================================

    async def _current_snapshot(self) -> PriceSnapshot | None:
        now = self._clock()
        snapshot = self._cache.snapshot

        if snapshot is not None:
            if not self._cache.is_fresh(
                now, self._settings.cache_ttl
            ) and not self._cache.in_backoff(now, self._settings.failure_backoff):
                logger.debug("Serving stale snapshot, refreshing in background")
                self.schedule_refresh()
            return snapshot

        if not self.is_refreshing and self._cache.in_backoff(
            now, self._settings.failure_backoff
        ):
            return None

        task = self._ensure_refresh_task()
        try:
            await asyncio.shield(task)
        except asyncio.CancelledError:
            # Re-raise if this reader is being cancelled; a refresh cancelled
            # by shutdown just leaves the cache as it is.
            current = asyncio.current_task()
            if not task.cancelled() or (current is not None and current.cancelling()):
                raise
            logger.debug("Refresh cancelled while a reader was waiting")
        return self._cache.snapshot

    def _store_prices(self, snapshot: PriceSnapshot, product_id: str) -> list[StorePrice]:
        retailer = self._settings.retailer_name
        store_prices: list[StorePrice] = []
        for record in snapshot.records_for(product_id):
            high: Decimal | None = snapshot.high_prices.get(record.identifier)
            store_prices.append(
                StorePrice(
                    store_name=retailer,
                    store_chain=retailer,
                    item_code=record.identifier,
                    item_name=record.name,
                    price=float(record.price),
                    high_price=float(high) if high is not None else None,
                    price_update_date=record.price_update_date,
                )
            )
        return store_prices

    def _live_product(self, product: CatalogProduct, snapshot: PriceSnapshot) -> Product:
        summary = summarize(snapshot.records_for(product.id))
        if not summary.has_data:
            return build_fallback_product(product)
        return build_product(
            product,
            summary,
            PriceSource.CRAWLED,
            last_updated=snapshot.crawled_at,
            store_prices=self._store_prices(snapshot, product.id),
        )

    def build_products_from_snapshot(self, snapshot: PriceSnapshot) -> list[Product]:
        """Price every catalog product from a snapshot.

        Products without matched records keep their fallback values and are
        tagged as such.
        """
        return [self._live_product(p, snapshot) for p in self._catalog]

    def get_fallback_products(self) -> list[Product]:
        """Price every catalog product from the static table."""
        return [build_fallback_product(p) for p in self._catalog]

    def _unavailable_message(self) -> str:
        if self._cache.last_error:
            return f"Live prices unavailable: {self._cache.last_error}"
        return "Live prices unavailable"

    async def get_products(self, *, use_fallback: bool = False) -> ProductsResult:
        """All catalog products with their current price ranges.

        Args:
            use_fallback: Skip live data and return static estimates.
        """
        if use_fallback:
            return ProductsResult(
                products=self.get_fallback_products(),
                source=PriceSource.FALLBACK,
                message="Fallback prices requested",
            )

        snapshot = await self._current_snapshot()
        if snapshot is None:
            return ProductsResult(
                products=self.get_fallback_products(),
                source=PriceSource.FALLBACK,
                message=self._unavailable_message(),
            )

        return ProductsResult(
            products=self.build_products_from_snapshot(snapshot),
            source=PriceSource.CRAWLED,
            last_updated=snapshot.crawled_at,
        )

    async def get_product(
        self,
        product_id: str,
        *,
        use_fallback: bool = False,
    ) -> Product | None:
        """One catalog product with its price range, or None if unknown."""
        product = get_catalog_product(product_id, self._catalog)
        if product is None:
            return None
        if use_fallback:
            return build_fallback_product(product)

        snapshot = await self._current_snapshot()
        if snapshot is None:
            return build_fallback_product(product)
        return self._live_product(product, snapshot)

    async def rate_product(
        self,
        product_id: str,
        price: Decimal | float,
    ) -> tuple[Product, Rating] | None:
        """Rate an observed price for a catalog product."""
        product = await self.get_product(product_id)
        if product is None:
            return None
        return product, rate(price, product)
