"""Locate -> Fetch -> Parse -> Dedupe pipeline over the published price files."""

from __future__ import annotations

import asyncio
import uuid
from types import MappingProxyType
from typing import TYPE_CHECKING

from price_checker.observability.logging import (
    bind_context,
    get_logger,
    unbind_context,
)
from price_checker.services.pricing.dedupe import dedupe, highest_prices
from price_checker.services.pricing.exceptions import (
    DownloadError,
    NoUsableDataError,
)
from price_checker.services.pricing.fetcher import decode_payload
from price_checker.services.pricing.locator import store_id_from_url
from price_checker.services.pricing.models import (
    CrawlReport,
    FileOutcome,
    ParseResult,
)
from price_checker.services.pricing.parser import parse_price_file


if TYPE_CHECKING:
    from price_checker.core.config.settings import PricingSettings
    from price_checker.services.pricing.fetcher import PriceFileFetcher
    from price_checker.services.pricing.locator import PriceFileLocator


logger = get_logger(__name__)


def _decode_and_parse(payload: bytes, url: str) -> ParseResult:
    return parse_price_file(decode_payload(payload, url=url))


class PriceCrawler:
    """Runs one crawl over the retailer's price files.

    Downloads fan out under a semaphore; decompression and parsing run in a
    worker thread. A failing file is recorded in its ``FileOutcome`` and
    never stops the others.
    """

    def __init__(
        self,
        locator: PriceFileLocator,
        fetcher: PriceFileFetcher,
        settings: PricingSettings,
    ) -> None:
        """Initialize the crawler.

        Args:
            locator: Discovers file URLs.
            fetcher: Downloads a single file.
            settings: Pricing configuration (file and concurrency limits).
        """
        self._locator = locator
        self._fetcher = fetcher
        self._settings = settings

    async def _process_file(self, url: str) -> FileOutcome:
        store_id = store_id_from_url(url)
        try:
            payload = await self._fetcher.fetch_bytes(url)
            result = await asyncio.to_thread(_decode_and_parse, payload, url)
        except DownloadError as e:
            logger.warning(
                "Failed to download price file",
                url=url,
                store_id=store_id,
                status_code=e.status_code,
                error=str(e),
            )
            return FileOutcome(url=url, store_id=store_id, error=str(e))
        except Exception as e:
            logger.exception("Unexpected error processing price file", url=url)
            return FileOutcome(url=url, store_id=store_id, error=str(e) or repr(e))

        logger.debug(
            "Parsed price file",
            url=url,
            store_id=store_id,
            records=len(result.records),
            discarded=result.discarded,
        )
        return FileOutcome(url=url, store_id=store_id, result=result)

    async def crawl(self) -> CrawlReport:
        """Run one full pass and return the deduplicated records.

        Raises:
            NoUsableDataError: If no file was located, every file failed, or
                no valid record survived parsing.
        """
        bind_context(crawl_id=uuid.uuid4().hex[:12])
        try:
            return await self._crawl()
        finally:
            unbind_context("crawl_id")

    async def _crawl(self) -> CrawlReport:
        urls = await self._locator.locate()
        if not urls:
            msg = "No price files located"
            raise NoUsableDataError(msg)

        selected = urls[: self._settings.max_files]
        semaphore = asyncio.Semaphore(self._settings.max_concurrent_downloads)

        async def process_with_semaphore(url: str) -> FileOutcome:
            async with semaphore:
                return await self._process_file(url)

        outcomes = tuple(
            await asyncio.gather(*[process_with_semaphore(u) for u in selected])
        )

        parsed = [o.result for o in outcomes if o.result is not None]
        if not parsed:
            msg = f"All {len(selected)} price file downloads failed"
            raise NoUsableDataError(msg)

        all_records = [record for result in parsed for record in result.records]
        if not all_records:
            msg = "Price files contained no usable records"
            raise NoUsableDataError(msg)

        unique = dedupe(all_records)
        report = CrawlReport(
            files_located=len(urls),
            outcomes=outcomes,
            records=tuple(unique.values()),
            high_prices=MappingProxyType(highest_prices(all_records)),
        )

        logger.info(
            "Crawl completed",
            files_located=report.files_located,
            files_processed=len(report.succeeded),
            files_failed=len(report.failed),
            records=len(report.records),
            discarded=report.discarded_records,
        )
        return report
