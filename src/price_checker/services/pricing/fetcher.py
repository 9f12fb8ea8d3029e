"""Download price files and decode them to text."""

from __future__ import annotations

import gzip
import zlib

import httpx

from price_checker.observability.logging import get_logger
from price_checker.services.pricing.constants import DOWNLOAD_HEADERS, GZIP_MAGIC
from price_checker.services.pricing.exceptions import DownloadError


logger = get_logger(__name__)


def is_gzip(payload: bytes) -> bool:
    """Whether a payload starts with the gzip signature."""
    return payload[:2] == GZIP_MAGIC


def decode_payload(payload: bytes, url: str | None = None) -> str:
    """Decompress a gzip payload if needed and decode it as UTF-8.

    Plain payloads are decoded untouched. A leading BOM is dropped and
    undecodable bytes are replaced rather than failing the file.

    Raises:
        DownloadError: If a payload carrying the gzip signature is corrupt.
    """
    if is_gzip(payload):
        try:
            payload = gzip.decompress(payload)
        except (OSError, EOFError, zlib.error) as e:
            msg = f"Corrupt gzip payload: {e}"
            raise DownloadError(msg, url=url) from e
    return payload.decode("utf-8-sig", errors="replace")


class PriceFileFetcher:
    """Retrieves one price file over HTTP."""

    def __init__(self, http_client: httpx.AsyncClient) -> None:
        """Initialize the fetcher.

        Args:
            http_client: Shared HTTP client.
        """
        self._http = http_client

    async def fetch_bytes(self, url: str) -> bytes:
        """Download a file's raw payload.

        Raises:
            DownloadError: On non-success status or network failure.
        """
        try:
            response = await self._http.get(url, headers=DOWNLOAD_HEADERS)
            response.raise_for_status()
        except httpx.HTTPStatusError as e:
            status_code = e.response.status_code
            msg = f"HTTP {status_code} from {url}"
            raise DownloadError(msg, url=url, status_code=status_code) from e
        except httpx.HTTPError as e:
            msg = f"Request failed for {url}: {e}"
            raise DownloadError(msg, url=url) from e

        logger.debug("Downloaded price file", url=url, size=len(response.content))
        return response.content

    async def fetch(self, url: str) -> str:
        """Download a price file and return its text.

        Raises:
            DownloadError: On HTTP failure or a corrupt gzip stream.
        """
        return decode_payload(await self.fetch_bytes(url), url=url)
