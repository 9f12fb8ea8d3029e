"""Discover the retailer's currently published price files."""

from __future__ import annotations

import html
import re
from typing import TYPE_CHECKING
from urllib.parse import urljoin, urlparse

import httpx
from bs4 import BeautifulSoup

from price_checker.observability.logging import get_logger
from price_checker.services.pricing.exceptions import DiscoveryError


if TYPE_CHECKING:
    from collections.abc import Iterable


logger = get_logger(__name__)

# Absolute .gz links embedded anywhere in the page (scripts, data attributes).
_EMBEDDED_URL_RE = re.compile(
    r"""https?://[^\s"'<>]+?\.gz(?![\w.])(?:\?[^\s"'<>]*)?""",
    re.IGNORECASE,
)
_STORE_ID_RE = re.compile(r"Price(?:Full)?\d+-(\d+)-", re.IGNORECASE)


def is_price_file_url(url: str) -> bool:
    """Whether a URL points at a compressed price file."""
    return urlparse(url).path.lower().endswith(".gz")


def store_id_from_url(url: str) -> str | None:
    """Extract the branch id from a price file name, if present.

    ``.../PriceFull7290027600007-001-202410170300.gz`` -> ``"001"``
    """
    match = _STORE_ID_RE.search(urlparse(url).path)
    return match.group(1) if match else None


def prefer_full_catalog(urls: Iterable[str], marker: str) -> list[str]:
    """Drop incremental files whenever a full-catalog file is published.

    Args:
        urls: Candidate file URLs in discovery order.
        marker: File-name fragment identifying full-catalog files.

    Returns:
        Full-catalog URLs if any exist, otherwise all URLs.
    """
    urls = list(urls)
    needle = marker.lower()
    full = [u for u in urls if needle in urlparse(u).path.lower()]
    return full or urls


def extract_file_urls(page: str, base_url: str) -> list[str]:
    """Collect distinct absolute price file URLs from a listing page.

    Links are read from ``href``/``src`` attributes and from bare URLs in the
    page text. Relative links are resolved against ``base_url``; order of
    first appearance is kept.
    """
    candidates: list[str] = []

    soup = BeautifulSoup(page, "html.parser")
    for tag in soup.find_all(True):
        for attr in ("href", "src", "data-url"):
            value = tag.get(attr)
            if isinstance(value, str) and value.strip():
                candidates.append(value.strip())

    candidates.extend(
        html.unescape(match.group(0)) for match in _EMBEDDED_URL_RE.finditer(page)
    )

    seen: set[str] = set()
    urls: list[str] = []
    for candidate in candidates:
        url = urljoin(base_url, candidate)
        if url in seen or not is_price_file_url(url):
            continue
        seen.add(url)
        urls.append(url)
    return urls


class PriceFileLocator:
    """Finds price file URLs on the retailer's transparency page."""

    def __init__(
        self,
        http_client: httpx.AsyncClient,
        listing_url: str,
        full_catalog_marker: str = "PriceFull",
    ) -> None:
        """Initialize the locator.

        Args:
            http_client: Shared HTTP client.
            listing_url: Public page listing the price files.
            full_catalog_marker: File-name fragment of full-catalog files.
        """
        self._http = http_client
        self._listing_url = listing_url
        self._full_catalog_marker = full_catalog_marker

    async def _fetch_listing(self) -> str:
        try:
            response = await self._http.get(self._listing_url)
            response.raise_for_status()
        except httpx.HTTPStatusError as e:
            msg = f"HTTP {e.response.status_code} from {self._listing_url}"
            raise DiscoveryError(msg, url=self._listing_url) from e
        except httpx.HTTPError as e:
            msg = f"Request failed for {self._listing_url}: {e}"
            raise DiscoveryError(msg, url=self._listing_url) from e
        return response.text

    async def locate(self) -> list[str]:
        """Return the currently published price file URLs.

        Never raises: a listing that cannot be fetched or read yields an
        empty list, which callers treat as a degraded crawl.
        """
        try:
            page = await self._fetch_listing()
            urls = extract_file_urls(page, self._listing_url)
        except DiscoveryError as e:
            logger.warning("Price file discovery failed", error=str(e))
            return []
        except Exception:
            logger.exception(
                "Unexpected error reading price file listing",
                url=self._listing_url,
            )
            return []

        selected = prefer_full_catalog(urls, self._full_catalog_marker)
        logger.info(
            "Located price files",
            found=len(urls),
            selected=len(selected),
        )
        return selected
