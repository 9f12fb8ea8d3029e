"""Unit tests for price file download and decoding."""

from __future__ import annotations

import gzip

import httpx
import pytest

from price_checker.services.pricing.exceptions import DownloadError
from price_checker.services.pricing.fetcher import (
    PriceFileFetcher,
    decode_payload,
    is_gzip,
)


pytestmark = pytest.mark.unit

URL = "https://cdn.example.test/PriceFull7290027600007-001-202410170300.gz"


def _fetcher(handler: httpx.MockTransport) -> PriceFileFetcher:
    return PriceFileFetcher(httpx.AsyncClient(transport=handler))


class TestDecodePayload:
    """Tests for decode_payload."""

    def test_decompresses_gzip(self) -> None:
        """Should decompress payloads carrying the gzip signature."""
        payload = gzip.compress("<Item>חלב</Item>".encode())

        assert is_gzip(payload)
        assert decode_payload(payload) == "<Item>חלב</Item>"

    def test_plain_text_passes_through(self) -> None:
        """Should decode plain payloads without decompressing."""
        assert decode_payload("<Item>לחם</Item>".encode()) == "<Item>לחם</Item>"

    def test_strips_bom(self) -> None:
        """Should drop a UTF-8 byte order mark."""
        assert decode_payload(b"\xef\xbb\xbf<root/>") == "<root/>"

    def test_replaces_invalid_bytes(self) -> None:
        """Should not fail on undecodable bytes."""
        assert decode_payload(b"ok\xff") == "ok\ufffd"

    def test_corrupt_gzip_raises(self) -> None:
        """Should raise DownloadError for a broken gzip stream."""
        with pytest.raises(DownloadError) as exc_info:
            decode_payload(b"\x1f\x8bnot really gzip", url=URL)

        assert exc_info.value.url == URL


class TestPriceFileFetcher:
    """Tests for PriceFileFetcher."""

    @pytest.mark.asyncio
    async def test_fetch_gzip(self) -> None:
        """Should download and decompress a gzip file."""
        body = gzip.compress(b"<Item><ItemCode>1</ItemCode></Item>")
        transport = httpx.MockTransport(
            lambda request: httpx.Response(200, content=body)
        )

        text = await _fetcher(transport).fetch(URL)

        assert text == "<Item><ItemCode>1</ItemCode></Item>"

    @pytest.mark.asyncio
    async def test_status_error(self) -> None:
        """Should raise DownloadError carrying the status code."""
        transport = httpx.MockTransport(lambda request: httpx.Response(404))

        with pytest.raises(DownloadError) as exc_info:
            await _fetcher(transport).fetch(URL)

        assert exc_info.value.status_code == 404
        assert exc_info.value.url == URL

    @pytest.mark.asyncio
    async def test_network_error(self) -> None:
        """Should raise DownloadError on transport failure."""

        def handler(request: httpx.Request) -> httpx.Response:
            raise httpx.ReadTimeout("timed out", request=request)

        with pytest.raises(DownloadError) as exc_info:
            await _fetcher(httpx.MockTransport(handler)).fetch(URL)

        assert exc_info.value.status_code is None
