"""Item record extraction from retailer price files.

Price files are XML-ish documents with one ``<Item>`` element per price
line. Schemas drift between retailers and versions, so each field is read
from an ordered list of tag aliases, and every item block is validated on its
own: a malformed block is counted and skipped, never fatal.
"""

from __future__ import annotations

import html
import re
from decimal import Decimal, InvalidOperation
from functools import lru_cache
from typing import TYPE_CHECKING

from price_checker.observability.logging import get_logger
from price_checker.services.pricing.constants import (
    IDENTIFIER_TAGS,
    ITEM_TAG,
    NAME_TAGS,
    PRICE_TAGS,
    QUANTITY_TAGS,
    UNIT_OF_MEASURE_TAGS,
    UNIT_PRICE_TAGS,
    UPDATE_DATE_TAGS,
)
from price_checker.services.pricing.exceptions import RecordParseError
from price_checker.services.pricing.models import ParseResult, RawRecord


if TYPE_CHECKING:
    from collections.abc import Iterator


logger = get_logger(__name__)

_ITEM_BLOCK_RE = re.compile(
    rf"<{ITEM_TAG}(?:\s[^>]*)?>(.*?)</{ITEM_TAG}\s*>",
    re.IGNORECASE | re.DOTALL,
)
_CDATA_RE = re.compile(r"<!\[CDATA\[(.*?)\]\]>", re.DOTALL)

_ONE = Decimal(1)


@lru_cache(maxsize=64)
def _tag_pattern(tag: str) -> re.Pattern[str]:
    return re.compile(
        rf"<{tag}(?:\s[^>]*)?>((?:<!\[CDATA\[.*?\]\]>|[^<])*)</{tag}\s*>",
        re.IGNORECASE | re.DOTALL,
    )


def iter_item_blocks(text: str) -> Iterator[str]:
    """Yield the inner text of every item element in a document.

    Blocks are found anywhere in the input, including inside larger
    mixed-content documents. Call again to restart the sequence.
    """
    for match in _ITEM_BLOCK_RE.finditer(text):
        yield match.group(1)


def get_tag_value(block: str, aliases: tuple[str, ...]) -> str:
    """Return the first non-empty value among the tag aliases.

    Args:
        block: Inner text of an item element.
        aliases: Candidate tag names in priority order.

    Returns:
        The unescaped, stripped value, or an empty string if none is present.
    """
    for tag in aliases:
        match = _tag_pattern(tag).search(block)
        if match is None:
            continue
        value = _CDATA_RE.sub(r"\1", match.group(1))
        value = html.unescape(value).strip()
        if value:
            return value
    return ""


def _to_decimal(value: str) -> Decimal | None:
    if not value:
        return None
    try:
        number = Decimal(value)
    except InvalidOperation:
        return None
    return number if number.is_finite() else None


def parse_item_block(block: str) -> RawRecord:
    """Build a record from one item block.

    Raises:
        RecordParseError: If the block has no identifier or no positive price.
    """
    identifier = get_tag_value(block, IDENTIFIER_TAGS)
    if not identifier:
        msg = "Item block has no identifier"
        raise RecordParseError(msg)

    price = _to_decimal(get_tag_value(block, PRICE_TAGS))
    if price is None or price <= 0:
        msg = f"Item {identifier} has no usable price"
        raise RecordParseError(msg)

    quantity = _to_decimal(get_tag_value(block, QUANTITY_TAGS))
    if quantity is None or quantity <= 0:
        quantity = _ONE

    return RawRecord(
        identifier=identifier,
        name=get_tag_value(block, NAME_TAGS),
        price=price,
        unit_of_measure=get_tag_value(block, UNIT_OF_MEASURE_TAGS),
        quantity=quantity,
        unit_price=_to_decimal(get_tag_value(block, UNIT_PRICE_TAGS)),
        price_update_date=get_tag_value(block, UPDATE_DATE_TAGS) or None,
    )


def parse_price_file(text: str) -> ParseResult:
    """Parse every item block in a price file.

    Args:
        text: Decoded price file content.

    Returns:
        Valid records plus the number of discarded blocks.
    """
    records: list[RawRecord] = []
    discarded = 0

    for block in iter_item_blocks(text):
        try:
            records.append(parse_item_block(block))
        except RecordParseError:
            discarded += 1

    if discarded:
        logger.debug(
            "Discarded malformed item blocks",
            parsed=len(records),
            discarded=discarded,
        )

    return ParseResult(records=tuple(records), discarded=discarded)


def parse_records(text: str) -> list[RawRecord]:
    """Parse a price file and return only the valid records."""
    return list(parse_price_file(text).records)
