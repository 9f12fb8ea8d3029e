"""Unit tests for the price file record parser."""

from __future__ import annotations

from decimal import Decimal

import pytest

from price_checker.services.pricing.constants import NAME_TAGS, PRICE_TAGS
from price_checker.services.pricing.exceptions import RecordParseError
from price_checker.services.pricing.parser import (
    get_tag_value,
    iter_item_blocks,
    parse_item_block,
    parse_price_file,
    parse_records,
)


pytestmark = pytest.mark.unit


class TestIterItemBlocks:
    """Tests for iter_item_blocks."""

    def test_finds_blocks_case_insensitively_with_attributes(self) -> None:
        """Should accept any tag case and attributes on the item element."""
        text = '<ITEM id="1"><ItemCode>1</ItemCode></ITEM><item><ItemCode>2</ItemCode></item>'

        blocks = list(iter_item_blocks(text))

        assert blocks == ["<ItemCode>1</ItemCode>", "<ItemCode>2</ItemCode>"]

    def test_does_not_match_items_container(self) -> None:
        """Should not treat <Items> as an item element."""
        text = "<Items><Item><ItemCode>1</ItemCode></Item></Items>"

        assert list(iter_item_blocks(text)) == ["<ItemCode>1</ItemCode>"]

    def test_is_restartable(self) -> None:
        """Should yield the same blocks on every call."""
        text = "<Item>a</Item><Item>b</Item>"

        assert list(iter_item_blocks(text)) == list(iter_item_blocks(text))

    def test_no_blocks(self) -> None:
        """Should yield nothing for text without items."""
        assert list(iter_item_blocks("<html>nothing here</html>")) == []


class TestGetTagValue:
    """Tests for get_tag_value."""

    def test_first_non_empty_alias_wins(self) -> None:
        """Should skip aliases that are missing or empty."""
        block = "<ItemName></ItemName><ItemNm>קוטג'</ItemNm>"

        assert get_tag_value(block, NAME_TAGS) == "קוטג'"

    def test_alias_order_is_priority(self) -> None:
        """Should prefer earlier aliases when several are present."""
        block = "<Price>9.90</Price><ItemPrice>5.90</ItemPrice>"

        assert get_tag_value(block, PRICE_TAGS) == "5.90"

    def test_unescapes_entities_and_cdata(self) -> None:
        """Should unescape XML entities and strip CDATA wrappers."""
        block = "<ItemName><![CDATA[ Salt &amp; Pepper ]]></ItemName>"

        assert get_tag_value(block, NAME_TAGS) == "Salt & Pepper"

    def test_does_not_confuse_prefixed_tags(self) -> None:
        """Should not read <UnitOfMeasurePrice> as <UnitOfMeasure>."""
        block = "<UnitOfMeasurePrice>6.90</UnitOfMeasurePrice>"

        assert get_tag_value(block, ("UnitOfMeasure",)) == ""

    def test_missing_returns_empty_string(self) -> None:
        """Should return an empty string when no alias is present."""
        assert get_tag_value("<Other>1</Other>", NAME_TAGS) == ""


class TestParseItemBlock:
    """Tests for parse_item_block."""

    def test_parses_all_fields(self) -> None:
        """Should read every field from its aliases."""
        block = (
            "<ItemCode>7290000066318</ItemCode>"
            "<ItemName>חלב 3%</ItemName>"
            "<UnitOfMeasure>ליטר</UnitOfMeasure>"
            "<Quantity>2</Quantity>"
            "<ItemPrice>6.90</ItemPrice>"
            "<UnitOfMeasurePrice>3.45</UnitOfMeasurePrice>"
            "<PriceUpdateDate>2024-10-17 03:00</PriceUpdateDate>"
        )

        record = parse_item_block(block)

        assert record.identifier == "7290000066318"
        assert record.name == "חלב 3%"
        assert record.unit_of_measure == "ליטר"
        assert record.quantity == Decimal(2)
        assert record.price == Decimal("6.90")
        assert record.unit_price == Decimal("3.45")
        assert record.price_update_date == "2024-10-17 03:00"

    def test_falls_back_to_alternate_aliases(self) -> None:
        """Should use ItemId/ItemNm/Price when the primary tags are absent."""
        block = "<ItemId>42</ItemId><ItemNm>לחם</ItemNm><Price>8.5</Price>"

        record = parse_item_block(block)

        assert record.identifier == "42"
        assert record.name == "לחם"
        assert record.price == Decimal("8.5")

    def test_quantity_defaults_to_one(self) -> None:
        """Should default an unparseable quantity to 1."""
        block = "<ItemCode>1</ItemCode><ItemPrice>2</ItemPrice><Quantity>n/a</Quantity>"

        assert parse_item_block(block).quantity == Decimal(1)

    def test_bad_unit_price_is_absent(self) -> None:
        """Should drop an unparseable unit price."""
        block = (
            "<ItemCode>1</ItemCode><ItemPrice>2</ItemPrice>"
            "<UnitOfMeasurePrice>abc</UnitOfMeasurePrice>"
        )

        assert parse_item_block(block).unit_price is None

    def test_missing_identifier_raises(self) -> None:
        """Should reject a block without an identifier."""
        with pytest.raises(RecordParseError):
            parse_item_block("<ItemName>x</ItemName><ItemPrice>1</ItemPrice>")

    @pytest.mark.parametrize("price", ["0", "-1.5", "abc", "", "NaN", "Infinity"])
    def test_unusable_price_raises(self, price: str) -> None:
        """Should reject zero, negative, non-numeric and non-finite prices."""
        block = f"<ItemCode>1</ItemCode><ItemPrice>{price}</ItemPrice>"

        with pytest.raises(RecordParseError):
            parse_item_block(block)


class TestParsePriceFile:
    """Tests for parse_price_file and parse_records."""

    def test_counts_discarded_blocks(self, price_file_xml: str) -> None:
        """Should keep valid records and count malformed ones."""
        result = parse_price_file(price_file_xml)

        assert [r.identifier for r in result.records] == [
            "7290000066318",
            "2000090000004",
        ]
        assert result.discarded == 1

    def test_malformed_block_does_not_abort(self) -> None:
        """Should keep parsing after a bad block."""
        text = (
            "<Item><ItemPrice>1</ItemPrice></Item>"
            "<Item><ItemCode>2</ItemCode><ItemPrice>3</ItemPrice></Item>"
        )

        records = parse_records(text)

        assert len(records) == 1
        assert records[0].identifier == "2"

    def test_embedded_in_other_markup(self) -> None:
        """Should find items inside unrelated surrounding content."""
        text = "garbage <div><Item><ItemCode>9</ItemCode><ItemPrice>1.1</ItemPrice></Item></div>"

        assert [r.identifier for r in parse_records(text)] == ["9"]

    def test_empty_text(self) -> None:
        """Should return an empty result for empty input."""
        result = parse_price_file("")

        assert result.records == ()
        assert result.discarded == 0
