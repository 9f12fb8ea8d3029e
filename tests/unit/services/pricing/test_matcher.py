"""Unit tests for catalog matching."""

from __future__ import annotations

from typing import TYPE_CHECKING

import pytest

from price_checker.catalog import PRODUCT_CATALOG, get_catalog_product
from price_checker.catalog.models import CatalogProduct
from price_checker.schemas.enums import Category
from price_checker.services.pricing.matcher import (
    match_catalog,
    match_product,
    search_records,
)


if TYPE_CHECKING:
    from collections.abc import Callable

    from price_checker.services.pricing.models import RawRecord


pytestmark = pytest.mark.unit


@pytest.fixture
def product() -> CatalogProduct:
    """A catalog product with two barcodes and search terms."""
    return CatalogProduct(
        id="x",
        name="Milk",
        name_hebrew="חלב",
        category=Category.DAIRY_AND_EGGS,
        unit="1 ליטר",
        image="🥛",
        identifiers=("111", "222"),
        search_terms=("חלב", "Milk"),
    )


class TestSearchRecords:
    """Tests for search_records."""

    def test_matches_name_case_insensitively(
        self, make_record: Callable[..., RawRecord]
    ) -> None:
        """Should match lower-cased names against lower-cased terms."""
        record = make_record("9", name="Fresh MILK 3%")

        assert search_records([record], ["milk"]) == [record]

    def test_matches_identifier_containing_term(
        self, make_record: Callable[..., RawRecord]
    ) -> None:
        """Should match when the identifier contains a term."""
        record = make_record("7290000066318", name="unrelated")

        assert search_records([record], ["66318"]) == [record]

    def test_ignores_empty_terms(
        self, make_record: Callable[..., RawRecord]
    ) -> None:
        """Should never match everything because of an empty term."""
        record = make_record("9", name="anything")

        assert search_records([record], ["", ""]) == []


class TestMatchProduct:
    """Tests for match_product."""

    def test_exact_match_skips_fuzzy(
        self,
        product: CatalogProduct,
        make_record: Callable[..., RawRecord],
    ) -> None:
        """Should return only barcode matches when any exist."""
        exact = make_record("222", name="something")
        fuzzy = make_record("999", name="חלב טרי")

        assert match_product(product, [fuzzy, exact]) == [exact]

    def test_fuzzy_when_no_exact(
        self,
        product: CatalogProduct,
        make_record: Callable[..., RawRecord],
    ) -> None:
        """Should fall back to text matches."""
        fuzzy = make_record("999", name="חלב טרי")
        other = make_record("888", name="לחם")

        assert match_product(product, [other, fuzzy]) == [fuzzy]

    def test_fuzzy_capped_in_encounter_order(
        self,
        product: CatalogProduct,
        make_record: Callable[..., RawRecord],
    ) -> None:
        """Should keep at most max_fuzzy_matches text matches."""
        records = [make_record(str(i), name=f"חלב {i}") for i in range(10)]

        result = match_product(product, records, max_fuzzy_matches=3)

        assert [r.identifier for r in result] == ["0", "1", "2"]

    def test_exact_matches_not_capped(
        self,
        product: CatalogProduct,
        make_record: Callable[..., RawRecord],
    ) -> None:
        """Should return every barcode match regardless of the fuzzy cap."""
        records = [make_record("111", price=str(p)) for p in range(1, 8)]

        assert len(match_product(product, records, max_fuzzy_matches=2)) == 7

    def test_no_match(
        self,
        product: CatalogProduct,
        make_record: Callable[..., RawRecord],
    ) -> None:
        """Should return an empty list when nothing matches."""
        assert match_product(product, [make_record("5", name="סבון")]) == []


class TestMatchCatalog:
    """Tests for match_catalog."""

    def test_covers_every_catalog_product(
        self, make_record: Callable[..., RawRecord]
    ) -> None:
        """Should key the matched set by every catalog id."""
        milk = get_catalog_product("13")
        assert milk is not None
        record = make_record(milk.identifiers[0])

        matched = match_catalog(PRODUCT_CATALOG, [record])

        assert set(matched) == {p.id for p in PRODUCT_CATALOG}
        assert matched["13"] == (record,)

    def test_is_read_only(self, make_record: Callable[..., RawRecord]) -> None:
        """Should not allow mutation of the matched set."""
        matched = match_catalog(PRODUCT_CATALOG, [make_record()])

        with pytest.raises(TypeError):
            matched["13"] = ()  # type: ignore[index]
