"""Match retailer records to catalog products.

Barcodes are authoritative, so an exact identifier match always wins. Free
text matching is a noisy fallback and is capped to a small sample so a few
false positives cannot dominate the price range.
"""

from __future__ import annotations

from types import MappingProxyType
from typing import TYPE_CHECKING, Final


if TYPE_CHECKING:
    from collections.abc import Iterable, Mapping, Sequence

    from price_checker.catalog.models import CatalogProduct
    from price_checker.services.pricing.models import RawRecord


DEFAULT_MAX_FUZZY_MATCHES: Final[int] = 5


def search_records(
    records: Iterable[RawRecord],
    search_terms: Sequence[str],
) -> list[RawRecord]:
    """Records whose code or name matches any search term.

    A record matches when its identifier equals or contains a term, or its
    name contains the term case-insensitively. Empty terms are ignored.
    """
    terms = [(term, term.lower()) for term in search_terms if term]
    if not terms:
        return []

    matches: list[RawRecord] = []
    for record in records:
        name = record.name.lower()
        if any(
            record.identifier == term or term in record.identifier or lowered in name
            for term, lowered in terms
        ):
            matches.append(record)
    return matches


def match_product(
    product: CatalogProduct,
    records: Sequence[RawRecord],
    max_fuzzy_matches: int = DEFAULT_MAX_FUZZY_MATCHES,
) -> list[RawRecord]:
    """Select the records that price a catalog product.

    Args:
        product: Catalog product to match.
        records: Candidate records, usually deduplicated.
        max_fuzzy_matches: Cap on text matches when no barcode matches.

    Returns:
        Barcode matches if any exist, otherwise at most ``max_fuzzy_matches``
        text matches in encounter order.
    """
    identifiers = set(product.identifiers)
    exact = [r for r in records if r.identifier in identifiers]
    if exact:
        return exact

    return search_records(records, product.search_terms)[:max_fuzzy_matches]


def match_catalog(
    catalog: Iterable[CatalogProduct],
    records: Sequence[RawRecord],
    max_fuzzy_matches: int = DEFAULT_MAX_FUZZY_MATCHES,
) -> Mapping[str, tuple[RawRecord, ...]]:
    """Build the read-only matched price set for a whole catalog."""
    return MappingProxyType(
        {
            product.id: tuple(match_product(product, records, max_fuzzy_matches))
            for product in catalog
        }
    )
