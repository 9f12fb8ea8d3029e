"""Catalog product type."""

from __future__ import annotations

from dataclasses import dataclass

from price_checker.schemas.enums import Category


@dataclass(frozen=True, slots=True)
class CatalogProduct:
    """A curated product the service tracks prices for.

    ``identifiers`` are retailer barcodes; several are allowed because a
    product can have package variants. ``search_terms`` are tried in order
    when no barcode matches.
    """

    id: str
    name: str
    name_hebrew: str
    category: Category
    unit: str
    image: str
    identifiers: tuple[str, ...]
    search_terms: tuple[str, ...]

    @property
    def barcode(self) -> str | None:
        """Primary barcode, if any."""
        return self.identifiers[0] if self.identifiers else None
