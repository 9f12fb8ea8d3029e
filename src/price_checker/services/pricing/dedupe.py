"""Merge records reported for the same item by several branches/files."""

from __future__ import annotations

from decimal import Decimal
from typing import TYPE_CHECKING

from price_checker.services.pricing.models import RawRecord


if TYPE_CHECKING:
    from collections.abc import Iterable


_NO_UNIT_PRICE = Decimal(-1)


def _preference_key(record: RawRecord) -> tuple[object, ...]:
    # Lowest price first; remaining fields make the order total.
    return (
        record.price,
        record.name,
        record.unit_of_measure,
        record.quantity,
        record.unit_price if record.unit_price is not None else _NO_UNIT_PRICE,
        record.price_update_date or "",
    )


def dedupe(records: Iterable[RawRecord]) -> dict[str, RawRecord]:
    """Keep the lowest-priced record per identifier.

    The result does not depend on input order: ties on price are broken by
    comparing the remaining record fields.

    Args:
        records: Records from any number of files.

    Returns:
        Mapping of identifier to its representative record.
    """
    best: dict[str, RawRecord] = {}
    for record in records:
        current = best.get(record.identifier)
        if current is None or _preference_key(record) < _preference_key(current):
            best[record.identifier] = record
    return best


def highest_prices(records: Iterable[RawRecord]) -> dict[str, Decimal]:
    """Maximum observed price per identifier."""
    highest: dict[str, Decimal] = {}
    for record in records:
        current = highest.get(record.identifier)
        if current is None or record.price > current:
            highest[record.identifier] = record.price
    return highest
