"""Stable record sort with missing values last in either direction."""

import unicodedata
from collections.abc import Sequence
from typing import Any, Literal

from election_api.lib.filters.facets import is_missing
from election_api.models.election_record import ElectionRecord


def collation_key(value: str) -> tuple[str, str]:
    """Locale-style key: accents decomposed and case folded, raw string as tiebreak."""
    return unicodedata.normalize("NFKD", value).casefold(), value


def _value_key(value: Any) -> tuple:
    # Numbers compare numerically; everything else as text.
    if isinstance(value, int | float) and not isinstance(value, bool):
        return (0, value, ("", ""))
    return (1, 0, collation_key(str(value)))


def sort_records(
    records: Sequence[ElectionRecord],
    key: str,
    direction: Literal["asc", "desc"] = "asc",
) -> list[ElectionRecord]:
    """Sort records by one field.

    Ties keep their input order (Python's sort is stable in both
    directions) and records lacking the field always come last.

    Args:
        records: Records to sort.
        key: Field name or dataset column header.
        direction: ``asc`` or ``desc``.

    Raises:
        ValueError: If ``key`` is not a record field.
    """
    field_name = ElectionRecord.resolve_field(key)

    present: list[ElectionRecord] = []
    missing: list[ElectionRecord] = []
    for record in records:
        (missing if is_missing(getattr(record, field_name)) else present).append(record)

    present.sort(key=lambda r: _value_key(getattr(r, field_name)), reverse=direction == "desc")
    return present + missing
