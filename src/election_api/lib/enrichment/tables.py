"""Localized label tables consumed by the enrichment step.

The tables are static data maintained outside the code.  They are loaded
from a JSON document of the form::

    {
        "constituencies": {"CHENNAI": "..."},
        "districts": {"Chennai": "..."},
        "parties": {"DMK": "..."},
        "education": {"Graduate": "..."},
        "professions": {"Business": "..."},
        "sex": {"M": "...", "F": "..."}
    }

Every section is optional; a missing section is an empty table.
"""

import json
from collections.abc import Mapping
from dataclasses import dataclass, field
from pathlib import Path
from types import MappingProxyType

from loguru import logger

_EMPTY: Mapping[str, str] = MappingProxyType({})

SECTIONS = ("constituencies", "districts", "parties", "education", "professions", "sex")


def _freeze(raw: object, section: str) -> Mapping[str, str]:
    if raw is None:
        return _EMPTY
    if not isinstance(raw, dict):
        msg = f"Translation section '{section}' must be an object"
        raise ValueError(msg)
    return MappingProxyType({str(k): str(v) for k, v in raw.items()})


@dataclass(frozen=True)
class TranslationTables:
    """Immutable lookup tables keyed by the base (dataset) value.

    Constituency keys are upper-cased names; the sex table maps the two
    dataset codes (``M``/``F``) to display labels.
    """

    constituencies: Mapping[str, str] = field(default_factory=lambda: _EMPTY)
    districts: Mapping[str, str] = field(default_factory=lambda: _EMPTY)
    parties: Mapping[str, str] = field(default_factory=lambda: _EMPTY)
    education: Mapping[str, str] = field(default_factory=lambda: _EMPTY)
    professions: Mapping[str, str] = field(default_factory=lambda: _EMPTY)
    sex: Mapping[str, str] = field(default_factory=lambda: _EMPTY)

    @classmethod
    def from_dict(cls, data: dict) -> "TranslationTables":
        unknown = set(data) - set(SECTIONS)
        if unknown:
            logger.warning(f"Ignoring unknown translation sections: {sorted(unknown)}")
        return cls(**{section: _freeze(data.get(section), section) for section in SECTIONS})


def load_translation_tables(path: Path | None) -> TranslationTables:
    """Load translation tables from a JSON file, or empty tables when no path is set.

    Raises:
        ValueError: If the file is not valid JSON or a section is malformed.
    """
    if path is None:
        return TranslationTables()

    with path.open("r", encoding="utf-8") as f:
        try:
            data = json.load(f)
        except json.JSONDecodeError as exc:
            msg = f"Invalid translations file {path}: {exc}"
            raise ValueError(msg) from exc

    if not isinstance(data, dict):
        msg = f"Translations file {path} must contain a JSON object"
        raise ValueError(msg)

    tables = TranslationTables.from_dict(data)
    logger.info(
        "Loaded translation tables from {}: {}",
        path,
        {section: len(getattr(tables, section)) for section in SECTIONS},
    )
    return tables
