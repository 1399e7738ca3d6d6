"""Enrichment library — localized labels for election records.

Public API:
    - enrich_records: Attach localized label fields to records
    - lookup_with_fallback: Table lookup returning the key when unmapped
    - TranslationTables: Immutable label tables
    - load_translation_tables: Read tables from a JSON file
"""

from election_api.lib.enrichment.enricher import enrich_records, localized_labels
from election_api.lib.enrichment.lookup import lookup_with_fallback
from election_api.lib.enrichment.tables import SECTIONS, TranslationTables, load_translation_tables

__all__ = [
    "SECTIONS",
    "TranslationTables",
    "enrich_records",
    "load_translation_tables",
    "localized_labels",
    "lookup_with_fallback",
]
