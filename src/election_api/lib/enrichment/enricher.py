"""Enrichment step — attaches localized labels to freshly loaded records.

Runs once per load.  Labels are pure functions of the base fields, so the
enriched records are never recomputed afterwards.
"""

from collections.abc import Iterable

from election_api.lib.enrichment.lookup import lookup_with_fallback
from election_api.lib.enrichment.tables import TranslationTables
from election_api.models.election_record import ElectionRecord


def localized_labels(record: ElectionRecord, tables: TranslationTables) -> dict[str, str | None]:
    """Compute the localized label fields for one record."""
    return {
        "constituency_name_local": lookup_with_fallback(tables.constituencies, record.constituency_name, key=str.upper),
        "district_name_local": lookup_with_fallback(tables.districts, record.district_name),
        "party_local": lookup_with_fallback(tables.parties, record.party),
        "education_local": lookup_with_fallback(tables.education, record.education),
        "profession_local": lookup_with_fallback(tables.professions, record.profession),
        "sex_local": lookup_with_fallback(tables.sex, record.sex),
    }


def enrich_records(records: Iterable[ElectionRecord], tables: TranslationTables) -> list[ElectionRecord]:
    """Return new records carrying localized labels, in input order."""
    return [record.model_copy(update=localized_labels(record, tables)) for record in records]
