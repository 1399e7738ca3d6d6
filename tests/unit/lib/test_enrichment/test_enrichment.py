"""Unit tests for label lookup and record enrichment."""

import json
from pathlib import Path

import pytest

from election_api.lib.enrichment import (
    TranslationTables,
    enrich_records,
    load_translation_tables,
    lookup_with_fallback,
)


class TestLookupWithFallback:
    def test_hit(self) -> None:
        assert lookup_with_fallback({"DMK": "திமுக"}, "DMK") == "திமுக"

    def test_miss_returns_value(self) -> None:
        assert lookup_with_fallback({"DMK": "திமுக"}, "PMK") == "PMK"

    def test_none_passes_through(self) -> None:
        assert lookup_with_fallback({"DMK": "திமுக"}, None) is None

    def test_key_transform(self) -> None:
        assert lookup_with_fallback({"MADURAI": "மதுரை"}, "Madurai", key=str.upper) == "மதுரை"
        assert lookup_with_fallback({}, "Madurai", key=str.upper) == "Madurai"


class TestLoadTranslationTables:
    def test_no_path_gives_empty_tables(self) -> None:
        tables = load_translation_tables(None)
        assert tables == TranslationTables()
        assert len(tables.parties) == 0

    def test_loads_sections(self, translations_json: Path) -> None:
        tables = load_translation_tables(translations_json)
        assert tables.parties["DMK"] == "திமுக"
        assert tables.sex["F"] == "பெண்"

    def test_tables_are_read_only(self, translations_json: Path) -> None:
        tables = load_translation_tables(translations_json)
        with pytest.raises(TypeError):
            tables.parties["NEW"] = "x"


class TestTranslationTablesDefaults:
    def test_default_sections_are_empty_and_read_only(self) -> None:
        tables = TranslationTables()
        assert all(len(getattr(tables, section)) == 0 for section in ("constituencies", "districts", "sex"))
        with pytest.raises(TypeError):
            tables.districts["Chennai"] = "x"

    def test_partial_construction_keeps_other_defaults(self) -> None:
        tables = TranslationTables(parties={"DMK": "திமுக"})
        assert tables.parties["DMK"] == "திமுக"
        assert len(tables.education) == 0

    def test_invalid_json(self, tmp_path: Path) -> None:
        path = tmp_path / "bad.json"
        path.write_text("{oops")
        with pytest.raises(ValueError, match="Invalid translations file"):
            load_translation_tables(path)

    def test_non_object_section(self, tmp_path: Path) -> None:
        path = tmp_path / "bad.json"
        path.write_text(json.dumps({"parties": ["DMK"]}))
        with pytest.raises(ValueError, match="must be an object"):
            load_translation_tables(path)


class TestEnrichRecords:
    def test_labels_attached(self, make_record, translations_json: Path) -> None:
        tables = load_translation_tables(translations_json)
        record = make_record(
            constituency_name="Madurai",
            district_name="Chennai",
            party="DMK",
            education="Graduate",
            profession="Business",
            sex="M",
        )
        [enriched] = enrich_records([record], tables)
        assert enriched.constituency_name_local == "மதுரை"
        assert enriched.district_name_local == "சென்னை மாவட்டம்"
        assert enriched.party_local == "திமுக"
        assert enriched.education_local == "பட்டதாரி"
        assert enriched.profession_local == "Business"
        assert enriched.sex_local == "ஆண்"

    def test_unmapped_values_fall_back(self, make_record) -> None:
        [enriched] = enrich_records([make_record(party="PMK", sex="O")], TranslationTables())
        assert enriched.party_local == "PMK"
        assert enriched.sex_local == "O"
        assert enriched.district_name_local is None

    def test_originals_untouched(self, make_record, translations_json: Path) -> None:
        record = make_record(party="DMK")
        enrich_records([record], load_translation_tables(translations_json))
        assert record.party_local is None
