"""Unit tests for the stable record sort."""

import math

import pytest

from election_api.lib.filters.sorting import collation_key, sort_records


class TestSortRecords:
    def test_numeric_ascending_and_descending(self, make_record) -> None:
        records = [make_record(candidate=c, votes=v) for c, v in [("a", 300), ("b", 20), ("c", 1000)]]
        assert [r.candidate for r in sort_records(records, "votes")] == ["b", "a", "c"]
        assert [r.candidate for r in sort_records(records, "votes", "desc")] == ["c", "a", "b"]

    def test_missing_values_last_in_both_directions(self, make_record) -> None:
        records = [
            make_record(candidate="none", margin=None),
            make_record(candidate="low", margin=10.0),
            make_record(candidate="high", margin=500.0),
        ]
        assert [r.candidate for r in sort_records(records, "margin")][-1] == "none"
        assert [r.candidate for r in sort_records(records, "margin", "desc")][-1] == "none"

    def test_nan_sorts_with_missing(self, make_record) -> None:
        nan_margin = make_record(candidate="nan").model_copy(update={"margin": math.nan})
        records = [nan_margin, make_record(candidate="low", margin=10.0), make_record(candidate="high", margin=500.0)]
        assert [r.candidate for r in sort_records(records, "margin")] == ["low", "high", "nan"]
        assert [r.candidate for r in sort_records(records, "margin", "desc")] == ["high", "low", "nan"]

    def test_ties_keep_input_order(self, make_record) -> None:
        records = [make_record(candidate=c, party="DMK") for c in ("first", "second", "third")]
        assert [r.candidate for r in sort_records(records, "party")] == ["first", "second", "third"]
        assert [r.candidate for r in sort_records(records, "party", "desc")] == ["first", "second", "third"]

    def test_text_is_case_insensitive(self, make_record) -> None:
        records = [make_record(candidate=c) for c in ("banana", "Apple", "cherry")]
        assert [r.candidate for r in sort_records(records, "candidate")] == ["Apple", "banana", "cherry"]

    def test_column_header_accepted(self, make_record) -> None:
        records = [make_record(candidate=c, votes=v) for c, v in [("a", 2), ("b", 1)]]
        assert [r.candidate for r in sort_records(records, "Votes")] == ["b", "a"]

    def test_unknown_key(self, make_record) -> None:
        with pytest.raises(ValueError):
            sort_records([make_record()], "not_a_field")


def test_collation_key_folds_accents_and_case() -> None:
    assert collation_key("École")[0].startswith("e")
    assert collation_key("ABC")[0] == collation_key("abc")[0]
