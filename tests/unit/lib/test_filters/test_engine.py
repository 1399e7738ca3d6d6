"""Unit tests for the filter engine."""

import pytest

from election_api.lib.filters.engine import apply_filters
from election_api.models.filter_state import FilterState


def _candidates(records) -> list[str]:
    return [r.candidate for r in records]


class TestApplyFilters:
    def test_empty_state_returns_copy(self, sample_records) -> None:
        result = apply_filters(sample_records, FilterState())
        assert result == sample_records
        assert result is not sample_records

    def test_result_is_subset(self, sample_records) -> None:
        result = apply_filters(sample_records, FilterState(party="DMK"))
        assert all(r in sample_records for r in result)
        assert _candidates(result) == ["Arul Selvan", "Elango"]

    def test_search_is_case_insensitive_over_fields(self, sample_records) -> None:
        assert _candidates(apply_filters(sample_records, FilterState(search="madur"))) == [
            "Devi Rani",
            "Elango",
            "Faizal",
        ]
        assert _candidates(apply_filters(sample_records, FilterState(search="GANES"))) == ["Ganesan"]
        assert _candidates(apply_filters(sample_records, FilterState(search="tiruvallur"))) == ["Ganesan", "Hari"]

    def test_search_matches_localized_labels(self, make_record) -> None:
        record = make_record(party="DMK", party_local="திமுக")
        assert apply_filters([record], FilterState(search="திமுக")) == [record]

    def test_margin_bucket_skips_missing_margins(self, sample_records) -> None:
        result = apply_filters(sample_records, FilterState(margin_range="Medium"))
        assert _candidates(result) == ["Arul Selvan"]

    def test_low_margin_bucket(self, sample_records) -> None:
        assert _candidates(apply_filters(sample_records, FilterState(margin_range="Low"))) == ["Devi Rani"]

    def test_zero_figures_match_no_range(self, make_record) -> None:
        blank = make_record(candidate="Zero", margin=0, vote_share_percentage=0.0, votes=0)
        counted = make_record(candidate="Counted", margin=500, vote_share_percentage=2.5, votes=800)
        records = [blank, counted]

        assert _candidates(apply_filters(records, FilterState(margin_range="Low"))) == ["Counted"]
        assert _candidates(apply_filters(records, FilterState(vote_share_range="Low"))) == ["Counted"]
        assert _candidates(apply_filters(records, FilterState(vote_count_range="<10k"))) == ["Counted"]

    def test_zero_share_still_loses_deposit(self, make_record) -> None:
        record = make_record(position=3, vote_share_percentage=0.0)
        assert apply_filters([record], FilterState(position="DepositLost")) == [record]

    def test_alliance_membership(self, sample_records) -> None:
        dmk = apply_filters(sample_records, FilterState(alliance="DMK+"))
        admk = apply_filters(sample_records, FilterState(alliance="ADMK+"))
        others = apply_filters(sample_records, FilterState(alliance="Others"))
        assert _candidates(dmk) == ["Arul Selvan", "Elango", "Hari"]
        assert _candidates(admk) == ["Bala Murugan", "Devi Rani", "Faizal", "Ganesan"]
        assert _candidates(others) == ["Chitra Devi"]

    def test_deposit_lost_position(self, sample_records) -> None:
        result = apply_filters(sample_records, FilterState(position="DepositLost"))
        assert _candidates(result) == ["Chitra Devi", "Faizal"]

    def test_exact_position(self, sample_records) -> None:
        assert _candidates(apply_filters(sample_records, FilterState(position=2))) == [
            "Bala Murugan",
            "Elango",
            "Hari",
        ]

    def test_category_flags(self, sample_records) -> None:
        assert _candidates(apply_filters(sample_records, FilterState(category="Incumbent"))) == [
            "Arul Selvan",
            "Elango",
        ]
        assert _candidates(apply_filters(sample_records, FilterState(category="Turncoat"))) == ["Devi Rani"]

    def test_winners_only_after_category(self, sample_records) -> None:
        state = FilterState(category="Incumbent", winners_only=True)
        assert _candidates(apply_filters(sample_records, state)) == ["Arul Selvan"]

    def test_constituency_type_and_district(self, sample_records) -> None:
        assert len(apply_filters(sample_records, FilterState(constituency_type="SC"))) == 3
        assert _candidates(apply_filters(sample_records, FilterState(district="Tiruvallur", position=1))) == [
            "Ganesan"
        ]

    def test_facet_matches_localized_label(self, make_record) -> None:
        record = make_record(district_name="Chennai", district_name_local="சென்னை")
        assert apply_filters([record], FilterState(district="சென்னை")) == [record]

    def test_age_and_vote_count_ranges(self, sample_records) -> None:
        assert _candidates(apply_filters(sample_records, FilterState(age_range="61+"))) == ["Devi Rani"]
        assert _candidates(apply_filters(sample_records, FilterState(vote_count_range=">1L"))) == ["Ganesan"]

    @pytest.mark.parametrize(
        ("first", "second"),
        [
            ({"party": "DMK"}, {"margin_range": "Medium"}),
            ({"alliance": "ADMK+"}, {"vote_share_range": "Low"}),
            ({"district": "Madurai"}, {"gender": "M"}),
        ],
    )
    def test_independent_facets_commute(self, sample_records, first: dict, second: dict) -> None:
        a_then_b = apply_filters(apply_filters(sample_records, FilterState(**first)), FilterState(**second))
        b_then_a = apply_filters(apply_filters(sample_records, FilterState(**second)), FilterState(**first))
        combined = apply_filters(sample_records, FilterState(**first, **second))
        assert a_then_b == b_then_a == combined

    def test_pure_and_repeatable(self, sample_records) -> None:
        before = list(sample_records)
        state = FilterState(alliance="DMK+", sort_key="votes", sort_direction="desc")
        first = apply_filters(sample_records, state)
        second = apply_filters(sample_records, state)
        assert first == second
        assert first is not second
        assert sample_records == before

    def test_unknown_sort_key_raises(self, sample_records) -> None:
        with pytest.raises(ValueError, match="Unknown record field"):
            apply_filters(sample_records, FilterState(sort_key="nope"))

    def test_chennai_scenario(self, make_record) -> None:
        dmk = make_record(constituency_name="Chennai", party="DMK", position=1, margin=12000, votes=50000)
        admk = make_record(constituency_name="Chennai", candidate="Other", party="ADMK", position=2, votes=38000)
        assert apply_filters([dmk, admk], FilterState(margin_range="Medium")) == [dmk]
