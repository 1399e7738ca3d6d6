"""Shared test fixtures: record factories, a small 2021 dataset, and dataset files on disk."""

import json
from collections.abc import Callable
from datetime import UTC, datetime
from pathlib import Path
from typing import Any

import pytest

from election_api.core.config import Settings
from election_api.lib.boundary_loader import parse_geojson
from election_api.lib.results_loader import LoadReport
from election_api.models.election_record import ElectionRecord
from election_api.services.dataset_service import DatasetState

RESULTS_CSV = """\
Year,Constituency_Name,Constituency_No,Constituency_Type,District_Name,Position,Candidate,Sex,Age,Party,Votes,Vote_Share_Percentage,Margin,Turnout_Percentage,MyNeta_education,TCPD_Prof_Main,Incumbent,Turncoat,Recontest
2021,Chennai (SC),1,SC,Chennai,1,Arul Selvan,M,45,DMK,80000,52.0,30000,68.5,Graduate,Business,True,False,True
2021,Chennai (SC),1,SC,Chennai,2,Bala Murugan,F,55,ADMK,50000,32.5,,68.5,Post Graduate,Lawyer,False,False,False
2021,Chennai (SC),1,SC,Chennai,3,Chitra Devi,F,29,NTK,5000,3.2,,68.5,12th Pass,Social Work,False,False,False
2021,Madurai,2,GEN,Madurai,1,Devi Rani,F,62,ADMK,60000,45.0,5000,72.1,Doctorate,Doctor,False,true,False
2021,Madurai,2,GEN,Madurai,2,Elango,M,48,DMK,55000,41.25,,72.1,Graduate,Business,True,False,True
2021,Madurai,2,GEN,Madurai,3,Faizal,M,39,BJP,9000,6.75,,72.1,10th Pass,Agriculture,False,False,False
2021,Gummidipundi,3,GEN,Tiruvallur,1,Ganesan,M,35,PMK,110000,61.0,60000,80.2,Graduate Professional,Lawyer,False,False,False
2021,Gummidipundi,3,GEN,Tiruvallur,2,Hari,M,50,INC,50000,27.7,,80.2,Graduate,Business,False,False,False
"""

TRANSLATIONS = {
    "constituencies": {"CHENNAI (SC)": "சென்னை", "MADURAI": "மதுரை"},
    "districts": {"Chennai": "சென்னை மாவட்டம்"},
    "parties": {"DMK": "திமுக", "ADMK": "அதிமுக"},
    "education": {"Graduate": "பட்டதாரி"},
    "professions": {},
    "sex": {"M": "ஆண்", "F": "பெண்"},
}


def _square(x: float) -> dict[str, Any]:
    return {
        "type": "Polygon",
        "coordinates": [[[x, 0.0], [x + 1, 0.0], [x + 1, 1.0], [x, 1.0], [x, 0.0]]],
    }


BOUNDARIES = {
    "type": "FeatureCollection",
    "features": [
        {"type": "Feature", "properties": {"AC_NAME": "Chennai (SC)", "AC_NO": 1}, "geometry": _square(0)},
        {"type": "Feature", "properties": {"AC_NAME": "MADURAI", "AC_NO": 2}, "geometry": _square(1)},
        {"type": "Feature", "properties": {"AC_NAME": "Gummidipoondi", "AC_NO": 3}, "geometry": _square(2)},
        {"type": "Feature", "properties": {"AC_NAME": "Atlantis", "AC_NO": 99}, "geometry": _square(3)},
    ],
}


def build_record(**overrides: Any) -> ElectionRecord:
    """Build an ElectionRecord with minimal required fields filled in."""
    data: dict[str, Any] = {
        "year": 2021,
        "constituency_name": "Chennai",
        "candidate": "Candidate",
        "position": 1,
    }
    data.update(overrides)
    return ElectionRecord(**data)


@pytest.fixture
def make_record() -> Callable[..., ElectionRecord]:
    """Factory for ElectionRecord instances with sensible defaults."""
    return build_record


@pytest.fixture
def sample_records() -> list[ElectionRecord]:
    """Three 2021 constituencies: Chennai (SC) DMK win, Madurai ADMK win, Gummidipundi PMK win."""
    rows = [
        ("Chennai (SC)", "SC", "Chennai", 1, "Arul Selvan", "M", 45, "DMK", 80000, 52.0, 30000.0, True, False),
        ("Chennai (SC)", "SC", "Chennai", 2, "Bala Murugan", "F", 55, "ADMK", 50000, 32.5, None, False, False),
        ("Chennai (SC)", "SC", "Chennai", 3, "Chitra Devi", "F", 29, "NTK", 5000, 3.2, None, False, False),
        ("Madurai", "GEN", "Madurai", 1, "Devi Rani", "F", 62, "ADMK", 60000, 45.0, 5000.0, False, "true"),
        ("Madurai", "GEN", "Madurai", 2, "Elango", "M", 48, "DMK", 55000, 41.25, None, True, False),
        ("Madurai", "GEN", "Madurai", 3, "Faizal", "M", 39, "BJP", 9000, 6.75, None, False, False),
        ("Gummidipundi", "GEN", "Tiruvallur", 1, "Ganesan", "M", 35, "PMK", 110000, 61.0, 60000.0, False, False),
        ("Gummidipundi", "GEN", "Tiruvallur", 2, "Hari", "M", 50, "INC", 50000, 27.7, None, False, False),
    ]
    return [
        build_record(
            constituency_name=name,
            constituency_type=ctype,
            district_name=district,
            position=position,
            candidate=candidate,
            sex=sex,
            age=age,
            party=party,
            votes=votes,
            vote_share_percentage=share,
            margin=margin,
            incumbent=incumbent,
            turncoat=turncoat,
        )
        for name, ctype, district, position, candidate, sex, age, party, votes, share, margin, incumbent, turncoat in rows
    ]


@pytest.fixture
def results_csv(tmp_path: Path) -> Path:
    path = tmp_path / "election_data.csv"
    path.write_text(RESULTS_CSV, encoding="utf-8")
    return path


@pytest.fixture
def boundaries_geojson(tmp_path: Path) -> Path:
    path = tmp_path / "constituencies.geojson"
    path.write_text(json.dumps(BOUNDARIES), encoding="utf-8")
    return path


@pytest.fixture
def translations_json(tmp_path: Path) -> Path:
    path = tmp_path / "translations.json"
    path.write_text(json.dumps(TRANSLATIONS, ensure_ascii=False), encoding="utf-8")
    return path


@pytest.fixture
def settings(results_csv: Path, boundaries_geojson: Path, translations_json: Path) -> Settings:
    """Settings pointing at the on-disk test datasets, isolated from any .env file."""
    return Settings(
        _env_file=None,
        results_source=str(results_csv),
        boundaries_source=str(boundaries_geojson),
        translations_path=str(translations_json),
        load_retries=0,
    )


@pytest.fixture
def dataset_state(sample_records: list[ElectionRecord]) -> DatasetState:
    """A fully loaded in-memory dataset: the sample records plus four boundary features."""
    return DatasetState(
        records=sample_records,
        features=parse_geojson(json.dumps(BOUNDARIES)),
        report=LoadReport(total_rows=len(sample_records), loaded=len(sample_records)),
        loaded_at=datetime(2026, 5, 2, tzinfo=UTC),
    )
