"""Unit tests for the query, check and serve CLI commands."""

import json
from pathlib import Path
from unittest.mock import patch

import pytest
from typer.testing import CliRunner

from election_api.cli.app import app

runner = CliRunner()


@pytest.fixture(autouse=True)
def dataset_env(
    monkeypatch: pytest.MonkeyPatch,
    tmp_path: Path,
    results_csv: Path,
    boundaries_geojson: Path,
    translations_json: Path,
):
    """Point the CLI's settings at the on-disk test datasets."""
    monkeypatch.chdir(tmp_path)
    monkeypatch.setenv("RESULTS_SOURCE", str(results_csv))
    monkeypatch.setenv("BOUNDARIES_SOURCE", str(boundaries_geojson))
    monkeypatch.setenv("TRANSLATIONS_PATH", str(translations_json))
    monkeypatch.setenv("LOAD_RETRIES", "0")
    with patch("election_api.cli.app.setup_logging") as mock_setup_logging:
        yield mock_setup_logging


class TestQueryRecords:
    def test_lists_matching_records(self) -> None:
        result = runner.invoke(app, ["query", "records", "--district", "Madurai"])
        assert result.exit_code == 0
        assert "3 matching records (showing 3)" in result.output
        assert "Devi Rani" in result.output
        assert "Arul Selvan" not in result.output

    def test_json_output_sorted(self) -> None:
        result = runner.invoke(
            app, ["query", "records", "--winners-only", "--sort", "votes", "--direction", "desc", "--json"]
        )
        assert result.exit_code == 0
        rows = json.loads(result.output)
        assert [r["candidate"] for r in rows] == ["Ganesan", "Arul Selvan", "Devi Rani"]

    def test_limit(self) -> None:
        result = runner.invoke(app, ["query", "records", "--limit", "2"])
        assert result.exit_code == 0
        assert "8 matching records (showing 2)" in result.output

    def test_invalid_alliance_exits_1(self) -> None:
        result = runner.invoke(app, ["query", "records", "--alliance", "Third Front"])
        assert result.exit_code == 1
        assert "invalid filter" in result.output

    def test_unknown_sort_key_exits_1(self) -> None:
        result = runner.invoke(app, ["query", "records", "--sort", "bogus"])
        assert result.exit_code == 1
        assert "bogus" in result.output

    def test_missing_results_file_exits_1(self, monkeypatch: pytest.MonkeyPatch, tmp_path: Path) -> None:
        monkeypatch.setenv("RESULTS_SOURCE", str(tmp_path / "missing.csv"))
        result = runner.invoke(app, ["query", "records"])
        assert result.exit_code == 1
        assert "Cannot read dataset file" in result.output


class TestQueryStats:
    def test_summary(self) -> None:
        result = runner.invoke(app, ["query", "stats"])
        assert result.exit_code == 0
        assert "Candidates:          8" in result.output
        assert "Winners:             3" in result.output
        assert "ADMK+" in result.output

    def test_json(self) -> None:
        result = runner.invoke(app, ["query", "stats", "--party", "DMK", "--json"])
        assert result.exit_code == 0
        stats = json.loads(result.output)
        assert stats["key_stats"]["candidates"] == 2
        assert stats["key_stats"]["winners"] == 1


class TestCheckReconcile:
    def test_reports_unmatched(self) -> None:
        result = runner.invoke(app, ["check", "reconcile"])
        assert result.exit_code == 0
        assert "Boundary features: 4" in result.output
        assert "Matched:           3" in result.output
        assert "  - Atlantis" in result.output

    def test_strict_fails_on_unmatched(self) -> None:
        result = runner.invoke(app, ["check", "reconcile", "--strict"])
        assert result.exit_code == 1

    def test_year_without_results(self) -> None:
        result = runner.invoke(app, ["check", "reconcile", "--year", "2016"])
        assert result.exit_code == 0
        assert "Matched:           0" in result.output

    def test_missing_boundaries_exits_1(self, monkeypatch: pytest.MonkeyPatch, tmp_path: Path) -> None:
        monkeypatch.setenv("BOUNDARIES_SOURCE", str(tmp_path / "missing.geojson"))
        result = runner.invoke(app, ["check", "reconcile"])
        assert result.exit_code == 1


class TestServe:
    def test_runs_uvicorn_factory(self) -> None:
        with patch("uvicorn.run") as mock_run:
            result = runner.invoke(app, ["serve", "--port", "9000"])
        assert result.exit_code == 0
        mock_run.assert_called_once_with(
            "election_api.main:create_app",
            factory=True,
            host="127.0.0.1",
            port=9000,
            reload=False,
        )


class TestLogLevelOption:
    def test_override(self, dataset_env) -> None:
        result = runner.invoke(app, ["--log-level", "DEBUG", "check", "reconcile"])
        assert result.exit_code == 0
        dataset_env.assert_called_once_with("DEBUG", log_dir=None)
