"""Unit tests for logging configuration."""

from pathlib import Path

from loguru import logger

from election_api.core.logging import setup_logging


class TestLogging:
    """Tests for Loguru logging setup."""

    def test_setup_logging_levels(self) -> None:
        setup_logging("DEBUG")
        setup_logging("info")
        setup_logging("warning")

    def test_file_sink_created(self, tmp_path: Path) -> None:
        log_dir = tmp_path / "logs"
        setup_logging("INFO", log_dir=str(log_dir))
        logger.info("dataset loaded")
        logger.complete()
        assert (log_dir / "election-api.log").exists()
        setup_logging("INFO")

    def test_json_sink_receives_bound_records(self, capsys) -> None:
        setup_logging("INFO")
        logger.bind(json_output=True).info("coverage report")
        err = capsys.readouterr().err
        assert '"message": "coverage report"' in err
        logger.remove()
