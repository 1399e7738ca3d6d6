"""Loguru logging configuration for the API server and the CLI.

Human-readable output goes to stderr.  Records bound with ``json_output=True``
(load reports, reconciliation coverage) are additionally emitted as JSON so
they can be scraped.  A rotating file sink is added when ``log_dir`` is set.
"""

import sys
from pathlib import Path

from loguru import logger

_LOG_FORMAT = "{time:YYYY-MM-DD HH:mm:ss.SSS} | {level:<8} | {name}:{function}:{line} | {message}"
_LOG_FILE_NAME = "election-api.log"


def _wants_json(record: dict) -> bool:
    return bool(record["extra"].get("json_output", False))


def setup_logging(log_level: str = "INFO", log_dir: str | None = None) -> None:
    """Replace Loguru's default sink with the application sinks.

    Args:
        log_level: Minimum log level to emit (case-insensitive).
        log_dir: Optional directory for log files.  The file sink rotates
            every 24 hours and keeps 7 days of history.
    """
    level = log_level.upper()

    logger.remove()
    logger.add(sys.stderr, level=level, format=_LOG_FORMAT)
    logger.add(sys.stderr, level=level, serialize=True, filter=_wants_json)

    if not log_dir:
        return

    log_path = Path(log_dir)
    log_path.mkdir(parents=True, exist_ok=True)
    logger.add(
        log_path / _LOG_FILE_NAME,
        level=level,
        format=_LOG_FORMAT,
        rotation="24h",
        retention="7 days",
    )
