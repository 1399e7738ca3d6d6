"""Tabular results parser — CSV bytes to validated ElectionRecord instances.

The CSV is header-driven with one row per candidate-year-constituency tuple.
pandas auto-types numeric and boolean columns; everything else stays text.
Rows that fail validation are skipped and reported, not fatal.
"""

import io
from dataclasses import dataclass, field
from typing import Any

import pandas as pd
from loguru import logger
from pydantic import ValidationError

from election_api.lib.results_loader.fetcher import DatasetLoadError
from election_api.models.election_record import ElectionRecord


@dataclass
class LoadReport:
    """Outcome of parsing one results file."""

    total_rows: int = 0
    loaded: int = 0
    skipped: list[dict[str, Any]] = field(default_factory=list)

    @property
    def skipped_rows(self) -> int:
        return len(self.skipped)

    def skip(self, row_number: int, reason: str) -> None:
        self.skipped.append({"row": row_number, "reason": reason})


def read_rows(content: bytes) -> list[dict[str, Any]]:
    """Parse CSV bytes into row dicts with missing cells as ``None``.

    Raises:
        DatasetLoadError: If the content is not parseable CSV.
    """
    try:
        df = pd.read_csv(io.BytesIO(content), skipinitialspace=True)
    except (pd.errors.ParserError, pd.errors.EmptyDataError, UnicodeDecodeError) as exc:
        msg = f"Malformed results CSV: {exc}"
        raise DatasetLoadError(msg) from exc

    df.columns = df.columns.str.strip()
    df = df.astype(object).where(pd.notna(df), None)
    return df.to_dict(orient="records")


def parse_results(content: bytes) -> tuple[list[ElectionRecord], LoadReport]:
    """Parse and validate a results CSV.

    Enforces one record per (constituency, year, candidate) and a single
    winner per (constituency, year); later duplicates are skipped.

    Args:
        content: Raw CSV bytes.

    Returns:
        Tuple of (records in file order, load report).

    Raises:
        DatasetLoadError: If the CSV is malformed or yields no valid rows.
    """
    rows = read_rows(content)
    report = LoadReport(total_rows=len(rows))
    records: list[ElectionRecord] = []
    seen_candidates: set[tuple[str, int, str]] = set()
    seen_winners: set[tuple[str, int]] = set()

    # Header is line 1, so data rows start at line 2.
    for row_number, row in enumerate(rows, start=2):
        try:
            record = ElectionRecord.model_validate(row)
        except ValidationError as exc:
            fields = ", ".join(str(err["loc"][0]) for err in exc.errors() if err["loc"])
            report.skip(row_number, f"invalid fields: {fields}")
            continue

        candidate_key = (record.constituency_name, record.year, record.candidate)
        if candidate_key in seen_candidates:
            report.skip(row_number, "duplicate candidate row")
            continue

        if record.is_winner:
            winner_key = (record.constituency_name, record.year)
            if winner_key in seen_winners:
                report.skip(row_number, "second winner for constituency")
                continue
            seen_winners.add(winner_key)

        seen_candidates.add(candidate_key)
        records.append(record)

    report.loaded = len(records)

    for skipped in report.skipped[:20]:
        logger.warning("Skipping results row {row}: {reason}", **skipped)
    if report.skipped_rows > 20:
        logger.warning(f"... {report.skipped_rows - 20} more rows skipped")

    if not records:
        msg = f"Results CSV has no valid rows ({report.total_rows} rows read)"
        raise DatasetLoadError(msg)

    logger.info(f"Parsed {report.loaded} result rows ({report.skipped_rows} skipped)")
    return records, report
