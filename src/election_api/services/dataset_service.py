"""Dataset service — one-time async load of results and boundaries.

Both sources are fetched concurrently and retried independently.  A failed
source is recorded on the DatasetState instead of stopping the app: the
other source keeps serving and the endpoints that need the missing one
answer 503.
"""

import asyncio
from collections.abc import Awaitable, Callable
from dataclasses import dataclass, field
from datetime import UTC, datetime
from pathlib import Path
from typing import TypeVar

from loguru import logger

from election_api.core.config import Settings
from election_api.lib.boundary_loader import parse_geojson
from election_api.lib.enrichment import enrich_records, load_translation_tables
from election_api.lib.results_loader import DatasetLoadError, LoadReport, parse_results, read_source
from election_api.models.election_record import ElectionRecord
from election_api.models.geographic_feature import GeographicFeature

T = TypeVar("T")


class DatasetUnavailableError(Exception):
    """Raised when a request needs a dataset that failed to load."""


@dataclass
class DatasetState:
    """Loaded, enriched records and boundary features plus any load errors.

    ``records`` is the full record set: the universe for runner-up lookup
    and the vote denominator of the vote-vs-seat comparison.
    """

    records: list[ElectionRecord] = field(default_factory=list)
    features: list[GeographicFeature] = field(default_factory=list)
    report: LoadReport | None = None
    results_error: str | None = None
    boundaries_error: str | None = None
    loaded_at: datetime | None = None

    @property
    def status(self) -> str:
        if self.results_error is None and self.boundaries_error is None:
            return "healthy"
        if self.results_error is not None and self.boundaries_error is not None:
            return "unavailable"
        return "degraded"

    def require_records(self) -> list[ElectionRecord]:
        """Return the record set.

        Raises:
            DatasetUnavailableError: If the results source failed to load.
        """
        if self.results_error is not None:
            msg = f"Election results are unavailable: {self.results_error}"
            raise DatasetUnavailableError(msg)
        return self.records

    def require_features(self) -> list[GeographicFeature]:
        """Return the boundary features.

        Raises:
            DatasetUnavailableError: If the boundary source failed to load.
        """
        if self.boundaries_error is not None:
            msg = f"Constituency boundaries are unavailable: {self.boundaries_error}"
            raise DatasetUnavailableError(msg)
        return self.features


_state: DatasetState | None = None


async def _with_retries(label: str, load: Callable[[], Awaitable[T]], retries: int) -> T:
    attempts = retries + 1
    for attempt in range(1, attempts + 1):
        try:
            return await load()
        except DatasetLoadError as e:
            if attempt == attempts:
                raise
            logger.warning(f"Loading {label} failed (attempt {attempt}/{attempts}): {e}")
    msg = f"No attempts made to load {label}"
    raise DatasetLoadError(msg)


async def load_results(settings: Settings) -> tuple[list[ElectionRecord], LoadReport]:
    """Read, validate and enrich the tabular results.

    Raises:
        DatasetLoadError: If the source or the translations file cannot be read.
    """
    content = await read_source(settings.results_source, timeout=settings.load_timeout)
    records, report = parse_results(content)

    translations = Path(settings.translations_path) if settings.translations_path else None
    try:
        tables = load_translation_tables(translations)
    except (OSError, ValueError) as exc:
        msg = f"Cannot load translation tables: {exc}"
        raise DatasetLoadError(msg, source=settings.translations_path) from exc

    return enrich_records(records, tables), report


async def load_boundaries(settings: Settings) -> list[GeographicFeature]:
    """Read the boundary FeatureCollection.

    Raises:
        DatasetLoadError: If the source cannot be read or is not a FeatureCollection.
    """
    content = await read_source(settings.boundaries_source, timeout=settings.load_timeout)
    try:
        return parse_geojson(content)
    except ValueError as exc:
        msg = f"Invalid boundary file {settings.boundaries_source}: {exc}"
        raise DatasetLoadError(msg, source=settings.boundaries_source) from exc


async def load_dataset(settings: Settings) -> DatasetState:
    """Load both datasets concurrently, each with its own retries.

    Returns:
        A DatasetState; source failures are recorded on it, not raised.
    """
    logger.info(f"Loading results from {settings.results_source} and boundaries from {settings.boundaries_source}")
    results, boundaries = await asyncio.gather(
        _with_retries("results", lambda: load_results(settings), settings.load_retries),
        _with_retries("boundaries", lambda: load_boundaries(settings), settings.load_retries),
        return_exceptions=True,
    )

    state = DatasetState(loaded_at=datetime.now(UTC))

    if isinstance(results, DatasetLoadError):
        logger.error(f"Results dataset unavailable: {results}")
        state.results_error = str(results)
    elif isinstance(results, BaseException):
        raise results
    else:
        state.records, state.report = results

    if isinstance(boundaries, DatasetLoadError):
        logger.error(f"Boundary dataset unavailable: {boundaries}")
        state.boundaries_error = str(boundaries)
    elif isinstance(boundaries, BaseException):
        raise boundaries
    else:
        state.features = boundaries

    logger.info(f"Dataset status {state.status}: {len(state.records)} records, {len(state.features)} features")
    return state


async def init_dataset(settings: Settings) -> DatasetState:
    """Load the dataset and store it as the process-wide state."""
    global _state  # noqa: PLW0603
    _state = await load_dataset(settings)
    return _state


def set_dataset(state: DatasetState | None) -> None:
    """Replace the process-wide state (used by the CLI and tests)."""
    global _state  # noqa: PLW0603
    _state = state


def get_dataset() -> DatasetState:
    """Return the process-wide dataset state.

    Raises:
        DatasetUnavailableError: If no dataset has been loaded yet.
    """
    if _state is None:
        msg = "Dataset not loaded"
        raise DatasetUnavailableError(msg)
    return _state
