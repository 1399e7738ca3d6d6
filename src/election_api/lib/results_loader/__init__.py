"""Results loader library — reads and validates the tabular election dataset.

Public API:
    - read_source: Read a local path or HTTPS URL into bytes
    - parse_results: Parse CSV bytes into validated ElectionRecord instances
    - LoadReport: Row counts and skipped-row reasons for one parse
    - DatasetLoadError: Unreachable or malformed source
"""

from election_api.lib.results_loader.fetcher import DatasetLoadError, fetch_bytes, is_remote_source, read_source
from election_api.lib.results_loader.parser import LoadReport, parse_results, read_rows

__all__ = [
    "DatasetLoadError",
    "LoadReport",
    "fetch_bytes",
    "is_remote_source",
    "parse_results",
    "read_rows",
    "read_source",
]
