"""Dataset source reader — local files or HTTPS URLs.

Uses httpx for async HTTP requests with timeout and error handling.  Local
files are read off the event loop with ``asyncio.to_thread``.
"""

import asyncio
from pathlib import Path

import httpx
from loguru import logger


class DatasetLoadError(Exception):
    """Raised when a dataset source is unreachable or cannot be parsed."""

    def __init__(self, message: str, source: str | None = None, status_code: int | None = None):
        super().__init__(message)
        self.source = source
        self.status_code = status_code


def is_remote_source(source: str) -> bool:
    """Return True when a source is an HTTP(S) URL rather than a local path."""
    return source.lower().startswith(("http://", "https://"))


async def fetch_bytes(url: str, timeout: float = 30.0) -> bytes:
    """Download a dataset from a URL.

    Args:
        url: The dataset URL.
        timeout: HTTP request timeout in seconds.

    Returns:
        The raw response body.

    Raises:
        DatasetLoadError: If the HTTP request fails.
    """
    try:
        async with httpx.AsyncClient(timeout=timeout, follow_redirects=True) as client:
            logger.debug("Fetching dataset from {}", url)
            response = await client.get(url)
            response.raise_for_status()
    except httpx.TimeoutException as exc:
        msg = f"Timeout fetching dataset from {url}"
        logger.error(msg)
        raise DatasetLoadError(msg, source=url) from exc
    except httpx.HTTPStatusError as exc:
        msg = f"HTTP {exc.response.status_code} fetching dataset from {url}"
        logger.error(msg)
        raise DatasetLoadError(msg, source=url, status_code=exc.response.status_code) from exc
    except httpx.HTTPError as exc:
        msg = f"HTTP error fetching dataset from {url}: {exc}"
        logger.error(msg)
        raise DatasetLoadError(msg, source=url) from exc

    return response.content


async def read_source(source: str, timeout: float = 30.0) -> bytes:
    """Read a dataset from a local path or an HTTPS URL.

    Raises:
        DatasetLoadError: If the source cannot be read.
    """
    if is_remote_source(source):
        return await fetch_bytes(source, timeout=timeout)

    path = Path(source)
    try:
        return await asyncio.to_thread(path.read_bytes)
    except OSError as exc:
        msg = f"Cannot read dataset file {path}: {exc}"
        logger.error(msg)
        raise DatasetLoadError(msg, source=source) from exc
