"""Health check schema."""

from datetime import datetime
from typing import Literal

from pydantic import BaseModel


class HealthResponse(BaseModel):
    """Dataset load status.

    ``degraded`` means one of the two sources loaded and the other failed.
    """

    status: Literal["healthy", "degraded", "unavailable"]
    records: int = 0
    features: int = 0
    skipped_rows: int = 0
    results_error: str | None = None
    boundaries_error: str | None = None
    loaded_at: datetime | None = None
