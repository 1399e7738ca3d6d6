"""Application configuration via Pydantic Settings.

All configuration is loaded from environment variables following 12-factor principles.
"""

from pydantic import Field, field_validator
from pydantic_settings import BaseSettings, SettingsConfigDict


class Settings(BaseSettings):
    """Application settings loaded from environment variables."""

    model_config = SettingsConfigDict(
        env_file=".env",
        env_file_encoding="utf-8",
        case_sensitive=False,
        extra="ignore",
    )

    # Datasets
    results_source: str = Field(
        default="./data/election_data.csv",
        description="Local path or https:// URL of the tabular election results CSV",
    )
    boundaries_source: str = Field(
        default="./data/constituencies.geojson",
        description="Local path or https:// URL of the constituency boundary GeoJSON",
    )
    translations_path: str | None = Field(
        default=None,
        description="JSON file with localized label tables (constituencies, districts, parties, ...)",
    )

    @field_validator("results_source", "boundaries_source")
    @classmethod
    def validate_source(cls, v: str) -> str:
        v = v.strip()
        if not v:
            msg = "Dataset source must not be empty"
            raise ValueError(msg)
        if v.lower().startswith("http://"):
            msg = "Remote dataset sources must use HTTPS"
            raise ValueError(msg)
        return v

    # Loading
    load_timeout: float = Field(
        default=30.0,
        description="HTTP timeout in seconds when fetching remote datasets",
        gt=0,
    )
    load_retries: int = Field(
        default=2,
        description="Additional attempts per dataset source after a failed load",
        ge=0,
    )

    # Aggregation
    total_seats: int | None = Field(
        default=None,
        description="Seat denominator for vote-vs-seat share (defaults to the number of winners loaded)",
        gt=0,
    )
    strike_rate_min_contested: int = Field(
        default=10,
        description="Parties contesting this many seats or fewer are left out of the strike-rate table",
        ge=0,
    )

    # Logging
    log_level: str = Field(
        default="INFO",
        description="Logging level",
    )
    log_dir: str | None = Field(
        default=None,
        description="Directory for log files (enables file logging with 24h rotation when set)",
    )

    # CORS
    cors_origins: str = Field(
        default="",
        description="Comma-separated list of allowed CORS origins (must be explicitly configured)",
    )
    cors_origin_regex: str = Field(
        default="",
        description="Regex pattern for allowed CORS origins",
    )

    # Environment
    environment: str = Field(
        default="production",
        description="Deployment environment name (e.g. production, dev, staging)",
    )

    # API
    api_v1_prefix: str = Field(
        default="/api/v1",
        description="API version prefix",
    )

    @property
    def cors_origin_list(self) -> list[str]:
        """Parse CORS origins string into a list."""
        if not self.cors_origins.strip():
            return []
        return [origin.strip() for origin in self.cors_origins.split(",") if origin.strip()]


def get_settings() -> Settings:
    """Create and return application settings."""
    return Settings()
