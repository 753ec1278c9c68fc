"""
VenueMaps Backend — Application Configuration
==============================================

What:  Centralized configuration management using Pydantic Settings.
How:   Pydantic Settings reads from environment variables (or .env file),
       validates types/ranges, and provides a singleton `settings` object.
       The mapping credentials are copied into a `MapConfig` that the SDK
       handle cache receives at process start.
Who:   Imported by every module that needs configuration values.
When:  Loaded once at module import time.

Note:
    Missing ATRIUSMAPS_ACCOUNT_ID / ATRIUSMAPS_VENUE_ID do NOT stop the
    process from starting. They are reported as a warning during startup
    and surface as InitializationError on the first request that needs
    an SDK handle.
"""

from dataclasses import dataclass
from typing import List

from pydantic import Field, field_validator
from pydantic_settings import BaseSettings

from venuemaps.exceptions import InitializationError


class Settings(BaseSettings):
    """
    Application settings loaded from environment variables.

    Attributes are grouped by concern for readability.
    """

    # ── Atrius Maps ───────────────────────────────────────────────────────
    # What: Account and venue the SDK handle is bound to
    # Required: YES. Every /api route needs an initialized handle
    atriusmaps_account_id: str = Field(
        default="",
        description="Atrius Maps account identifier",
    )
    atriusmaps_venue_id: str = Field(
        default="",
        description="Atrius Maps venue identifier",
    )

    # What: Root URL of the mapping backend the SDK client talks to
    map_api_base_url: str = Field(default="https://api.atriusmaps.com/v1")

    # What: Per-call timeout for SDK HTTP requests, in seconds
    # The routes add no timeout of their own; this is the only one.
    map_api_timeout: float = Field(default=30.0, gt=0, le=300)

    # ── CORS ──────────────────────────────────────────────────────────────
    # Format: Comma-separated URLs (parsed by the property below)
    cors_origins: str = Field(default="http://localhost:3000")

    @property
    def cors_origins_list(self) -> List[str]:
        """Splits comma-separated CORS origins into a list."""
        return [origin.strip() for origin in self.cors_origins.split(",")]

    # ── Server ────────────────────────────────────────────────────────────
    backend_host: str = Field(default="0.0.0.0")
    backend_port: int = Field(default=8000, ge=1024, le=65535)

    # Valid: DEBUG, INFO, WARNING, ERROR, CRITICAL
    log_level: str = Field(default="INFO")

    @field_validator("log_level")
    @classmethod
    def validate_log_level(cls, v: str) -> str:
        """Ensures log level is a valid Python logging level name."""
        valid_levels = {"DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL"}
        upper = v.upper()
        if upper not in valid_levels:
            raise ValueError(f"Invalid log_level '{v}'. Must be one of: {valid_levels}")
        return upper

    # ── Rate Limiting ─────────────────────────────────────────────────────
    # What: Per-IP sliding window rate limit
    rate_limit_requests: int = Field(default=100, ge=10, le=10000)
    rate_limit_window: int = Field(default=3600, ge=60, le=86400)  # seconds

    # ── Pydantic Settings Config ──────────────────────────────────────────
    model_config = {
        "env_file": ".env",
        "env_file_encoding": "utf-8",
        "case_sensitive": False,  # ATRIUSMAPS_VENUE_ID and atriusmaps_venue_id both work
    }

    def map_config(self) -> "MapConfig":
        """Snapshot of the values needed to construct an SDK handle."""
        return MapConfig(
            account_id=self.atriusmaps_account_id,
            venue_id=self.atriusmaps_venue_id,
            base_url=self.map_api_base_url,
            timeout=self.map_api_timeout,
        )

    def validate_required_for_production(self) -> None:
        """
        What:  Validates that the mapping credentials are configured.
        When:  Called during app startup (lifespan) and by the health check.
        How:   Collects every missing value and raises one ValueError.
        """
        errors = []
        if not self.atriusmaps_account_id.strip():
            errors.append("ATRIUSMAPS_ACCOUNT_ID is not set.")
        if not self.atriusmaps_venue_id.strip():
            errors.append("ATRIUSMAPS_VENUE_ID is not set.")
        if errors:
            raise ValueError(
                "Configuration validation failed:\n" + "\n".join(f"  - {e}" for e in errors)
            )


@dataclass(frozen=True)
class MapConfig:
    """
    Explicit configuration handed to the SDK handle cache.

    Attributes:
        account_id: Atrius Maps account identifier
        venue_id:   Venue the handle is bound to
        base_url:   Root URL of the mapping backend
        timeout:    Seconds per backend call
    """

    account_id: str
    venue_id: str
    base_url: str = "https://api.atriusmaps.com/v1"
    timeout: float = 30.0

    def require_complete(self) -> None:
        """Raise InitializationError unless both identifiers are present."""
        missing = []
        if not (self.account_id or "").strip():
            missing.append("accountId")
        if not (self.venue_id or "").strip():
            missing.append("venueId")
        if missing:
            raise InitializationError(
                message=f"Missing required map configuration: {', '.join(missing)}",
                context={"missing": missing},
            )


# Singleton instance, imported throughout the application
settings = Settings()
