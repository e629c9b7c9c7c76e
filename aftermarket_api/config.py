"""Application configuration with environment variable validation."""

from functools import lru_cache
from pathlib import Path

from pydantic import Field, model_validator
from pydantic_settings import BaseSettings, SettingsConfigDict

_PROJECT_ROOT = Path(__file__).resolve().parent.parent
_ENV_FILE = _PROJECT_ROOT / ".env"


class Settings(BaseSettings):
    """Application settings loaded from environment variables."""

    model_config = SettingsConfigDict(
        env_file=str(_ENV_FILE),
        env_file_encoding="utf-8",
        extra="ignore",
    )

    # Fixtures
    fixture_set: str = Field(default="full", validation_alias="MOCK_FIXTURE_SET")

    # Simulated network latency
    latency_enabled: bool = Field(default=True, validation_alias="MOCK_LATENCY_ENABLED")
    latency_min_ms: int = Field(default=100, validation_alias="MOCK_LATENCY_MIN_MS")
    latency_max_ms: int = Field(default=200, validation_alias="MOCK_LATENCY_MAX_MS")

    # CORS
    allowed_origins: str = Field(default="*", validation_alias="ALLOWED_ORIGINS")
    allowed_methods: str = Field(
        default="GET, POST, OPTIONS",
        validation_alias="ALLOWED_METHODS",
    )
    allowed_headers: str = Field(
        default="Content-Type",
        validation_alias="ALLOWED_HEADERS",
    )

    # Server
    log_level: str = Field(default="INFO", validation_alias="LOG_LEVEL")
    port: int = Field(default=3001, validation_alias="PORT")

    @property
    def cors_origins(self) -> list[str]:
        """Parse ALLOWED_ORIGINS from a comma-separated string."""
        return [o.strip() for o in self.allowed_origins.split(",") if o.strip()]

    @model_validator(mode="after")
    def check_latency_bounds(self) -> "Settings":
        if self.latency_min_ms < 0 or self.latency_max_ms < 0:
            raise ValueError("Latency bounds must be non-negative")
        if self.latency_min_ms > self.latency_max_ms:
            raise ValueError(
                f"MOCK_LATENCY_MIN_MS ({self.latency_min_ms}) exceeds "
                f"MOCK_LATENCY_MAX_MS ({self.latency_max_ms})"
            )
        return self


@lru_cache
def get_settings() -> Settings:
    """Get cached application settings."""
    return Settings()
