"""Application Configuration — environment-driven settings via pydantic-settings.

Invariants:
    - get_settings() is cached (lru_cache) — single instance per process
    - Nothing here affects payload rules; schemas are fixed in core/

Design Decisions:
    - pydantic-settings over raw os.environ: validation, type coercion, .env file support (ADR: developer UX)
    - Defaults provided for every setting: works out-of-the-box with docker-compose
"""

from pydantic import field_validator
from pydantic_settings import BaseSettings, SettingsConfigDict
from functools import lru_cache


class Settings(BaseSettings):
    """Application settings from environment variables."""

    model_config = SettingsConfigDict(env_file=".env", case_sensitive=False)

    service_name: str = "leaps-payloads"
    service_version: str = "0.1.0"

    # API
    cors_origins: list[str] = ["http://localhost:3000"]

    # Include per-field issues in 400 bodies (off hides rule detail from clients)
    expose_validation_details: bool = True

    # Observability
    log_level: str = "INFO"
    log_format: str = "json"

    @field_validator("log_format")
    @classmethod
    def check_log_format(cls, v: str) -> str:
        if v not in ("json", "text"):
            raise ValueError("log_format must be 'json' or 'text'")
        return v


@lru_cache
def get_settings() -> Settings:
    return Settings()
