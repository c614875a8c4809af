"""Application configuration loaded from environment variables."""

from typing import Any, Literal

from pydantic import Field, field_validator
from pydantic_settings import BaseSettings, SettingsConfigDict


class Settings(BaseSettings):
    """All settings are read from environment variables (case-insensitive)."""

    model_config = SettingsConfigDict(env_file=".env", extra="ignore")

    # ── HTTP listener ─────────────────────────────────────────────────────────
    host: str = "0.0.0.0"
    port: int = Field(3000, ge=1, le=65535)

    # root_path lets FastAPI generate correct OpenAPI URLs when served
    # behind a reverse proxy at a sub-path (e.g. nginx /orders/ prefix).
    root_path: str = ""

    # ── Logging ───────────────────────────────────────────────────────────────
    log_level: Literal["CRITICAL", "ERROR", "WARNING", "INFO", "DEBUG"] = "INFO"

    @field_validator("log_level", mode="before")
    @classmethod
    def _upper_log_level(cls, value: Any) -> Any:
        return value.upper() if isinstance(value, str) else value
