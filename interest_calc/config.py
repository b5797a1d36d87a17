"""Runtime settings for the API server, read from INTEREST_CALC_* environment variables."""

from __future__ import annotations

import os
from typing import List, Mapping, Optional

from pydantic import BaseModel, ConfigDict, Field, field_validator

ENV_PREFIX = "INTEREST_CALC_"

_LOG_LEVELS = {"CRITICAL", "ERROR", "WARNING", "INFO", "DEBUG"}


class Settings(BaseModel):
    model_config = ConfigDict(extra="forbid", frozen=True)

    log_level: str = "INFO"
    cors_origins: List[str] = Field(
        default_factory=lambda: ["http://localhost:5173", "http://127.0.0.1:5173"]
    )
    host: str = "127.0.0.1"
    port: int = Field(5000, ge=1, le=65535)
    debug: bool = False

    @field_validator("log_level")
    @classmethod
    def _known_level(cls, value: str) -> str:
        level = value.upper()
        if level not in _LOG_LEVELS:
            raise ValueError(f"unknown log level {value!r}")
        return level

    @field_validator("cors_origins", mode="before")
    @classmethod
    def _split_origins(cls, value: object) -> object:
        if isinstance(value, str):
            return [origin.strip() for origin in value.split(",") if origin.strip()]
        return value


def load_settings(environ: Optional[Mapping[str, str]] = None) -> Settings:
    """Build Settings from the environment; unset variables keep their defaults."""
    environ = os.environ if environ is None else environ
    raw = {
        field: environ[ENV_PREFIX + field.upper()]
        for field in Settings.model_fields
        if ENV_PREFIX + field.upper() in environ
    }
    return Settings.model_validate(raw)


__all__ = ["ENV_PREFIX", "Settings", "load_settings"]
