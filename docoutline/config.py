"""Environment driven settings for the outline extractor."""

from __future__ import annotations

import os
from functools import lru_cache
from pathlib import Path

from pydantic import BaseModel, Field, field_validator

from .outline.profiles import PROFILES


class Settings(BaseModel):
    """Runtime configuration resolved from environment variables."""

    input_dir: Path = Path("/app/input")
    output_dir: Path = Path("/app/output")
    outline_profile: str = "batch"
    api_profile: str = "interactive"
    max_upload_size: int = Field(default=25 * 1024 * 1024, gt=0)
    log_level: str = "INFO"

    @field_validator("outline_profile", "api_profile")
    @classmethod
    def _known_profile(cls, value: str) -> str:
        value = str(value).strip().lower()
        if value not in PROFILES:
            raise ValueError(f"unknown profile {value!r}")
        return value

    @field_validator("log_level")
    @classmethod
    def _upper_level(cls, value: str) -> str:
        return str(value).strip().upper() or "INFO"

    @classmethod
    def from_env(cls) -> "Settings":
        mapping = {
            "input_dir": "INPUT_DIR",
            "output_dir": "OUTPUT_DIR",
            "outline_profile": "OUTLINE_PROFILE",
            "api_profile": "API_PROFILE",
            "max_upload_size": "MAX_UPLOAD_SIZE",
            "log_level": "LOG_LEVEL",
        }
        values = {
            field: os.environ[env]
            for field, env in mapping.items()
            if os.environ.get(env)
        }
        return cls(**values)


@lru_cache(maxsize=1)
def get_settings() -> Settings:
    """Return the cached settings instance."""

    return Settings.from_env()


def reset_settings_cache() -> None:
    """Drop the cached settings (used by tests after changing the env)."""

    get_settings.cache_clear()


__all__ = ["Settings", "get_settings", "reset_settings_cache"]
