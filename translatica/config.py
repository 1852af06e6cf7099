"""Runtime configuration based on environment variables."""

from __future__ import annotations

from functools import lru_cache
from pathlib import Path

from pydantic import Field, field_validator
from pydantic_settings import BaseSettings, SettingsConfigDict

from translatica.locale import Locale
from translatica.logging import resolve_log_level


class TranslaticaSettings(BaseSettings):
    model_config = SettingsConfigDict(
        env_prefix="TRANSLATICA_",
        env_file=".env",
        env_file_encoding="utf-8",
        extra="ignore",
    )

    default_source_name: str = Field(default="messages", min_length=1)
    locales_path: Path = Field(
        default=Path("locales"),
        description="Directory holding <default_source_name>_<locale>.json bundles.",
    )
    default_locale: str | None = Field(
        default=None,
        description="Fixed default locale; when unset LC_ALL/LC_MESSAGES/LANG are read per call.",
    )
    log_level: str = "INFO"

    @field_validator("default_locale", mode="before")
    @classmethod
    def _normalize_locale(cls, value):
        if isinstance(value, str):
            if not value.strip():
                return None
            return str(Locale.parse(value))
        return value

    @field_validator("log_level")
    @classmethod
    def _normalize_log_level(cls, value: str) -> str:
        resolve_log_level(value)
        return value.strip().upper()


@lru_cache
def get_settings() -> TranslaticaSettings:
    """Return cached settings instance."""

    return TranslaticaSettings()


__all__ = ["TranslaticaSettings", "get_settings"]
