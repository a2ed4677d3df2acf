from __future__ import annotations

import os
from functools import lru_cache
from pathlib import Path
from zoneinfo import ZoneInfo, ZoneInfoNotFoundError

from pydantic import Field, HttpUrl, field_validator
from pydantic_settings import BaseSettings, SettingsConfigDict


class Settings(BaseSettings):
    """Application configuration loaded from environment variables."""

    model_config = SettingsConfigDict(
        env_file=".env",
        env_file_encoding="utf-8",
        case_sensitive=False,
        populate_by_name=True,
    )

    database_url: str = Field(
        default="sqlite+aiosqlite:///./data/thrivetrack.db",
        alias="DATABASE_URL",
    )
    log_file: Path = Field(default=Path("logs/thrivetrack.log"))
    log_level: str = Field(default="INFO", alias="LOG_LEVEL")
    demo_user_id: str = Field(default="demo-student-1", alias="DEMO_USER_ID")

    # Remote entries API; the local database is used when unset.
    mood_source_url: HttpUrl | None = Field(default=None, alias="MOOD_SOURCE_URL")
    request_timeout_seconds: float = Field(default=8.0, alias="REQUEST_TIMEOUT")

    # Insight engine configuration
    insights_timezone: str = Field(default="UTC", alias="INSIGHTS_TIMEZONE")
    visit_ttl_seconds: int = Field(default=1800, alias="VISIT_TTL_SEC")
    support_resources_path: str = Field(
        default="/api/v1/resources",
        alias="SUPPORT_RESOURCES_PATH",
    )

    version: str = Field(default_factory=lambda: Settings._load_version())

    @staticmethod
    def _load_version() -> str:
        version_env = os.getenv("VERSION")
        if version_env:
            return version_env
        version_file = Path("VERSION")
        if version_file.exists():
            return version_file.read_text(encoding="utf-8").strip()
        return "0.0.0"

    @field_validator("log_file", mode="before")
    @classmethod
    def _validate_log_file(cls, value: Path | str) -> Path:
        path = Path(value)
        if not path.parent.exists():
            path.parent.mkdir(parents=True, exist_ok=True)
        return path

    @field_validator("log_level", mode="before")
    @classmethod
    def _validate_log_level(cls, value: str | None) -> str:
        allowed = {"DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL"}
        normalized = str(value or "INFO").upper()
        if normalized not in allowed:
            return "INFO"
        return normalized

    @field_validator("insights_timezone", mode="before")
    @classmethod
    def _validate_timezone(cls, value: str | None) -> str:
        if not value:
            return "UTC"
        try:
            ZoneInfo(str(value))
        except (ZoneInfoNotFoundError, ValueError):
            return "UTC"
        return str(value)

    @field_validator("visit_ttl_seconds", mode="before")
    @classmethod
    def _validate_visit_ttl(cls, value: int | str | None) -> int:
        if value is None:
            return 1800
        ttl = int(value)
        return max(ttl, 60)

    @field_validator("database_url", mode="before")
    @classmethod
    def _validate_database_url(cls, value: str | None) -> str:
        if not value:
            value = "sqlite:///./data/thrivetrack.db"

        normalized = str(value)
        if normalized.startswith("postgres://"):
            normalized = normalized.replace("postgres://", "postgresql://", 1)
        if normalized.startswith("postgresql://") and "+asyncpg" not in normalized:
            normalized = normalized.replace("postgresql://", "postgresql+asyncpg://", 1)
        if normalized.startswith("sqlite://") and "+aiosqlite" not in normalized:
            normalized = normalized.replace("sqlite://", "sqlite+aiosqlite://", 1)

        if normalized.startswith("sqlite+aiosqlite:///"):
            db_path = normalized.split("///", maxsplit=1)[-1]
            if db_path and db_path != ":memory:":
                db_file = Path(db_path)
                db_file.parent.mkdir(parents=True, exist_ok=True)

        return normalized


@lru_cache
def get_settings() -> Settings:
    """Cached settings accessor."""

    return Settings()
