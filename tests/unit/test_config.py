from __future__ import annotations

from pathlib import Path

import pytest

from thrivetrack.app.core import config
from thrivetrack.app.core.config import get_settings


@pytest.fixture(autouse=True)
def reset_settings_cache() -> None:
    config.get_settings.cache_clear()
    yield
    config.get_settings.cache_clear()


@pytest.fixture(autouse=True)
def clean_env(monkeypatch: pytest.MonkeyPatch) -> None:
    for name in (
        "DATABASE_URL",
        "MOOD_SOURCE_URL",
        "REQUEST_TIMEOUT",
        "INSIGHTS_TIMEZONE",
        "VISIT_TTL_SEC",
        "LOG_LEVEL",
        "DEMO_USER_ID",
    ):
        monkeypatch.delenv(name, raising=False)


def test_settings_read_version_from_env(monkeypatch: pytest.MonkeyPatch, tmp_path: Path) -> None:
    monkeypatch.setenv("VERSION", "9.9.9")
    monkeypatch.setenv("MOOD_SOURCE_URL", "https://entries.example.com")
    monkeypatch.setenv("LOG_FILE", str(tmp_path / "nested" / "app.log"))
    monkeypatch.chdir(tmp_path)

    settings = get_settings()

    assert settings.version == "9.9.9"
    assert str(settings.mood_source_url) == "https://entries.example.com/"
    assert settings.log_file.parent.exists()


def test_settings_fallback_to_version_file(monkeypatch: pytest.MonkeyPatch, tmp_path: Path) -> None:
    version_file = tmp_path / "VERSION"
    version_file.write_text("1.2.3", encoding="utf-8")
    monkeypatch.delenv("VERSION", raising=False)
    monkeypatch.chdir(tmp_path)

    settings = get_settings()

    assert settings.version == "1.2.3"


def test_defaults(monkeypatch: pytest.MonkeyPatch, tmp_path: Path) -> None:
    monkeypatch.chdir(tmp_path)

    settings = get_settings()

    assert settings.mood_source_url is None
    assert settings.request_timeout_seconds == 8.0
    assert settings.insights_timezone == "UTC"
    assert settings.visit_ttl_seconds == 1800
    assert settings.demo_user_id == "demo-student-1"
    assert settings.support_resources_path == "/api/v1/resources"


def test_database_url_is_made_async(monkeypatch: pytest.MonkeyPatch, tmp_path: Path) -> None:
    monkeypatch.chdir(tmp_path)
    monkeypatch.setenv("DATABASE_URL", "postgres://user:pw@db:5432/thrive")

    assert get_settings().database_url == "postgresql+asyncpg://user:pw@db:5432/thrive"

    config.get_settings.cache_clear()
    monkeypatch.setenv("DATABASE_URL", "sqlite:///./var/moods.db")

    assert get_settings().database_url == "sqlite+aiosqlite:///./var/moods.db"
    assert (tmp_path / "var").is_dir()


def test_invalid_values_fall_back(monkeypatch: pytest.MonkeyPatch, tmp_path: Path) -> None:
    monkeypatch.chdir(tmp_path)
    monkeypatch.setenv("INSIGHTS_TIMEZONE", "Mars/Olympus")
    monkeypatch.setenv("LOG_LEVEL", "chatty")
    monkeypatch.setenv("VISIT_TTL_SEC", "5")
    monkeypatch.setenv("REQUEST_TIMEOUT", "2.5")

    settings = get_settings()

    assert settings.insights_timezone == "UTC"
    assert settings.log_level == "INFO"
    assert settings.visit_ttl_seconds == 60
    assert settings.request_timeout_seconds == 2.5
