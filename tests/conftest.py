from __future__ import annotations

import asyncio
from collections.abc import Generator
from datetime import UTC, datetime, timedelta
from pathlib import Path
from uuid import uuid4

import pytest
from fastapi.testclient import TestClient

from thrivetrack.app.core import config
from thrivetrack.app.schemas.mood import MoodRecord
from thrivetrack.db import create_engine, create_session_factory, init_db

# Sunday; the trailing week starts on Sunday 2024-06-30 at noon.
FIXED_NOW = datetime(2024, 7, 7, 12, 0, tzinfo=UTC)
MONDAY = datetime(2024, 7, 1, 9, 0, tzinfo=UTC)


@pytest.fixture(scope="session")
def anyio_backend() -> str:
    return "asyncio"


@pytest.fixture()
def now() -> datetime:
    return FIXED_NOW


@pytest.fixture()
def monday() -> datetime:
    return MONDAY


@pytest.fixture()
def make_record():
    counter = {"id": 0}

    def _make(
        mood: str | None = "okay",
        *,
        at: datetime | None = None,
        days_ago: float | None = None,
        value: float | None = None,
    ) -> MoodRecord:
        counter["id"] += 1
        if at is None:
            at = FIXED_NOW - timedelta(days=days_ago or 0)
        return MoodRecord(
            id=counter["id"],
            user_id="demo-student-1",
            mood=mood,
            mood_value=value,
            created_at=at,
        )

    return _make


@pytest.fixture()
def test_client(
    monkeypatch: pytest.MonkeyPatch,
    tmp_path: Path,
) -> Generator[TestClient, None, None]:
    monkeypatch.delenv("MOOD_SOURCE_URL", raising=False)
    monkeypatch.setenv("VERSION", "0.1.0-test")
    monkeypatch.setenv("LOG_FILE", str(tmp_path / "logs" / "test.log"))
    db_path = tmp_path / f"test_{uuid4().hex}.db"
    monkeypatch.setenv("DATABASE_URL", f"sqlite+aiosqlite:///{db_path}")
    config.get_settings.cache_clear()

    from thrivetrack.app.main import app

    try:
        with TestClient(app) as client:
            client.headers.update({"X-ThriveTrack-User": "student-under-test"})
            yield client
    finally:
        app.dependency_overrides.clear()
        config.get_settings.cache_clear()


@pytest.fixture()
def temp_session_factory(tmp_path: Path):
    db_path = tmp_path / f"unit_{uuid4().hex}.db"
    database_url = f"sqlite+aiosqlite:///{db_path}"
    engine = create_engine(database_url)
    session_factory = create_session_factory(engine)

    async def _prepare() -> None:
        await init_db(engine, session_factory, "test")
        # Drop pooled connections opened on this temporary loop.
        await engine.dispose()

    asyncio.run(_prepare())
    try:
        yield session_factory
    finally:
        asyncio.run(engine.dispose())
