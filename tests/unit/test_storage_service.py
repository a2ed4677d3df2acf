from __future__ import annotations

import pytest

from thrivetrack.app.services.storage import StorageService


@pytest.mark.anyio
async def test_storage_service_crud(temp_session_factory) -> None:
    storage = StorageService(temp_session_factory)
    await storage.healthcheck()

    saved = await storage.add_mood_entry(
        user_id="demo-student-1",
        mood="okay",
        mood_value=3,
        notes="long day",
    )

    assert saved.id > 0
    assert saved.created_at is not None

    fetched = await storage.get_mood_entry(saved.id)
    assert fetched is not None
    assert fetched.notes == "long day"

    updated = await storage.update_mood_entry(saved.id, mood="good", mood_value=4)
    assert updated is not None
    assert updated.mood == "good"
    assert updated.notes is None

    assert await storage.delete_mood_entry(saved.id) is True
    assert await storage.delete_mood_entry(saved.id) is False
    assert await storage.get_mood_entry(saved.id) is None
    assert await storage.update_mood_entry(saved.id, mood="low") is None


@pytest.mark.anyio
async def test_list_is_newest_first_and_filtered(temp_session_factory) -> None:
    storage = StorageService(temp_session_factory)
    first = await storage.add_mood_entry(user_id="alice", mood="low")
    second = await storage.add_mood_entry(user_id="alice", mood="good")
    await storage.add_mood_entry(user_id="bob", mood="amazing")

    alice = await storage.list_mood_entries("alice")
    everyone = await storage.list_mood_entries()
    latest = await storage.list_mood_entries("alice", limit=1)

    assert [entry.id for entry in alice] == [second.id, first.id]
    assert len(everyone) == 3
    assert [entry.id for entry in latest] == [second.id]
