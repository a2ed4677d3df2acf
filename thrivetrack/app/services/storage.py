from __future__ import annotations

from collections.abc import Sequence

from sqlalchemy import delete, select, text
from sqlalchemy.ext.asyncio import async_sessionmaker

from ..db.models import MoodEntry


class StorageService:
    """Persist mood check-ins."""

    def __init__(self, session_factory: async_sessionmaker) -> None:
        self._session_factory = session_factory

    async def healthcheck(self) -> None:
        async with self._session_factory() as session:
            await session.execute(text("SELECT 1"))

    async def add_mood_entry(
        self,
        *,
        user_id: str,
        mood: str,
        mood_value: int | None = None,
        notes: str | None = None,
    ) -> MoodEntry:
        async with self._session_factory() as session:
            entry = MoodEntry(
                user_id=user_id,
                mood=mood,
                mood_value=mood_value,
                notes=notes,
            )
            session.add(entry)
            await session.commit()
            await session.refresh(entry)
            return entry

    async def list_mood_entries(
        self,
        user_id: str | None = None,
        *,
        limit: int | None = None,
    ) -> Sequence[MoodEntry]:
        query = select(MoodEntry).order_by(MoodEntry.created_at.desc(), MoodEntry.id.desc())
        if user_id is not None:
            query = query.where(MoodEntry.user_id == user_id)
        if limit is not None:
            query = query.limit(limit)
        async with self._session_factory() as session:
            result = await session.execute(query)
            return result.scalars().all()

    async def get_mood_entry(self, entry_id: int) -> MoodEntry | None:
        async with self._session_factory() as session:
            return await session.get(MoodEntry, entry_id)

    async def update_mood_entry(
        self,
        entry_id: int,
        *,
        mood: str,
        mood_value: int | None = None,
        notes: str | None = None,
    ) -> MoodEntry | None:
        async with self._session_factory() as session:
            entry = await session.get(MoodEntry, entry_id)
            if entry is None:
                return None
            entry.mood = mood
            entry.mood_value = mood_value
            entry.notes = notes
            await session.commit()
            await session.refresh(entry)
            return entry

    async def delete_mood_entry(self, entry_id: int) -> bool:
        async with self._session_factory() as session:
            result = await session.execute(delete(MoodEntry).where(MoodEntry.id == entry_id))
            await session.commit()
            return bool(result.rowcount)


__all__ = ["StorageService"]
