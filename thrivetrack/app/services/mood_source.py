from __future__ import annotations

import logging
from collections.abc import Iterable
from typing import Any, Protocol

import httpx
from pydantic import ValidationError

from ..metrics import SNAPSHOT_FAILURES
from ..schemas.mood import MoodRecord
from .storage import StorageService

logger = logging.getLogger(__name__)


class MoodSourceError(RuntimeError):
    """The mood snapshot could not be loaded."""


class MoodRecordSource(Protocol):
    name: str

    async def fetch(self, user_id: str) -> list[MoodRecord]: ...

    async def close(self) -> None: ...


def parse_records(items: Iterable[Any]) -> list[MoodRecord]:
    """Validate raw rows, skipping the ones that cannot be read at all."""

    records: list[MoodRecord] = []
    skipped = 0
    for item in items:
        try:
            records.append(MoodRecord.model_validate(item))
        except ValidationError:
            skipped += 1
    if skipped:
        logger.debug("skipped %s unreadable mood rows", skipped)
    return records


class StorageMoodSource:
    """Snapshot straight from the local ``mood_entries`` table."""

    name = "storage"

    def __init__(self, storage: StorageService) -> None:
        self._storage = storage

    async def fetch(self, user_id: str) -> list[MoodRecord]:
        try:
            rows = await self._storage.list_mood_entries(user_id)
        except Exception as exc:
            SNAPSHOT_FAILURES.labels(source=self.name).inc()
            raise MoodSourceError("mood entries query failed") from exc
        return parse_records(rows)

    async def close(self) -> None:
        return None


class RemoteMoodSource:
    """Snapshot from a remote entries API (``GET /mood_entries?user_id=``)."""

    name = "remote"

    def __init__(
        self,
        base_url: str,
        *,
        timeout: float,
        client: httpx.AsyncClient | None = None,
    ) -> None:
        self._base_url = base_url.rstrip("/")
        self._client = client or httpx.AsyncClient(timeout=timeout)
        self._owns_client = client is None

    async def fetch(self, user_id: str) -> list[MoodRecord]:
        url = f"{self._base_url}/mood_entries"
        try:
            response = await self._client.get(url, params={"user_id": user_id})
            response.raise_for_status()
            payload = response.json()
        except httpx.HTTPStatusError as exc:
            SNAPSHOT_FAILURES.labels(source=self.name).inc()
            raise MoodSourceError(f"HTTP {exc.response.status_code}") from exc
        except (httpx.HTTPError, ValueError) as exc:
            SNAPSHOT_FAILURES.labels(source=self.name).inc()
            raise MoodSourceError(str(exc) or exc.__class__.__name__) from exc

        if not isinstance(payload, list):
            SNAPSHOT_FAILURES.labels(source=self.name).inc()
            raise MoodSourceError("unexpected payload shape")
        return parse_records(payload)

    async def close(self) -> None:
        if self._owns_client:
            await self._client.aclose()


__all__ = [
    "MoodRecordSource",
    "MoodSourceError",
    "RemoteMoodSource",
    "StorageMoodSource",
    "parse_records",
]
