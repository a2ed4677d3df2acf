from __future__ import annotations

import asyncio
import time
from collections.abc import AsyncIterator
from contextlib import asynccontextmanager
from dataclasses import dataclass, field
from uuid import uuid4

from ..insights.support import SupportPromptState


@dataclass
class Visit:
    visit_id: str
    state: SupportPromptState = field(default_factory=SupportPromptState)
    last_seen: float = field(default_factory=time.monotonic)


@dataclass
class VisitRegistry:
    """Per-visit support prompt state, dropped after ``ttl_seconds`` idle."""

    ttl_seconds: float = 1800.0
    _visits: dict[str, Visit] = field(default_factory=dict, init=False)
    _lock: asyncio.Lock = field(default_factory=asyncio.Lock, init=False)

    async def start(self) -> Visit:
        async with self._lock:
            self._prune()
            visit = Visit(visit_id=uuid4().hex)
            self._visits[visit.visit_id] = visit
            return visit

    async def end(self, visit_id: str) -> bool:
        async with self._lock:
            return self._visits.pop(visit_id, None) is not None

    @asynccontextmanager
    async def session(self, visit_id: str) -> AsyncIterator[Visit]:
        """Hold the registry lock while the caller reads and replaces the state.

        Unknown ids start a fresh visit so a client that never called
        ``start`` still gets one-shot behaviour.
        """

        async with self._lock:
            self._prune()
            visit = self._visits.get(visit_id)
            if visit is None:
                visit = Visit(visit_id=visit_id)
                self._visits[visit_id] = visit
            visit.last_seen = time.monotonic()
            yield visit

    def snapshot(self, visit_id: str) -> SupportPromptState | None:
        visit = self._visits.get(visit_id)
        return visit.state if visit else None

    def __len__(self) -> int:
        return len(self._visits)

    def _prune(self) -> None:
        now = time.monotonic()
        expired = [
            key for key, visit in self._visits.items() if now - visit.last_seen > self.ttl_seconds
        ]
        for key in expired:
            del self._visits[key]


__all__ = ["Visit", "VisitRegistry"]
