from __future__ import annotations

import logging
import math
from collections.abc import Iterable
from dataclasses import dataclass
from datetime import UTC, datetime

from ..schemas.mood import MoodRecord
from .categories import CATEGORY_VALUES, MOOD_CEILING, MOOD_FLOOR, MoodCategory

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class NormalizedRecord:
    """Mood check-in reduced to a category, a 1..5 value and a timestamp."""

    mood_key: MoodCategory
    mood_value: int
    created_at: datetime


def _clamp(value: float) -> int:
    # Halves round up: 2.5 -> 3, 3.5 -> 4.
    return int(min(MOOD_CEILING, max(MOOD_FLOOR, math.floor(value + 0.5))))


def _as_aware(value: datetime) -> datetime:
    if value.tzinfo is None:
        return value.replace(tzinfo=UTC)
    return value


def normalize_record(record: MoodRecord | NormalizedRecord) -> NormalizedRecord | None:
    """Return the canonical form of ``record`` or ``None`` when it is unusable.

    The explicit ``mood_value`` wins over the label lookup. Records with an
    unknown label keep their place as long as they carry a numeric value; their
    category is derived from that value.
    """

    if isinstance(record, NormalizedRecord):
        label: str | None = record.mood_key.value
        explicit: float | None = record.mood_value
    else:
        label = record.mood
        explicit = record.mood_value

    if record.created_at is None:
        logger.debug("mood record dropped: missing timestamp")
        return None

    key = (label or "").strip().lower()
    category = MoodCategory.from_key(key)

    if explicit is not None and not math.isfinite(explicit):
        logger.debug("mood record dropped: non-finite value %r", explicit)
        return None

    if explicit is not None:
        resolved: float | None = explicit
    elif category is not None:
        resolved = CATEGORY_VALUES[category]
    else:
        resolved = None

    if resolved is None:
        logger.debug("mood record dropped: unmapped label %r", label)
        return None

    value = _clamp(resolved)
    if category is None:
        category = MoodCategory.from_score(value)

    return NormalizedRecord(
        mood_key=category,
        mood_value=value,
        created_at=_as_aware(record.created_at),
    )


def normalize_records(records: Iterable[MoodRecord | NormalizedRecord]) -> list[NormalizedRecord]:
    normalized = []
    for record in records:
        item = normalize_record(record)
        if item is not None:
            normalized.append(item)
    return normalized


__all__ = ["NormalizedRecord", "normalize_record", "normalize_records"]
