from __future__ import annotations

from collections.abc import Sequence
from dataclasses import dataclass, field

from .categories import DISPLAY_ORDER, NO_MODE_LABEL, MoodCategory, format_mood
from .normalizer import NormalizedRecord


def _zero_counts() -> dict[MoodCategory, int]:
    return {category: 0 for category in DISPLAY_ORDER}


@dataclass(frozen=True)
class MoodAggregate:
    total_entries: int = 0
    mean: float = 0.0
    category_counts: dict[MoodCategory, int] = field(default_factory=_zero_counts)
    most_common: MoodCategory | None = None

    @property
    def average_mood(self) -> str:
        if self.total_entries == 0:
            return "0.0"
        return format_mood(self.mean)

    @property
    def most_common_label(self) -> str:
        if self.most_common is None:
            return NO_MODE_LABEL
        return self.most_common.label


def most_common_category(counts: dict[MoodCategory, int]) -> MoodCategory | None:
    """Category with the highest count; ties go to the higher mood value."""

    best: MoodCategory | None = None
    best_count = 0
    for category in DISPLAY_ORDER:
        count = counts.get(category, 0)
        if count > best_count:
            best = category
            best_count = count
    return best


def aggregate(records: Sequence[NormalizedRecord]) -> MoodAggregate:
    total = len(records)
    if total == 0:
        return MoodAggregate()

    counts = _zero_counts()
    for record in records:
        counts[record.mood_key] += 1

    mean = sum(record.mood_value for record in records) / total
    return MoodAggregate(
        total_entries=total,
        mean=mean,
        category_counts=counts,
        most_common=most_common_category(counts),
    )


__all__ = ["MoodAggregate", "aggregate", "most_common_category"]
