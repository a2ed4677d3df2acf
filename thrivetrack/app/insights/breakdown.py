from __future__ import annotations

import math
from dataclasses import dataclass

from .categories import DISPLAY_ORDER, MoodCategory


@dataclass(frozen=True)
class BreakdownRow:
    category: MoodCategory
    count: int
    percent: int

    @property
    def label(self) -> str:
        return self.category.label

    @property
    def color(self) -> str:
        return self.category.color


@dataclass(frozen=True)
class MoodBreakdown:
    rows: list[BreakdownRow]

    @property
    def slices(self) -> list[BreakdownRow]:
        return [row for row in self.rows if row.count > 0]


def _percent(count: int, total: int) -> int:
    # Half rounds up, matching how the legend displays shares.
    return int(math.floor(100 * count / max(total, 1) + 0.5))


def build_breakdown(counts: dict[MoodCategory, int], total_entries: int) -> MoodBreakdown:
    rows = [
        BreakdownRow(
            category=category,
            count=counts.get(category, 0),
            percent=_percent(counts.get(category, 0), total_entries),
        )
        for category in DISPLAY_ORDER
    ]
    return MoodBreakdown(rows=rows)


__all__ = ["BreakdownRow", "MoodBreakdown", "build_breakdown"]
