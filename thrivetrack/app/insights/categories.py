from __future__ import annotations

from decimal import ROUND_HALF_UP, Decimal
from enum import Enum

MOOD_FLOOR = 1
MOOD_CEILING = 5
NO_MODE_LABEL = "—"


class MoodCategory(str, Enum):
    STRUGGLING = "struggling"
    LOW = "low"
    OKAY = "okay"
    GOOD = "good"
    AMAZING = "amazing"

    @property
    def score(self) -> int:
        return CATEGORY_VALUES[self]

    @property
    def label(self) -> str:
        return self.value.capitalize()

    @property
    def color(self) -> str:
        return CATEGORY_COLORS[self]

    @classmethod
    def from_key(cls, key: str) -> MoodCategory | None:
        try:
            return cls(key)
        except ValueError:
            return None

    @classmethod
    def from_score(cls, score: int) -> MoodCategory:
        return _BY_SCORE[score]


CATEGORY_VALUES: dict[MoodCategory, int] = {
    MoodCategory.STRUGGLING: 1,
    MoodCategory.LOW: 2,
    MoodCategory.OKAY: 3,
    MoodCategory.GOOD: 4,
    MoodCategory.AMAZING: 5,
}

CATEGORY_COLORS: dict[MoodCategory, str] = {
    MoodCategory.AMAZING: "#f06292",
    MoodCategory.GOOD: "#f8a7c3",
    MoodCategory.OKAY: "#b9a7f3",
    MoodCategory.LOW: "#a9c3b1",
    MoodCategory.STRUGGLING: "#cfd2d6",
}

# Display order for charts and legends; also the tie-break priority for the
# most common mood (highest value wins).
DISPLAY_ORDER: tuple[MoodCategory, ...] = (
    MoodCategory.AMAZING,
    MoodCategory.GOOD,
    MoodCategory.OKAY,
    MoodCategory.LOW,
    MoodCategory.STRUGGLING,
)

_BY_SCORE = {value: category for category, value in CATEGORY_VALUES.items()}


def format_mood(value: float) -> str:
    """One decimal place, halves rounded up (3.25 -> "3.3")."""

    return str(Decimal(str(value)).quantize(Decimal("0.1"), rounding=ROUND_HALF_UP))


__all__ = [
    "CATEGORY_COLORS",
    "CATEGORY_VALUES",
    "DISPLAY_ORDER",
    "MOOD_CEILING",
    "MOOD_FLOOR",
    "NO_MODE_LABEL",
    "MoodCategory",
    "format_mood",
]
