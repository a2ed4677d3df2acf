# ruff: noqa: RUF001
from __future__ import annotations

from collections.abc import Callable, Sequence

from .aggregate import MoodAggregate
from .categories import MoodCategory
from .trend import TrendPoint

MAX_INSIGHTS = 4
TREND_DELTA = 0.35
POSITIVE_RATIO = 0.6
DIFFICULT_RATIO = 0.5

Rule = Callable[[MoodAggregate, Sequence[TrendPoint]], str | None]


def average_level_rule(stats: MoodAggregate, trend: Sequence[TrendPoint]) -> str | None:
    avg = stats.mean
    if avg >= 4.2:
        return "🌟 Overall, your mood has been very positive in this period."
    if avg >= 3.5:
        return "😊 Overall, your mood has been mostly positive in this period."
    if avg >= 2.6:
        return "🧡 Overall, your mood has been mixed: some good days, some tougher days."
    return "🫶 Overall, this period looks tough. Be kind to yourself and take small steps."


def trend_direction_rule(stats: MoodAggregate, trend: Sequence[TrendPoint]) -> str | None:
    series = [point.value for point in trend if point.value > 0]
    if len(series) < 2:
        return None
    diff = series[-1] - series[0]
    if diff >= TREND_DELTA:
        return "📈 Your mood is trending upward across this period."
    if diff <= -TREND_DELTA:
        return "📉 Your mood is trending downward across this period."
    return "➡️ Your mood has stayed fairly steady across this period."


def balance_rule(stats: MoodAggregate, trend: Sequence[TrendPoint]) -> str | None:
    counts = stats.category_counts
    total = stats.total_entries
    positive = counts[MoodCategory.GOOD] + counts[MoodCategory.AMAZING]
    difficult = counts[MoodCategory.LOW] + counts[MoodCategory.STRUGGLING]
    if positive / total >= POSITIVE_RATIO:
        return "😊 You’ve had more positive days (Good/Amazing) than difficult ones."
    if difficult / total >= DIFFICULT_RATIO:
        return (
            "🫶 A lot of days have been difficult (Low/Struggling). "
            "Consider extra self-care support."
        )
    return "⚖️ Your days are balanced between positive and difficult moods."


def most_common_rule(stats: MoodAggregate, trend: Sequence[TrendPoint]) -> str | None:
    if stats.most_common is None:
        return None
    return f"🏷️ Your most common mood in this period was **{stats.most_common.label}**."


RULES: tuple[Rule, ...] = (
    average_level_rule,
    trend_direction_rule,
    balance_rule,
    most_common_rule,
)


def build_insights(
    stats: MoodAggregate,
    trend: Sequence[TrendPoint],
    *,
    rules: Sequence[Rule] = RULES,
) -> list[str]:
    """Evaluate ``rules`` in order and keep the first few observations."""

    if stats.total_entries == 0:
        return []
    insights: list[str] = []
    for rule in rules:
        text = rule(stats, trend)
        if text:
            insights.append(text)
    return insights[:MAX_INSIGHTS]


__all__ = [
    "MAX_INSIGHTS",
    "RULES",
    "Rule",
    "average_level_rule",
    "balance_rule",
    "build_insights",
    "most_common_rule",
    "trend_direction_rule",
]
