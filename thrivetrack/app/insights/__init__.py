"""Mood insights derivation pipeline."""

from .aggregate import MoodAggregate, aggregate
from .breakdown import BreakdownRow, MoodBreakdown, build_breakdown
from .categories import MoodCategory
from .engine import MoodInsights, MoodInsightsEngine, build_mood_insights
from .normalizer import NormalizedRecord, normalize_record, normalize_records
from .ranges import RangeKey, filter_by_range
from .rules import build_insights
from .support import SupportPrompt, SupportPromptState, evaluate_support_prompt
from .trend import TrendPoint, build_trend

__all__ = [
    "BreakdownRow",
    "MoodAggregate",
    "MoodBreakdown",
    "MoodCategory",
    "MoodInsights",
    "MoodInsightsEngine",
    "NormalizedRecord",
    "RangeKey",
    "SupportPrompt",
    "SupportPromptState",
    "TrendPoint",
    "aggregate",
    "build_breakdown",
    "build_insights",
    "build_mood_insights",
    "build_trend",
    "evaluate_support_prompt",
    "filter_by_range",
    "normalize_record",
    "normalize_records",
]
