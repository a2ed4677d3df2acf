from __future__ import annotations

import logging
from collections.abc import Callable, Sequence
from dataclasses import dataclass, field
from datetime import UTC, datetime, tzinfo
from typing import TYPE_CHECKING
from zoneinfo import ZoneInfo

from ..core.config import Settings
from ..metrics import INSIGHTS_COMPUTED, SUPPORT_PROMPTS
from ..schemas.mood import MoodRecord
from .aggregate import MoodAggregate, aggregate
from .breakdown import MoodBreakdown, build_breakdown
from .normalizer import NormalizedRecord, normalize_records
from .ranges import RangeKey, filter_by_range
from .rules import build_insights
from .support import (
    DEFAULT_RESOURCES_PATH,
    SupportPrompt,
    SupportPromptState,
    evaluate_support_prompt,
)
from .trend import TrendPoint, build_trend

if TYPE_CHECKING:
    from ..services.mood_source import MoodRecordSource
    from ..services.visits import VisitRegistry

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class MoodInsights:
    range_key: RangeKey
    stats: MoodAggregate
    trend: list[TrendPoint] = field(default_factory=list)
    breakdown: MoodBreakdown | None = None
    insights: list[str] = field(default_factory=list)
    support_prompt: SupportPrompt | None = None


def build_mood_insights(
    records: Sequence[MoodRecord | NormalizedRecord],
    range_key: RangeKey,
    *,
    now: datetime,
    tz: tzinfo = UTC,
    support_state: SupportPromptState | None = None,
    resources_path: str = DEFAULT_RESOURCES_PATH,
) -> tuple[MoodInsights, SupportPromptState]:
    """Derive every view of the mood screen from one in-memory snapshot."""

    history = normalize_records(records)
    in_range = filter_by_range(history, range_key, now=now)

    stats = aggregate(in_range)
    trend = build_trend(in_range, range_key, tz=tz)
    breakdown = build_breakdown(stats.category_counts, stats.total_entries)
    insights = build_insights(stats, trend)
    prompt, state = evaluate_support_prompt(
        history,
        support_state or SupportPromptState(),
        resources_path=resources_path,
    )
    result = MoodInsights(
        range_key=range_key,
        stats=stats,
        trend=trend,
        breakdown=breakdown,
        insights=insights,
        support_prompt=prompt,
    )
    return result, state


class MoodInsightsEngine:
    """Fetch a user's snapshot and run the insights pipeline over it."""

    def __init__(
        self,
        source: MoodRecordSource,
        *,
        settings: Settings,
        visits: VisitRegistry | None = None,
        clock: Callable[[], datetime] | None = None,
    ) -> None:
        self._source = source
        self._settings = settings
        self._visits = visits
        self._clock = clock or (lambda: datetime.now(UTC))
        self._tz = ZoneInfo(settings.insights_timezone)

    async def compute(
        self,
        user_id: str,
        range_key: RangeKey,
        *,
        visit_id: str | None = None,
    ) -> MoodInsights:
        # MoodSourceError propagates: no partial views on a failed fetch.
        records = await self._source.fetch(user_id)
        now = self._clock()

        if self._visits is None or visit_id is None:
            insights, _ = self._run(records, range_key, now, SupportPromptState())
        else:
            async with self._visits.session(visit_id) as visit:
                insights, visit.state = self._run(records, range_key, now, visit.state)

        INSIGHTS_COMPUTED.labels(range=range_key.value).inc()
        if insights.support_prompt is not None:
            SUPPORT_PROMPTS.inc()
            logger.info(
                "support prompt surfaced",
                extra={"extra_fields": {"visit_id": visit_id, "avg": insights.support_prompt.avg}},
            )
        logger.debug(
            "mood insights computed",
            extra={
                "extra_fields": {
                    "range": range_key.value,
                    "fetched": len(records),
                    "entries": insights.stats.total_entries,
                }
            },
        )
        return insights

    def _run(
        self,
        records: Sequence[MoodRecord],
        range_key: RangeKey,
        now: datetime,
        state: SupportPromptState,
    ) -> tuple[MoodInsights, SupportPromptState]:
        return build_mood_insights(
            records,
            range_key,
            now=now,
            tz=self._tz,
            support_state=state,
            resources_path=self._settings.support_resources_path,
        )


__all__ = ["MoodInsights", "MoodInsightsEngine", "build_mood_insights"]
