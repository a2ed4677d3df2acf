from __future__ import annotations

from pydantic import BaseModel, Field

from ..insights import MoodInsights, RangeKey
from ..insights.breakdown import BreakdownRow
from ..insights.support import SupportPrompt


class TrendPointModel(BaseModel):
    label: str
    value: float
    interpolated: bool = False


class BreakdownRowModel(BaseModel):
    category: str
    label: str
    count: int = Field(ge=0)
    percent: int = Field(ge=0, le=100)
    color: str

    @classmethod
    def from_row(cls, row: BreakdownRow) -> BreakdownRowModel:
        return cls(
            category=row.category.value,
            label=row.label,
            count=row.count,
            percent=row.percent,
            color=row.color,
        )


class SupportPromptModel(BaseModel):
    avg: str
    message: str
    resources_path: str
    dismissible: bool = True

    @classmethod
    def from_prompt(cls, prompt: SupportPrompt) -> SupportPromptModel:
        return cls(
            avg=prompt.avg,
            message=prompt.message,
            resources_path=prompt.resources_path,
            dismissible=prompt.dismissible,
        )


class MoodInsightsResponse(BaseModel):
    range: RangeKey
    total_entries: int
    average_mood: str
    most_common_mood: str
    trend_points: list[TrendPointModel]
    breakdown_rows: list[BreakdownRowModel]
    breakdown_slices: list[BreakdownRowModel]
    insights: list[str]
    support_prompt: SupportPromptModel | None = None

    @classmethod
    def from_insights(cls, result: MoodInsights) -> MoodInsightsResponse:
        rows = result.breakdown.rows if result.breakdown else []
        return cls(
            range=result.range_key,
            total_entries=result.stats.total_entries,
            average_mood=result.stats.average_mood,
            most_common_mood=result.stats.most_common_label,
            trend_points=[
                TrendPointModel(
                    label=point.label,
                    value=point.value,
                    interpolated=point.interpolated,
                )
                for point in result.trend
            ],
            breakdown_rows=[BreakdownRowModel.from_row(row) for row in rows],
            breakdown_slices=[
                BreakdownRowModel.from_row(row) for row in rows if row.count > 0
            ],
            insights=list(result.insights),
            support_prompt=(
                SupportPromptModel.from_prompt(result.support_prompt)
                if result.support_prompt
                else None
            ),
        )


class VisitResponse(BaseModel):
    visit_id: str


__all__ = [
    "BreakdownRowModel",
    "MoodInsightsResponse",
    "SupportPromptModel",
    "TrendPointModel",
    "VisitResponse",
]
