from __future__ import annotations

from collections.abc import Sequence
from dataclasses import dataclass
from datetime import UTC, tzinfo

from .categories import MOOD_FLOOR
from .normalizer import NormalizedRecord
from .ranges import RangeKey

WEEKDAY_LABELS = ("Mon", "Tue", "Wed", "Thu", "Fri", "Sat", "Sun")
MONTH_LABELS = (
    "Jan",
    "Feb",
    "Mar",
    "Apr",
    "May",
    "Jun",
    "Jul",
    "Aug",
    "Sep",
    "Oct",
    "Nov",
    "Dec",
)
RECENT_POINTS = 7


@dataclass(frozen=True)
class TrendPoint:
    label: str
    value: float
    interpolated: bool = False


def _weekly_points(records: Sequence[NormalizedRecord], tz: tzinfo) -> list[TrendPoint]:
    buckets: list[list[int]] = [[] for _ in WEEKDAY_LABELS]
    for record in records:
        buckets[record.created_at.astimezone(tz).weekday()].append(record.mood_value)

    points: list[TrendPoint] = []
    last_known: float | None = None
    for label, values in zip(WEEKDAY_LABELS, buckets, strict=True):
        if values:
            last_known = sum(values) / len(values)
            points.append(TrendPoint(label=label, value=last_known))
            continue
        # Unlogged day: carry the previous value so the line never drops to zero.
        carried = last_known if last_known is not None else float(MOOD_FLOOR)
        points.append(TrendPoint(label=label, value=carried, interpolated=True))
    return points


def _recent_points(records: Sequence[NormalizedRecord], tz: tzinfo) -> list[TrendPoint]:
    ordered = sorted(records, key=lambda record: record.created_at)
    points = []
    for record in ordered[-RECENT_POINTS:]:
        local = record.created_at.astimezone(tz)
        label = f"{local.day:02d} {MONTH_LABELS[local.month - 1]}"
        points.append(TrendPoint(label=label, value=float(record.mood_value)))
    return points


def build_trend(
    records: Sequence[NormalizedRecord],
    range_key: RangeKey,
    *,
    tz: tzinfo = UTC,
) -> list[TrendPoint]:
    """Chart series for the active range.

    ``week`` yields one point per weekday (Monday first) with carried-forward
    interpolation for empty days; ``month`` and ``all`` yield the last seven
    check-ins in chronological order.
    """

    if not records:
        return []
    if range_key is RangeKey.WEEK:
        return _weekly_points(records, tz)
    return _recent_points(records, tz)


__all__ = ["MONTH_LABELS", "WEEKDAY_LABELS", "TrendPoint", "build_trend"]
