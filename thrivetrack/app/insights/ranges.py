from __future__ import annotations

from collections.abc import Iterable
from datetime import datetime, timedelta
from enum import Enum
from typing import Protocol, TypeVar


class RangeKey(str, Enum):
    WEEK = "week"
    MONTH = "month"
    ALL = "all"

    @property
    def days(self) -> int | None:
        return _WINDOW_DAYS.get(self)


_WINDOW_DAYS = {RangeKey.WEEK: 7, RangeKey.MONTH: 30}


class _Timestamped(Protocol):
    @property
    def created_at(self) -> datetime | None: ...


T = TypeVar("T", bound=_Timestamped)


def range_start(range_key: RangeKey, now: datetime) -> datetime | None:
    """Lower bound of the trailing window, or ``None`` for an unbounded range."""

    days = range_key.days
    if days is None:
        return None
    return now - timedelta(days=days)


def filter_by_range(records: Iterable[T], range_key: RangeKey, *, now: datetime) -> list[T]:
    start = range_start(range_key, now)
    if start is None:
        return list(records)
    return [
        record
        for record in records
        if record.created_at is not None and record.created_at >= start
    ]


__all__ = ["RangeKey", "filter_by_range", "range_start"]
