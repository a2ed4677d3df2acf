from __future__ import annotations

from datetime import timedelta
from zoneinfo import ZoneInfo

from thrivetrack.app.insights import RangeKey, build_trend, normalize_records
from thrivetrack.app.insights.trend import WEEKDAY_LABELS


def test_empty_input_has_no_points() -> None:
    assert build_trend([], RangeKey.WEEK) == []
    assert build_trend([], RangeKey.MONTH) == []


def test_week_carries_last_value_forward(make_record, monday) -> None:
    records = normalize_records(
        [
            make_record("amazing", at=monday),
            make_record("struggling", at=monday + timedelta(days=3)),
        ]
    )

    points = build_trend(records, RangeKey.WEEK)

    assert [point.label for point in points] == list(WEEKDAY_LABELS)
    assert [point.value for point in points] == [5, 5, 5, 1, 1, 1, 1]
    assert [point.interpolated for point in points] == [
        False,
        True,
        True,
        False,
        True,
        True,
        True,
    ]


def test_week_uses_floor_before_first_value(make_record, monday) -> None:
    records = normalize_records([make_record("good", at=monday + timedelta(days=2))])

    points = build_trend(records, RangeKey.WEEK)

    assert [point.value for point in points[:2]] == [1.0, 1.0]
    assert all(point.interpolated for point in points[:2])
    assert points[2].value == 4
    assert points[2].interpolated is False


def test_week_averages_same_weekday(make_record, monday) -> None:
    records = normalize_records(
        [
            make_record("good", at=monday),
            make_record("low", at=monday + timedelta(hours=5)),
            make_record("amazing", at=monday + timedelta(days=7)),
        ]
    )

    points = build_trend(records, RangeKey.WEEK)

    assert points[0].value == 11 / 3
    assert points[0].interpolated is False


def test_week_buckets_in_configured_timezone(make_record, monday) -> None:
    # 23:30 UTC on Monday is already Tuesday in Dublin summer time.
    records = normalize_records([make_record("good", at=monday.replace(hour=23, minute=30))])

    utc_points = build_trend(records, RangeKey.WEEK)
    dublin_points = build_trend(records, RangeKey.WEEK, tz=ZoneInfo("Europe/Dublin"))

    assert utc_points[0].interpolated is False
    assert dublin_points[0].interpolated is True
    assert dublin_points[1].interpolated is False


def test_month_uses_last_seven_records_in_order(make_record, now) -> None:
    # Newest first, as the entries API serves them.
    raw = [make_record("okay", days_ago=day, value=(day % 5) + 1) for day in range(10)]

    points = build_trend(normalize_records(raw), RangeKey.MONTH)

    assert len(points) == 7
    # Oldest of the seven is six days back, newest is today.
    assert points[0].label == "01 Jul"
    assert points[-1].label == "07 Jul"
    assert [point.value for point in points] == [2.0, 1.0, 5.0, 4.0, 3.0, 2.0, 1.0]
    assert not any(point.interpolated for point in points)


def test_all_range_with_few_records(make_record) -> None:
    records = normalize_records(
        [make_record("good", days_ago=200), make_record("low", days_ago=400)]
    )

    points = build_trend(records, RangeKey.ALL)

    assert [point.value for point in points] == [2.0, 4.0]
