from __future__ import annotations

from thrivetrack.app.insights import MoodCategory, aggregate, normalize_records
from thrivetrack.app.insights.aggregate import most_common_category


def test_empty_aggregate_has_zero_state() -> None:
    stats = aggregate([])

    assert stats.total_entries == 0
    assert stats.average_mood == "0.0"
    assert stats.most_common is None
    assert stats.most_common_label == "—"
    assert set(stats.category_counts) == set(MoodCategory)
    assert sum(stats.category_counts.values()) == 0


def test_average_and_counts(make_record) -> None:
    records = normalize_records(
        [make_record("good"), make_record("good"), make_record("amazing"), make_record("low")]
    )

    stats = aggregate(records)

    assert stats.total_entries == 4
    assert stats.mean == 3.75
    assert stats.average_mood == "3.8"
    assert stats.category_counts[MoodCategory.GOOD] == 2
    assert stats.category_counts[MoodCategory.STRUGGLING] == 0
    assert stats.most_common == MoodCategory.GOOD
    assert stats.most_common_label == "Good"


def test_tie_goes_to_higher_mood(make_record) -> None:
    records = normalize_records(
        [make_record("low"), make_record("okay"), make_record("okay"), make_record("low")]
    )

    assert aggregate(records).most_common == MoodCategory.OKAY


def test_most_common_ignores_zero_counts() -> None:
    counts = {category: 0 for category in MoodCategory}

    assert most_common_category(counts) is None

    counts[MoodCategory.STRUGGLING] = 1
    assert most_common_category(counts) == MoodCategory.STRUGGLING


def test_average_display_rounds_halves_up(make_record) -> None:
    def stats_for(*values: int):
        return aggregate(normalize_records([make_record("okay", value=v) for v in values]))

    assert stats_for(3, 3, 3, 4).average_mood == "3.3"
    assert stats_for(1, 1, 1, 2).average_mood == "1.3"
    assert stats_for(4, 4, 4, 5).average_mood == "4.3"
