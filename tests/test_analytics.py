# SPDX-License-Identifier: MIT

from conftest import NOW, local, make_entry
from wellness_log.model.event_type import EventType
from wellness_log.service.analytics import (
    average_duration,
    average_per_month,
    count_in_last_days,
    count_this_month,
    days_since_last,
    exercise_streak,
    format_days_since,
    get_analytics_summary,
    most_active_day,
    most_common_time_of_day,
    parse_duration_minutes,
    time_of_day_bucket,
    weekly_average,
)


def exercise_on(*days):
    return [make_entry(EventType.EXERCISE, local(2024, 3, day, 7, 0)) for day in days]


# ---- exercise streak ----


def test_streak_counts_back_from_today():
    assert exercise_streak(exercise_on(15, 14, 13, 11), NOW) == 3


def test_streak_grace_when_today_is_missing():
    assert exercise_streak(exercise_on(14), NOW) == 1
    assert exercise_streak(exercise_on(14, 13, 12), NOW) == 3


def test_streak_broken_before_yesterday():
    assert exercise_streak(exercise_on(13, 12), NOW) == 0


def test_streak_ignores_other_types():
    entries = [make_entry(EventType.SVT_EPISODE, local(2024, 3, 15, 9, 0))]
    assert exercise_streak(entries, NOW) == 0


def test_streak_counts_a_day_once():
    entries = exercise_on(15) + exercise_on(15) + exercise_on(14)
    assert exercise_streak(entries, NOW) == 2


# ---- counts ----


def test_count_this_month():
    entries = exercise_on(1, 10) + [make_entry(EventType.EXERCISE, local(2024, 2, 29, 22, 0))]
    assert count_this_month(entries, EventType.EXERCISE, NOW) == 2
    assert count_this_month(entries, EventType.SVT_EPISODE, NOW) == 0


def test_count_in_last_days():
    entries = exercise_on(1, 10) + [make_entry(EventType.EXERCISE, local(2024, 2, 1, 9, 0))]
    assert count_in_last_days(entries, EventType.EXERCISE, NOW) == 2


def test_average_per_month_over_inclusive_span():
    entries = [
        make_entry(EventType.SVT_EPISODE, local(2024, 1, 10, 9, 0)),
        make_entry(EventType.SVT_EPISODE, local(2024, 2, 10, 9, 0)),
        make_entry(EventType.SVT_EPISODE, local(2024, 3, 10, 9, 0)),
    ]
    assert average_per_month(entries, EventType.SVT_EPISODE) == 1.0


def test_average_per_month_single_month():
    entries = [make_entry(EventType.SVT_EPISODE, local(2024, 3, day, 9, 0)) for day in (1, 2)]
    assert average_per_month(entries, EventType.SVT_EPISODE) == 2.0
    assert average_per_month([], EventType.SVT_EPISODE) == 0.0


# ---- most active day / time of day ----


def test_most_active_day_tie_goes_to_earlier_weekday():
    # 2024-03-11 is a Monday, 2024-03-15 a Friday
    entries = exercise_on(15, 15, 11, 11)
    assert most_active_day(entries) == "Monday"


def test_most_active_day_empty():
    assert most_active_day([]) == "-"


def test_time_of_day_bucket_boundaries():
    assert time_of_day_bucket(local(2024, 3, 15, 6, 0)) == "Morning (6-12)"
    assert time_of_day_bucket(local(2024, 3, 15, 11, 59)) == "Morning (6-12)"
    assert time_of_day_bucket(local(2024, 3, 15, 12, 0)) == "Afternoon (12-18)"
    assert time_of_day_bucket(local(2024, 3, 15, 18, 0)) == "Evening (18-24)"
    assert time_of_day_bucket(local(2024, 3, 15, 0, 0)) == "Night (0-6)"
    assert time_of_day_bucket(local(2024, 3, 15, 5, 59)) == "Night (0-6)"


def test_most_common_time_of_day_tie_break():
    entries = [
        make_entry(EventType.SVT_EPISODE, local(2024, 3, 15, 2, 0)),
        make_entry(EventType.SVT_EPISODE, local(2024, 3, 14, 20, 0)),
    ]
    assert most_common_time_of_day(entries, EventType.SVT_EPISODE) == "Evening (18-24)"
    assert most_common_time_of_day([], EventType.SVT_EPISODE) == "-"


# ---- durations ----


def test_parse_duration_minutes():
    assert parse_duration_minutes("3 minutes") == 3
    assert parse_duration_minutes("about 10-15 min") == 10
    assert parse_duration_minutes("a few") is None
    assert parse_duration_minutes(None) is None


def test_average_duration_skips_missing_values():
    entries = [
        make_entry(EventType.SVT_EPISODE, NOW, duration="3 minutes"),
        make_entry(EventType.SVT_EPISODE, NOW, duration="1 minute"),
        make_entry(EventType.SVT_EPISODE, NOW),
    ]
    assert average_duration(entries) == "2.0 min"


def test_average_duration_placeholder():
    assert average_duration([make_entry(EventType.SVT_EPISODE, NOW, duration="short")]) == "-"


# ---- days since / weekly average ----


def test_days_since_last():
    today = [make_entry(EventType.SVT_EPISODE, local(2024, 3, 15, 1, 0))]
    two_days = [make_entry(EventType.SVT_EPISODE, local(2024, 3, 13, 12, 0))]
    last_evening = [make_entry(EventType.SVT_EPISODE, local(2024, 3, 14, 18, 0))]

    assert days_since_last(today, EventType.SVT_EPISODE, NOW) == "Today"
    assert days_since_last(two_days, EventType.SVT_EPISODE, NOW) == 2
    assert days_since_last(last_evening, EventType.SVT_EPISODE, NOW) == "Today"
    assert days_since_last([], EventType.SVT_EPISODE, NOW) == "-"


def test_format_days_since():
    assert format_days_since(1) == "1 day"
    assert format_days_since(3) == "3 days"
    assert format_days_since("Today") == "Today"
    assert format_days_since("-") == "-"


def test_weekly_average():
    entries = exercise_on(1, 5, 8, 12, 14)
    assert weekly_average(entries, EventType.EXERCISE, NOW) == 1.2


# ---- summary ----


def test_summary_of_empty_collection():
    summary = get_analytics_summary([], NOW)

    assert summary["cards"] == {
        "exercise_streak": 0,
        "svt_this_month": 0,
        "medications_this_month": 0,
        "total_entries": 0,
    }
    assert summary["monthly"]["average_svt_per_month"] == 0.0
    assert summary["monthly"]["most_active_day"] == "-"
    assert summary["monthly"]["common_svt_time"] == "-"
    assert summary["patterns"]["average_svt_duration"] == "-"
    assert summary["patterns"]["days_since_svt"] == "-"
    assert summary["patterns"]["weekly_exercise_average"] == 0.0


def test_summary_uses_recent_svt_for_duration():
    entries = [
        make_entry(EventType.SVT_EPISODE, local(2024, 3, 10, 9, 0), duration="4 minutes"),
        make_entry(EventType.SVT_EPISODE, local(2024, 1, 10, 9, 0), duration="20 minutes"),
        make_entry(EventType.MEDICATION, local(2024, 3, 10, 9, 5), dosage="1 tablet"),
    ]
    summary = get_analytics_summary(entries, NOW)

    assert summary["cards"]["svt_this_month"] == 1
    assert summary["cards"]["medications_this_month"] == 1
    assert summary["cards"]["total_entries"] == 3
    assert summary["patterns"]["svt_last_30"] == 1
    assert summary["patterns"]["average_svt_duration"] == "4.0 min"
    assert summary["patterns"]["days_since_svt"] == 5
