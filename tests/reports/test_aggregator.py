from datetime import date, datetime, timedelta, timezone

from attendance_dashboard.attendance.model import AttendanceEvent
from attendance_dashboard.reports.aggregator import (
    active_split,
    daily_trend,
    growth_series,
    percent,
    weekday_pattern,
)

UTC = timezone.utc


def _ev(emp, day, present, hour=12):
    return AttendanceEvent(emp, datetime(day.year, day.month, day.day, hour, tzinfo=UTC), present)


def test_percent_rounds_half_up_and_handles_zero():
    assert percent(7, 10) == 70
    assert percent(1, 8) == 13  # 12.5
    assert percent(1, 3) == 33
    assert percent(2, 3) == 67
    assert percent(0, 0) == 0


def test_growth_series_is_dense_and_chronological():
    today = date(2025, 10, 19)
    regs = [
        datetime(2025, 10, 19, 9, tzinfo=UTC),
        datetime(2025, 10, 19, 10, tzinfo=UTC),
        datetime(2025, 10, 14, 9, tzinfo=UTC),
        datetime(2025, 10, 12, 9, tzinfo=UTC),  # outside the 7-day window
    ]

    series = growth_series(regs, today=today, tz=UTC)

    assert [b.day for b in series] == [date(2025, 10, 13) + timedelta(days=i) for i in range(7)]
    assert [b.count for b in series] == [0, 1, 0, 0, 0, 0, 2]
    assert series[-1].to_dict() == {"date": "Oct 19", "iso_date": "2025-10-19", "count": 2}


def test_growth_series_with_no_data_still_has_seven_buckets():
    series = growth_series([], today=date(2025, 1, 3), tz=UTC)

    assert len(series) == 7
    assert series[0].day == date(2024, 12, 28)
    assert all(b.count == 0 for b in series)


def test_daily_trend_omits_empty_days_and_computes_rates():
    d1, d3 = date(2025, 10, 1), date(2025, 10, 3)
    events = [_ev("A", d3, True), _ev("B", d1, True), _ev("C", d1, False), _ev("D", d1, True)]

    trend = daily_trend(events, tz=UTC)

    assert [b.day for b in trend] == [d1, d3]
    assert trend[0].to_dict() == {"date": "Oct 1", "iso_date": "2025-10-01", "present": 2, "absent": 1, "rate": 67}
    assert trend[1].rate == 100


def test_daily_trend_keeps_only_latest_fourteen_populated_days():
    start = date(2025, 9, 20)
    events = [_ev("A", start + timedelta(days=2 * i), i % 2 == 0) for i in range(15)]

    trend = daily_trend(events, tz=UTC)

    assert len(trend) == 14
    assert trend[0].day == start + timedelta(days=2)
    assert trend[-1].day == start + timedelta(days=28)


def test_weekday_pattern_is_sunday_first_and_drops_empty_days():
    sunday = date(2025, 10, 5)
    wednesday = date(2025, 10, 8)
    events = [
        _ev("A", wednesday, True),
        _ev("B", wednesday, False),
        _ev("A", sunday, True),
        _ev("A", sunday + timedelta(days=7), False),  # another Sunday
    ]

    pattern = weekday_pattern(events, tz=UTC)

    assert [b.to_dict() for b in pattern] == [
        {"day": "Sunday", "present": 1, "total": 2, "rate": 50},
        {"day": "Wednesday", "present": 1, "total": 2, "rate": 50},
    ]


def test_weekday_pattern_empty_input():
    assert weekday_pattern([], tz=UTC) == []


def test_active_split_counts_roster_members_with_events():
    events = [_ev("A", date(2025, 10, 1), True), _ev("A", date(2025, 10, 2), False), _ev("ghost", date(2025, 10, 1), True)]

    assert active_split(events, ["A", "B", "C"]) == {"active": 1, "inactive": 2}
    assert active_split([], []) == {"active": 0, "inactive": 0}
