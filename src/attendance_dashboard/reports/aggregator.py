"""Temporal bucketing of attendance events and registrations.

All functions are pure: callers pass the already-fetched slice of the log
plus the zone used to decide which calendar day an instant belongs to.
"""
from __future__ import annotations

from collections import OrderedDict
from dataclasses import dataclass
from datetime import date, datetime, timedelta, tzinfo
from typing import Iterable, Sequence

from ..attendance.model import AttendanceEvent
from ..common.datetime_utils import local_date, short_label
from ..core.constants import GROWTH_WINDOW_DAYS, TREND_MAX_POINTS, WEEKDAY_NAMES


def percent(part: int, whole: int) -> int:
    """Integer percentage rounded half-up; 0 when `whole` is 0."""
    if whole <= 0:
        return 0
    return (200 * part + whole) // (2 * whole)


@dataclass(frozen=True)
class GrowthBucket:
    day: date
    count: int

    def to_dict(self) -> dict:
        return {"date": short_label(self.day), "iso_date": self.day.isoformat(), "count": self.count}


@dataclass(frozen=True)
class DailyBucket:
    day: date
    present: int
    absent: int

    @property
    def rate(self) -> int:
        return percent(self.present, self.present + self.absent)

    def to_dict(self) -> dict:
        return {
            "date": short_label(self.day),
            "iso_date": self.day.isoformat(),
            "present": self.present,
            "absent": self.absent,
            "rate": self.rate,
        }


@dataclass(frozen=True)
class WeekdayBucket:
    day: str
    present: int
    total: int

    @property
    def rate(self) -> int:
        return percent(self.present, self.total)

    def to_dict(self) -> dict:
        return {"day": self.day, "present": self.present, "total": self.total, "rate": self.rate}


def growth_series(
    registrations: Iterable[datetime],
    *,
    today: date,
    tz: tzinfo,
    days: int = GROWTH_WINDOW_DAYS,
) -> list[GrowthBucket]:
    """Dense series of registrations per day for the `days` days ending today."""
    counts: "OrderedDict[date, int]" = OrderedDict(
        (today - timedelta(days=offset), 0) for offset in range(days - 1, -1, -1)
    )
    for created_at in registrations:
        day = local_date(created_at, tz)
        if day in counts:
            counts[day] += 1
    return [GrowthBucket(day=d, count=c) for d, c in counts.items()]


def daily_trend(
    events: Iterable[AttendanceEvent],
    *,
    tz: tzinfo,
    max_points: int = TREND_MAX_POINTS,
) -> list[DailyBucket]:
    """Present/absent per populated day, chronological, last `max_points` days only."""
    tally: dict[date, list[int]] = {}
    for e in events:
        day = local_date(e.timestamp, tz)
        counts = tally.setdefault(day, [0, 0])
        counts[0 if e.present else 1] += 1

    buckets = [DailyBucket(day=d, present=p, absent=a) for d, (p, a) in sorted(tally.items())]
    if max_points <= 0:
        return []
    return buckets[-max_points:]


def weekday_pattern(events: Iterable[AttendanceEvent], *, tz: tzinfo) -> list[WeekdayBucket]:
    """Per day-of-week totals, Sunday first; weekdays with no events are dropped."""
    present = [0] * 7
    total = [0] * 7
    for e in events:
        # date.weekday() is Monday=0; shift so Sunday=0
        idx = (local_date(e.timestamp, tz).weekday() + 1) % 7
        total[idx] += 1
        if e.present:
            present[idx] += 1

    return [
        WeekdayBucket(day=WEEKDAY_NAMES[i], present=present[i], total=total[i])
        for i in range(7)
        if total[i] > 0
    ]


def active_split(events: Iterable[AttendanceEvent], roster_ids: Sequence[str]) -> dict:
    """Roster members with any event in the slice vs the rest of the roster."""
    roster = set(roster_ids)
    active = len({e.employee_id for e in events if e.employee_id in roster})
    return {"active": active, "inactive": max(0, len(roster) - active)}
