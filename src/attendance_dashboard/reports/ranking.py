from __future__ import annotations

from dataclasses import dataclass, field
from typing import Iterable, Optional, Sequence

from ..attendance.model import AttendanceEvent
from ..employees.model import Employee
from .aggregator import percent


@dataclass(frozen=True)
class EmployeeStat:
    user_id: str
    username: str
    email: Optional[str]
    total_days: int
    present_days: int

    @property
    def absent_days(self) -> int:
        return self.total_days - self.present_days

    @property
    def presence_rate(self) -> int:
        return percent(self.present_days, self.total_days)

    @property
    def is_active(self) -> bool:
        return self.total_days > 0

    def to_dict(self) -> dict:
        return {
            "user_id": self.user_id,
            "username": self.username,
            "email": self.email,
            "total_days": self.total_days,
            "present_days": self.present_days,
            "absent_days": self.absent_days,
            "presence_rate": self.presence_rate,
        }


@dataclass(frozen=True)
class Ranking:
    most_present: Optional[EmployeeStat]
    most_absent: Optional[EmployeeStat]
    average_rate: int
    active_count: int
    stats: list[EmployeeStat] = field(default_factory=list)


@dataclass(frozen=True)
class TodaySnapshot:
    present: int
    absent: int
    not_marked: int
    total: int

    def to_dict(self) -> dict:
        return {
            "present": self.present,
            "absent": self.absent,
            "not_marked": self.not_marked,
            "total": self.total,
        }


def employee_stats(events: Iterable[AttendanceEvent], roster: Sequence[Employee]) -> list[EmployeeStat]:
    """One lifetime stat per roster member, in roster order."""
    totals: dict[str, list[int]] = {e.user_id: [0, 0] for e in roster}
    for ev in events:
        counts = totals.get(ev.employee_id)
        if counts is None:
            continue
        counts[0] += 1
        if ev.present:
            counts[1] += 1

    return [
        EmployeeStat(
            user_id=emp.user_id,
            username=emp.username or "Unknown",
            email=emp.email,
            total_days=totals[emp.user_id][0],
            present_days=totals[emp.user_id][1],
        )
        for emp in roster
    ]


def _first_max(stats: Sequence[EmployeeStat], key) -> Optional[EmployeeStat]:
    # strict '>' keeps the earliest entry on ties
    best: Optional[EmployeeStat] = None
    for s in stats:
        if best is None or key(s) > key(best):
            best = s
    return best


def rank(events: Iterable[AttendanceEvent], roster: Sequence[Employee]) -> Ranking:
    stats = employee_stats(events, roster)
    active = [s for s in stats if s.is_active]

    average = 0
    if active:
        # mean of integer rates, rounded half-up
        average = percent(sum(s.presence_rate for s in active), 100 * len(active))

    return Ranking(
        most_present=_first_max(active, lambda s: s.present_days),
        most_absent=_first_max(active, lambda s: s.absent_days),
        average_rate=average,
        active_count=len(active),
        stats=stats,
    )


def today_snapshot(today_events: Iterable[AttendanceEvent], roster_size: int) -> TodaySnapshot:
    present = 0
    absent = 0
    for e in today_events:
        if e.present:
            present += 1
        else:
            absent += 1
    return TodaySnapshot(
        present=present,
        absent=absent,
        not_marked=max(0, roster_size - present - absent),
        total=roster_size,
    )
