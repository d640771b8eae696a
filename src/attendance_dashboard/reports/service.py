from __future__ import annotations

from dataclasses import dataclass
from datetime import date, datetime, timedelta, tzinfo
from typing import Callable, Optional

from ..attendance.repository import AttendanceRepository
from ..common.datetime_utils import day_bounds, now_local, start_of_day
from ..core.constants import GROWTH_WINDOW_DAYS, TREND_WINDOW_DAYS
from ..employees.repository import EmployeeRepository
from . import aggregator, ranking


@dataclass(frozen=True)
class InsightsReport:
    total_employees: int
    employee_growth: list[aggregator.GrowthBucket]
    today_attendance: ranking.TodaySnapshot
    monthly_trend: list[aggregator.DailyBucket]
    employee_status: dict
    weekly_pattern: list[aggregator.WeekdayBucket]

    def to_dict(self) -> dict:
        return {
            "total_employees": self.total_employees,
            "employee_growth": [b.to_dict() for b in self.employee_growth],
            "today_attendance": self.today_attendance.to_dict(),
            "monthly_trend": [b.to_dict() for b in self.monthly_trend],
            "employee_status": dict(self.employee_status),
            "weekly_pattern": [b.to_dict() for b in self.weekly_pattern],
        }


@dataclass(frozen=True)
class EmployeeStatsReport:
    highest_presence: Optional[ranking.EmployeeStat]
    average_attendance: int
    most_absents: Optional[ranking.EmployeeStat]
    total_employees: int
    total_active_employees: int
    employee_stats: list[ranking.EmployeeStat]

    def to_dict(self) -> dict:
        highest = None
        if self.highest_presence:
            highest = {**self.highest_presence.to_dict(), "display_text": f"{self.highest_presence.present_days} days present"}
        absents = None
        if self.most_absents:
            absents = {**self.most_absents.to_dict(), "display_text": f"{self.most_absents.absent_days} days absent"}
        return {
            "highest_presence": highest,
            "average_attendance": self.average_attendance,
            "most_absents": absents,
            "total_employees": self.total_employees,
            "total_active_employees": self.total_active_employees,
            "employee_stats": [s.to_dict() for s in self.employee_stats],
        }


class ReportService:
    """Reporting facade: fetches the slices and composes aggregator/ranking output.

    No caching; every call re-reads the store.
    """

    def __init__(
        self,
        attendance: AttendanceRepository,
        employees: EmployeeRepository,
        *,
        tz: tzinfo,
        clock: Optional[Callable[[], datetime]] = None,
    ):
        self._attendance = attendance
        self._employees = employees
        self._tz = tz
        self._clock = clock or (lambda: now_local(tz))

    def _today(self) -> date:
        return self._clock().astimezone(self._tz).date()

    def get_insights_report(self) -> InsightsReport:
        today = self._today()
        roster = list(self._employees.list_employees())
        roster_ids = [e.user_id for e in roster]

        growth_start = start_of_day(today - timedelta(days=GROWTH_WINDOW_DAYS - 1), self._tz)
        registrations = [e.created_at for e in self._employees.list_registered_since(growth_start)]

        today_start, today_end = day_bounds(today, self._tz)
        today_events = self._attendance.query_events(start=today_start, end=today_end)

        window_start = start_of_day(today - timedelta(days=TREND_WINDOW_DAYS), self._tz)
        window_events = list(self._attendance.query_events(start=window_start, end=today_end))

        return InsightsReport(
            total_employees=len(roster),
            employee_growth=aggregator.growth_series(registrations, today=today, tz=self._tz),
            today_attendance=ranking.today_snapshot(today_events, len(roster)),
            monthly_trend=aggregator.daily_trend(window_events, tz=self._tz),
            employee_status=aggregator.active_split(window_events, roster_ids),
            weekly_pattern=aggregator.weekday_pattern(window_events, tz=self._tz),
        )

    def get_employee_stats_report(self) -> EmployeeStatsReport:
        roster = list(self._employees.list_employees())
        if not roster:
            return EmployeeStatsReport(
                highest_presence=None,
                average_attendance=0,
                most_absents=None,
                total_employees=0,
                total_active_employees=0,
                employee_stats=[],
            )

        result = ranking.rank(self._attendance.query_events(), roster)
        return EmployeeStatsReport(
            highest_presence=result.most_present,
            average_attendance=result.average_rate,
            most_absents=result.most_absent,
            total_employees=len(roster),
            total_active_employees=result.active_count,
            employee_stats=result.stats,
        )
