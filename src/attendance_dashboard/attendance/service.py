from __future__ import annotations

import logging
from datetime import date, datetime, tzinfo
from typing import Callable, Optional

from ..common.datetime_utils import (
    day_bounds,
    local_date,
    local_time,
    month_bounds,
    now_local,
    parse_iso_date,
    parse_month,
)
from ..common.validators import require_non_empty, require_presence_map
from ..core.constants import DEFAULT_MAX_PRESENCE_ENTRIES
from ..core.enums import AttendanceStatus
from ..core.exceptions import StoreError
from .model import EmployeeHistory, HistoryRecord, ReconciliationResult
from .reconciler import DayReconciler
from .repository import AttendanceRepository

logger = logging.getLogger(__name__)


class AttendanceService:
    """Use cases behind the attendance marking screen and calendar."""

    def __init__(
        self,
        attendance: AttendanceRepository,
        reconciler: DayReconciler,
        *,
        tz: tzinfo,
        max_presence_entries: int = DEFAULT_MAX_PRESENCE_ENTRIES,
        clock: Optional[Callable[[], datetime]] = None,
    ):
        self._attendance = attendance
        self._reconciler = reconciler
        self._tz = tz
        self._max_presence_entries = int(max_presence_entries)
        self._clock = clock or (lambda: now_local(tz))

    def get_day_presence(self, day: str) -> dict[str, bool]:
        """`{employee_id: present}` for one calendar day."""
        target = parse_iso_date(day)
        start, end = day_bounds(target, self._tz)
        events = self._attendance.query_events(start=start, end=end)
        return {e.employee_id: e.present for e in events}

    def get_dates_with_data(self, month: str) -> set[date]:
        """Calendar markers: days of `month` (YYYY-MM) that have any attendance.

        Malformed months raise ValidationError. Future months and store
        failures both yield an empty set.
        """
        first_day = parse_month(month)
        today = self._clock().astimezone(self._tz).date()
        if first_day > today.replace(day=1):
            return set()

        start, end = month_bounds(first_day, self._tz)
        try:
            events = self._attendance.query_events(start=start, end=end)
        except StoreError:
            logger.warning("Could not load attendance dates for %s; returning none", month, exc_info=True)
            return set()
        return {local_date(e.timestamp, self._tz) for e in events}

    def get_employee_history(self, employee_id: str) -> EmployeeHistory:
        employee_id = require_non_empty(employee_id, "User ID")
        events = self._attendance.query_events(employee_id=employee_id, newest_first=True)
        return EmployeeHistory(
            records=[
                HistoryRecord(
                    created_at=e.timestamp.isoformat(),
                    present=e.present,
                    note=e.note,
                    lat=e.lat,
                    lng=e.lng,
                    date=local_date(e.timestamp, self._tz).isoformat(),
                    time=local_time(e.timestamp, self._tz),
                    status=AttendanceStatus.from_flag(e.present).value,
                )
                for e in events
            ]
        )

    def save_day(self, day: str, presence_map: object) -> ReconciliationResult:
        # Validate everything before the store is touched.
        target = parse_iso_date(day)
        presence = require_presence_map(presence_map, max_entries=self._max_presence_entries)
        return self._reconciler.reconcile(target, presence)
