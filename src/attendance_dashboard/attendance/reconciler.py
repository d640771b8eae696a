from __future__ import annotations

import logging
from collections.abc import Mapping
from datetime import date, tzinfo

from ..common.datetime_utils import anchor_instant, day_bounds
from ..core.exceptions import PartialWriteError, StoreError
from ..employees.repository import EmployeeRepository
from .model import AttendanceEvent, ReconciliationResult
from .repository import AttendanceRepository

logger = logging.getLogger(__name__)


class DayReconciler:
    """Replace one calendar day's attendance with a full roster-covering set.

    Every employee on the roster gets exactly one row for the day; anyone
    missing from the presence map is recorded absent. Existing rows for the
    day are deleted first (whole-day overwrite, last writer wins).
    """

    def __init__(self, attendance: AttendanceRepository, roster: EmployeeRepository, *, tz: tzinfo):
        self._attendance = attendance
        self._roster = roster
        self._tz = tz

    def build_events(self, day: date, presence_map: Mapping[str, bool], roster_ids: list[str]) -> list[AttendanceEvent]:
        stamp = anchor_instant(day, self._tz)
        return [
            AttendanceEvent(employee_id=emp_id, timestamp=stamp, present=bool(presence_map.get(emp_id, False)))
            for emp_id in roster_ids
        ]

    def reconcile(self, day: date, presence_map: Mapping[str, bool]) -> ReconciliationResult:
        start, end = day_bounds(day, self._tz)

        # A failure here aborts before anything is written.
        removed = self._attendance.delete_events(start=start, end=end)
        logger.debug("Cleared %d attendance rows for %s", removed, day.isoformat())

        try:
            roster_ids = [e.user_id for e in self._roster.list_employees()]
            events = self.build_events(day, presence_map, roster_ids)
            if events:
                self._attendance.insert_events(events)
        except StoreError as exc:
            logger.critical(
                "Attendance for %s was cleared but replacement rows could not be written; day has no records",
                day.isoformat(),
            )
            raise PartialWriteError(
                f"Attendance for {day.isoformat()} was cleared but could not be saved; please retry"
            ) from exc

        if not events:
            logger.info("No employees on roster; nothing saved for %s", day.isoformat())
            return ReconciliationResult(total=0, present=0, absent=0)

        present = sum(1 for e in events if e.present)
        result = ReconciliationResult(total=len(events), present=present, absent=len(events) - present)
        logger.info(
            "Saved attendance for %s: total=%d present=%d absent=%d",
            day.isoformat(),
            result.total,
            result.present,
            result.absent,
        )
        return result
