from __future__ import annotations

from datetime import datetime
from typing import Optional, Protocol, Sequence

from .model import AttendanceEvent


class AttendanceRepository(Protocol):
    """Attendance log store: append/delete only, no in-place updates.

    Ranges are half-open `[start, end)` over aware instants.
    """

    def query_events(
        self,
        *,
        employee_id: Optional[str] = None,
        start: Optional[datetime] = None,
        end: Optional[datetime] = None,
        newest_first: bool = False,
    ) -> Sequence[AttendanceEvent]:
        raise NotImplementedError

    def delete_events(self, *, start: datetime, end: datetime) -> int:
        raise NotImplementedError

    def insert_events(self, events: Sequence[AttendanceEvent]) -> int:
        raise NotImplementedError
