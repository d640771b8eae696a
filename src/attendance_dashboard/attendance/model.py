from __future__ import annotations

from dataclasses import dataclass, field
from datetime import datetime
from typing import Optional


@dataclass(frozen=True)
class AttendanceEvent:
    """Domain entity: one employee's attendance mark for one day."""

    employee_id: str
    timestamp: datetime
    present: bool
    note: Optional[str] = None
    lat: Optional[float] = None
    lng: Optional[float] = None
    event_id: Optional[int] = None


@dataclass(frozen=True)
class ReconciliationResult:
    total: int
    present: int
    absent: int

    def to_dict(self) -> dict:
        return {"total": self.total, "present": self.present, "absent": self.absent}


@dataclass(frozen=True)
class HistoryRecord:
    """Read-model: an event enriched with local date/time/status strings."""

    created_at: str
    present: bool
    note: Optional[str]
    lat: Optional[float]
    lng: Optional[float]
    date: str
    time: str
    status: str


@dataclass(frozen=True)
class EmployeeHistory:
    records: list[HistoryRecord] = field(default_factory=list)

    @property
    def total(self) -> int:
        return len(self.records)

    @property
    def present(self) -> int:
        return sum(1 for r in self.records if r.present)

    @property
    def absent(self) -> int:
        return self.total - self.present
