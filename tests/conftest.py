from __future__ import annotations

from dataclasses import dataclass, field, replace
from datetime import datetime, timezone
from typing import Optional

import pytest

from attendance_dashboard.attendance.model import AttendanceEvent
from attendance_dashboard.core.enums import Role
from attendance_dashboard.core.exceptions import StoreError
from attendance_dashboard.employees.model import Employee


def make_employee(user_id: str, *, created_at: Optional[datetime] = None, role: Role = Role.EMPLOYEE, **kw) -> Employee:
    return Employee(
        user_id=user_id,
        username=kw.pop("username", user_id.lower()),
        role=role,
        created_at=created_at or datetime(2025, 1, 1, tzinfo=timezone.utc),
        **kw,
    )


@dataclass
class InMemoryEmployees:
    users: list[Employee] = field(default_factory=list)
    fail_list: bool = False
    list_calls: int = 0

    def list_employees(self):
        self.list_calls += 1
        if self.fail_list:
            raise StoreError("roster unavailable")
        return [u for u in self.users if u.role == Role.EMPLOYEE]

    def list_registered_since(self, start: datetime):
        return [u for u in self.list_employees() if u.created_at >= start]

    def get_by_id(self, user_id: str) -> Optional[Employee]:
        return next((u for u in self.users if u.user_id == user_id), None)

    def get_by_username(self, username: str) -> Optional[Employee]:
        return next((u for u in self.users if u.username == username), None)

    def create_employee(self, *, user_id, username, password_hash, role, email=None, phone=None, address=None, cnic_no=None):
        emp = Employee(
            user_id=user_id,
            username=username,
            role=role,
            created_at=datetime.now(timezone.utc),
            email=email,
            phone=phone,
            address=address,
            cnic_no=cnic_no,
            password_hash=password_hash,
        )
        self.users.append(emp)
        return emp

    def delete_by_id(self, user_id: str) -> bool:
        before = len(self.users)
        self.users = [u for u in self.users if u.user_id != user_id]
        return len(self.users) < before


class InMemoryAttendance:
    """Attendance log fake with switchable failures and call recording."""

    def __init__(self, events: Optional[list[AttendanceEvent]] = None):
        self._next_id = 0
        self.events: list[AttendanceEvent] = []
        self.calls: list[str] = []
        self.fail_query = False
        self.fail_delete = False
        self.fail_insert = False
        for e in events or []:
            self._append(e)

    def _append(self, e: AttendanceEvent) -> None:
        self._next_id += 1
        self.events.append(replace(e, event_id=self._next_id))

    def query_events(self, *, employee_id=None, start=None, end=None, newest_first=False):
        self.calls.append("query")
        if self.fail_query:
            raise StoreError("query failed")
        out = [
            e
            for e in self.events
            if (employee_id is None or e.employee_id == employee_id)
            and (start is None or e.timestamp >= start)
            and (end is None or e.timestamp < end)
        ]
        out.sort(key=lambda e: (e.timestamp, e.event_id), reverse=newest_first)
        return out

    def delete_events(self, *, start, end) -> int:
        self.calls.append("delete")
        if self.fail_delete:
            raise StoreError("delete failed")
        keep = [e for e in self.events if not (start <= e.timestamp < end)]
        removed = len(self.events) - len(keep)
        self.events = keep
        return removed

    def insert_events(self, events) -> int:
        self.calls.append("insert")
        if self.fail_insert:
            raise StoreError("insert failed")
        for e in events:
            self._append(e)
        return len(events)


@pytest.fixture
def roster_abc() -> InMemoryEmployees:
    return InMemoryEmployees(
        users=[
            make_employee("A", created_at=datetime(2025, 1, 1, tzinfo=timezone.utc)),
            make_employee("B", created_at=datetime(2025, 1, 2, tzinfo=timezone.utc)),
            make_employee("C", created_at=datetime(2025, 1, 3, tzinfo=timezone.utc)),
            make_employee("ADMIN", role=Role.ADMIN),
        ]
    )


@pytest.fixture
def attendance_log() -> InMemoryAttendance:
    return InMemoryAttendance()


@pytest.fixture
def employee_factory():
    return make_employee


@pytest.fixture
def make_log():
    return InMemoryAttendance


@pytest.fixture
def make_roster():
    return InMemoryEmployees
