from __future__ import annotations

from enum import Enum


class Role(str, Enum):
    """Account role stored on each user row."""

    ADMIN = "admin"
    EMPLOYEE = "employee"


class AttendanceStatus(str, Enum):
    """Display status derived from the `present` flag."""

    PRESENT = "Present"
    ABSENT = "Absent"

    @classmethod
    def from_flag(cls, present: bool) -> "AttendanceStatus":
        return cls.PRESENT if present else cls.ABSENT
