from __future__ import annotations

from dataclasses import dataclass
from datetime import datetime, tzinfo
from typing import Callable, Optional

from .attendance.mysql_attendance_repository import MySQLAttendanceRepository
from .attendance.reconciler import DayReconciler
from .attendance.repository import AttendanceRepository
from .attendance.service import AttendanceService
from .common.datetime_utils import resolve_timezone
from .config.settings import Settings
from .core.constants import DEFAULT_MAX_PRESENCE_ENTRIES
from .database.connection import DBConfig, DatabaseConnection
from .employees.mysql_employee_repository import MySQLEmployeeRepository
from .employees.repository import EmployeeRepository
from .employees.service import AuthService, EmployeeService
from .reports.service import ReportService


@dataclass(frozen=True)
class Container:
    employees_repo: EmployeeRepository
    attendance_repo: AttendanceRepository

    auth_service: AuthService
    employee_service: EmployeeService
    attendance_service: AttendanceService
    report_service: ReportService

    conn: Optional[DatabaseConnection] = None


def wire_services(
    *,
    employees_repo: EmployeeRepository,
    attendance_repo: AttendanceRepository,
    tz: tzinfo,
    max_presence_entries: int = DEFAULT_MAX_PRESENCE_ENTRIES,
    clock: Optional[Callable[[], datetime]] = None,
    conn: Optional[DatabaseConnection] = None,
) -> Container:
    """Build services over any repository implementations (MySQL or in-memory)."""
    reconciler = DayReconciler(attendance_repo, employees_repo, tz=tz)

    return Container(
        conn=conn,
        employees_repo=employees_repo,
        attendance_repo=attendance_repo,
        auth_service=AuthService(employees_repo),
        employee_service=EmployeeService(employees_repo),
        attendance_service=AttendanceService(
            attendance_repo,
            reconciler,
            tz=tz,
            max_presence_entries=max_presence_entries,
            clock=clock,
        ),
        report_service=ReportService(attendance_repo, employees_repo, tz=tz, clock=clock),
    )


def build_container(settings: Settings) -> Container:
    conn = DatabaseConnection(DBConfig.from_dict(settings.db_config))

    return wire_services(
        employees_repo=MySQLEmployeeRepository(conn),
        attendance_repo=MySQLAttendanceRepository(conn),
        tz=resolve_timezone(settings.timezone),
        max_presence_entries=settings.max_presence_entries,
        conn=conn,
    )
