from __future__ import annotations

from datetime import datetime, timezone
from typing import Optional, Sequence

from ..core.enums import Role
from ..database.connection import DatabaseConnection
from ..database.mysql_base import db_cursor, fetchall, fetchone, from_db_datetime, to_db_datetime
from .model import Employee
from .repository import EmployeeRepository

_COLUMNS = "user_id, username, email, password_hash, role, phone, address, cnic_no, created_at"


def _row_to_employee(row: dict) -> Employee:
    return Employee(
        user_id=str(row["user_id"]),
        username=row["username"],
        role=Role(row["role"]),
        created_at=from_db_datetime(row["created_at"]),
        email=row.get("email"),
        phone=row.get("phone"),
        address=row.get("address"),
        cnic_no=row.get("cnic_no"),
        password_hash=row.get("password_hash") or "",
    )


class MySQLEmployeeRepository(EmployeeRepository):
    def __init__(self, conn_factory: DatabaseConnection):
        self._conn_factory = conn_factory

    def list_employees(self) -> Sequence[Employee]:
        with db_cursor(self._conn_factory) as (_, cur):
            cur.execute(
                f"""
                SELECT {_COLUMNS}
                FROM users
                WHERE role=%s
                ORDER BY created_at ASC, user_id ASC
                """,
                (Role.EMPLOYEE.value,),
            )
            return [_row_to_employee(r) for r in fetchall(cur)]

    def list_registered_since(self, start: datetime) -> Sequence[Employee]:
        with db_cursor(self._conn_factory) as (_, cur):
            cur.execute(
                f"""
                SELECT {_COLUMNS}
                FROM users
                WHERE role=%s AND created_at >= %s
                ORDER BY created_at ASC
                """,
                (Role.EMPLOYEE.value, to_db_datetime(start)),
            )
            return [_row_to_employee(r) for r in fetchall(cur)]

    def get_by_id(self, user_id: str) -> Optional[Employee]:
        with db_cursor(self._conn_factory) as (_, cur):
            cur.execute(f"SELECT {_COLUMNS} FROM users WHERE user_id=%s", (user_id,))
            row = fetchone(cur)
            return _row_to_employee(row) if row else None

    def get_by_username(self, username: str) -> Optional[Employee]:
        with db_cursor(self._conn_factory) as (_, cur):
            cur.execute(f"SELECT {_COLUMNS} FROM users WHERE username=%s", (username,))
            row = fetchone(cur)
            return _row_to_employee(row) if row else None

    def create_employee(
        self,
        *,
        user_id: str,
        username: str,
        password_hash: str,
        role: Role,
        email: Optional[str] = None,
        phone: Optional[str] = None,
        address: Optional[str] = None,
        cnic_no: Optional[str] = None,
    ) -> Employee:
        with db_cursor(self._conn_factory) as (_, cur):
            cur.execute(
                """
                INSERT INTO users(user_id, username, email, password_hash, role, phone, address, cnic_no, created_at)
                VALUES(%s,%s,%s,%s,%s,%s,%s,%s,%s)
                """,
                (
                    user_id,
                    username,
                    email,
                    password_hash,
                    role.value,
                    phone,
                    address,
                    cnic_no,
                    to_db_datetime(datetime.now(timezone.utc)),
                ),
            )
            cur.execute(f"SELECT {_COLUMNS} FROM users WHERE user_id=%s", (user_id,))
            return _row_to_employee(fetchone(cur))

    def delete_by_id(self, user_id: str) -> bool:
        # attendance rows go with the user via ON DELETE CASCADE
        with db_cursor(self._conn_factory) as (_, cur):
            cur.execute("DELETE FROM users WHERE user_id=%s", (user_id,))
            return cur.rowcount > 0
