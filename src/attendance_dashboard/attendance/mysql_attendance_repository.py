from __future__ import annotations

from datetime import datetime
from typing import Optional, Sequence

from ..database.connection import DatabaseConnection
from ..database.mysql_base import db_cursor, fetchall, from_db_datetime, to_db_datetime
from .model import AttendanceEvent
from .repository import AttendanceRepository


def _row_to_event(r: dict) -> AttendanceEvent:
    return AttendanceEvent(
        event_id=int(r["attendance_id"]),
        employee_id=str(r["user_id"]),
        timestamp=from_db_datetime(r["created_at"]),
        present=bool(r["present"]),
        note=r.get("note"),
        lat=r.get("lat"),
        lng=r.get("lng"),
    )


class MySQLAttendanceRepository(AttendanceRepository):
    def __init__(self, conn_factory: DatabaseConnection):
        self._conn_factory = conn_factory

    def query_events(
        self,
        *,
        employee_id: Optional[str] = None,
        start: Optional[datetime] = None,
        end: Optional[datetime] = None,
        newest_first: bool = False,
    ) -> Sequence[AttendanceEvent]:
        clauses: list[str] = []
        params: list[object] = []

        if employee_id is not None:
            clauses.append("user_id=%s")
            params.append(employee_id)
        if start is not None:
            clauses.append("created_at >= %s")
            params.append(to_db_datetime(start))
        if end is not None:
            clauses.append("created_at < %s")
            params.append(to_db_datetime(end))

        where = f"WHERE {' AND '.join(clauses)}" if clauses else ""
        order = "DESC" if newest_first else "ASC"

        with db_cursor(self._conn_factory) as (_, cur):
            cur.execute(
                f"""
                SELECT attendance_id, user_id, present, note, lat, lng, created_at
                FROM attendance
                {where}
                ORDER BY created_at {order}, attendance_id {order}
                """,
                tuple(params),
            )
            return [_row_to_event(r) for r in fetchall(cur)]

    def delete_events(self, *, start: datetime, end: datetime) -> int:
        with db_cursor(self._conn_factory) as (_, cur):
            cur.execute(
                "DELETE FROM attendance WHERE created_at >= %s AND created_at < %s",
                (to_db_datetime(start), to_db_datetime(end)),
            )
            return int(cur.rowcount or 0)

    def insert_events(self, events: Sequence[AttendanceEvent]) -> int:
        if not events:
            return 0
        with db_cursor(self._conn_factory) as (_, cur):
            cur.executemany(
                """
                INSERT INTO attendance(user_id, present, note, lat, lng, created_at)
                VALUES(%s,%s,%s,%s,%s,%s)
                """,
                [
                    (e.employee_id, int(e.present), e.note, e.lat, e.lng, to_db_datetime(e.timestamp))
                    for e in events
                ],
            )
            return len(events)
