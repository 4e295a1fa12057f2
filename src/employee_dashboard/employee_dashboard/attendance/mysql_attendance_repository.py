from __future__ import annotations

from datetime import date
from typing import Sequence

from ..core.enums import AttendanceStatus
from ..database.connection import DatabaseConnection
from ..database.mysql_base import db_cursor, fetch_count, fetchall, normalize_mysql_date
from .model import AttendanceRecord
from .repository import AttendanceRepository


class MySQLAttendanceRepository(AttendanceRepository):
    def __init__(self, conn_factory: DatabaseConnection):
        self._conn_factory = conn_factory

    def list_for_employee(self, employee_id: int) -> Sequence[AttendanceRecord]:
        with db_cursor(self._conn_factory) as (_, cur):
            cur.execute(
                """
                SELECT attendance_id, employee_id, work_date, status, created_at
                FROM attendance
                WHERE employee_id=%s
                ORDER BY work_date DESC
                """,
                (employee_id,),
            )
            return [
                AttendanceRecord(
                    attendance_id=int(r["attendance_id"]),
                    employee_id=int(r["employee_id"]),
                    work_date=normalize_mysql_date(r["work_date"]),
                    status=AttendanceStatus(r["status"]),
                    created_at=r.get("created_at"),
                )
                for r in fetchall(cur)
            ]

    def count_for_date(self, work_date: date, status: AttendanceStatus) -> int:
        with db_cursor(self._conn_factory) as (_, cur):
            cur.execute(
                "SELECT COUNT(*) AS total FROM attendance WHERE work_date=%s AND status=%s",
                (work_date, status.value),
            )
            return fetch_count(cur)
