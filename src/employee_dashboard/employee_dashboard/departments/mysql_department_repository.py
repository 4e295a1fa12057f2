from __future__ import annotations

from typing import Optional, Sequence

from ..database.connection import DatabaseConnection
from ..database.mysql_base import db_cursor, fetch_count, fetchall, fetchone
from .model import Department
from .repository import DepartmentRepository

_SELECT = """
    SELECT d.dept_id, d.dept_name, d.manager_id, d.created_at,
           m.name AS manager_name, m.email AS manager_email
    FROM departments d
    LEFT JOIN employees m ON m.employee_id = d.manager_id
"""


def _to_department(row: dict) -> Department:
    return Department(
        dept_id=int(row["dept_id"]),
        dept_name=row["dept_name"],
        manager_id=row.get("manager_id"),
        created_at=row.get("created_at"),
        manager_name=row.get("manager_name"),
        manager_email=row.get("manager_email"),
    )


class MySQLDepartmentRepository(DepartmentRepository):
    def __init__(self, conn_factory: DatabaseConnection):
        self._conn_factory = conn_factory

    def list_all(self) -> Sequence[Department]:
        with db_cursor(self._conn_factory) as (_, cur):
            cur.execute(_SELECT + " ORDER BY d.dept_name")
            return [_to_department(r) for r in fetchall(cur)]

    def get_by_id(self, dept_id: int) -> Optional[Department]:
        with db_cursor(self._conn_factory) as (_, cur):
            cur.execute(_SELECT + " WHERE d.dept_id=%s", (dept_id,))
            row = fetchone(cur)
            return _to_department(row) if row else None

    def create(self, *, dept_name: str, manager_id: Optional[int]) -> int:
        with db_cursor(self._conn_factory) as (_, cur):
            cur.execute(
                "INSERT INTO departments(dept_name, manager_id) VALUES(%s,%s)",
                (dept_name, manager_id),
            )
            return int(cur.lastrowid)

    def update(self, *, dept_id: int, dept_name: str, manager_id: Optional[int]) -> bool:
        with db_cursor(self._conn_factory) as (_, cur):
            cur.execute(
                "UPDATE departments SET dept_name=%s, manager_id=%s WHERE dept_id=%s",
                (dept_name, manager_id, dept_id),
            )
            # MySQL reports 0 changed rows when values are identical.
            if cur.rowcount > 0:
                return True
            cur.execute("SELECT 1 FROM departments WHERE dept_id=%s", (dept_id,))
            return fetchone(cur) is not None

    def delete_by_id(self, dept_id: int) -> bool:
        with db_cursor(self._conn_factory) as (_, cur):
            cur.execute("DELETE FROM departments WHERE dept_id=%s", (dept_id,))
            return cur.rowcount > 0

    def count_all(self) -> int:
        with db_cursor(self._conn_factory) as (_, cur):
            cur.execute("SELECT COUNT(*) AS total FROM departments")
            return fetch_count(cur)
