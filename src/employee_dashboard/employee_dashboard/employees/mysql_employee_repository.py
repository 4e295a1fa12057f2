from __future__ import annotations

from datetime import date
from decimal import Decimal
from typing import Optional, Sequence

from ..core.enums import Role
from ..database.connection import DatabaseConnection
from ..database.mysql_base import (
    db_cursor,
    fetch_count,
    fetchall,
    fetchone,
    normalize_mysql_date,
    normalize_mysql_decimal,
)
from .model import Employee
from .repository import EmployeeRepository

_SELECT = """
    SELECT e.employee_id, e.user_id, e.name, e.email, e.phone, e.dept_id,
           e.job_title, e.salary, e.date_of_joining, e.created_at,
           d.dept_name,
           u.email AS user_email, u.role AS user_role
    FROM employees e
    LEFT JOIN departments d ON d.dept_id = e.dept_id
    LEFT JOIN users u ON u.user_id = e.user_id
"""

_NEWEST_FIRST = " ORDER BY e.created_at DESC, e.employee_id DESC"


def _to_employee(row: dict) -> Employee:
    return Employee(
        employee_id=int(row["employee_id"]),
        user_id=row.get("user_id"),
        name=row["name"],
        email=row["email"],
        phone=row.get("phone"),
        dept_id=row.get("dept_id"),
        job_title=row.get("job_title"),
        salary=normalize_mysql_decimal(row.get("salary")),
        date_of_joining=normalize_mysql_date(row["date_of_joining"]),
        created_at=row.get("created_at"),
        dept_name=row.get("dept_name"),
        user_email=row.get("user_email"),
        user_role=Role(row["user_role"]) if row.get("user_role") else None,
    )


class MySQLEmployeeRepository(EmployeeRepository):
    def __init__(self, conn_factory: DatabaseConnection):
        self._conn_factory = conn_factory

    def list_all(self) -> Sequence[Employee]:
        with db_cursor(self._conn_factory) as (_, cur):
            cur.execute(_SELECT + _NEWEST_FIRST)
            return [_to_employee(r) for r in fetchall(cur)]

    def get_by_id(self, employee_id: int) -> Optional[Employee]:
        with db_cursor(self._conn_factory) as (_, cur):
            cur.execute(_SELECT + " WHERE e.employee_id=%s", (employee_id,))
            row = fetchone(cur)
            return _to_employee(row) if row else None

    def get_by_user_id(self, user_id: int) -> Optional[Employee]:
        with db_cursor(self._conn_factory) as (_, cur):
            cur.execute(_SELECT + " WHERE e.user_id=%s LIMIT 1", (user_id,))
            row = fetchone(cur)
            return _to_employee(row) if row else None

    def create(
        self,
        *,
        user_id: Optional[int],
        name: str,
        email: str,
        phone: Optional[str],
        dept_id: Optional[int],
        job_title: Optional[str],
        salary: Optional[Decimal],
        date_of_joining: date,
    ) -> int:
        with db_cursor(self._conn_factory) as (_, cur):
            cur.execute(
                """
                INSERT INTO employees(user_id, name, email, phone, dept_id, job_title, salary, date_of_joining)
                VALUES(%s,%s,%s,%s,%s,%s,%s,%s)
                """,
                (user_id, name, email, phone, dept_id, job_title, salary, date_of_joining),
            )
            return int(cur.lastrowid)

    def update(
        self,
        *,
        employee_id: int,
        name: str,
        email: str,
        phone: Optional[str],
        dept_id: Optional[int],
        job_title: Optional[str],
        salary: Optional[Decimal],
        date_of_joining: date,
    ) -> bool:
        with db_cursor(self._conn_factory) as (_, cur):
            cur.execute(
                """
                UPDATE employees
                SET name=%s, email=%s, phone=%s, dept_id=%s, job_title=%s, salary=%s, date_of_joining=%s
                WHERE employee_id=%s
                """,
                (name, email, phone, dept_id, job_title, salary, date_of_joining, employee_id),
            )
            # MySQL reports 0 changed rows when values are identical.
            if cur.rowcount > 0:
                return True
            cur.execute("SELECT 1 FROM employees WHERE employee_id=%s", (employee_id,))
            return fetchone(cur) is not None

    def delete_by_id(self, employee_id: int) -> bool:
        with db_cursor(self._conn_factory) as (_, cur):
            cur.execute("DELETE FROM employees WHERE employee_id=%s", (employee_id,))
            return cur.rowcount > 0

    def count_all(self) -> int:
        with db_cursor(self._conn_factory) as (_, cur):
            cur.execute("SELECT COUNT(*) AS total FROM employees")
            return fetch_count(cur)

    def list_joined_since(self, since: date) -> Sequence[Employee]:
        with db_cursor(self._conn_factory) as (_, cur):
            cur.execute(_SELECT + " WHERE e.date_of_joining >= %s" + _NEWEST_FIRST, (since,))
            return [_to_employee(r) for r in fetchall(cur)]
