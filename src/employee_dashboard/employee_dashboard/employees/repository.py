from __future__ import annotations

from datetime import date
from decimal import Decimal
from typing import Optional, Protocol, Sequence

from .model import Employee


class EmployeeRepository(Protocol):
    def list_all(self) -> Sequence[Employee]:
        """All employees, newest first, with department and login joined."""
        raise NotImplementedError

    def get_by_id(self, employee_id: int) -> Optional[Employee]:
        raise NotImplementedError

    def get_by_user_id(self, user_id: int) -> Optional[Employee]:
        raise NotImplementedError

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
        raise NotImplementedError

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
        raise NotImplementedError

    def delete_by_id(self, employee_id: int) -> bool:
        raise NotImplementedError

    def count_all(self) -> int:
        raise NotImplementedError

    def list_joined_since(self, since: date) -> Sequence[Employee]:
        """Employees whose date_of_joining >= since, newest first."""
        raise NotImplementedError
