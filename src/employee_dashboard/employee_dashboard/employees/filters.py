from __future__ import annotations

from dataclasses import dataclass
from typing import Iterable

from .model import Employee


@dataclass(frozen=True)
class EmployeeFilter:
    """Search box + department select, ANDed together.

    ``search`` matches name, email or job title case-insensitively;
    an empty ``department_id`` matches every department.
    """

    search: str = ""
    department_id: str = ""

    def matches_search(self, employee: Employee) -> bool:
        term = self.search.lower()
        return (
            term in employee.name.lower()
            or term in employee.email.lower()
            or term in (employee.job_title or "").lower()
        )

    def matches_department(self, employee: Employee) -> bool:
        if self.department_id == "":
            return True
        return employee.dept_id is not None and str(employee.dept_id) == self.department_id

    def matches(self, employee: Employee) -> bool:
        return self.matches_search(employee) and self.matches_department(employee)

    def apply(self, employees: Iterable[Employee]) -> list[Employee]:
        return [e for e in employees if self.matches(e)]
