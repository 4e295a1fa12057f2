from __future__ import annotations

from dataclasses import asdict, dataclass
from datetime import date, datetime
from decimal import Decimal
from typing import Mapping, Optional

from ..common.formatting import plain_number
from ..core.enums import Role


@dataclass(frozen=True)
class Employee:
    """Employee row; ``user_id`` is None when the employee has no login."""

    employee_id: int
    user_id: Optional[int]
    name: str
    email: str
    phone: Optional[str]
    dept_id: Optional[int]
    job_title: Optional[str]
    salary: Optional[Decimal]
    date_of_joining: date
    created_at: Optional[datetime] = None
    # Joined read-model fields.
    dept_name: Optional[str] = None
    user_email: Optional[str] = None
    user_role: Optional[Role] = None


@dataclass(frozen=True)
class EmployeeForm:
    """Raw form input. Login fields are only used on create."""

    name: str = ""
    email: str = ""
    phone: str = ""
    department_id: str = ""
    job_title: str = ""
    salary: str = ""
    date_of_joining: str = ""
    user_email: str = ""
    user_role: str = Role.EMPLOYEE.value

    @classmethod
    def blank(cls, today: date) -> "EmployeeForm":
        return cls(date_of_joining=today.isoformat())

    @classmethod
    def from_employee(cls, employee: Employee) -> "EmployeeForm":
        return cls(
            name=employee.name,
            email=employee.email,
            phone=employee.phone or "",
            department_id=str(employee.dept_id) if employee.dept_id else "",
            job_title=employee.job_title or "",
            salary=plain_number(employee.salary),
            date_of_joining=employee.date_of_joining.isoformat(),
            user_email=employee.user_email or "",
            user_role=(employee.user_role or Role.EMPLOYEE).value,
        )

    @classmethod
    def from_mapping(cls, data: Mapping[str, str]) -> "EmployeeForm":
        fields = cls.__dataclass_fields__
        values = {name: data.get(name, "") for name in fields}
        values["user_role"] = values["user_role"] or Role.EMPLOYEE.value
        return cls(**values)

    def as_dict(self) -> dict:
        return asdict(self)
