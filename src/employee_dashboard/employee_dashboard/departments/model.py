from __future__ import annotations

from dataclasses import asdict, dataclass
from datetime import datetime
from typing import Mapping, Optional


@dataclass(frozen=True)
class Department:
    dept_id: int
    dept_name: str
    manager_id: Optional[int] = None
    created_at: Optional[datetime] = None
    # Joined from employees for display.
    manager_name: Optional[str] = None
    manager_email: Optional[str] = None


@dataclass(frozen=True)
class DepartmentForm:
    """Raw form input, seeded from an existing department or blank."""

    name: str = ""
    manager_id: str = ""

    @classmethod
    def from_department(cls, department: Department) -> "DepartmentForm":
        return cls(
            name=department.dept_name,
            manager_id=str(department.manager_id) if department.manager_id else "",
        )

    @classmethod
    def from_mapping(cls, data: Mapping[str, str]) -> "DepartmentForm":
        return cls(name=data.get("name", ""), manager_id=data.get("manager_id", ""))

    def as_dict(self) -> dict:
        return asdict(self)
