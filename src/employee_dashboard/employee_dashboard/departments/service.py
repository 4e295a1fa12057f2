from __future__ import annotations

from collections import Counter
from typing import Iterable, Sequence

from ..audit.service import AuditTrail, audited
from ..common.validators import optional_id, require_non_empty
from ..core.enums import AuditAction
from ..core.exceptions import AuthorizationError, NotFoundError
from ..users.model import SessionUser
from .model import Department, DepartmentForm
from .repository import DepartmentRepository


def _require_admin(actor: SessionUser) -> None:
    if not actor.is_admin:
        raise AuthorizationError("Only admins can change departments")


def count_by_department(employees: Iterable) -> dict[int, int]:
    """Employees per department id; employees without a department are skipped."""
    return dict(Counter(e.dept_id for e in employees if e.dept_id is not None))


class DepartmentService:
    """Use case: manage departments (admin)."""

    def __init__(self, departments: DepartmentRepository, audit: AuditTrail):
        self._departments = departments
        self._audit = audit

    def list_departments(self) -> Sequence[Department]:
        return self._departments.list_all()

    def get_department(self, dept_id: int) -> Department:
        department = self._departments.get_by_id(int(dept_id))
        if not department:
            raise NotFoundError("Department not found")
        return department

    @audited(
        AuditAction.CREATE_DEPARTMENT,
        "department",
        target_id=lambda new_id, kw: new_id,
        details=lambda new_id, kw: {"department_data": kw["form"].as_dict()},
    )
    def create_department(self, *, actor: SessionUser, form: DepartmentForm) -> int:
        _require_admin(actor)
        return self._departments.create(
            dept_name=require_non_empty(form.name, "Department name"),
            manager_id=optional_id(form.manager_id, "Manager"),
        )

    @audited(
        AuditAction.UPDATE_DEPARTMENT,
        "department",
        target_id=lambda _, kw: int(kw["dept_id"]),
        details=lambda _, kw: {"updated_fields": list(kw["form"].as_dict())},
    )
    def update_department(self, *, actor: SessionUser, dept_id: int, form: DepartmentForm) -> None:
        _require_admin(actor)
        ok = self._departments.update(
            dept_id=int(dept_id),
            dept_name=require_non_empty(form.name, "Department name"),
            manager_id=optional_id(form.manager_id, "Manager"),
        )
        if not ok:
            raise NotFoundError("Department not found")

    @audited(
        AuditAction.DELETE_DEPARTMENT,
        "department",
        target_id=lambda _, kw: int(kw["dept_id"]),
        details=lambda _, kw: {"department_id": int(kw["dept_id"])},
    )
    def delete_department(self, *, actor: SessionUser, dept_id: int) -> None:
        _require_admin(actor)
        if not self._departments.delete_by_id(int(dept_id)):
            raise NotFoundError("Department not found")
