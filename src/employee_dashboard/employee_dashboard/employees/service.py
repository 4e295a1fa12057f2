from __future__ import annotations

from dataclasses import dataclass
from datetime import date
from decimal import Decimal
from typing import Optional, Sequence

from werkzeug.security import generate_password_hash

from ..audit.service import AuditTrail, audited
from ..common.datetime_utils import parse_iso_date
from ..common.validators import (
    optional_amount,
    optional_id,
    optional_text,
    require_email,
    require_non_empty,
)
from ..core.constants import DEFAULT_EMPLOYEE_PASSWORD
from ..core.enums import AuditAction, Role
from ..core.exceptions import AuthorizationError, NotFoundError, ValidationError
from ..core.logging import get_logger
from ..users.model import SessionUser
from ..users.repository import UserRepository
from .model import Employee, EmployeeForm
from .repository import EmployeeRepository

logger = get_logger(__name__)


@dataclass(frozen=True)
class EmployeeFields:
    """Validated column values for an employee row."""

    name: str
    email: str
    phone: Optional[str]
    dept_id: Optional[int]
    job_title: Optional[str]
    salary: Optional[Decimal]
    date_of_joining: date

    @classmethod
    def from_form(cls, form: EmployeeForm) -> "EmployeeFields":
        raw_date = require_non_empty(form.date_of_joining, "Date of joining")
        try:
            joined = parse_iso_date(raw_date)
        except ValueError:
            raise ValidationError("Date of joining must be YYYY-MM-DD")

        return cls(
            name=require_non_empty(form.name, "Full name"),
            email=require_email(form.email, "Email address"),
            phone=optional_text(form.phone, "Phone number"),
            dept_id=optional_id(form.department_id, "Department"),
            job_title=optional_text(form.job_title, "Job title"),
            salary=optional_amount(form.salary, "Salary"),
            date_of_joining=joined,
        )

    def as_columns(self) -> dict:
        return {
            "name": self.name,
            "email": self.email,
            "phone": self.phone,
            "dept_id": self.dept_id,
            "job_title": self.job_title,
            "salary": self.salary,
            "date_of_joining": self.date_of_joining,
        }


def _require_admin(actor: SessionUser) -> None:
    if not actor.is_admin:
        raise AuthorizationError("Only admins can change employee records")


class EmployeeService:
    """Use case: manage employee records and their logins (admin)."""

    def __init__(
        self,
        employees: EmployeeRepository,
        users: UserRepository,
        audit: AuditTrail,
        *,
        default_password: str = DEFAULT_EMPLOYEE_PASSWORD,
    ):
        self._employees = employees
        self._users = users
        self._audit = audit
        self._default_password = default_password

    def list_employees(self) -> Sequence[Employee]:
        return self._employees.list_all()

    def get_employee(self, employee_id: int) -> Employee:
        employee = self._employees.get_by_id(int(employee_id))
        if not employee:
            raise NotFoundError("Employee not found")
        return employee

    def get_for_user(self, user_id: int) -> Optional[Employee]:
        return self._employees.get_by_user_id(int(user_id))

    def _create_login(self, form: EmployeeForm) -> Optional[int]:
        login_email = (form.user_email or "").strip().lower()
        if not login_email:
            return None

        require_email(login_email, "Login email")
        try:
            role = Role(form.user_role or Role.EMPLOYEE.value)
        except ValueError:
            raise ValidationError("User role is not valid")

        if self._users.get_by_email(login_email):
            raise ValidationError("Login email already exists")

        return self._users.create_user(
            email=login_email,
            password_hash=generate_password_hash(self._default_password),
            role=role,
        )

    @audited(
        AuditAction.CREATE_EMPLOYEE,
        "employee",
        target_id=lambda new_id, kw: new_id,
        details=lambda new_id, kw: {"employee_data": kw["form"].as_dict()},
    )
    def create_employee(self, *, actor: SessionUser, form: EmployeeForm) -> int:
        """Create the login (when a login email is given), then the employee row.

        If the employee insert fails, the login created for it is deleted
        again before the error propagates.
        """
        _require_admin(actor)
        fields = EmployeeFields.from_form(form)

        user_id = self._create_login(form)
        try:
            return self._employees.create(user_id=user_id, **fields.as_columns())
        except Exception:
            if user_id is not None:
                self._discard_login(user_id)
            raise

    def _discard_login(self, user_id: int) -> None:
        try:
            self._users.delete_by_id(user_id)
            logger.warning("Employee insert failed; removed login %s created for it", user_id)
        except Exception:
            logger.exception("Employee insert failed and login %s could not be removed", user_id)

    @audited(
        AuditAction.UPDATE_EMPLOYEE,
        "employee",
        target_id=lambda _, kw: int(kw["employee_id"]),
        details=lambda _, kw: {"updated_fields": list(kw["form"].as_dict())},
    )
    def update_employee(self, *, actor: SessionUser, employee_id: int, form: EmployeeForm) -> None:
        _require_admin(actor)
        fields = EmployeeFields.from_form(form)
        if not self._employees.update(employee_id=int(employee_id), **fields.as_columns()):
            raise NotFoundError("Employee not found")

    @audited(
        AuditAction.DELETE_EMPLOYEE,
        "employee",
        target_id=lambda _, kw: int(kw["employee_id"]),
        details=lambda _, kw: {"employee_id": int(kw["employee_id"])},
    )
    def delete_employee(self, *, actor: SessionUser, employee_id: int) -> None:
        _require_admin(actor)
        if not self._employees.delete_by_id(int(employee_id)):
            raise NotFoundError("Employee not found")
