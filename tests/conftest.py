from __future__ import annotations

from dataclasses import replace
from datetime import date, datetime
from decimal import Decimal
from typing import Optional

import pytest
from werkzeug.security import generate_password_hash

from src.employee_dashboard.employee_dashboard.attendance.model import AttendanceRecord
from src.employee_dashboard.employee_dashboard.audit.model import AuditEntry
from src.employee_dashboard.employee_dashboard.container import wire_container
from src.employee_dashboard.employee_dashboard.core.enums import AttendanceStatus, AuditAction, Role
from src.employee_dashboard.employee_dashboard.departments.model import Department
from src.employee_dashboard.employee_dashboard.employees.model import Employee
from src.employee_dashboard.employee_dashboard.users.model import SessionUser, User


class InMemoryUsers:
    def __init__(self):
        self.users: dict[int, User] = {}
        self._next_id = 1

    def add(self, email: str, password: str, role: Role) -> User:
        user_id = self.create_user(email=email, password_hash=generate_password_hash(password), role=role)
        return self.users[user_id]

    def get_by_id(self, user_id: int) -> Optional[User]:
        return self.users.get(user_id)

    def get_by_email(self, email: str) -> Optional[User]:
        return next((u for u in self.users.values() if u.email == email), None)

    def create_user(self, *, email: str, password_hash: str, role: Role) -> int:
        user_id = self._next_id
        self._next_id += 1
        self.users[user_id] = User(user_id=user_id, email=email, password_hash=password_hash, role=role)
        return user_id

    def delete_by_id(self, user_id: int) -> bool:
        return self.users.pop(user_id, None) is not None


class InMemoryDepartments:
    def __init__(self):
        self.departments: dict[int, Department] = {}
        self._next_id = 1
        self.employees: Optional["InMemoryEmployees"] = None

    def _join(self, d: Department) -> Department:
        manager = self.employees.employees.get(d.manager_id) if self.employees and d.manager_id else None
        return replace(
            d,
            manager_name=manager.name if manager else None,
            manager_email=manager.email if manager else None,
        )

    def list_all(self):
        return sorted((self._join(d) for d in self.departments.values()), key=lambda d: d.dept_name)

    def get_by_id(self, dept_id: int) -> Optional[Department]:
        d = self.departments.get(dept_id)
        return self._join(d) if d else None

    def create(self, *, dept_name: str, manager_id: Optional[int]) -> int:
        dept_id = self._next_id
        self._next_id += 1
        self.departments[dept_id] = Department(
            dept_id=dept_id,
            dept_name=dept_name,
            manager_id=manager_id,
            created_at=datetime(2024, 1, 1, 9, 0),
        )
        return dept_id

    def update(self, *, dept_id: int, dept_name: str, manager_id: Optional[int]) -> bool:
        if dept_id not in self.departments:
            return False
        self.departments[dept_id] = replace(self.departments[dept_id], dept_name=dept_name, manager_id=manager_id)
        return True

    def delete_by_id(self, dept_id: int) -> bool:
        return self.departments.pop(dept_id, None) is not None

    def count_all(self) -> int:
        return len(self.departments)


class InMemoryEmployees:
    def __init__(self, users: InMemoryUsers, departments: InMemoryDepartments):
        self.employees: dict[int, Employee] = {}
        self._next_id = 1
        self._users = users
        self._departments = departments
        self.fail_on_create = False

    def _join(self, e: Employee) -> Employee:
        dept = self._departments.departments.get(e.dept_id) if e.dept_id else None
        user = self._users.users.get(e.user_id) if e.user_id else None
        return replace(
            e,
            dept_name=dept.dept_name if dept else None,
            user_email=user.email if user else None,
            user_role=user.role if user else None,
        )

    def add(self, name: str, email: str, **fields) -> Employee:
        values = dict(
            user_id=None,
            phone=None,
            dept_id=None,
            job_title=None,
            salary=None,
            date_of_joining=date(2024, 1, 15),
        )
        values.update(fields)
        employee_id = self.create(name=name, email=email, **values)
        return self.get_by_id(employee_id)

    def list_all(self):
        rows = [self._join(e) for e in self.employees.values()]
        return sorted(rows, key=lambda e: e.employee_id, reverse=True)

    def get_by_id(self, employee_id: int) -> Optional[Employee]:
        e = self.employees.get(employee_id)
        return self._join(e) if e else None

    def get_by_user_id(self, user_id: int) -> Optional[Employee]:
        e = next((e for e in self.employees.values() if e.user_id == user_id), None)
        return self._join(e) if e else None

    def create(self, *, user_id, name, email, phone, dept_id, job_title, salary, date_of_joining) -> int:
        if self.fail_on_create:
            raise RuntimeError("insert failed")
        employee_id = self._next_id
        self._next_id += 1
        self.employees[employee_id] = Employee(
            employee_id=employee_id,
            user_id=user_id,
            name=name,
            email=email,
            phone=phone,
            dept_id=dept_id,
            job_title=job_title,
            salary=Decimal(salary) if salary is not None else None,
            date_of_joining=date_of_joining,
            created_at=datetime(2024, 1, 1, 9, 0),
        )
        return employee_id

    def update(self, *, employee_id, name, email, phone, dept_id, job_title, salary, date_of_joining) -> bool:
        if employee_id not in self.employees:
            return False
        self.employees[employee_id] = replace(
            self.employees[employee_id],
            name=name,
            email=email,
            phone=phone,
            dept_id=dept_id,
            job_title=job_title,
            salary=salary,
            date_of_joining=date_of_joining,
        )
        return True

    def delete_by_id(self, employee_id: int) -> bool:
        return self.employees.pop(employee_id, None) is not None

    def count_all(self) -> int:
        return len(self.employees)

    def list_joined_since(self, since: date):
        return [e for e in self.list_all() if e.date_of_joining >= since]


class InMemoryAttendance:
    def __init__(self):
        self.records: list[AttendanceRecord] = []

    def add(self, employee_id: int, work_date: date, status: AttendanceStatus) -> None:
        self.records.append(
            AttendanceRecord(
                attendance_id=len(self.records) + 1,
                employee_id=employee_id,
                work_date=work_date,
                status=status,
            )
        )

    def list_for_employee(self, employee_id: int):
        return [r for r in self.records if r.employee_id == employee_id]

    def count_for_date(self, work_date: date, status: AttendanceStatus) -> int:
        return sum(1 for r in self.records if r.work_date == work_date and r.status == status)


class InMemoryAuditLogs:
    def __init__(self):
        self.entries: list[AuditEntry] = []
        self.fail = False

    def append(self, *, admin_id: int, action: AuditAction, target_type: str, target_id, details) -> int:
        if self.fail:
            raise RuntimeError("audit insert failed")
        entry = AuditEntry(
            log_id=len(self.entries) + 1,
            admin_id=admin_id,
            action=action,
            target_type=target_type,
            target_id=target_id,
            details=details,
        )
        self.entries.append(entry)
        return entry.log_id


@pytest.fixture
def users_repo():
    return InMemoryUsers()


@pytest.fixture
def departments_repo():
    return InMemoryDepartments()


@pytest.fixture
def employees_repo(users_repo, departments_repo):
    repo = InMemoryEmployees(users_repo, departments_repo)
    departments_repo.employees = repo
    return repo


@pytest.fixture
def attendance_repo():
    return InMemoryAttendance()


@pytest.fixture
def audit_repo():
    return InMemoryAuditLogs()


@pytest.fixture
def container(users_repo, employees_repo, departments_repo, attendance_repo, audit_repo):
    return wire_container(
        users_repo=users_repo,
        employees_repo=employees_repo,
        departments_repo=departments_repo,
        attendance_repo=attendance_repo,
        audit_repo=audit_repo,
        default_password="password123",
    )


@pytest.fixture
def admin_user(users_repo) -> SessionUser:
    user = users_repo.add("admin@company.com", "admin123", Role.ADMIN)
    return SessionUser(user_id=user.user_id, email=user.email, role=user.role)


@pytest.fixture
def employee_user(users_repo) -> SessionUser:
    user = users_repo.add("employee@company.com", "employee123", Role.EMPLOYEE)
    return SessionUser(user_id=user.user_id, email=user.email, role=user.role)


@pytest.fixture
def app(container, monkeypatch):
    monkeypatch.setenv("APP_ENV", "testing")
    from src.employee_dashboard.employee_dashboard.main import create_app

    return create_app(container)


@pytest.fixture
def client(app):
    return app.test_client()


@pytest.fixture
def login(client):
    def _login(email: str, password: str):
        return client.post("/login", data={"email": email, "password": password})

    return _login
