from __future__ import annotations

from dataclasses import dataclass

from .attendance.mysql_attendance_repository import MySQLAttendanceRepository
from .attendance.repository import AttendanceRepository
from .audit.mysql_audit_repository import MySQLAuditLogRepository
from .audit.repository import AuditLogRepository
from .audit.service import AuditTrail
from .core.constants import DEFAULT_EMPLOYEE_PASSWORD
from .dashboard.service import DashboardService
from .database.connection import DBConfig, DatabaseConnection
from .departments.mysql_department_repository import MySQLDepartmentRepository
from .departments.repository import DepartmentRepository
from .departments.service import DepartmentService
from .employees.mysql_employee_repository import MySQLEmployeeRepository
from .employees.repository import EmployeeRepository
from .employees.service import EmployeeService
from .users.mysql_user_repository import MySQLUserRepository
from .users.repository import UserRepository
from .users.service import AuthService


@dataclass(frozen=True)
class Container:
    users_repo: UserRepository
    employees_repo: EmployeeRepository
    departments_repo: DepartmentRepository
    attendance_repo: AttendanceRepository
    audit_repo: AuditLogRepository

    auth_service: AuthService
    employee_service: EmployeeService
    department_service: DepartmentService
    dashboard_service: DashboardService


def wire_container(
    *,
    users_repo: UserRepository,
    employees_repo: EmployeeRepository,
    departments_repo: DepartmentRepository,
    attendance_repo: AttendanceRepository,
    audit_repo: AuditLogRepository,
    default_password: str = DEFAULT_EMPLOYEE_PASSWORD,
) -> Container:
    """Build services on top of the given repositories (MySQL or in-memory)."""
    audit = AuditTrail(audit_repo)

    return Container(
        users_repo=users_repo,
        employees_repo=employees_repo,
        departments_repo=departments_repo,
        attendance_repo=attendance_repo,
        audit_repo=audit_repo,
        auth_service=AuthService(users_repo),
        employee_service=EmployeeService(
            employees_repo,
            users_repo,
            audit,
            default_password=default_password,
        ),
        department_service=DepartmentService(departments_repo, audit),
        dashboard_service=DashboardService(employees_repo, departments_repo, attendance_repo),
    )


def build_container(*, db_config: dict, default_password: str = DEFAULT_EMPLOYEE_PASSWORD) -> Container:
    conn = DatabaseConnection.get_instance(DBConfig.from_dict(db_config))

    return wire_container(
        users_repo=MySQLUserRepository(conn),
        employees_repo=MySQLEmployeeRepository(conn),
        departments_repo=MySQLDepartmentRepository(conn),
        attendance_repo=MySQLAttendanceRepository(conn),
        audit_repo=MySQLAuditLogRepository(conn),
        default_password=default_password,
    )
