from __future__ import annotations

from concurrent.futures import ThreadPoolExecutor
from dataclasses import dataclass, field
from datetime import date, timedelta
from typing import Optional, Union

from ..attendance.repository import AttendanceRepository
from ..attendance.service import attendance_rate, is_present_on
from ..common.datetime_utils import today_local
from ..common.formatting import NOT_AVAILABLE
from ..core.constants import RECENT_HIRE_WINDOW_DAYS, RECENT_HIRES_SHOWN
from ..core.enums import AttendanceStatus
from ..departments.repository import DepartmentRepository
from ..employees.model import Employee
from ..employees.repository import EmployeeRepository


@dataclass(frozen=True)
class StatCard:
    title: str
    value: Union[int, str]
    color: str = "blue"


@dataclass(frozen=True)
class AdminDashboard:
    total_employees: int = 0
    total_departments: int = 0
    present_today: int = 0
    recent_hires: int = 0
    recent_employees: list[Employee] = field(default_factory=list)

    def cards(self) -> list[StatCard]:
        return [
            StatCard("Total Employees", self.total_employees, "blue"),
            StatCard("Departments", self.total_departments, "green"),
            StatCard("Present Today", self.present_today, "purple"),
            StatCard(f"New Hires ({RECENT_HIRE_WINDOW_DAYS}d)", self.recent_hires, "orange"),
        ]


@dataclass(frozen=True)
class EmployeeDashboard:
    employee: Optional[Employee] = None
    present_today: bool = False
    attendance_rate: int = 0

    def cards(self) -> list[StatCard]:
        dept_name = self.employee.dept_name if self.employee else None
        return [
            StatCard("My Status", "Active", "green"),
            StatCard("Department", dept_name or NOT_AVAILABLE, "blue"),
            StatCard("Present Today", "Yes" if self.present_today else "No", "green" if self.present_today else "red"),
            StatCard("Attendance Rate", f"{self.attendance_rate}%", "purple"),
        ]


class DashboardService:
    """Aggregates shown on the landing page, computed from fetched rows."""

    def __init__(
        self,
        employees: EmployeeRepository,
        departments: DepartmentRepository,
        attendance: AttendanceRepository,
    ):
        self._employees = employees
        self._departments = departments
        self._attendance = attendance

    def admin_dashboard(self, *, today: date | None = None) -> AdminDashboard:
        today = today or today_local()
        since = today - timedelta(days=RECENT_HIRE_WINDOW_DAYS)

        # Four independent reads; each repository call opens its own connection.
        with ThreadPoolExecutor(max_workers=4, thread_name_prefix="dashboard") as pool:
            employees_f = pool.submit(self._employees.count_all)
            departments_f = pool.submit(self._departments.count_all)
            present_f = pool.submit(self._attendance.count_for_date, today, AttendanceStatus.PRESENT)
            recent_f = pool.submit(self._employees.list_joined_since, since)

            recent = list(recent_f.result())
            return AdminDashboard(
                total_employees=employees_f.result(),
                total_departments=departments_f.result(),
                present_today=present_f.result(),
                recent_hires=len(recent),
                recent_employees=recent[:RECENT_HIRES_SHOWN],
            )

    def employee_dashboard(self, *, user_id: int, today: date | None = None) -> EmployeeDashboard:
        today = today or today_local()

        employee = self._employees.get_by_user_id(int(user_id))
        if not employee:
            return EmployeeDashboard()

        records = self._attendance.list_for_employee(employee.employee_id)
        return EmployeeDashboard(
            employee=employee,
            present_today=is_present_on(records, today),
            attendance_rate=attendance_rate(records),
        )
