import pytest

from src.employee_dashboard.employee_dashboard.core.enums import Role
from src.employee_dashboard.employee_dashboard.users.access import (
    AdminView,
    EmployeeView,
    dispatch,
    role_view,
)
from src.employee_dashboard.employee_dashboard.users.model import SessionUser


def _user(role):
    return SessionUser(user_id=1, email="someone@company.com", role=role)


def test_role_view_picks_variant():
    assert isinstance(role_view(_user(Role.ADMIN)), AdminView)
    assert isinstance(role_view(_user(Role.EMPLOYEE)), EmployeeView)


def test_dispatch_calls_matching_branch_only():
    calls = []

    result = dispatch(
        role_view(_user(Role.EMPLOYEE)),
        admin=lambda v: calls.append("admin") or "admin page",
        employee=lambda v: calls.append("employee") or v.portal_label,
    )

    assert result == "Employee Portal"
    assert calls == ["employee"]


def test_dispatch_rejects_unknown_view():
    with pytest.raises(TypeError):
        dispatch(object(), admin=lambda v: None, employee=lambda v: None)


def test_navigation_links_per_role():
    admin_paths = [link.path for link in role_view(_user(Role.ADMIN)).links]
    employee_paths = [link.path for link in role_view(_user(Role.EMPLOYEE)).links]

    assert admin_paths == ["/", "/employees", "/departments", "/attendance", "/reports", "/notifications"]
    assert employee_paths == ["/", "/profile", "/my-attendance", "/notifications"]
    assert role_view(_user(Role.ADMIN)).portal_label == "Admin Panel"
