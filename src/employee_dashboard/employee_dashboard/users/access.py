"""Role-based view switching and route guards.

The signed-in role is turned into one of two view variants. Pages branch on
the variant through ``dispatch`` instead of comparing role strings, so the
admin/employee split lives in one place.
"""
from __future__ import annotations

from dataclasses import dataclass
from functools import wraps
from typing import Callable, Optional, TypeVar, Union

from flask import redirect, render_template, session, url_for

from ..core.enums import Role
from .model import SessionUser

T = TypeVar("T")


@dataclass(frozen=True)
class NavLink:
    endpoint: str
    path: str
    label: str


ADMIN_LINKS = (
    NavLink("dashboard", "/", "Dashboard"),
    NavLink("employees", "/employees", "Employees"),
    NavLink("departments", "/departments", "Departments"),
    NavLink("attendance", "/attendance", "Attendance"),
    NavLink("reports", "/reports", "Reports"),
    NavLink("notifications", "/notifications", "Notifications"),
)

EMPLOYEE_LINKS = (
    NavLink("dashboard", "/", "Dashboard"),
    NavLink("profile", "/profile", "My Profile"),
    NavLink("my_attendance", "/my-attendance", "My Attendance"),
    NavLink("notifications", "/notifications", "Notifications"),
)


@dataclass(frozen=True)
class AdminView:
    user: SessionUser
    portal_label: str = "Admin Panel"
    links: tuple[NavLink, ...] = ADMIN_LINKS


@dataclass(frozen=True)
class EmployeeView:
    user: SessionUser
    portal_label: str = "Employee Portal"
    links: tuple[NavLink, ...] = EMPLOYEE_LINKS


RoleView = Union[AdminView, EmployeeView]


def role_view(user: SessionUser) -> RoleView:
    if user.role == Role.ADMIN:
        return AdminView(user)
    if user.role == Role.EMPLOYEE:
        return EmployeeView(user)
    raise ValueError(f"Unknown role: {user.role!r}")


def dispatch(
    view: RoleView,
    *,
    admin: Callable[[AdminView], T],
    employee: Callable[[EmployeeView], T],
) -> T:
    if isinstance(view, AdminView):
        return admin(view)
    if isinstance(view, EmployeeView):
        return employee(view)
    raise TypeError(f"Unsupported view: {type(view)!r}")


def start_session(user: SessionUser, *, remember: bool = False) -> None:
    session.clear()
    session.permanent = remember
    session["user_id"] = user.user_id
    session["email"] = user.email
    session["role"] = user.role.value


def current_user() -> Optional[SessionUser]:
    if "user_id" not in session:
        return None
    try:
        role = Role(session.get("role"))
    except ValueError:
        session.clear()
        return None
    return SessionUser(user_id=int(session["user_id"]), email=session.get("email", ""), role=role)


def current_view() -> Optional[RoleView]:
    user = current_user()
    return role_view(user) if user else None


def login_required(view):
    @wraps(view)
    def wrapper(*args, **kwargs):
        if current_user() is None:
            return redirect(url_for("login"))
        return view(*args, **kwargs)

    return wrapper


def admin_required(view):
    @wraps(view)
    def wrapper(*args, **kwargs):
        user = current_user()
        if user is None:
            return redirect(url_for("login"))

        if not user.is_admin:
            return render_template("403.html", current_view=role_view(user)), 403

        return view(*args, **kwargs)

    return wrapper
