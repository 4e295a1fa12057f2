from __future__ import annotations

from flask import Flask, render_template

from ..common.fetch import fetch_or_default
from ..container import Container
from ..users.access import AdminView, EmployeeView, current_view, dispatch, login_required
from .service import AdminDashboard, EmployeeDashboard

# Pages that share the dashboard until they get their own screens.
DASHBOARD_ALIASES = (
    ("/attendance", "attendance"),
    ("/my-attendance", "my_attendance"),
    ("/reports", "reports"),
    ("/notifications", "notifications"),
)


def register(app: Flask, container: Container) -> None:
    def _admin(view: AdminView):
        data = fetch_or_default(
            container.dashboard_service.admin_dashboard,
            AdminDashboard(),
            what="dashboard data",
        )
        return render_template("dashboard/admin.html", data=data)

    def _employee(view: EmployeeView):
        data = fetch_or_default(
            lambda: container.dashboard_service.employee_dashboard(user_id=view.user.user_id),
            EmployeeDashboard(),
            what="employee dashboard data",
        )
        return render_template("dashboard/employee.html", data=data)

    @app.route("/", endpoint="dashboard")
    @login_required
    def dashboard():
        return dispatch(current_view(), admin=_admin, employee=_employee)

    for path, endpoint in DASHBOARD_ALIASES:
        app.add_url_rule(path, endpoint=endpoint, view_func=dashboard)
