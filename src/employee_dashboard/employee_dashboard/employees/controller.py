from __future__ import annotations

from flask import Flask, flash, redirect, render_template, request, url_for

from ..common.datetime_utils import today_local
from ..common.fetch import fetch_or_default
from ..container import Container
from ..core.constants import EXPORT_FILENAME
from ..core.exceptions import AuthorizationError, NotFoundError, ValidationError
from ..core.logging import get_logger
from ..users.access import (
    AdminView,
    EmployeeView,
    admin_required,
    current_user,
    current_view,
    dispatch,
    login_required,
)
from .export import employees_to_csv
from .filters import EmployeeFilter
from .model import EmployeeForm

logger = get_logger(__name__)


def register(app: Flask, container: Container) -> None:
    def _current_filter() -> EmployeeFilter:
        return EmployeeFilter(
            search=request.args.get("search", ""),
            department_id=request.args.get("department", "").strip(),
        )

    def _filtered_employees(employee_filter: EmployeeFilter):
        employees = fetch_or_default(container.employee_service.list_employees, [], what="employees")
        return employee_filter.apply(employees)

    def _departments():
        return fetch_or_default(container.department_service.list_departments, [], what="departments")

    def _admin_list(view: AdminView):
        employee_filter = _current_filter()
        return render_template(
            "employees/list.html",
            employees=_filtered_employees(employee_filter),
            departments=_departments(),
            employee_filter=employee_filter,
        )

    def _own_profile(view: EmployeeView):
        employee = fetch_or_default(
            lambda: container.employee_service.get_for_user(view.user.user_id),
            None,
            what="employee profile",
        )
        return render_template("employees/profile.html", employee=employee)

    @app.route("/employees", endpoint="employees")
    @login_required
    def employees():
        return dispatch(current_view(), admin=_admin_list, employee=_own_profile)

    app.add_url_rule("/profile", endpoint="profile", view_func=employees)

    @app.route("/employees/export.csv", endpoint="employees_export")
    @admin_required
    def employees_export():
        rows = _filtered_employees(_current_filter())
        csv_bytes = employees_to_csv(rows).encode("utf-8-sig")
        return app.response_class(
            csv_bytes,
            mimetype="text/csv",
            headers={"Content-Disposition": f"attachment; filename={EXPORT_FILENAME}"},
        )

    @app.route("/employees/<int:employee_id>", endpoint="employee_detail")
    @admin_required
    def employee_detail(employee_id: int):
        try:
            employee = container.employee_service.get_employee(employee_id)
        except NotFoundError as e:
            flash(str(e), "warning")
            return redirect(url_for("employees"))
        return render_template("employees/detail.html", employee=employee)

    @app.route("/employees/new", methods=["GET", "POST"], endpoint="employee_create")
    @admin_required
    def employee_create():
        form = EmployeeForm.blank(today_local())
        if request.method == "POST":
            form = EmployeeForm.from_mapping(request.form)
            try:
                container.employee_service.create_employee(actor=current_user(), form=form)
                flash("Employee created.", "success")
                return redirect(url_for("employees"))
            except (ValidationError, AuthorizationError) as e:
                flash(str(e), "danger")
            except Exception:
                logger.exception("Error saving employee")
                flash("Error saving employee. Please try again.", "danger")

        return render_template("employees/form.html", form=form, employee=None, departments=_departments())

    @app.route("/employees/<int:employee_id>/edit", methods=["GET", "POST"], endpoint="employee_edit")
    @admin_required
    def employee_edit(employee_id: int):
        try:
            employee = container.employee_service.get_employee(employee_id)
        except NotFoundError as e:
            flash(str(e), "warning")
            return redirect(url_for("employees"))

        form = EmployeeForm.from_employee(employee)
        if request.method == "POST":
            form = EmployeeForm.from_mapping(request.form)
            try:
                container.employee_service.update_employee(
                    actor=current_user(),
                    employee_id=employee_id,
                    form=form,
                )
                flash("Employee updated.", "success")
                return redirect(url_for("employees"))
            except (ValidationError, AuthorizationError, NotFoundError) as e:
                flash(str(e), "danger")
            except Exception:
                logger.exception("Error saving employee %s", employee_id)
                flash("Error saving employee. Please try again.", "danger")

        return render_template("employees/form.html", form=form, employee=employee, departments=_departments())

    @app.route("/employees/<int:employee_id>/delete", methods=["POST"], endpoint="employee_delete")
    @admin_required
    def employee_delete(employee_id: int):
        try:
            container.employee_service.delete_employee(actor=current_user(), employee_id=employee_id)
            flash("Employee deleted.", "success")
        except (ValidationError, AuthorizationError, NotFoundError) as e:
            flash(str(e), "danger")
        except Exception:
            logger.exception("Error deleting employee %s", employee_id)
            flash("Error deleting employee", "danger")

        return redirect(url_for("employees"))
