from __future__ import annotations

from flask import Flask, flash, redirect, render_template, request, url_for

from ..common.fetch import fetch_or_default
from ..container import Container
from ..core.exceptions import AuthorizationError, NotFoundError, ValidationError
from ..core.logging import get_logger
from ..users.access import admin_required, current_user, login_required
from .model import DepartmentForm
from .service import count_by_department

logger = get_logger(__name__)


def register(app: Flask, container: Container) -> None:
    def _employees_by_name():
        employees = fetch_or_default(container.employee_service.list_employees, [], what="employees")
        return sorted(employees, key=lambda e: e.name.lower())

    @app.route("/departments", endpoint="departments")
    @login_required
    def departments():
        departments = fetch_or_default(container.department_service.list_departments, [], what="departments")
        employee_counts = count_by_department(_employees_by_name())
        return render_template(
            "departments/list.html",
            departments=departments,
            employee_counts=employee_counts,
        )

    @app.route("/departments/new", methods=["GET", "POST"], endpoint="department_create")
    @admin_required
    def department_create():
        form = DepartmentForm()
        if request.method == "POST":
            form = DepartmentForm.from_mapping(request.form)
            try:
                container.department_service.create_department(actor=current_user(), form=form)
                flash("Department created.", "success")
                return redirect(url_for("departments"))
            except (ValidationError, AuthorizationError) as e:
                flash(str(e), "danger")
            except Exception:
                logger.exception("Error saving department")
                flash("Error saving department. Please try again.", "danger")

        return render_template(
            "departments/form.html",
            form=form,
            department=None,
            employees=_employees_by_name(),
        )

    @app.route("/departments/<int:dept_id>/edit", methods=["GET", "POST"], endpoint="department_edit")
    @admin_required
    def department_edit(dept_id: int):
        try:
            department = container.department_service.get_department(dept_id)
        except NotFoundError as e:
            flash(str(e), "warning")
            return redirect(url_for("departments"))

        form = DepartmentForm.from_department(department)
        if request.method == "POST":
            form = DepartmentForm.from_mapping(request.form)
            try:
                container.department_service.update_department(actor=current_user(), dept_id=dept_id, form=form)
                flash("Department updated.", "success")
                return redirect(url_for("departments"))
            except (ValidationError, AuthorizationError, NotFoundError) as e:
                flash(str(e), "danger")
            except Exception:
                logger.exception("Error saving department %s", dept_id)
                flash("Error saving department. Please try again.", "danger")

        return render_template(
            "departments/form.html",
            form=form,
            department=department,
            employees=_employees_by_name(),
        )

    @app.route("/departments/<int:dept_id>/delete", methods=["POST"], endpoint="department_delete")
    @admin_required
    def department_delete(dept_id: int):
        try:
            container.department_service.delete_department(actor=current_user(), dept_id=dept_id)
            flash("Department deleted.", "success")
        except (ValidationError, AuthorizationError, NotFoundError) as e:
            flash(str(e), "danger")
        except Exception:
            logger.exception("Error deleting department %s", dept_id)
            flash("Error deleting department", "danger")

        return redirect(url_for("departments"))
