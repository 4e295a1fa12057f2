import pytest

from src.employee_dashboard.employee_dashboard.core.enums import AuditAction
from src.employee_dashboard.employee_dashboard.core.exceptions import (
    AuthorizationError,
    NotFoundError,
    ValidationError,
)
from src.employee_dashboard.employee_dashboard.departments.model import DepartmentForm
from src.employee_dashboard.employee_dashboard.departments.service import count_by_department


def test_delete_department_removes_row_and_logs_once(container, departments_repo, audit_repo, admin_user):
    keep = departments_repo.create(dept_name="Sales", manager_id=None)
    doomed = departments_repo.create(dept_name="Legacy", manager_id=None)

    container.department_service.delete_department(actor=admin_user, dept_id=doomed)

    assert set(departments_repo.departments) == {keep}
    assert len(audit_repo.entries) == 1
    entry = audit_repo.entries[0]
    assert entry.action == AuditAction.DELETE_DEPARTMENT
    assert entry.target_type == "department"
    assert entry.target_id == doomed
    assert entry.admin_id == admin_user.user_id


def test_delete_unknown_department_raises_and_logs_nothing(container, audit_repo, admin_user):
    with pytest.raises(NotFoundError):
        container.department_service.delete_department(actor=admin_user, dept_id=99)

    assert audit_repo.entries == []


def test_delete_is_not_blocked_by_dependent_employees(container, departments_repo, employees_repo, admin_user):
    dept_id = departments_repo.create(dept_name="Ops", manager_id=None)
    employees_repo.add("Op Erator", "op@company.com", dept_id=dept_id)

    container.department_service.delete_department(actor=admin_user, dept_id=dept_id)

    assert departments_repo.get_by_id(dept_id) is None


def test_create_and_update_department(container, departments_repo, employees_repo, audit_repo, admin_user):
    manager = employees_repo.add("Mia Manager", "mia@company.com")

    dept_id = container.department_service.create_department(
        actor=admin_user,
        form=DepartmentForm(name=" Research ", manager_id=str(manager.employee_id)),
    )
    container.department_service.update_department(
        actor=admin_user,
        dept_id=dept_id,
        form=DepartmentForm(name="R&D", manager_id=""),
    )

    department = departments_repo.get_by_id(dept_id)
    assert department.dept_name == "R&D"
    assert department.manager_id is None
    assert [e.action for e in audit_repo.entries] == [AuditAction.CREATE_DEPARTMENT, AuditAction.UPDATE_DEPARTMENT]
    assert audit_repo.entries[0].target_id == dept_id
    assert audit_repo.entries[0].details == {"department_data": {"name": " Research ", "manager_id": str(manager.employee_id)}}
    assert audit_repo.entries[1].details == {"updated_fields": ["name", "manager_id"]}


def test_department_list_joins_manager(container, departments_repo, employees_repo):
    manager = employees_repo.add("Mia Manager", "mia@company.com")
    departments_repo.create(dept_name="Sales", manager_id=manager.employee_id)
    departments_repo.create(dept_name="Accounting", manager_id=None)

    listed = container.department_service.list_departments()

    assert [d.dept_name for d in listed] == ["Accounting", "Sales"]
    assert listed[1].manager_name == "Mia Manager"


def test_blank_name_is_rejected(container, admin_user):
    with pytest.raises(ValidationError):
        container.department_service.create_department(actor=admin_user, form=DepartmentForm(name="   "))


def test_employee_role_cannot_delete(container, departments_repo, audit_repo, employee_user):
    dept_id = departments_repo.create(dept_name="Sales", manager_id=None)

    with pytest.raises(AuthorizationError):
        container.department_service.delete_department(actor=employee_user, dept_id=dept_id)

    assert departments_repo.get_by_id(dept_id) is not None
    assert audit_repo.entries == []


def test_count_by_department_skips_unassigned(employees_repo):
    employees_repo.add("A", "a@company.com", dept_id=1)
    employees_repo.add("B", "b@company.com", dept_id=1)
    employees_repo.add("C", "c@company.com", dept_id=2)
    employees_repo.add("D", "d@company.com")

    assert count_by_department(employees_repo.list_all()) == {1: 2, 2: 1}
