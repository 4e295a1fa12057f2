from datetime import date

import pytest

from src.employee_dashboard.employee_dashboard.employees.filters import EmployeeFilter
from src.employee_dashboard.employee_dashboard.employees.model import Employee


def _employee(employee_id, name, email, job_title=None, dept_id=None):
    return Employee(
        employee_id=employee_id,
        user_id=None,
        name=name,
        email=email,
        phone=None,
        dept_id=dept_id,
        job_title=job_title,
        salary=None,
        date_of_joining=date(2024, 1, 15),
    )


@pytest.fixture
def staff():
    return [
        _employee(1, "Alice Smith", "alice@company.com", "Software Engineer", dept_id=1),
        _employee(2, "Bob Jones", "bob@company.com", "Recruiter", dept_id=2),
        _employee(3, "Carol White", "carol@sales.io", None, dept_id=None),
        _employee(4, "Dan Engel", "dan@company.com", "Sales Engineer", dept_id=2),
    ]


def test_empty_filter_returns_everyone(staff):
    assert EmployeeFilter().apply(staff) == staff


def test_search_is_case_insensitive_across_name_email_and_title(staff):
    assert [e.employee_id for e in EmployeeFilter(search="ENGINEER").apply(staff)] == [1, 4]
    assert [e.employee_id for e in EmployeeFilter(search="sales").apply(staff)] == [3, 4]
    assert [e.employee_id for e in EmployeeFilter(search="bob").apply(staff)] == [2]


def test_missing_job_title_does_not_match_or_fail(staff):
    assert EmployeeFilter(search="recruit").apply(staff) == [staff[1]]


def test_department_filter_is_exact_id_match(staff):
    assert [e.employee_id for e in EmployeeFilter(department_id="2").apply(staff)] == [2, 4]
    assert EmployeeFilter(department_id="9").apply(staff) == []


def test_search_and_department_are_anded(staff):
    result = EmployeeFilter(search="engineer", department_id="2").apply(staff)
    assert [e.employee_id for e in result] == [4]


@pytest.mark.parametrize("term", ["", "a", "company", "xyz", "Smith"])
def test_filter_equals_reference_predicate(staff, term):
    expected = [
        e
        for e in staff
        if term.lower() in e.name.lower()
        or term.lower() in e.email.lower()
        or term.lower() in (e.job_title or "").lower()
    ]
    assert EmployeeFilter(search=term).apply(staff) == expected
