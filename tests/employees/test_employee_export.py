import csv
import io
from datetime import date
from decimal import Decimal

from src.employee_dashboard.employee_dashboard.employees.export import employees_to_csv
from src.employee_dashboard.employee_dashboard.employees.model import Employee


def _employee(employee_id, name, salary, dept_name=None):
    return Employee(
        employee_id=employee_id,
        user_id=None,
        name=name,
        email=f"{name.split()[0].lower()}@company.com",
        phone=None,
        dept_id=None,
        job_title="Analyst",
        salary=salary,
        date_of_joining=date(2024, 3, 1),
        dept_name=dept_name,
    )


def test_export_has_header_plus_one_line_per_employee():
    rows = [
        _employee(1, "Ann Lee", Decimal("50000.00"), "Finance"),
        _employee(2, "Ben Ray", None),
        _employee(3, "Cy Doe", Decimal("1234.50"), "Ops"),
    ]

    text = employees_to_csv(rows)

    lines = text.splitlines()
    assert len(lines) == 4
    assert lines[0] == "Name,Email,Department,Job Title,Salary,Date of Joining"
    assert lines[1] == "Ann Lee,ann@company.com,Finance,Analyst,50000,2024-03-01"
    assert lines[2] == "Ben Ray,ben@company.com,,Analyst,,2024-03-01"
    assert lines[3] == "Cy Doe,cy@company.com,Ops,Analyst,1234.5,2024-03-01"


def test_export_of_empty_list_is_header_only():
    assert employees_to_csv([]).splitlines() == ["Name,Email,Department,Job Title,Salary,Date of Joining"]


def test_fields_with_commas_are_quoted():
    row = _employee(1, "Lee, Ann", None, "R&D, Labs")

    parsed = list(csv.reader(io.StringIO(employees_to_csv([row]))))

    assert parsed[1][0] == "Lee, Ann"
    assert parsed[1][2] == "R&D, Labs"
