from __future__ import annotations

import csv
import io
from typing import Iterable

from ..common.formatting import plain_number
from ..core.constants import EXPORT_COLUMNS
from .model import Employee


def employee_csv_row(employee: Employee) -> list[str]:
    return [
        employee.name,
        employee.email,
        employee.dept_name or "",
        employee.job_title or "",
        plain_number(employee.salary),
        employee.date_of_joining.isoformat(),
    ]


def employees_to_csv(employees: Iterable[Employee]) -> str:
    """Header line plus one line per employee, in the fixed export column order."""
    out = io.StringIO()
    writer = csv.writer(out, lineterminator="\n")
    writer.writerow(EXPORT_COLUMNS)
    for employee in employees:
        writer.writerow(employee_csv_row(employee))
    return out.getvalue()
