"""Example: use the service layer directly (no Flask).

Controllers are thin; the business rules live in the services.
"""

import importlib

from config import get_settings_module

from src.employee_dashboard.employee_dashboard.container import build_container
from src.employee_dashboard.employee_dashboard.employees.export import employees_to_csv
from src.employee_dashboard.employee_dashboard.employees.filters import EmployeeFilter


def main():
    settings = importlib.import_module(get_settings_module())
    container = build_container(db_config=settings.DB_CONFIG)

    print(container.dashboard_service.admin_dashboard())

    engineers = EmployeeFilter(search="engineer").apply(container.employee_service.list_employees())
    print(employees_to_csv(engineers))


if __name__ == "__main__":
    main()
