"""Employee Dashboard package.

Feature modules (users, employees, departments, attendance, audit, dashboard)
each carry a dataclass model, a repository Protocol with its MySQL
implementation, a service holding the business rules and a thin Flask
controller.
"""
