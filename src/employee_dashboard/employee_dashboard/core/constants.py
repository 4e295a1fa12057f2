"""Constants and defaults.

Note: Keep constants here to avoid magic numbers spread across code.
"""

DEFAULT_SESSION_DAYS = 7
RECENT_HIRE_WINDOW_DAYS = 30
RECENT_HIRES_SHOWN = 5
DEFAULT_EMPLOYEE_PASSWORD = "password123"

EXPORT_FILENAME = "employees.csv"
EXPORT_COLUMNS = ("Name", "Email", "Department", "Job Title", "Salary", "Date of Joining")

THEME_COOKIE = "theme"
THEMES = ("light", "dark")
