from __future__ import annotations

from enum import Enum


class Role(str, Enum):
    """Access level; the only authorization discriminator."""

    ADMIN = "admin"
    EMPLOYEE = "employee"


class AttendanceStatus(str, Enum):
    PRESENT = "present"
    ABSENT = "absent"
    LATE = "late"


class AuditAction(str, Enum):
    """Action tags written to the audit log."""

    CREATE_EMPLOYEE = "CREATE_EMPLOYEE"
    UPDATE_EMPLOYEE = "UPDATE_EMPLOYEE"
    DELETE_EMPLOYEE = "DELETE_EMPLOYEE"
    CREATE_DEPARTMENT = "CREATE_DEPARTMENT"
    UPDATE_DEPARTMENT = "UPDATE_DEPARTMENT"
    DELETE_DEPARTMENT = "DELETE_DEPARTMENT"
