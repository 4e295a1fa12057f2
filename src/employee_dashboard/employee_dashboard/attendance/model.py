from __future__ import annotations

from dataclasses import dataclass
from datetime import date, datetime
from typing import Optional

from ..core.enums import AttendanceStatus


@dataclass(frozen=True)
class AttendanceRecord:
    attendance_id: int
    employee_id: int
    work_date: date
    status: AttendanceStatus
    created_at: Optional[datetime] = None
