from __future__ import annotations

from datetime import date
from typing import Protocol, Sequence

from ..core.enums import AttendanceStatus
from .model import AttendanceRecord


class AttendanceRepository(Protocol):
    def list_for_employee(self, employee_id: int) -> Sequence[AttendanceRecord]:
        raise NotImplementedError

    def count_for_date(self, work_date: date, status: AttendanceStatus) -> int:
        raise NotImplementedError
