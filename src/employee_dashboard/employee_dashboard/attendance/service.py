from __future__ import annotations

import math
from datetime import date
from typing import Sequence

from ..core.enums import AttendanceStatus
from .model import AttendanceRecord


def is_present_on(records: Sequence[AttendanceRecord], day: date) -> bool:
    return any(r.work_date == day and r.status == AttendanceStatus.PRESENT for r in records)


def attendance_rate(records: Sequence[AttendanceRecord]) -> int:
    """Share of ``present`` rows as a whole percentage (halves round up); 0 without rows."""
    if not records:
        return 0
    present = sum(1 for r in records if r.status == AttendanceStatus.PRESENT)
    return int(math.floor(present * 100 / len(records) + 0.5))
