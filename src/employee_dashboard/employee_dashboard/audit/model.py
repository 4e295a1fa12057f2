from __future__ import annotations

from dataclasses import dataclass
from datetime import datetime
from typing import Any, Optional

from ..core.enums import AuditAction


@dataclass(frozen=True)
class AuditEntry:
    """One append-only audit row."""

    log_id: int
    admin_id: int
    action: AuditAction
    target_type: str
    target_id: Optional[int]
    details: Optional[dict[str, Any]]
    created_at: Optional[datetime] = None
