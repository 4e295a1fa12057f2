from __future__ import annotations

from typing import Any, Optional, Protocol

from ..core.enums import AuditAction


class AuditLogRepository(Protocol):
    def append(
        self,
        *,
        admin_id: int,
        action: AuditAction,
        target_type: str,
        target_id: Optional[int],
        details: Optional[dict[str, Any]],
    ) -> int:
        raise NotImplementedError
