from __future__ import annotations

from typing import Any, Optional

from ..core.enums import AuditAction
from ..database.connection import DatabaseConnection
from ..database.mysql_base import db_cursor, encode_json
from .repository import AuditLogRepository


class MySQLAuditLogRepository(AuditLogRepository):
    def __init__(self, conn_factory: DatabaseConnection):
        self._conn_factory = conn_factory

    def append(
        self,
        *,
        admin_id: int,
        action: AuditAction,
        target_type: str,
        target_id: Optional[int],
        details: Optional[dict[str, Any]],
    ) -> int:
        with db_cursor(self._conn_factory) as (_, cur):
            cur.execute(
                """
                INSERT INTO audit_logs(admin_id, action, target_type, target_id, details)
                VALUES(%s,%s,%s,%s,%s)
                """,
                (admin_id, action.value, target_type, target_id, encode_json(details)),
            )
            return int(cur.lastrowid)
