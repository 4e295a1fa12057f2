"""Audit trail for admin-initiated writes.

Service mutations are wrapped with ``audited``; after the wrapped call
succeeds, one row is appended through the owning service's ``_audit`` trail.
Appending is best-effort: a failure is logged and the primary write stands.
"""
from __future__ import annotations

from functools import wraps
from typing import Any, Callable, Optional

from ..core.enums import AuditAction
from ..core.logging import get_logger
from ..users.model import SessionUser
from .repository import AuditLogRepository

logger = get_logger(__name__)

TargetFn = Callable[[Any, dict], Optional[int]]
DetailsFn = Callable[[Any, dict], Optional[dict]]


class AuditTrail:
    def __init__(self, logs: AuditLogRepository):
        self._logs = logs

    def record(
        self,
        *,
        actor: SessionUser,
        action: AuditAction,
        target_type: str,
        target_id: Optional[int] = None,
        details: Optional[dict] = None,
    ) -> bool:
        """Append one entry for an admin actor. Returns whether a row was written."""
        if not actor.is_admin:
            return False

        try:
            self._logs.append(
                admin_id=actor.user_id,
                action=action,
                target_type=target_type,
                target_id=target_id,
                details=details,
            )
        except Exception:
            logger.warning(
                "Audit log write failed (action=%s target=%s:%s)",
                action.value,
                target_type,
                target_id,
                exc_info=True,
            )
            return False
        return True


def audited(
    action: AuditAction,
    target_type: str,
    *,
    target_id: Optional[TargetFn] = None,
    details: Optional[DetailsFn] = None,
):
    """Record ``action`` after the decorated service method returns.

    The method must be called with keyword arguments only, one of which is
    ``actor``. ``target_id`` and ``details`` receive the method's return value
    and its keyword arguments.
    """

    def decorator(method):
        @wraps(method)
        def wrapper(self, *, actor: SessionUser, **kwargs):
            result = method(self, actor=actor, **kwargs)
            self._audit.record(
                actor=actor,
                action=action,
                target_type=target_type,
                target_id=target_id(result, kwargs) if target_id else None,
                details=details(result, kwargs) if details else None,
            )
            return result

        return wrapper

    return decorator
