from __future__ import annotations

from werkzeug.security import check_password_hash

from ..core.exceptions import AuthenticationError
from ..core.logging import get_logger
from .model import SessionUser
from .repository import UserRepository

logger = get_logger(__name__)


class AuthService:
    """Use case: authenticate user (login)."""

    def __init__(self, users: UserRepository):
        self._users = users

    def authenticate(self, email: str, password: str) -> SessionUser:
        email = (email or "").strip().lower()
        if not email or not password:
            raise AuthenticationError("Invalid email or password")

        user = self._users.get_by_email(email)
        if not user:
            raise AuthenticationError("Invalid email or password")

        try:
            ok = check_password_hash(user.password_hash, password)
        except ValueError:
            # Placeholder or corrupted hashes
            ok = False

        if not ok:
            logger.info("Failed login for %s", email)
            raise AuthenticationError("Invalid email or password")

        return SessionUser(user_id=user.user_id, email=user.email, role=user.role)
