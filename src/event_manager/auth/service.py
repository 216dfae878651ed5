from __future__ import annotations

import logging
from typing import Optional

from werkzeug.security import check_password_hash

from ..common.audit import log_action, log_failed_action
from ..core.exceptions import AuthenticationError
from .model import AdminIdentity
from .repository import AdminRepository
from .session_store import SessionStore

logger = logging.getLogger(__name__)

INVALID_CREDENTIALS = "Invalid credentials."


class AuthService:
    """Use case: verify admin credentials and manage their sessions."""

    def __init__(self, admins: AdminRepository, sessions: SessionStore):
        self._admins = admins
        self._sessions = sessions

    def authenticate(self, username: str, password: str, *, ip_address: Optional[str] = None) -> AdminIdentity:
        username = (username or "").strip()
        admin = self._admins.get_by_username(username) if username else None
        if not admin:
            log_failed_action(username, "Login Failed", ip_address, "Username not found")
            raise AuthenticationError(INVALID_CREDENTIALS)

        try:
            ok = check_password_hash(admin.password_hash, password or "")
        except (TypeError, ValueError):
            # e.g. placeholder or foreign-format hashes
            logger.warning("Unreadable password hash stored for admin '%s'", admin.username)
            ok = False

        if not ok:
            log_failed_action(username, "Login Failed", ip_address, "Incorrect password")
            raise AuthenticationError(INVALID_CREDENTIALS)

        log_action(admin.username, "Logged In", ip_address)
        return AdminIdentity(admin_id=admin.id, username=admin.username)

    def login(
        self,
        username: str,
        password: str,
        *,
        ip_address: Optional[str] = None,
        previous_token: Optional[str] = None,
    ) -> tuple[str, AdminIdentity]:
        """Authenticate and open a new session, ending the browser's previous one."""

        identity = self.authenticate(username, password, ip_address=ip_address)
        self._sessions.destroy(previous_token)
        self._sessions.purge_expired()
        return self._sessions.create(identity), identity

    def resolve(self, token: Optional[str]) -> Optional[AdminIdentity]:
        return self._sessions.resolve(token)

    def logout(self, token: Optional[str], *, ip_address: Optional[str] = None) -> None:
        identity = self._sessions.resolve(token)
        self._sessions.destroy(token)
        log_action(identity.username if identity else None, "Logged Out", ip_address)
