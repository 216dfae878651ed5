"""Server-side admin sessions keyed by opaque token.

The browser only ever holds the token (inside Flask's signed cookie); who the
token belongs to and when it expires lives here. Expiry is a fixed TTL from
creation, it is not extended by activity.
"""

from __future__ import annotations

import secrets
from datetime import datetime, timedelta
from threading import Lock
from typing import Callable, Dict, Optional, Protocol

from ..common.datetime_utils import now_local
from ..core.constants import SESSION_TTL_HOURS
from ..database.connection import DatabaseConnection
from ..database.mysql_base import db_cursor, fetchone
from .model import AdminIdentity, SessionRecord


def new_token() -> str:
    return secrets.token_urlsafe(32)


class SessionStore(Protocol):
    def create(self, identity: AdminIdentity) -> str:
        raise NotImplementedError

    def resolve(self, token: Optional[str]) -> Optional[AdminIdentity]:
        raise NotImplementedError

    def destroy(self, token: Optional[str]) -> None:
        raise NotImplementedError

    def purge_expired(self) -> int:
        raise NotImplementedError


class InMemorySessionStore(SessionStore):
    """Process-local store for tests and single-process development."""

    def __init__(self, *, ttl: timedelta = timedelta(hours=SESSION_TTL_HOURS), clock: Callable[[], datetime] = now_local):
        self._ttl = ttl
        self._clock = clock
        self._records: Dict[str, SessionRecord] = {}
        self._lock = Lock()

    def create(self, identity: AdminIdentity) -> str:
        now = self._clock()
        token = new_token()
        with self._lock:
            self._records[token] = SessionRecord(token=token, identity=identity, created_at=now, expires_at=now + self._ttl)
        return token

    def resolve(self, token: Optional[str]) -> Optional[AdminIdentity]:
        if not token:
            return None
        with self._lock:
            record = self._records.get(token)
            if record is None:
                return None
            if record.is_expired(self._clock()):
                del self._records[token]
                return None
            return record.identity

    def destroy(self, token: Optional[str]) -> None:
        if not token:
            return
        with self._lock:
            self._records.pop(token, None)

    def purge_expired(self) -> int:
        now = self._clock()
        with self._lock:
            expired = [t for t, r in self._records.items() if r.is_expired(now)]
            for t in expired:
                del self._records[t]
        return len(expired)


class MySQLSessionStore(SessionStore):
    def __init__(
        self,
        conn_factory: DatabaseConnection,
        *,
        ttl: timedelta = timedelta(hours=SESSION_TTL_HOURS),
        clock: Callable[[], datetime] = now_local,
    ):
        self._conn_factory = conn_factory
        self._ttl = ttl
        self._clock = clock

    def create(self, identity: AdminIdentity) -> str:
        now = self._clock()
        token = new_token()
        with db_cursor(self._conn_factory) as (_, cur):
            cur.execute(
                """
                INSERT INTO admin_sessions(token, admin_id, username, created_at, expires_at)
                VALUES(%s,%s,%s,%s,%s)
                """,
                (token, identity.admin_id, identity.username, now, now + self._ttl),
            )
        return token

    def resolve(self, token: Optional[str]) -> Optional[AdminIdentity]:
        if not token:
            return None
        with db_cursor(self._conn_factory) as (_, cur):
            cur.execute(
                "SELECT admin_id, username, expires_at FROM admin_sessions WHERE token=%s",
                (token,),
            )
            row = fetchone(cur)
            if not row:
                return None
            if self._clock() >= row["expires_at"]:
                cur.execute("DELETE FROM admin_sessions WHERE token=%s", (token,))
                return None
            return AdminIdentity(admin_id=int(row["admin_id"]), username=row["username"])

    def destroy(self, token: Optional[str]) -> None:
        if not token:
            return
        with db_cursor(self._conn_factory) as (_, cur):
            cur.execute("DELETE FROM admin_sessions WHERE token=%s", (token,))

    def purge_expired(self) -> int:
        with db_cursor(self._conn_factory) as (_, cur):
            cur.execute("DELETE FROM admin_sessions WHERE expires_at <= %s", (self._clock(),))
            return int(cur.rowcount)
