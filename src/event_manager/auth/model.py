from __future__ import annotations

from dataclasses import dataclass
from datetime import datetime


@dataclass(frozen=True)
class Admin:
    """Administrator account (provisioned out-of-band, never created by the app)."""

    id: int
    username: str
    password_hash: str


@dataclass(frozen=True)
class AdminIdentity:
    """What a resolved session tells us about the acting administrator."""

    admin_id: int
    username: str


@dataclass(frozen=True)
class SessionRecord:
    token: str
    identity: AdminIdentity
    created_at: datetime
    expires_at: datetime

    def is_expired(self, now: datetime) -> bool:
        return now >= self.expires_at
