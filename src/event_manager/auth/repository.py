from __future__ import annotations

from typing import Optional, Protocol

from .model import Admin


class AdminRepository(Protocol):
    """Repository interface for administrator accounts.

    Services depend on this interface, not on a concrete database.
    """

    def get_by_username(self, username: str) -> Optional[Admin]:
        raise NotImplementedError
