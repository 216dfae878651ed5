from __future__ import annotations

from typing import Optional, Protocol, Sequence

from .model import Participant


class PointsRepository(Protocol):
    def add_entry(self, *, uid: int, points: int, reason: str, admin_username: Optional[str]) -> int:
        raise NotImplementedError

    def list_reasons(self, *, term: Optional[str] = None, limit: Optional[int] = None) -> Sequence[str]:
        """Distinct reasons (event names), optionally substring-filtered."""

        raise NotImplementedError

    def list_participants(self, reason: str) -> Sequence[Participant]:
        raise NotImplementedError
