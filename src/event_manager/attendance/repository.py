from __future__ import annotations

from datetime import date
from typing import Optional, Protocol


class AttendanceRepository(Protocol):
    def has_attendance(self, uid: int, day: int) -> bool:
        raise NotImplementedError

    def record_attendance(
        self,
        *,
        uid: int,
        day: int,
        attended_on: date,
        points: int,
        reason: str,
        admin_username: Optional[str],
    ) -> int:
        """Insert the attendance row and its companion points row atomically.

        Raises DuplicateEntryError when (uid, day) is already recorded and
        NotFoundError when the candidate vanished.
        """

        raise NotImplementedError
