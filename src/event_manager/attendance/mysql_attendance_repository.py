from __future__ import annotations

from datetime import date
from typing import Optional

import mysql.connector

from ..core.exceptions import DuplicateEntryError, NotFoundError
from ..database.connection import DatabaseConnection
from ..database.mysql_base import db_cursor, fetchone, is_duplicate_key, is_missing_parent
from .repository import AttendanceRepository


class MySQLAttendanceRepository(AttendanceRepository):
    def __init__(self, conn_factory: DatabaseConnection):
        self._conn_factory = conn_factory

    def has_attendance(self, uid: int, day: int) -> bool:
        with db_cursor(self._conn_factory) as (_, cur):
            cur.execute(
                "SELECT attendance_id FROM attendance WHERE candidate_uid=%s AND event_day=%s",
                (int(uid), int(day)),
            )
            return fetchone(cur) is not None

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
        try:
            with db_cursor(self._conn_factory) as (_, cur):
                cur.execute(
                    """
                    INSERT INTO attendance(candidate_uid, event_day, attended_at)
                    VALUES(%s,%s,%s)
                    """,
                    (int(uid), int(day), attended_on),
                )
                attendance_id = int(cur.lastrowid)
                cur.execute(
                    """
                    INSERT INTO points_log(candidate_uid, points, reason, admin_username)
                    VALUES(%s,%s,%s,%s)
                    """,
                    (int(uid), int(points), reason, admin_username),
                )
                return attendance_id
        except mysql.connector.IntegrityError as e:
            if is_duplicate_key(e):
                raise DuplicateEntryError(f"Attendance already marked for UID {uid} on Day {day}.") from e
            if is_missing_parent(e):
                raise NotFoundError(f"Candidate UID {uid} not found.") from e
            raise
