from __future__ import annotations

from typing import Optional, Sequence

import mysql.connector

from ..core.exceptions import NotFoundError
from ..database.connection import DatabaseConnection
from ..database.mysql_base import db_cursor, fetchall, is_missing_parent, like_pattern
from .model import Participant
from .repository import PointsRepository


class MySQLPointsRepository(PointsRepository):
    def __init__(self, conn_factory: DatabaseConnection):
        self._conn_factory = conn_factory

    def add_entry(self, *, uid: int, points: int, reason: str, admin_username: Optional[str]) -> int:
        try:
            with db_cursor(self._conn_factory) as (_, cur):
                cur.execute(
                    """
                    INSERT INTO points_log(candidate_uid, points, reason, admin_username)
                    VALUES(%s,%s,%s,%s)
                    """,
                    (int(uid), int(points), reason, admin_username),
                )
                return int(cur.lastrowid)
        except mysql.connector.IntegrityError as e:
            if is_missing_parent(e):
                raise NotFoundError(f"Candidate UID {uid} not found.") from e
            raise

    def list_reasons(self, *, term: Optional[str] = None, limit: Optional[int] = None) -> Sequence[str]:
        sql = "SELECT DISTINCT reason FROM points_log"
        params: list[object] = []
        if term:
            sql += " WHERE reason LIKE %s"
            params.append(like_pattern(term))
        sql += " ORDER BY reason ASC"
        if limit is not None:
            sql += " LIMIT %s"
            params.append(int(limit))

        with db_cursor(self._conn_factory) as (_, cur):
            cur.execute(sql, tuple(params))
            return [r["reason"] for r in fetchall(cur)]

    def list_participants(self, reason: str) -> Sequence[Participant]:
        with db_cursor(self._conn_factory) as (_, cur):
            cur.execute(
                """
                SELECT DISTINCT c.uid, c.name
                FROM points_log pl
                JOIN candidates c ON c.uid = pl.candidate_uid
                WHERE pl.reason=%s
                ORDER BY c.uid ASC
                """,
                (reason,),
            )
            return [Participant(uid=int(r["uid"]), name=r["name"]) for r in fetchall(cur)]
