from __future__ import annotations

import re
from typing import Iterable, Optional, Sequence

from ..core.enums import Gender
from ..database.connection import DatabaseConnection
from ..database.mysql_base import db_cursor, fetchall, fetchone, like_pattern
from ..points.model import PointsLogEntry
from .model import Candidate, CandidateDetail, CandidateSummary
from .repository import CandidateRepository


class MySQLCandidateRepository(CandidateRepository):
    def __init__(self, conn_factory: DatabaseConnection):
        self._conn_factory = conn_factory

    def create(self, *, name: str, age: int, phone: str, gender: Gender) -> int:
        with db_cursor(self._conn_factory) as (_, cur):
            cur.execute(
                "INSERT INTO candidates(name, age, phone, gender) VALUES(%s,%s,%s,%s)",
                (name, age, phone, gender.value),
            )
            return int(cur.lastrowid)

    def exists(self, uid: int) -> bool:
        with db_cursor(self._conn_factory) as (_, cur):
            cur.execute("SELECT uid FROM candidates WHERE uid=%s", (int(uid),))
            return fetchone(cur) is not None

    def existing_uids(self, uids: Iterable[int]) -> set[int]:
        wanted = [int(u) for u in uids]
        if not wanted:
            return set()
        placeholders = ",".join(["%s"] * len(wanted))
        with db_cursor(self._conn_factory) as (_, cur):
            cur.execute(f"SELECT uid FROM candidates WHERE uid IN ({placeholders})", tuple(wanted))
            return {int(r["uid"]) for r in fetchall(cur)}

    def find_by_search_term(self, term: str) -> Optional[CandidateDetail]:
        term = term.strip()
        uid = int(term) if re.fullmatch(r"[0-9]+", term) else None

        with db_cursor(self._conn_factory) as (_, cur):
            cur.execute(
                """
                SELECT uid, name, age, phone, gender, created_at
                FROM candidates
                WHERE uid=%s OR name LIKE %s
                ORDER BY (uid=%s) DESC, uid ASC
                LIMIT 1
                """,
                (uid, like_pattern(term), uid),
            )
            r = fetchone(cur)
            if not r:
                return None
            candidate = Candidate(
                uid=int(r["uid"]),
                name=r["name"],
                age=int(r["age"]),
                phone=r["phone"],
                gender=Gender(r["gender"]),
                created_at=r.get("created_at"),
            )

            cur.execute(
                "SELECT COALESCE(SUM(points), 0) AS total_points FROM points_log WHERE candidate_uid=%s",
                (candidate.uid,),
            )
            total = fetchone(cur) or {}

            cur.execute(
                "SELECT event_day FROM attendance WHERE candidate_uid=%s ORDER BY event_day ASC",
                (candidate.uid,),
            )
            days = [int(row["event_day"]) for row in fetchall(cur)]

            cur.execute(
                """
                SELECT log_id, candidate_uid, points, reason, admin_username, awarded_at
                FROM points_log
                WHERE candidate_uid=%s
                ORDER BY awarded_at DESC, log_id DESC
                """,
                (candidate.uid,),
            )
            history = [
                PointsLogEntry(
                    log_id=int(row["log_id"]),
                    candidate_uid=int(row["candidate_uid"]),
                    points=int(row["points"]),
                    reason=row["reason"],
                    admin_username=row.get("admin_username"),
                    awarded_at=row["awarded_at"],
                )
                for row in fetchall(cur)
            ]

            return CandidateDetail(
                candidate=candidate,
                total_points=int(total.get("total_points") or 0),
                attendance_days=days,
                history=history,
            )

    def list_summaries(self) -> Sequence[CandidateSummary]:
        with db_cursor(self._conn_factory) as (_, cur):
            cur.execute(
                """
                SELECT c.uid, c.name, c.age, c.phone, c.gender,
                       COALESCE(SUM(pl.points), 0) AS total_points,
                       COALESCE(SUM(CASE WHEN DATE(pl.awarded_at) = CURDATE() THEN pl.points ELSE 0 END), 0) AS today_points
                FROM candidates c
                LEFT JOIN points_log pl ON pl.candidate_uid = c.uid
                GROUP BY c.uid, c.name, c.age, c.phone, c.gender
                ORDER BY c.uid ASC
                """
            )
            return [
                CandidateSummary(
                    uid=int(r["uid"]),
                    name=r["name"],
                    age=int(r["age"]),
                    phone=r["phone"],
                    gender=Gender(r["gender"]),
                    total_points=int(r["total_points"] or 0),
                    today_points=int(r["today_points"] or 0),
                )
                for r in fetchall(cur)
            ]

    def delete(self, uid: int) -> bool:
        # Ledger rows first, same transaction: no orphans are left behind.
        with db_cursor(self._conn_factory) as (_, cur):
            cur.execute("DELETE FROM attendance WHERE candidate_uid=%s", (int(uid),))
            cur.execute("DELETE FROM points_log WHERE candidate_uid=%s", (int(uid),))
            cur.execute("DELETE FROM candidates WHERE uid=%s", (int(uid),))
            return cur.rowcount > 0
