from __future__ import annotations

from typing import Optional, Sequence

from ..core.enums import Gender
from ..database.connection import DatabaseConnection
from ..database.mysql_base import db_cursor, fetchall, fetchone
from ..points.model import ActivityItem
from .model import DailyPoints, LeaderboardRow, Totals
from .repository import DashboardRepository


class MySQLDashboardRepository(DashboardRepository):
    def __init__(self, conn_factory: DatabaseConnection):
        self._conn_factory = conn_factory

    def totals(self) -> Totals:
        with db_cursor(self._conn_factory) as (_, cur):
            cur.execute(
                """
                SELECT
                    (SELECT COUNT(*) FROM candidates) AS candidates,
                    (SELECT COALESCE(SUM(points), 0) FROM points_log) AS points,
                    (SELECT COUNT(*) FROM attendance) AS attendance,
                    (SELECT COUNT(*) FROM attendance WHERE attended_at = CURDATE()) AS today_attendance
                """
            )
            r = fetchone(cur) or {}
            return Totals(
                candidates=int(r.get("candidates") or 0),
                points=int(r.get("points") or 0),
                attendance=int(r.get("attendance") or 0),
                today_attendance=int(r.get("today_attendance") or 0),
            )

    def points_per_day(self, *, days: int) -> Sequence[DailyPoints]:
        with db_cursor(self._conn_factory) as (_, cur):
            cur.execute(
                """
                SELECT DATE(awarded_at) AS day, SUM(points) AS total
                FROM points_log
                GROUP BY DATE(awarded_at)
                ORDER BY day DESC
                LIMIT %s
                """,
                (int(days),),
            )
            return [DailyPoints(day=r["day"], total=int(r["total"] or 0)) for r in fetchall(cur)]

    def top_candidates(self, *, limit: int, gender: Optional[Gender] = None) -> Sequence[LeaderboardRow]:
        where = ""
        params: list[object] = []
        if gender is not None:
            where = "WHERE c.gender=%s"
            params.append(gender.value)
        params.append(int(limit))

        with db_cursor(self._conn_factory) as (_, cur):
            cur.execute(
                f"""
                SELECT c.uid, c.name, COALESCE(SUM(pl.points), 0) AS total
                FROM candidates c
                LEFT JOIN points_log pl ON pl.candidate_uid = c.uid
                {where}
                GROUP BY c.uid, c.name
                ORDER BY total DESC, c.uid ASC
                LIMIT %s
                """,
                tuple(params),
            )
            return [LeaderboardRow(uid=int(r["uid"]), name=r["name"], total=int(r["total"] or 0)) for r in fetchall(cur)]

    def recent_activity(self, *, limit: int) -> Sequence[ActivityItem]:
        with db_cursor(self._conn_factory) as (_, cur):
            cur.execute(
                """
                SELECT c.name, pl.reason, pl.points, pl.admin_username, pl.awarded_at
                FROM points_log pl
                JOIN candidates c ON c.uid = pl.candidate_uid
                ORDER BY pl.awarded_at DESC, pl.log_id DESC
                LIMIT %s
                """,
                (int(limit),),
            )
            return [
                ActivityItem(
                    name=r["name"],
                    reason=r["reason"],
                    points=int(r["points"]),
                    admin_username=r.get("admin_username"),
                    awarded_at=r["awarded_at"],
                )
                for r in fetchall(cur)
            ]
