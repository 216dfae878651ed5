from __future__ import annotations

from typing import Any, Sequence

from ..database.connection import DatabaseConnection
from ..database.mysql_base import db_cursor, fetchall
from .repository import BackupRepository

_QUERIES = {
    "candidates": "SELECT uid, name, age, phone, gender, created_at FROM candidates ORDER BY uid",
    "points_log": (
        "SELECT log_id, candidate_uid, points, reason, admin_username, awarded_at FROM points_log ORDER BY log_id"
    ),
    "attendance": "SELECT attendance_id, candidate_uid, event_day, attended_at FROM attendance ORDER BY attendance_id",
}


class MySQLBackupRepository(BackupRepository):
    def __init__(self, conn_factory: DatabaseConnection):
        self._conn_factory = conn_factory

    def dump_table(self, table: str) -> Sequence[dict[str, Any]]:
        sql = _QUERIES.get(table)
        if sql is None:
            raise ValueError(f"Table {table!r} is not exportable")
        with db_cursor(self._conn_factory) as (_, cur):
            cur.execute(sql)
            return fetchall(cur)
