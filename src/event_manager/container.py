from __future__ import annotations

from dataclasses import dataclass
from datetime import timedelta
from typing import Optional

from .attendance.mysql_attendance_repository import MySQLAttendanceRepository
from .attendance.service import AttendanceService
from .auth.mysql_admin_repository import MySQLAdminRepository
from .auth.service import AuthService
from .auth.session_store import InMemorySessionStore, MySQLSessionStore, SessionStore
from .backup.mysql_backup_repository import MySQLBackupRepository
from .backup.service import BackupService
from .candidates.mysql_candidate_repository import MySQLCandidateRepository
from .candidates.service import CandidateService
from .core.constants import DEFAULT_POOL_SIZE, DEFAULT_POOL_TIMEOUT, SESSION_TTL_HOURS
from .dashboard.mysql_dashboard_repository import MySQLDashboardRepository
from .dashboard.service import DashboardService
from .database.connection import DBConfig, DatabaseConnection
from .points.mysql_points_repository import MySQLPointsRepository
from .points.service import EventService, PointsService


@dataclass(frozen=True)
class Container:
    conn: Optional[DatabaseConnection]
    sessions: SessionStore

    auth_service: AuthService
    candidate_service: CandidateService
    points_service: PointsService
    event_service: EventService
    attendance_service: AttendanceService
    dashboard_service: DashboardService
    backup_service: BackupService


def build_services(
    *,
    conn: Optional[DatabaseConnection],
    admins,
    sessions: SessionStore,
    candidates,
    points,
    attendance,
    dashboard,
    backup,
) -> Container:
    """Wire services over any set of repositories (MySQL or in-memory)."""

    return Container(
        conn=conn,
        sessions=sessions,
        auth_service=AuthService(admins, sessions),
        candidate_service=CandidateService(candidates),
        points_service=PointsService(points, candidates),
        event_service=EventService(points),
        attendance_service=AttendanceService(attendance, candidates),
        dashboard_service=DashboardService(dashboard),
        backup_service=BackupService(backup),
    )


def build_container(
    *,
    db_config: dict,
    pool_size: int = DEFAULT_POOL_SIZE,
    pool_timeout: float = DEFAULT_POOL_TIMEOUT,
    session_backend: str = "mysql",
    session_ttl_hours: int = SESSION_TTL_HOURS,
) -> Container:
    config = DBConfig(
        host=str(db_config["host"]),
        port=int(db_config.get("port", 3306)),
        user=str(db_config["user"]),
        password=str(db_config["password"]),
        database=str(db_config["database"]),
        pool_size=int(pool_size),
        pool_timeout=float(pool_timeout),
    )
    conn = DatabaseConnection.get_instance(config)

    ttl = timedelta(hours=int(session_ttl_hours))
    if session_backend == "memory":
        sessions: SessionStore = InMemorySessionStore(ttl=ttl)
    elif session_backend == "mysql":
        sessions = MySQLSessionStore(conn, ttl=ttl)
    else:
        raise ValueError(f"Unknown SESSION_BACKEND: {session_backend!r}")

    return build_services(
        conn=conn,
        admins=MySQLAdminRepository(conn),
        sessions=sessions,
        candidates=MySQLCandidateRepository(conn),
        points=MySQLPointsRepository(conn),
        attendance=MySQLAttendanceRepository(conn),
        dashboard=MySQLDashboardRepository(conn),
        backup=MySQLBackupRepository(conn),
    )
