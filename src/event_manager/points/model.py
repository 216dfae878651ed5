from __future__ import annotations

from dataclasses import dataclass
from datetime import datetime
from typing import Optional


@dataclass(frozen=True)
class PointsLogEntry:
    """One append-only points grant (negative points are deductions)."""

    log_id: int
    candidate_uid: int
    points: int
    reason: str
    admin_username: Optional[str]
    awarded_at: datetime


@dataclass(frozen=True)
class ActivityItem:
    """Read-model for the dashboard activity feed."""

    name: str
    reason: str
    points: int
    admin_username: Optional[str]
    awarded_at: datetime


@dataclass(frozen=True)
class Participant:
    uid: int
    name: str
