from __future__ import annotations

from dataclasses import dataclass, field
from datetime import datetime
from typing import Optional

from ..core.enums import Gender
from ..points.model import PointsLogEntry


@dataclass(frozen=True)
class Candidate:
    """Domain entity: a tracked individual earning points and attendance."""

    uid: int
    name: str
    age: int
    phone: str
    gender: Gender
    created_at: Optional[datetime] = None


@dataclass(frozen=True)
class CandidateSummary:
    """Read-model for the "all candidates" table."""

    uid: int
    name: str
    age: int
    phone: str
    gender: Gender
    total_points: int
    today_points: int


@dataclass(frozen=True)
class CandidateDetail:
    candidate: Candidate
    total_points: int
    attendance_days: list[int] = field(default_factory=list)
    history: list[PointsLogEntry] = field(default_factory=list)
