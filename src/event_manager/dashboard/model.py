from __future__ import annotations

from dataclasses import dataclass
from datetime import date


@dataclass(frozen=True)
class Totals:
    candidates: int
    points: int
    attendance: int
    today_attendance: int


@dataclass(frozen=True)
class DailyPoints:
    day: date
    total: int


@dataclass(frozen=True)
class LeaderboardRow:
    uid: int
    name: str
    total: int
