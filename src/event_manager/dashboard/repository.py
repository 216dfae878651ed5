from __future__ import annotations

from typing import Optional, Protocol, Sequence

from ..core.enums import Gender
from ..points.model import ActivityItem
from .model import DailyPoints, LeaderboardRow, Totals


class DashboardRepository(Protocol):
    """Read-only aggregate queries behind the dashboard."""

    def totals(self) -> Totals:
        raise NotImplementedError

    def points_per_day(self, *, days: int) -> Sequence[DailyPoints]:
        """Most recent ``days`` days that have points, newest first."""

        raise NotImplementedError

    def top_candidates(self, *, limit: int, gender: Optional[Gender] = None) -> Sequence[LeaderboardRow]:
        raise NotImplementedError

    def recent_activity(self, *, limit: int) -> Sequence[ActivityItem]:
        raise NotImplementedError
