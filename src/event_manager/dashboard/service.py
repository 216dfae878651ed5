from __future__ import annotations

from typing import Optional

from ..candidates.service import parse_gender
from ..common.datetime_utils import iso_or_none
from ..core.constants import ACTIVITY_FEED_LIMIT, LEADERBOARD_SIZE, POINTS_SERIES_DAYS
from .repository import DashboardRepository


class DashboardService:
    def __init__(
        self,
        dashboard: DashboardRepository,
        *,
        series_days: int = POINTS_SERIES_DAYS,
        leaderboard_size: int = LEADERBOARD_SIZE,
        feed_limit: int = ACTIVITY_FEED_LIMIT,
    ):
        self._dashboard = dashboard
        self._series_days = series_days
        self._leaderboard_size = leaderboard_size
        self._feed_limit = feed_limit

    def summary(self, gender: Optional[str] = None) -> dict:
        gender_filter = None
        if gender and gender.strip().lower() != "all":
            gender_filter = parse_gender(gender)

        totals = self._dashboard.totals()
        # Newest-first from storage, oldest-first for the chart.
        series = list(reversed(self._dashboard.points_per_day(days=self._series_days)))
        top = self._dashboard.top_candidates(limit=self._leaderboard_size, gender=gender_filter)
        feed = self._dashboard.recent_activity(limit=self._feed_limit)

        return {
            "stats": {
                "totalCandidates": totals.candidates,
                "totalPoints": totals.points,
                "totalAttendance": totals.attendance,
                "todayAttendance": totals.today_attendance,
            },
            "charts": {
                "pointsPerDay": [{"date": iso_or_none(p.day), "total": p.total} for p in series],
                "topUsers": [{"uid": t.uid, "name": t.name, "total": t.total} for t in top],
            },
            "feed": [
                {
                    "name": a.name,
                    "reason": a.reason,
                    "points": a.points,
                    "admin_username": a.admin_username,
                    "awarded_at": iso_or_none(a.awarded_at),
                }
                for a in feed
            ],
        }
