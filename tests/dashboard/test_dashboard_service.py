from datetime import timedelta

import pytest

from event_manager.core.enums import Gender
from event_manager.core.exceptions import ValidationError
from event_manager.dashboard.service import DashboardService

from fakes import InMemoryDashboard, Ledger


@pytest.fixture
def ledger():
    ledger = Ledger()
    ledger.add_candidate("Asha", gender=Gender.FEMALE)   # 101
    ledger.add_candidate("Ravi")                         # 102
    ledger.add_candidate("Ashok")                        # 103
    ledger.add_candidate("Meera", gender=Gender.FEMALE)  # 104
    return ledger


def test_summary_shapes_and_ordering(ledger):
    now = ledger.now
    for days_ago in range(9):
        ledger.add_points(102, 10 + days_ago, f"Day -{days_ago}", at=now - timedelta(days=days_ago))
    ledger.add_points(101, 500, "Quiz", "admin1")
    ledger.add_points(104, 30, "Quiz", "admin2")
    ledger.attendance.append((101, 1, now.date()))
    ledger.attendance.append((102, 1, (now - timedelta(days=1)).date()))

    summary = DashboardService(InMemoryDashboard(ledger)).summary()

    assert summary["stats"] == {
        "totalCandidates": 4,
        "totalPoints": sum(10 + d for d in range(9)) + 530,
        "totalAttendance": 2,
        "todayAttendance": 1,
    }
    days = [p["date"] for p in summary["charts"]["pointsPerDay"]]
    assert len(days) == 7
    assert days == sorted(days)
    assert days[-1] == now.date().isoformat()
    assert [u["uid"] for u in summary["charts"]["topUsers"]] == [101, 102, 104]
    assert len(summary["feed"]) == 5
    assert summary["feed"][0]["admin_username"] == "admin2"


def test_leaderboard_gender_filter(ledger):
    ledger.add_points(102, 900, "Quiz")
    ledger.add_points(104, 10, "Quiz")
    service = DashboardService(InMemoryDashboard(ledger))

    assert [u["name"] for u in service.summary("Female")["charts"]["topUsers"]] == ["Meera", "Asha"]
    assert service.summary("all")["charts"]["topUsers"][0]["name"] == "Ravi"
    with pytest.raises(ValidationError):
        service.summary("Robot")


def test_empty_dashboard():
    summary = DashboardService(InMemoryDashboard(Ledger())).summary()
    assert summary["stats"]["totalPoints"] == 0
    assert summary["charts"] == {"pointsPerDay": [], "topUsers": []}
    assert summary["feed"] == []
