"""In-memory repositories shared by the service and API tests."""

from __future__ import annotations

from dataclasses import dataclass, field
from datetime import date, datetime
from typing import Any, Iterable, Optional

from werkzeug.security import generate_password_hash

from event_manager.auth.model import Admin
from event_manager.candidates.model import Candidate, CandidateDetail, CandidateSummary
from event_manager.core.enums import Gender
from event_manager.core.exceptions import DuplicateEntryError, NotFoundError
from event_manager.dashboard.model import DailyPoints, LeaderboardRow, Totals
from event_manager.points.model import ActivityItem, Participant, PointsLogEntry

FIXED_NOW = datetime(2026, 3, 14, 10, 30, 0)


@dataclass
class InMemoryAdmins:
    admins: dict[str, Admin] = field(default_factory=dict)

    def add(self, username: str, password: str) -> Admin:
        admin = Admin(id=len(self.admins) + 1, username=username, password_hash=generate_password_hash(password))
        self.admins[username] = admin
        return admin

    def get_by_username(self, username: str) -> Optional[Admin]:
        return self.admins.get(username)


@dataclass
class Ledger:
    """Shared backing state: candidates, the points log and attendance rows."""

    candidates: dict[int, Candidate] = field(default_factory=dict)
    points: list[PointsLogEntry] = field(default_factory=list)
    attendance: list[tuple[int, int, date]] = field(default_factory=list)
    now: datetime = FIXED_NOW

    def add_candidate(self, name: str, *, age: int = 20, phone: str = "9876543210", gender: Gender = Gender.MALE) -> int:
        uid = max(self.candidates, default=100) + 1
        self.candidates[uid] = Candidate(uid=uid, name=name, age=age, phone=phone, gender=gender, created_at=self.now)
        return uid

    def add_points(self, uid: int, points: int, reason: str, admin_username: Optional[str] = None, *, at: Optional[datetime] = None) -> int:
        if uid not in self.candidates:
            raise NotFoundError(f"Candidate UID {uid} not found.")
        log_id = len(self.points) + 1
        self.points.append(
            PointsLogEntry(
                log_id=log_id,
                candidate_uid=uid,
                points=points,
                reason=reason,
                admin_username=admin_username,
                awarded_at=at or self.now,
            )
        )
        return log_id

    def total(self, uid: int) -> int:
        return sum(e.points for e in self.points if e.candidate_uid == uid)


class InMemoryCandidates:
    def __init__(self, ledger: Ledger):
        self.ledger = ledger
        self.existing_calls: list[list[int]] = []
        self.fail_existing = False

    def create(self, *, name: str, age: int, phone: str, gender: Gender) -> int:
        return self.ledger.add_candidate(name, age=age, phone=phone, gender=gender)

    def exists(self, uid: int) -> bool:
        return uid in self.ledger.candidates

    def existing_uids(self, uids: Iterable[int]) -> set[int]:
        uids = list(uids)
        self.existing_calls.append(uids)
        if self.fail_existing:
            raise RuntimeError("connection lost")
        return {u for u in uids if u in self.ledger.candidates}

    def find_by_search_term(self, term: str) -> Optional[CandidateDetail]:
        matches = []
        if term.isdigit() and int(term) in self.ledger.candidates:
            matches.append(self.ledger.candidates[int(term)])
        matches += sorted(
            (c for c in self.ledger.candidates.values() if term.lower() in c.name.lower() and c not in matches),
            key=lambda c: c.uid,
        )
        if not matches:
            return None
        c = matches[0]
        history = sorted(
            (e for e in self.ledger.points if e.candidate_uid == c.uid),
            key=lambda e: (e.awarded_at, e.log_id),
            reverse=True,
        )
        days = sorted(day for uid, day, _ in self.ledger.attendance if uid == c.uid)
        return CandidateDetail(candidate=c, total_points=self.ledger.total(c.uid), attendance_days=days, history=history)

    def list_summaries(self):
        today = self.ledger.now.date()
        return [
            CandidateSummary(
                uid=c.uid,
                name=c.name,
                age=c.age,
                phone=c.phone,
                gender=c.gender,
                total_points=self.ledger.total(c.uid),
                today_points=sum(
                    e.points for e in self.ledger.points if e.candidate_uid == c.uid and e.awarded_at.date() == today
                ),
            )
            for c in sorted(self.ledger.candidates.values(), key=lambda c: c.uid)
        ]

    def delete(self, uid: int) -> bool:
        if uid not in self.ledger.candidates:
            return False
        del self.ledger.candidates[uid]
        self.ledger.points = [e for e in self.ledger.points if e.candidate_uid != uid]
        self.ledger.attendance = [a for a in self.ledger.attendance if a[0] != uid]
        return True


class InMemoryPoints:
    def __init__(self, ledger: Ledger):
        self.ledger = ledger
        self.fail_for: set[int] = set()

    def add_entry(self, *, uid: int, points: int, reason: str, admin_username: Optional[str]) -> int:
        if uid in self.fail_for:
            raise RuntimeError(f"write failed for {uid}")
        return self.ledger.add_points(uid, points, reason, admin_username)

    def list_reasons(self, *, term: Optional[str] = None, limit: Optional[int] = None):
        reasons = sorted({e.reason for e in self.ledger.points})
        if term:
            reasons = [r for r in reasons if term.lower() in r.lower()]
        return reasons[:limit] if limit is not None else reasons

    def list_participants(self, reason: str):
        uids = sorted({e.candidate_uid for e in self.ledger.points if e.reason == reason})
        return [Participant(uid=u, name=self.ledger.candidates[u].name) for u in uids]


class InMemoryAttendance:
    def __init__(self, ledger: Ledger):
        self.ledger = ledger
        self.fail_for: set[int] = set()

    def has_attendance(self, uid: int, day: int) -> bool:
        return any(a[0] == uid and a[1] == day for a in self.ledger.attendance)

    def record_attendance(self, *, uid: int, day: int, attended_on: date, points: int, reason: str, admin_username):
        if uid in self.fail_for:
            raise RuntimeError(f"write failed for {uid}")
        if self.has_attendance(uid, day):
            raise DuplicateEntryError(f"Attendance already marked for UID {uid} on Day {day}.")
        if uid not in self.ledger.candidates:
            raise NotFoundError(f"Candidate UID {uid} not found.")
        self.ledger.attendance.append((uid, day, attended_on))
        self.ledger.add_points(uid, points, reason, admin_username)
        return len(self.ledger.attendance)


class InMemoryDashboard:
    def __init__(self, ledger: Ledger):
        self.ledger = ledger

    def totals(self) -> Totals:
        today = self.ledger.now.date()
        return Totals(
            candidates=len(self.ledger.candidates),
            points=sum(e.points for e in self.ledger.points),
            attendance=len(self.ledger.attendance),
            today_attendance=sum(1 for a in self.ledger.attendance if a[2] == today),
        )

    def points_per_day(self, *, days: int):
        by_day: dict[date, int] = {}
        for e in self.ledger.points:
            by_day[e.awarded_at.date()] = by_day.get(e.awarded_at.date(), 0) + e.points
        newest_first = sorted(by_day.items(), reverse=True)[:days]
        return [DailyPoints(day=d, total=t) for d, t in newest_first]

    def top_candidates(self, *, limit: int, gender: Optional[Gender] = None):
        rows = [
            LeaderboardRow(uid=c.uid, name=c.name, total=self.ledger.total(c.uid))
            for c in self.ledger.candidates.values()
            if gender is None or c.gender == gender
        ]
        rows.sort(key=lambda r: (-r.total, r.uid))
        return rows[:limit]

    def recent_activity(self, *, limit: int):
        entries = sorted(self.ledger.points, key=lambda e: (e.awarded_at, e.log_id), reverse=True)[:limit]
        return [
            ActivityItem(
                name=self.ledger.candidates[e.candidate_uid].name,
                reason=e.reason,
                points=e.points,
                admin_username=e.admin_username,
                awarded_at=e.awarded_at,
            )
            for e in entries
        ]


class InMemoryBackup:
    def __init__(self, ledger: Ledger):
        self.ledger = ledger

    def dump_table(self, table: str) -> list[dict[str, Any]]:
        if table == "candidates":
            return [
                {"uid": c.uid, "name": c.name, "age": c.age, "phone": c.phone, "gender": c.gender.value, "created_at": c.created_at}
                for c in self.ledger.candidates.values()
            ]
        if table == "points_log":
            return [
                {
                    "log_id": e.log_id,
                    "candidate_uid": e.candidate_uid,
                    "points": e.points,
                    "reason": e.reason,
                    "admin_username": e.admin_username,
                    "awarded_at": e.awarded_at,
                }
                for e in self.ledger.points
            ]
        if table == "attendance":
            return [
                {"attendance_id": i + 1, "candidate_uid": uid, "event_day": day, "attended_at": on}
                for i, (uid, day, on) in enumerate(self.ledger.attendance)
            ]
        raise ValueError(table)
