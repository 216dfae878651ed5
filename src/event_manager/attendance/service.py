from __future__ import annotations

from typing import Any, Optional

from ..bulk.aggregator import run_bulk
from ..bulk.model import BulkOutcome
from ..bulk.parser import parse_uid_list
from ..candidates.repository import CandidateRepository
from ..common.datetime_utils import today_local
from ..common.validators import require_int, require_min
from ..core.constants import ATTENDANCE_POINTS, ATTENDANCE_REASON
from ..core.exceptions import DuplicateEntryError, NotFoundError
from .repository import AttendanceRepository


def parse_day(value: Any) -> int:
    return require_min(require_int(value, "Day"), "Day", 1)


class AttendanceService:
    """Use case: AwardAttendance.

    Marking a candidate present for a day always grants the fixed attendance
    points in the same transaction; the two writes never happen apart.
    """

    def __init__(
        self,
        attendance: AttendanceRepository,
        candidates: CandidateRepository,
        *,
        points: int = ATTENDANCE_POINTS,
    ):
        self._attendance = attendance
        self._candidates = candidates
        self._points = int(points)

    def award(self, *, uid: Any, day: Any, admin_username: Optional[str]) -> None:
        uid = require_int(uid, "UID")
        day = parse_day(day)
        if not self._candidates.exists(uid):
            raise NotFoundError(f"Candidate UID {uid} not found.")
        self._award(uid, day, admin_username)

    def _award(self, uid: int, day: int, admin_username: Optional[str]) -> None:
        if self._attendance.has_attendance(uid, day):
            raise DuplicateEntryError(f"Attendance already marked for UID {uid} on Day {day}.")
        self._attendance.record_attendance(
            uid=uid,
            day=day,
            attended_on=today_local(),
            points=self._points,
            reason=ATTENDANCE_REASON.format(day=day),
            admin_username=admin_username,
        )

    def award_bulk(self, *, uids: Any, day: Any, admin_username: Optional[str]) -> BulkOutcome:
        day = parse_day(day)
        outcome = BulkOutcome(
            success_clause="Attendance marked for {count} user(s).",
            duplicate_clause=f"Already marked for Day {day}: UID(s) {{uids}}.",
        )

        targets = parse_uid_list(uids)
        if not targets:
            return outcome

        known = self._candidates.existing_uids(targets)
        return run_bulk(
            targets,
            lambda uid: self._award(uid, day, admin_username),
            outcome,
            known=known,
            track_duplicates=True,
            label=f"Bulk attendance Day {day}",
        )
