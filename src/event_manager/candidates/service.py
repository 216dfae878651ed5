from __future__ import annotations

from typing import Any, Iterable, Optional, Sequence

from ..common.datetime_utils import iso_or_none
from ..common.validators import require_digits, require_int, require_min, require_non_empty
from ..core.constants import MIN_CANDIDATE_AGE, PHONE_DIGITS
from ..core.enums import CandidateSort, Gender
from ..core.exceptions import NotFoundError, ValidationError
from .model import CandidateDetail, CandidateSummary
from .repository import CandidateRepository


def parse_gender(value: Any) -> Gender:
    try:
        return Gender(str(value or "").strip())
    except ValueError:
        raise ValidationError("Gender must be Male or Female.")


def filter_and_sort(
    rows: Iterable[CandidateSummary],
    *,
    gender: Optional[str] = None,
    search: Optional[str] = None,
    sort: Optional[str] = None,
) -> list[CandidateSummary]:
    """Filter the candidate table by gender / free text and order it.

    ``search`` matches case-insensitively against name, uid and phone.
    Point sorts are highest first; ties and the default fall back to uid.
    """

    out = list(rows)

    if gender and gender.lower() != "all":
        wanted = parse_gender(gender)
        out = [r for r in out if r.gender == wanted]

    needle = (search or "").strip().lower()
    if needle:
        out = [r for r in out if needle in r.name.lower() or needle in str(r.uid) or needle in (r.phone or "")]

    try:
        order = CandidateSort(sort or CandidateSort.UID.value)
    except ValueError:
        raise ValidationError("Unknown sort field.")

    if order == CandidateSort.NAME:
        out.sort(key=lambda r: (r.name.lower(), r.uid))
    elif order == CandidateSort.TOTAL_POINTS:
        out.sort(key=lambda r: (-r.total_points, r.uid))
    elif order == CandidateSort.TODAY_POINTS:
        out.sort(key=lambda r: (-r.today_points, r.uid))
    else:
        out.sort(key=lambda r: r.uid)
    return out


class CandidateService:
    """Use case: register, look up, list and remove candidates."""

    def __init__(self, candidates: CandidateRepository):
        self._candidates = candidates

    def create(self, *, name: Any, age: Any, phone: Any, gender: Any) -> int:
        name = require_non_empty(name, "Name")
        age = require_min(require_int(age, "Age"), "Age", MIN_CANDIDATE_AGE)
        phone = require_digits(phone, "Phone number", PHONE_DIGITS)
        gender = parse_gender(gender)
        return self._candidates.create(name=name, age=age, phone=phone, gender=gender)

    def find(self, term: Any) -> CandidateDetail:
        term = (str(term) if term is not None else "").strip()
        if not term:
            raise NotFoundError("Candidate not found")
        detail = self._candidates.find_by_search_term(term)
        if not detail:
            raise NotFoundError("Candidate not found")
        return detail

    def list_all(
        self,
        *,
        gender: Optional[str] = None,
        search: Optional[str] = None,
        sort: Optional[str] = None,
    ) -> list[CandidateSummary]:
        return filter_and_sort(self._candidates.list_summaries(), gender=gender, search=search, sort=sort)

    def delete(self, uid: Any) -> None:
        uid = require_int(uid, "UID")
        if not self._candidates.delete(uid):
            raise NotFoundError(f"Candidate UID {uid} not found.")

    @staticmethod
    def detail_to_ui(detail: CandidateDetail) -> dict:
        c = detail.candidate
        return {
            "uid": c.uid,
            "name": c.name,
            "age": c.age,
            "phone": c.phone,
            "gender": c.gender.value,
            "created_at": iso_or_none(c.created_at),
            "total_points": detail.total_points,
            "attendance": list(detail.attendance_days),
            "logs": [
                {
                    "points": e.points,
                    "reason": e.reason,
                    "admin_username": e.admin_username,
                    "awarded_at": iso_or_none(e.awarded_at),
                }
                for e in detail.history
            ],
        }

    @staticmethod
    def summaries_to_ui(rows: Sequence[CandidateSummary]) -> list[dict]:
        return [
            {
                "uid": r.uid,
                "name": r.name,
                "age": r.age,
                "phone": r.phone,
                "gender": r.gender.value,
                "total_points": r.total_points,
                "today_points": r.today_points,
            }
            for r in rows
        ]
