from __future__ import annotations

from typing import Any, Optional

from ..bulk.aggregator import run_bulk
from ..bulk.model import BulkOutcome
from ..bulk.parser import parse_uid_list
from ..candidates.repository import CandidateRepository
from ..common.validators import require_int, require_non_empty
from ..core.constants import EVENT_SEARCH_LIMIT
from ..core.exceptions import NotFoundError
from .model import Participant
from .repository import PointsRepository


class PointsService:
    """Use case: grant (or deduct) points, one candidate or many."""

    def __init__(self, points: PointsRepository, candidates: CandidateRepository):
        self._points = points
        self._candidates = candidates

    def grant(self, *, uid: Any, points: Any, reason: Any, admin_username: Optional[str]) -> None:
        uid = require_int(uid, "UID")
        points = require_int(points, "Points")
        reason = require_non_empty(reason, "Reason")
        self._grant(uid, points, reason, admin_username)

    def _grant(self, uid: int, points: int, reason: str, admin_username: Optional[str]) -> None:
        if not self._candidates.exists(uid):
            raise NotFoundError(f"Candidate UID {uid} not found.")
        self._points.add_entry(uid=uid, points=points, reason=reason, admin_username=admin_username)

    def grant_bulk(self, *, uids: Any, points: Any, event_name: Any, admin_username: Optional[str]) -> BulkOutcome:
        """Grant the same points to every listed candidate under one event name.

        Invalid ``points``/``event_name`` raise before anything is parsed or
        stored. A failure of the batch setup query propagates to the caller.
        """

        points = require_int(points, "Points")
        event_name = require_non_empty(event_name, "Event name")
        outcome = BulkOutcome(success_clause="Points added to {count} user(s).")

        targets = parse_uid_list(uids)
        if not targets:
            return outcome

        known = self._candidates.existing_uids(targets)
        return run_bulk(
            targets,
            lambda uid: self._points.add_entry(uid=uid, points=points, reason=event_name, admin_username=admin_username),
            outcome,
            known=known,
            label=f"Bulk event points '{event_name}'",
        )


class EventService:
    """Read side of the points ledger keyed by reason (event name)."""

    def __init__(self, points: PointsRepository, *, search_limit: int = EVENT_SEARCH_LIMIT):
        self._points = points
        self._search_limit = int(search_limit)

    def search(self, term: Optional[str] = None) -> list[str]:
        term = (term or "").strip()
        if term:
            return list(self._points.list_reasons(term=term, limit=self._search_limit))
        return list(self._points.list_reasons())

    def participants(self, event_name: Any) -> list[Participant]:
        event_name = require_non_empty(event_name, "Event name")
        return list(self._points.list_participants(event_name))
