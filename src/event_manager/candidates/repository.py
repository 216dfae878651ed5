from __future__ import annotations

from typing import Iterable, Optional, Protocol, Sequence

from ..core.enums import Gender
from .model import CandidateDetail, CandidateSummary


class CandidateRepository(Protocol):
    def create(self, *, name: str, age: int, phone: str, gender: Gender) -> int:
        raise NotImplementedError

    def exists(self, uid: int) -> bool:
        raise NotImplementedError

    def existing_uids(self, uids: Iterable[int]) -> set[int]:
        """Which of the given identifiers reference a stored candidate (one round-trip)."""

        raise NotImplementedError

    def find_by_search_term(self, term: str) -> Optional[CandidateDetail]:
        """uid equality OR name substring; a uid match wins over name matches."""

        raise NotImplementedError

    def list_summaries(self) -> Sequence[CandidateSummary]:
        raise NotImplementedError

    def delete(self, uid: int) -> bool:
        """Remove the candidate together with its ledger rows."""

        raise NotImplementedError
