from __future__ import annotations

from dataclasses import dataclass, field

from ..core.enums import Bucket

NO_VALID_UIDS = "No valid UIDs provided."


def _join(uids: list[int]) -> str:
    return ", ".join(str(u) for u in uids)


@dataclass
class BulkOutcome:
    """Per-identifier classification of one bulk call.

    ``success`` is true iff nothing fell into not_found or error; duplicates
    alone do not make the call unsuccessful.
    """

    success_clause: str
    duplicate_clause: str = "Already recorded for UID(s): {uids}."
    failure_clause: str = "Failed for UID(s): {uids}."
    items: list[tuple[int, Bucket]] = field(default_factory=list)

    def add(self, uid: int, bucket: Bucket) -> None:
        self.items.append((uid, bucket))

    def bucket(self, bucket: Bucket) -> list[int]:
        return [uid for uid, b in self.items if b == bucket]

    @property
    def failed(self) -> list[int]:
        return [uid for uid, b in self.items if b in (Bucket.NOT_FOUND, Bucket.ERROR)]

    @property
    def is_empty(self) -> bool:
        return not self.items

    @property
    def success(self) -> bool:
        return not self.is_empty and not self.failed

    @property
    def message(self) -> str:
        if self.is_empty:
            return NO_VALID_UIDS

        clauses: list[str] = []
        succeeded = self.bucket(Bucket.SUCCESS)
        if succeeded:
            clauses.append(self.success_clause.format(count=len(succeeded)))
        duplicates = self.bucket(Bucket.DUPLICATE)
        if duplicates:
            clauses.append(self.duplicate_clause.format(uids=_join(duplicates)))
        if self.failed:
            clauses.append(self.failure_clause.format(uids=_join(self.failed)))
        return " ".join(clauses)

    def to_dict(self) -> dict[str, list[int]]:
        return {b.value: self.bucket(b) for b in Bucket}

    def audit_details(self) -> str:
        status = "Success" if self.success else ("No Valid UIDs" if self.is_empty else "Partial Failure")
        parts = [status]
        for label, bucket in (
            ("Success UIDs", Bucket.SUCCESS),
            ("Duplicate UIDs", Bucket.DUPLICATE),
            ("Not Found UIDs", Bucket.NOT_FOUND),
            ("Error UIDs", Bucket.ERROR),
        ):
            uids = self.bucket(bucket)
            parts.append(f"{label}: {','.join(str(u) for u in uids) or 'None'}")
        return ", ".join(parts)
