from __future__ import annotations

from typing import Any, Protocol, Sequence


class BackupRepository(Protocol):
    def dump_table(self, table: str) -> Sequence[dict[str, Any]]:
        """Every row of one exported table, in primary-key order."""

        raise NotImplementedError
