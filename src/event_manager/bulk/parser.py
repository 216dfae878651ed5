from __future__ import annotations

import re
from typing import Any, Iterable

_SEPARATORS = re.compile(r"[\s,;]+")
_UID = re.compile(r"[0-9]+")


def parse_uid_list(raw: Any) -> list[int]:
    """Normalize a bulk submission into distinct candidate identifiers.

    Accepts one string delimited by any mixture of whitespace, commas and
    semicolons, or an iterable of tokens. Empty and non-numeric tokens are
    dropped; duplicates collapse onto their first occurrence.
    """

    if raw is None:
        return []
    if isinstance(raw, (str, int)):
        tokens: Iterable[Any] = _SEPARATORS.split(str(raw))
    else:
        tokens = raw

    seen: set[int] = set()
    out: list[int] = []
    for token in tokens:
        text = str(token).strip()
        if not _UID.fullmatch(text):
            continue
        uid = int(text)
        if uid in seen:
            continue
        seen.add(uid)
        out.append(uid)
    return out
