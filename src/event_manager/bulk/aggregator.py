from __future__ import annotations

import logging
from typing import Callable, Iterable, Optional

from ..core.enums import Bucket
from ..core.exceptions import DuplicateEntryError, NotFoundError
from .model import BulkOutcome

logger = logging.getLogger(__name__)


def run_bulk(
    uids: Iterable[int],
    apply: Callable[[int], None],
    outcome: BulkOutcome,
    *,
    known: Optional[set[int]] = None,
    track_duplicates: bool = False,
    label: str = "bulk operation",
) -> BulkOutcome:
    """Apply ``apply`` to every identifier independently and classify each result.

    ``known`` is the set of identifiers the batch setup found in storage;
    anything outside it is not_found without an attempt. Per-item failures
    never stop the loop.
    """

    for uid in uids:
        if known is not None and uid not in known:
            outcome.add(uid, Bucket.NOT_FOUND)
            continue
        try:
            apply(uid)
        except NotFoundError:
            outcome.add(uid, Bucket.NOT_FOUND)
        except DuplicateEntryError:
            if track_duplicates:
                outcome.add(uid, Bucket.DUPLICATE)
            else:
                logger.error("%s: unexpected duplicate for UID %s", label, uid)
                outcome.add(uid, Bucket.ERROR)
        except Exception:
            logger.exception("%s failed for UID %s", label, uid)
            outcome.add(uid, Bucket.ERROR)
        else:
            outcome.add(uid, Bucket.SUCCESS)
    return outcome
