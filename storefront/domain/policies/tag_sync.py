# storefront/domain/policies/tag_sync.py
from __future__ import annotations

from typing import Iterable, List, Sequence, Tuple

from storefront.domain.dataclasses.tag_sync import TagSyncPlan


def _dedupe(ids: Iterable[int]) -> List[int]:
    seen: set[int] = set()
    out: List[int] = []
    for i in ids:
        if i not in seen:
            seen.add(i)
            out.append(i)
    return out


def plan_tag_sync(current: Sequence[Tuple[int, int]], requested: Iterable[int]) -> TagSyncPlan:
    """
    Three-way diff between a product's join rows and the requested tag set.

    `current` holds (join_row_id, tag_id) pairs as stored; `requested` is the
    tag id list from the client.

      - to_add:    requested tag ids with no join row yet (first-seen order)
      - to_remove: ids of join rows whose tag is not requested
      - keep:      requested tag ids that are already linked; their rows are
                   left untouched, so re-applying a plan writes nothing
    """
    wanted = _dedupe(requested)
    wanted_set = set(wanted)
    linked = {tag_id for _, tag_id in current}

    return TagSyncPlan(
        to_add=[t for t in wanted if t not in linked],
        to_remove=[row_id for row_id, tag_id in current if tag_id not in wanted_set],
        keep=[t for t in wanted if t in linked],
    )
