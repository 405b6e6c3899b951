from __future__ import annotations

from dataclasses import dataclass, field
from typing import List


@dataclass(frozen=True)
class TagSyncPlan:
    to_add: List[int] = field(default_factory=list)     # tag ids needing a new join row
    to_remove: List[int] = field(default_factory=list)  # join row ids to delete
    keep: List[int] = field(default_factory=list)       # tag ids already linked and requested

    @property
    def is_noop(self) -> bool:
        return not self.to_add and not self.to_remove
