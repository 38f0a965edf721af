"""Classification result for a single worktree."""

from dataclasses import dataclass, field
from typing import Tuple

from worktree_keeper.constants import SAFE_REASON, UNSAFE_PREFIX
from worktree_keeper.models.worktree import Worktree


@dataclass(frozen=True)
class CleanStatus:
    """Outcome of the merge, clean and push checks for one worktree.

    ``is_safe`` and ``reason`` are derived once from the three check results
    and the accumulated ``reasons``; instances are never mutated afterwards.
    """

    worktree: Worktree
    is_merged: bool
    is_clean: bool
    is_pushed: bool
    reasons: Tuple[str, ...] = ()
    is_safe: bool = field(init=False)
    reason: str = field(init=False)

    def __post_init__(self):
        is_safe = self.is_merged and self.is_clean and self.is_pushed
        object.__setattr__(self, "reasons", tuple(self.reasons))
        object.__setattr__(self, "is_safe", is_safe)
        if is_safe:
            summary = SAFE_REASON
        else:
            summary = UNSAFE_PREFIX + ", ".join(self.reasons)
        object.__setattr__(self, "reason", summary)
