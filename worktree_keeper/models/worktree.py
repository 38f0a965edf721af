"""Worktree data models."""

from dataclasses import dataclass

from worktree_keeper.constants import DETACHED_MARKER


@dataclass(frozen=True)
class Worktree:
    """One entry of the repository's worktree inventory."""

    path: str
    branch: str = ""  # Empty or DETACHED_MARKER when no branch is attached
    head: str = ""
    is_main: bool = False  # First record of the inventory

    @property
    def has_branch(self) -> bool:
        """True when a named branch is checked out."""
        return bool(self.branch) and self.branch != DETACHED_MARKER

    def __str__(self) -> str:
        ref = self.branch if self.branch else self.head
        main_marker = " (main)" if self.is_main else ""
        return f"{self.path} [{ref}]{main_marker}"
