"""Interactive selection for worktree-keeper."""

from .selector import WorktreeSelectorApp, select_interactively, select_preselected

__all__ = ["WorktreeSelectorApp", "select_interactively", "select_preselected"]
