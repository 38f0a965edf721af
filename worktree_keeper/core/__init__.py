"""Core cleanup flow for worktree-keeper."""

from .cleaner import CleanupReport, WorktreeCleaner

__all__ = ["CleanupReport", "WorktreeCleaner"]
