"""Data models for worktree-keeper."""

from .worktree import Worktree
from .clean_status import CleanStatus
from .options import CleanOption, CleanOptions

__all__ = ["Worktree", "CleanStatus", "CleanOption", "CleanOptions"]
