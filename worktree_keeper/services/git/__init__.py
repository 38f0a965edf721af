"""Git-related services for worktree-keeper."""

from . import commands
from .inventory import parse_worktree_list, load_worktrees, find_main_worktree_path
from .main_branch import detect_main_branch

__all__ = [
    "commands",
    "parse_worktree_list",
    "load_worktrees",
    "find_main_worktree_path",
    "detect_main_branch",
]
