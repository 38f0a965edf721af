"""Services for worktree-keeper."""

from .command_executor import Command, CommandResult, CommandExecutor, GitCommandExecutor
from .classifier import WorktreeClassifier
from .coordinator import classify_worktrees
from .removal import RemovalOutcome, remove_selected_worktrees

__all__ = [
    "Command",
    "CommandResult",
    "CommandExecutor",
    "GitCommandExecutor",
    "WorktreeClassifier",
    "classify_worktrees",
    "RemovalOutcome",
    "remove_selected_worktrees",
]
