"""Shared constants for worktree-keeper."""

from dataclasses import dataclass
from typing import List


# Branch marker used when a worktree has no attached branch
DETACHED_MARKER = "detached"

# Branch candidates for the comparison baseline
MAIN_BRANCH = "main"
MASTER_BRANCH = "master"

# Name of the remote used by the push check
DEFAULT_REMOTE = "origin"

# Repository configuration
CONFIG_FILE_NAME = ".worktree-keeper.yml"
CONFIG_VERSION = "1.0"
DEFAULT_BASE_DIR = "../worktrees"

# Display name of the main worktree
MAIN_WORKTREE_NAME = "@"


# Classification reasons, in the order the checks run
REASON_DETACHED = "detached HEAD"
REASON_UNMERGED = "unmerged"
REASON_DIRTY = "uncommitted changes"
REASON_UNPUSHED = "unpushed commits"

SAFE_NOTE = "merged, clean, pushed"
SAFE_REASON = f"safe: {SAFE_NOTE}"
UNSAFE_PREFIX = "unsafe: "

STATUS_SAFE = "safe"
STATUS_UNSAFE = "unsafe"


@dataclass
class ColumnDefinition:
    """Definition of a table column."""

    key: str
    label: str
    width: int = 0  # 0 means auto-width


# Shared by the selector header and the dry-run table
COLUMNS: List[ColumnDefinition] = [
    ColumnDefinition("worktree", "WORKTREE"),
    ColumnDefinition("status", "STATUS", 6),
    ColumnDefinition("note", "NOTE"),
]


# Rich styles for the two verdicts
CLI_COLORS = {
    STATUS_SAFE: "green",
    STATUS_UNSAFE: "yellow",
}

SYMBOL_REMOVED = "✓"
