"""Custom exceptions for worktree-keeper"""

from typing import Optional


class WorktreeKeeperError(Exception):
    """Base exception for all worktree-keeper errors."""
    pass


class GitOperationError(WorktreeKeeperError):
    """Exception raised for errors in Git operations."""

    def __init__(self, operation: str, message: Optional[str] = None):
        self.operation = operation
        self.message = message

        error_msg = f"Git operation '{operation}' failed"
        if message:
            error_msg += f": {message}"

        super().__init__(error_msg)


class InventoryError(GitOperationError):
    """Exception raised when the worktree inventory cannot be read."""

    def __init__(self, message: Optional[str] = None):
        super().__init__("git worktree list", message or "no additional details available")


class NotInGitRepositoryError(WorktreeKeeperError):
    """Exception raised when the working directory is not inside a repository."""

    def __init__(self, path: str):
        self.path = path
        super().__init__(f"not in a git repository: {path}")


class WorktreeNotFoundError(WorktreeKeeperError):
    """Exception raised when a display name does not match any worktree."""

    def __init__(self, name: str):
        self.name = name
        super().__init__(f"worktree not found: {name}")


class SelectionCancelledError(WorktreeKeeperError):
    """Exception raised when the operator closes the selection prompt."""

    def __init__(self):
        super().__init__("selection cancelled")


class ConfigError(WorktreeKeeperError):
    """Exception raised for invalid configuration values."""
    pass


class TerminalRequiredError(WorktreeKeeperError):
    """Exception raised when the selection prompt cannot reach an operator."""

    def __init__(self):
        super().__init__("interactive prompt needs a terminal; use --no-interactive or --dry-run")
