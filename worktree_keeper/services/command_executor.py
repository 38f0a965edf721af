"""External command execution for worktree-keeper."""

import os
from dataclasses import dataclass
from typing import List, Optional, Sequence, Tuple

import git

from worktree_keeper.logging_config import get_logger

logger = get_logger(__name__)


@dataclass(frozen=True)
class Command:
    """An external command to run."""

    name: str
    args: Tuple[str, ...] = ()
    working_dir: Optional[str] = None  # None = the executor's default directory

    @property
    def argv(self) -> List[str]:
        return [self.name, *self.args]

    def __str__(self) -> str:
        return " ".join(self.argv)


@dataclass(frozen=True)
class CommandResult:
    """Captured output of one command, with the error it raised if any."""

    command: Command
    output: str = ""
    error: Optional[Exception] = None

    @property
    def ok(self) -> bool:
        return self.error is None


def describe_error(error: Exception) -> str:
    """Render a command error as a single readable line."""
    if isinstance(error, git.exc.GitCommandError):
        stderr = (error.stderr or "").strip()
        # GitPython prefixes captured stderr with "stderr: '" ... "'"
        if stderr.startswith("stderr: '") and stderr.endswith("'"):
            stderr = stderr[len("stderr: '"):-1].strip()
        command = error.command
        if isinstance(command, (list, tuple)):
            command = " ".join(str(part) for part in command[:3])
        if stderr:
            return f"{command} failed (exit {error.status}): {stderr}"
        return f"{command} failed with exit code {error.status}"
    return str(error)


class CommandExecutor:
    """Runs batches of commands, returning one result per command.

    Implementations must be safe to call from several threads at once and
    must report per-command failures through ``CommandResult.error`` instead
    of raising.
    """

    def execute(self, commands: Sequence[Command]) -> List[CommandResult]:
        raise NotImplementedError

    def run(self, command: Command) -> CommandResult:
        """Execute a single command."""
        return self.execute([command])[0]


class GitCommandExecutor(CommandExecutor):
    """Command executor backed by GitPython's process runner."""

    def __init__(self, default_workdir: str):
        """Initialize the executor.

        Args:
            default_workdir: Directory commands run in unless they name their own
        """
        self.default_workdir = default_workdir

    def _get_git(self, working_dir: str) -> git.Git:
        """Get a fresh git.Git runner bound to a directory.

        A new instance per command keeps concurrent callers independent.
        """
        return git.Git(working_dir)

    def execute(self, commands: Sequence[Command]) -> List[CommandResult]:
        results = []
        for command in commands:
            workdir = command.working_dir or self.default_workdir
            logger.debug(f"Running: {command} (cwd={workdir})")
            # GitPython silently falls back to the process cwd for a missing directory
            if not os.path.isdir(workdir):
                error = NotADirectoryError(f"working directory does not exist: {workdir}")
                logger.debug(f"Not running {command}: {error}")
                results.append(CommandResult(command, "", error))
                continue
            try:
                output = self._get_git(workdir).execute(command.argv)
                results.append(CommandResult(command, output.strip()))
            except git.exc.CommandError as e:
                logger.debug(f"Command failed: {command}: {describe_error(e)}")
                results.append(CommandResult(command, "", e))
            except OSError as e:
                logger.debug(f"Could not run {command}: {e}")
                results.append(CommandResult(command, "", e))
        return results
