"""Worktree inventory: reading and parsing `git worktree list --porcelain`."""

from typing import Dict, List

from worktree_keeper.constants import DETACHED_MARKER
from worktree_keeper.exceptions import InventoryError
from worktree_keeper.logging_config import get_logger
from worktree_keeper.models.worktree import Worktree
from worktree_keeper.services.command_executor import CommandExecutor, describe_error
from worktree_keeper.services.git import commands

logger = get_logger(__name__)

BRANCH_REF_PREFIX = "refs/heads/"


def parse_worktree_list(output: str) -> List[Worktree]:
    """Parse porcelain worktree output into Worktree entries.

    Format (records separated by blank lines):
        worktree /path/to/worktree
        HEAD <sha>
        branch refs/heads/<name>    or    detached

    The first record with a path is the main worktree. A trailing record
    without a terminating blank line is still emitted.
    """
    worktrees: List[Worktree] = []
    current: Dict[str, str] = {}

    def flush():
        if current.get("path"):
            worktrees.append(
                Worktree(
                    path=current["path"],
                    branch=current.get("branch", ""),
                    head=current.get("head", ""),
                    is_main=not worktrees,
                )
            )
        current.clear()

    for raw_line in output.splitlines():
        line = raw_line.rstrip("\r")
        if not line.strip():
            flush()
            continue

        if line.startswith("worktree "):
            current["path"] = line[len("worktree "):]
        elif line.startswith("HEAD "):
            current["head"] = line[len("HEAD "):].strip()
        elif line.startswith("branch "):
            ref = line[len("branch "):].strip()
            if ref.startswith(BRANCH_REF_PREFIX):
                ref = ref[len(BRANCH_REF_PREFIX):]
            current["branch"] = ref
        elif line.strip() == DETACHED_MARKER:
            current["branch"] = DETACHED_MARKER

    flush()
    return worktrees


def load_worktrees(executor: CommandExecutor) -> List[Worktree]:
    """Take a fresh inventory snapshot.

    Raises:
        InventoryError: If the inventory command fails
    """
    results = executor.execute([commands.worktree_list()])
    if not results:
        raise InventoryError("no output")
    result = results[0]
    if result.error is not None:
        raise InventoryError(describe_error(result.error))

    worktrees = parse_worktree_list(result.output)
    logger.debug(f"Found {len(worktrees)} worktrees")
    for wt in worktrees:
        logger.debug(f"  {wt}")
    return worktrees


def find_main_worktree_path(worktrees: List[Worktree]) -> str:
    """Return the main worktree's path, or an empty string for an empty inventory."""
    for wt in worktrees:
        if wt.is_main:
            return wt.path
    return ""
