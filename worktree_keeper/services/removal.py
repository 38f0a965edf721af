"""Sequential removal of the worktrees the operator selected."""

from dataclasses import dataclass
from typing import Iterable, List, Optional

from rich.console import Console

from worktree_keeper.constants import SYMBOL_REMOVED
from worktree_keeper.exceptions import WorktreeNotFoundError
from worktree_keeper.logging_config import get_logger
from worktree_keeper.models.worktree import Worktree
from worktree_keeper.services.command_executor import CommandExecutor, describe_error
from worktree_keeper.services.git import commands
from worktree_keeper.services.managed import NameRenderer

logger = get_logger(__name__)


@dataclass(frozen=True)
class RemovalOutcome:
    """Result of removing one selected worktree."""

    name: str
    success: bool
    path: Optional[str] = None
    error: Optional[str] = None


def find_worktree_by_name(
    worktrees: Iterable[Worktree], name: str, name_for: NameRenderer
) -> Worktree:
    """Map a display name back to its worktree.

    Raises:
        WorktreeNotFoundError: If no worktree renders to ``name``
    """
    for wt in worktrees:
        if name_for(wt) == name:
            return wt
    raise WorktreeNotFoundError(name)


def _emit(console: Console, message: str, style: str) -> None:
    console.print(message, style=style, markup=False, highlight=False, soft_wrap=True)


def remove_selected_worktrees(
    console: Console,
    executor: CommandExecutor,
    worktrees: List[Worktree],
    selected: List[str],
    name_for: NameRenderer,
    force: bool = False,
) -> List[RemovalOutcome]:
    """Remove each selected worktree in selection order.

    A worktree that cannot be found or removed is reported and skipped;
    the rest of the batch still runs. Each outcome is printed as soon as
    it is known.

    Args:
        console: Where progress lines are written
        executor: Command executor used for the removals
        worktrees: Worktrees the selection was made from
        selected: Chosen display names, in selection order
        name_for: Renders a worktree to its display name
        force: Pass --force to git worktree remove

    Returns:
        One RemovalOutcome per selected name, in the same order
    """
    outcomes = []
    for name in selected:
        try:
            wt = find_worktree_by_name(worktrees, name, name_for)
        except WorktreeNotFoundError as e:
            logger.error(f"Could not resolve selection '{name}'")
            _emit(console, f"Failed to find worktree '{name}': {e}", "red")
            outcomes.append(RemovalOutcome(name, False, error=str(e)))
            continue

        result = executor.run(commands.worktree_remove(wt.path, force))
        if not result.ok:
            error_msg = describe_error(result.error)
            logger.error(f"Failed to remove worktree at {wt.path}: {error_msg}")
            _emit(console, f"Failed to remove '{name}': {error_msg}", "red")
            outcomes.append(RemovalOutcome(name, False, wt.path, error_msg))
            continue

        logger.info(f"Removed worktree at {wt.path}")
        _emit(console, f"{SYMBOL_REMOVED} Removed '{name}'", "green")
        outcomes.append(RemovalOutcome(name, True, wt.path))

    return outcomes
