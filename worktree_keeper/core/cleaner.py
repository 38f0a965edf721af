"""Cleanup flow: inventory, classification, selection and removal."""

from dataclasses import dataclass, field
from typing import List, Optional, Union

import git
from rich.console import Console

from worktree_keeper.config import Config, load_config
from worktree_keeper.exceptions import NotInGitRepositoryError, SelectionCancelledError
from worktree_keeper.formatters import build_clean_options
from worktree_keeper.logging_config import get_logger
from worktree_keeper.models.clean_status import CleanStatus
from worktree_keeper.services.command_executor import CommandExecutor, GitCommandExecutor
from worktree_keeper.services.coordinator import classify_worktrees
from worktree_keeper.services.display_service import DisplayService
from worktree_keeper.services.git.inventory import find_main_worktree_path, load_worktrees
from worktree_keeper.services.managed import filter_managed_worktrees, make_name_renderer
from worktree_keeper.services.removal import RemovalOutcome, remove_selected_worktrees
from worktree_keeper.ui.selector import Selector, select_interactively, select_preselected

logger = get_logger(__name__)


@dataclass
class CleanupReport:
    """What a cleanup run classified, selected and removed."""

    statuses: List[CleanStatus] = field(default_factory=list)
    selected: List[str] = field(default_factory=list)
    outcomes: List[RemovalOutcome] = field(default_factory=list)
    cancelled: bool = False

    @property
    def removed_count(self) -> int:
        return sum(1 for outcome in self.outcomes if outcome.success)

    @property
    def failed_count(self) -> int:
        return sum(1 for outcome in self.outcomes if not outcome.success)


class WorktreeCleaner:
    """Runs one cleanup pass over a repository's managed worktrees."""

    def __init__(
        self,
        working_dir: str,
        config: Union[Config, dict, None] = None,
        console: Optional[Console] = None,
        executor: Optional[CommandExecutor] = None,
    ):
        """Initialize the cleaner.

        Args:
            working_dir: Directory the run operates from (inside the repository)
            config: A ready Config, or a dict of overrides applied on top of
                the repository's config file once the main worktree is known
            console: Output stream for progress and results
            executor: Command executor (defaults to GitCommandExecutor in working_dir)
        """
        self.working_dir = working_dir
        self.config = config
        self.console = console or Console()
        self.executor = executor or GitCommandExecutor(working_dir)

    @classmethod
    def for_directory(
        cls,
        working_dir: str,
        config: Union[Config, dict, None] = None,
        console: Optional[Console] = None,
    ) -> "WorktreeCleaner":
        """Create a cleaner after checking that ``working_dir`` is inside a repository.

        Raises:
            NotInGitRepositoryError: If no repository contains ``working_dir``
        """
        try:
            repo = git.Repo(working_dir, search_parent_directories=True)
        except (git.exc.InvalidGitRepositoryError, git.exc.NoSuchPathError) as e:
            raise NotInGitRepositoryError(working_dir) from e
        repo.close()
        return cls(working_dir, config, console)

    def _resolve_config(self, main_repo_path: str) -> Config:
        if isinstance(self.config, Config):
            return self.config
        return load_config(main_repo_path, **(self.config or {}))

    def _print(self, message: str) -> None:
        self.console.print(message, markup=False, highlight=False, soft_wrap=True)

    def run(self, selector: Optional[Selector] = None) -> CleanupReport:
        """Run the cleanup flow.

        Args:
            selector: Chooses worktrees from the checklist. Defaults to the
                interactive prompt, or to the pre-selection when the config
                is non-interactive.

        Returns:
            CleanupReport describing the run

        Raises:
            InventoryError: If the worktree list cannot be read
        """
        report = CleanupReport()

        worktrees = load_worktrees(self.executor)
        main_repo_path = find_main_worktree_path(worktrees)
        config = self._resolve_config(main_repo_path or self.working_dir)

        managed = filter_managed_worktrees(worktrees, config, main_repo_path)
        if not managed:
            self._print("No managed worktrees found")
            return report

        report.statuses = classify_worktrees(managed, self.executor, config.workers)
        name_for = make_name_renderer(config, main_repo_path)

        if config.dry_run:
            DisplayService(self.console, verbose=config.verbose).display_status_table(
                report.statuses, name_for
            )
            return report

        clean_options = build_clean_options(report.statuses, name_for)
        if not clean_options:
            self._print("Nothing to clean")
            return report

        if selector is None:
            selector = select_interactively if config.interactive else select_preselected

        try:
            report.selected = list(selector(clean_options))
        except SelectionCancelledError:
            report.cancelled = True
            self._print("Cleanup cancelled")
            return report

        if not report.selected:
            self._print("No worktrees selected for removal")
            return report

        self._print(f"\nRemoving {len(report.selected)} worktree(s)...")
        report.outcomes = remove_selected_worktrees(
            self.console,
            self.executor,
            managed,
            report.selected,
            name_for,
            force=config.force,
        )
        self._print(f"Removed {report.removed_count} of {len(report.selected)} worktree(s)")
        return report
