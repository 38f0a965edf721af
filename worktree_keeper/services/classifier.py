"""Safety classification of a single worktree."""

from typing import List

from worktree_keeper.constants import (
    REASON_DETACHED,
    REASON_DIRTY,
    REASON_UNMERGED,
    REASON_UNPUSHED,
)
from worktree_keeper.logging_config import get_logger
from worktree_keeper.models.clean_status import CleanStatus
from worktree_keeper.models.worktree import Worktree
from worktree_keeper.services.command_executor import CommandExecutor
from worktree_keeper.services.git import commands

logger = get_logger(__name__)


class WorktreeClassifier:
    """Decides whether a worktree can be removed without losing work.

    Three checks run in a fixed order (merged, clean, pushed) and each
    appends a reason when it finds a problem. None of them raises: a check
    whose command cannot run falls back to its permissive answer, except
    the merge check, where a failing ancestry test means "unmerged".
    """

    def __init__(self, executor: CommandExecutor, main_branch: str):
        self.executor = executor
        self.main_branch = main_branch

    def classify(self, worktree: Worktree) -> CleanStatus:
        """Run all checks for one worktree."""
        reasons: List[str] = []
        is_merged = self.check_merged(worktree, reasons)
        is_clean = self.check_clean(worktree, reasons)
        is_pushed = self.check_pushed(worktree, reasons)

        status = CleanStatus(
            worktree=worktree,
            is_merged=is_merged,
            is_clean=is_clean,
            is_pushed=is_pushed,
            reasons=tuple(reasons),
        )
        logger.debug(f"{worktree.path}: {status.reason}")
        return status

    def check_merged(self, worktree: Worktree, reasons: List[str]) -> bool:
        if not worktree.has_branch:
            reasons.append(REASON_DETACHED)
            return False

        result = self.executor.run(commands.is_ancestor(worktree.branch, self.main_branch))
        if not result.ok:
            logger.debug(f"Branch {worktree.branch} is not merged into {self.main_branch}")
            reasons.append(REASON_UNMERGED)
            return False
        return True

    def check_clean(self, worktree: Worktree, reasons: List[str]) -> bool:
        result = self.executor.run(commands.status_porcelain(worktree.path))
        if not result.ok:
            # Not being able to read the status does not count as dirty
            logger.debug(f"Ignoring status failure for {worktree.path}: {result.error}")
            return True

        if result.output.strip():
            reasons.append(REASON_DIRTY)
            return False
        return True

    def check_pushed(self, worktree: Worktree, reasons: List[str]) -> bool:
        if not worktree.has_branch:
            return True

        result = self.executor.run(commands.count_unpushed(worktree.branch))
        if not result.ok:
            # Usually no remote counterpart; treated as pushed
            logger.debug(f"Ignoring push check failure for {worktree.branch}: {result.error}")
            return True

        count = result.output.strip()
        if count in ("", "0"):
            return True

        logger.debug(f"Branch {worktree.branch} has {count} unpushed commit(s)")
        reasons.append(self._unpushed_reason(worktree.branch))
        return False

    def _unpushed_reason(self, branch: str) -> str:
        """Reason text for unpushed work, with the ahead-of-main count when known."""
        result = self.executor.run(commands.count_commits(self.main_branch, branch))
        ahead = result.output.strip() if result.ok else ""
        if ahead and ahead != "0":
            return f"{REASON_UNPUSHED} ({ahead} ahead)"
        return REASON_UNPUSHED
