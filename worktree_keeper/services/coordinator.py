"""Concurrent classification of all managed worktrees."""

from concurrent.futures import ThreadPoolExecutor
from typing import List, Optional

from worktree_keeper.logging_config import get_logger
from worktree_keeper.models.clean_status import CleanStatus
from worktree_keeper.models.worktree import Worktree
from worktree_keeper.services.classifier import WorktreeClassifier
from worktree_keeper.services.command_executor import CommandExecutor
from worktree_keeper.services.git.main_branch import detect_main_branch

logger = get_logger(__name__)


def classify_worktrees(
    worktrees: List[Worktree],
    executor: CommandExecutor,
    max_workers: Optional[int] = None,
) -> List[CleanStatus]:
    """Classify every worktree concurrently.

    The baseline branch is resolved once up front. Each task writes its
    result into its own slot of a pre-sized list, so the output has the
    same length and order as ``worktrees`` whatever order tasks finish in.

    Args:
        worktrees: Managed, non-main worktrees to classify
        executor: Command executor shared by all tasks
        max_workers: Optional cap on concurrent tasks (default: one per worktree)

    Returns:
        One CleanStatus per input worktree, index-aligned with the input
    """
    main_branch = detect_main_branch(executor)
    if not worktrees:
        return []

    classifier = WorktreeClassifier(executor, main_branch)
    statuses: List[Optional[CleanStatus]] = [None] * len(worktrees)

    def classify_into(index: int, worktree: Worktree) -> None:
        statuses[index] = classifier.classify(worktree)

    workers = max_workers or len(worktrees)
    logger.debug(
        f"Classifying {len(worktrees)} worktree(s) against {main_branch} with {workers} worker(s)"
    )
    with ThreadPoolExecutor(max_workers=workers, thread_name_prefix="classify") as pool:
        futures = [pool.submit(classify_into, i, wt) for i, wt in enumerate(worktrees)]

    # The pool has joined; surface anything a task raised
    for future in futures:
        future.result()

    return statuses
