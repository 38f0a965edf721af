"""Managed-worktree filtering and display names."""

import os
from pathlib import Path, PurePath
from typing import Callable, List

from worktree_keeper.config import Config
from worktree_keeper.constants import MAIN_WORKTREE_NAME
from worktree_keeper.logging_config import get_logger
from worktree_keeper.models.worktree import Worktree

logger = get_logger(__name__)

NameRenderer = Callable[[Worktree], str]


def _normalize(path: str, anchor: str, fold_case: bool = True) -> str:
    """Absolute, symlink-resolved, separator-normalized form of ``path``.

    Relative paths are anchored at ``anchor`` rather than the process cwd.
    """
    candidate = Path(path)
    if not candidate.is_absolute():
        candidate = Path(anchor) / candidate
    normalized = os.path.normpath(str(candidate.resolve(strict=False)))
    return os.path.normcase(normalized) if fold_case else normalized


def is_worktree_managed(
    worktree_path: str, config: Config, main_repo_path: str, is_main: bool = False
) -> bool:
    """Check whether a worktree lives under the managed root.

    The main worktree is always managed. Anything that cannot be resolved
    is treated as unmanaged.
    """
    if is_main:
        return True

    try:
        base_dir = _normalize(config.resolve_base_dir(main_repo_path), main_repo_path)
        wt_path = _normalize(worktree_path, main_repo_path)
        rel_path = os.path.relpath(wt_path, base_dir)
    except (OSError, RuntimeError, ValueError) as e:
        logger.debug(f"Could not resolve {worktree_path} against managed root: {e}")
        return False

    if rel_path in (".", ""):
        return True
    if rel_path == os.pardir or rel_path.startswith(os.pardir + os.sep):
        return False
    return True


def filter_managed_worktrees(
    worktrees: List[Worktree], config: Config, main_repo_path: str
) -> List[Worktree]:
    """Return the non-main worktrees under the managed root, in inventory order."""
    managed = []
    for wt in worktrees:
        if wt.is_main:
            continue
        if not is_worktree_managed(wt.path, config, main_repo_path, wt.is_main):
            logger.debug(f"Skipping unmanaged worktree {wt.path}")
            continue
        managed.append(wt)
    return managed


def worktree_display_name(
    worktree_path: str, config: Config, main_repo_path: str, is_main: bool = False
) -> str:
    """Name shown to the operator: ``@`` for the main worktree, otherwise
    the path relative to the managed root using ``/`` separators."""
    if is_main:
        return MAIN_WORKTREE_NAME

    try:
        base_dir = _normalize(config.resolve_base_dir(main_repo_path), main_repo_path, fold_case=False)
        wt_path = _normalize(worktree_path, main_repo_path, fold_case=False)
        return PurePath(os.path.relpath(wt_path, base_dir)).as_posix()
    except (OSError, RuntimeError, ValueError):
        return os.path.basename(os.path.normpath(worktree_path))


def make_name_renderer(config: Config, main_repo_path: str) -> NameRenderer:
    """Bind config and main repository path into a worktree -> name function."""

    def render(worktree: Worktree) -> str:
        return worktree_display_name(worktree.path, config, main_repo_path, worktree.is_main)

    return render
