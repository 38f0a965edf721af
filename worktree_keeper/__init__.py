"""
worktree-keeper - Safe, interactive cleanup of git worktrees
"""

from .__version__ import __version__
from .core import WorktreeCleaner
from .cli.main import main

__all__ = ["WorktreeCleaner", "main", "__version__"]
