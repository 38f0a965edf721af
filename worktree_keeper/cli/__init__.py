"""Command-line interface for worktree-keeper.

This package provides the CLI entry point and argument parsing.
"""

from .main import main
from .args import build_parser

__all__ = ["main", "build_parser"]
