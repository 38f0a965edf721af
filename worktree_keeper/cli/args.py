"""Command-line argument parsing for worktree-keeper."""

import argparse
from worktree_keeper.__version__ import __version__


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="worktree-keeper",
        description="Find git worktrees that are safe to delete and clean them up",
    )
    parser.add_argument("-v", "--verbose", action="store_true", help="Show verbose output")
    parser.add_argument("--version", action="version", version=f"worktree-keeper {__version__}")
    parser.add_argument(
        "--debug", action="store_true", help="Show debug information for troubleshooting"
    )

    subparsers = parser.add_subparsers(dest="command", metavar="COMMAND")
    clean = subparsers.add_parser(
        "clean",
        help="Interactively clean up worktrees",
        description="Shows a checklist of managed worktrees. Worktrees are pre-selected "
        "when they are fully merged into the main branch, have no uncommitted changes "
        "and have no unpushed commits.",
    )
    clean.add_argument(
        "-f", "--force", action="store_true", help="Force removal even if worktree is dirty"
    )
    clean.add_argument(
        "--dry-run",
        action="store_true",
        help="Preview mode - show the classification without removing anything",
    )
    clean.add_argument(
        "--no-interactive",
        action="store_true",
        help="Remove the pre-selected (safe) worktrees without prompting",
    )
    clean.add_argument(
        "--workers",
        type=int,
        metavar="N",
        help="Maximum number of worktrees checked in parallel (default: all at once)",
    )
    return parser
