"""Entry point for the worktree-keeper command."""

import os
import sys

from rich.console import Console

from worktree_keeper.cli.args import build_parser
from worktree_keeper.core import WorktreeCleaner
from worktree_keeper.exceptions import TerminalRequiredError, WorktreeKeeperError
from worktree_keeper.logging_config import setup_logging

console = Console()


def run_clean(parsed_args, working_dir: str) -> int:
    """Run the clean command from ``working_dir``.

    Raises:
        TerminalRequiredError: If a prompt is needed but stdin is not a terminal
    """
    interactive = not parsed_args.no_interactive
    if interactive and not parsed_args.dry_run and not sys.stdin.isatty():
        raise TerminalRequiredError()
    overrides = {
        "force": parsed_args.force,
        "dry_run": parsed_args.dry_run,
        "interactive": interactive,
        "verbose": parsed_args.verbose,
        "debug": parsed_args.debug,
        "workers": parsed_args.workers,
    }
    cleaner = WorktreeCleaner.for_directory(working_dir, overrides, console)
    cleaner.run()
    return 0


def main(argv=None) -> int:
    """Main entry point for the application."""
    parser = build_parser()
    parsed_args = parser.parse_args(argv)

    setup_logging(verbose=parsed_args.verbose, debug=parsed_args.debug)

    if parsed_args.command is None:
        parser.print_help()
        return 1

    try:
        return run_clean(parsed_args, os.getcwd())
    except KeyboardInterrupt:
        console.print("\n[yellow]Operation cancelled by user[/yellow]")
        return 1
    except WorktreeKeeperError as e:
        console.print(f"Error: {e}", style="red", markup=False, highlight=False)
        if parsed_args.debug:
            console.print_exception()
        return 1
    except Exception as e:
        console.print(f"Unexpected error: {e}", style="red", markup=False, highlight=False)
        if parsed_args.debug:
            console.print_exception()
        return 1


if __name__ == "__main__":
    sys.exit(main())
