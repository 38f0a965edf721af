"""Display of classification results"""
from typing import List

from rich.console import Console
from rich.table import Table
from rich.text import Text

from worktree_keeper.constants import CLI_COLORS, COLUMNS
from worktree_keeper.formatters import format_note, format_status_word
from worktree_keeper.logging_config import get_logger
from worktree_keeper.models.clean_status import CleanStatus
from worktree_keeper.services.managed import NameRenderer

logger = get_logger(__name__)


class DisplayService:
    def __init__(self, console: Console, verbose: bool = False):
        self.console = console
        self.verbose = verbose

    def display_status_table(
            self,
            statuses: List[CleanStatus],
            name_for: NameRenderer,
            show_summary: bool = True
        ) -> None:
        """Display a table of worktree classifications."""
        table = Table()
        for col in COLUMNS:
            table.add_column(col.label.title())
        if self.verbose:
            table.add_column("Branch")
            table.add_column("Path")

        for status in statuses:
            status_word = format_status_word(status)
            row = [Text(name_for(status.worktree)), Text(status_word), Text(format_note(status))]
            if self.verbose:
                row.append(Text(status.worktree.branch or "(no branch)"))
                row.append(Text(status.worktree.path))
            table.add_row(*row, style=CLI_COLORS.get(status_word))

        self.console.print(table)

        if show_summary:
            safe_count = sum(1 for s in statuses if s.is_safe)
            self.console.print("\nSummary:")
            self.console.print(f"Total worktrees: {len(statuses)}")
            self.console.print(f"Safe to remove: {safe_count}")
            self.console.print(f"Unsafe: {len(statuses) - safe_count}")
