"""Selection of the worktrees to remove."""

from typing import Callable, List, Optional

from rich.text import Text
from textual.app import App, ComposeResult
from textual.binding import Binding
from textual.containers import Vertical
from textual.widgets import Footer, Header, SelectionList, Static
from textual.widgets.selection_list import Selection

from worktree_keeper.__version__ import __version__
from worktree_keeper.exceptions import SelectionCancelledError
from worktree_keeper.logging_config import get_logger
from worktree_keeper.models.options import CleanOptions

logger = get_logger(__name__)

# Given the checklist, returns the chosen keys or raises SelectionCancelledError
Selector = Callable[[CleanOptions], List[str]]


class WorktreeSelectorApp(App[Optional[List[str]]]):
    """Checklist of worktrees; exits with the chosen keys, or None when cancelled."""

    TITLE = "Select worktrees to remove"
    SUB_TITLE = f"v{__version__}"

    CSS = """
    Screen {
        background: $surface;
    }

    #column-header {
        height: auto;
        padding: 0 1;
        text-style: bold;
    }

    SelectionList {
        height: 1fr;
    }
    """

    BINDINGS = [
        Binding("enter", "confirm", "Remove Selected", priority=True),
        Binding("escape", "cancel", "Cancel", priority=True),
        Binding("q", "cancel", "Cancel"),
        Binding("a", "select_all", "Select All"),
        Binding("n", "select_none", "Select None"),
    ]

    def __init__(self, clean_options: CleanOptions):
        super().__init__()
        self.clean_options = clean_options

    def compose(self) -> ComposeResult:
        yield Header(show_clock=False)
        with Vertical():
            yield Static(Text(self.clean_options.column_header), id="column-header")
            yield SelectionList[str](
                *[
                    Selection(Text(option.label), option.value, option.selected)
                    for option in self.clean_options.options
                ],
                id="worktree-list",
            )
        yield Footer()

    def on_mount(self) -> None:
        self.query_one(SelectionList).focus()

    def selected_values(self) -> List[str]:
        """Chosen keys in display order."""
        chosen = set(self.query_one(SelectionList).selected)
        return [option.value for option in self.clean_options.options if option.value in chosen]

    def action_confirm(self) -> None:
        self.exit(self.selected_values())

    def action_cancel(self) -> None:
        self.exit(None)

    def action_select_all(self) -> None:
        self.query_one(SelectionList).select_all()

    def action_select_none(self) -> None:
        self.query_one(SelectionList).deselect_all()


def select_interactively(clean_options: CleanOptions) -> List[str]:
    """Show the checklist and wait for the operator.

    Raises:
        SelectionCancelledError: If the operator closes the prompt
    """
    app = WorktreeSelectorApp(clean_options)
    selected = app.run()
    if selected is None:
        logger.debug("Selection prompt closed without confirming")
        raise SelectionCancelledError()
    return selected


def select_preselected(clean_options: CleanOptions) -> List[str]:
    """Accept the default selection (the safe worktrees) without prompting."""
    return clean_options.preselected
