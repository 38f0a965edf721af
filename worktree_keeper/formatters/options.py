"""Checklist rows for the removal prompt."""

from typing import List

from rich.cells import cell_len

from worktree_keeper.constants import COLUMNS, SAFE_NOTE, STATUS_SAFE, STATUS_UNSAFE
from worktree_keeper.models.clean_status import CleanStatus
from worktree_keeper.models.options import CleanOption, CleanOptions
from worktree_keeper.services.managed import NameRenderer

# Width of the checkbox the selector draws in front of each row
CHECKBOX_INDENT = "    "


def pad_cell(text: str, width: int) -> str:
    """Left-align text in a column of terminal cells (wide characters count double)."""
    return text + " " * max(0, width - cell_len(text))


def format_status_word(status: CleanStatus) -> str:
    return STATUS_SAFE if status.is_safe else STATUS_UNSAFE


def format_note(status: CleanStatus) -> str:
    return SAFE_NOTE if status.is_safe else ", ".join(status.reasons)


def build_clean_options(statuses: List[CleanStatus], name_for: NameRenderer) -> CleanOptions:
    """
    Build the pre-selected checklist for the removal prompt.

    Args:
        statuses: Classification results, in display order
        name_for: Renders a worktree to its display name (also the option key)

    Returns:
        CleanOptions whose rows line up under ``column_header``. Safe
        worktrees are pre-selected; unsafe ones are not. Empty input gives
        an empty option set.

    Example row:
        "feature/auth  safe    merged, clean, pushed"
    """
    name_col, status_col, note_col = COLUMNS
    names = [name_for(status.worktree) for status in statuses]
    name_width = max([cell_len(name_col.label)] + [cell_len(name) for name in names])
    status_width = max(status_col.width, cell_len(STATUS_UNSAFE))

    options = []
    for name, status in zip(names, statuses):
        label = (
            f"{pad_cell(name, name_width)}  "
            f"{pad_cell(format_status_word(status), status_width)}  "
            f"{format_note(status)}"
        )
        options.append(CleanOption(label=label, value=name, selected=status.is_safe))

    header = (
        f"{CHECKBOX_INDENT}{pad_cell(name_col.label, name_width)}  "
        f"{pad_cell(status_col.label, status_width)}  {note_col.label}"
    )
    return CleanOptions(options=options, column_header=header)
