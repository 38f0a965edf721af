"""Formatting utilities for worktree-keeper."""

from .options import build_clean_options, format_note, format_status_word, pad_cell

__all__ = [
    "build_clean_options",
    "format_note",
    "format_status_word",
    "pad_cell",
]
