"""Pane building: wrapping, packing, grid composition, colorizing and layout."""

from .colorizer import colorize_grid, colorize_row
from .entries import prepare_console_entries, prepare_diary_entries
from .grid import GridComposer, GridOptions, actor_signature, build_actor_positions
from .layout import resolve_diary_layout, should_use_column_layout
from .log_panes import build_console_pane, build_diary_pane
from .packer import pack_entries_to_height
from .text import wrap_text

__all__ = [
    "colorize_grid",
    "colorize_row",
    "prepare_console_entries",
    "prepare_diary_entries",
    "GridComposer",
    "GridOptions",
    "actor_signature",
    "build_actor_positions",
    "resolve_diary_layout",
    "should_use_column_layout",
    "build_console_pane",
    "build_diary_pane",
    "pack_entries_to_height",
    "wrap_text",
]
