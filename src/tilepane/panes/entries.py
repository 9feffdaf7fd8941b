"""
Entry preparation for the log panes.

Turns raw console and diary entries into PreparedEntry records: label columns
sized consistently across the batch and the message wrapped to whatever width
the label columns leave over.
"""
from typing import Optional, Sequence

from ..core.game_enums import ColorAttribute, EntryLevel
from ..core.records import ConsoleEntry, DiaryEntry
from ..core.renderable import PreparedEntry
from .text import format_time, wrap_text


TIME_COLUMN_WIDTH = 8
LEVEL_COLUMN_WIDTH = 5
MIN_TURN_COLUMN_WIDTH = 3
# Two "|" separators plus the margins around them
SEPARATOR_WIDTH = 6
MIN_MESSAGE_WIDTH = 12

LEVEL_COLORS = {
    EntryLevel.ERROR: ColorAttribute.RED,
    EntryLevel.WARN: ColorAttribute.YELLOW,
    EntryLevel.DEBUG: ColorAttribute.GRAY,
    EntryLevel.TRACE: ColorAttribute.GRAY,
}

DIM_LEVELS = {EntryLevel.DEBUG, EntryLevel.TRACE}


def message_width(inner_width: int, leading_col_width: int, trailing_col_width: int) -> int:
    """Columns left for the message once labels and separators are placed."""
    return max(inner_width - leading_col_width - trailing_col_width - SEPARATOR_WIDTH,
               MIN_MESSAGE_WIDTH)


def _wrap(message: str, width: int) -> tuple[str, ...]:
    # An empty message still occupies one row
    return tuple(wrap_text(message, width) or [""])


def prepare_console_entries(entries: Sequence[ConsoleEntry], inner_width: int) -> list[PreparedEntry]:
    """Prepare console entries: time label leading, level label trailing."""
    available = message_width(inner_width, TIME_COLUMN_WIDTH, LEVEL_COLUMN_WIDTH)

    prepared = []
    for entry in entries:
        lines = _wrap(entry.display_message, available)
        prepared.append(PreparedEntry(
            source=entry,
            leading_label=format_time(entry.timestamp),
            trailing_label=entry.level.value.upper(),
            leading_col_width=TIME_COLUMN_WIDTH,
            trailing_col_width=LEVEL_COLUMN_WIDTH,
            wrapped_lines=lines,
            lines_needed=len(lines),
            color=LEVEL_COLORS.get(entry.level),
            dim=entry.level in DIM_LEVELS,
        ))
    return prepared


def turn_column_width(entries: Sequence[DiaryEntry]) -> int:
    """Width of the turn column, shared by every entry of the batch."""
    return max([MIN_TURN_COLUMN_WIDTH] + [len(str(entry.turn)) for entry in entries])


def prepare_diary_entries(entries: Sequence[DiaryEntry], inner_width: int,
                          include_stat_changes: bool = False) -> list[PreparedEntry]:
    """Prepare diary entries: turn label leading, time label trailing.

    Args:
        include_stat_changes: Append the per-unit stat change summary to the
            description before wrapping
    """
    turn_width = turn_column_width(entries)
    available = message_width(inner_width, turn_width, TIME_COLUMN_WIDTH)

    prepared = []
    for entry in entries:
        description = entry.action.description
        summary: Optional[list[str]] = entry.stat_changes_summary if include_stat_changes else None
        if summary:
            description = f"{description} ({'; '.join(summary)})"

        lines = _wrap(description, available)
        prepared.append(PreparedEntry(
            source=entry,
            leading_label=str(entry.turn),
            trailing_label=format_time(entry.timestamp),
            leading_col_width=turn_width,
            trailing_col_width=TIME_COLUMN_WIDTH,
            wrapped_lines=lines,
            lines_needed=len(lines),
        ))
    return prepared
