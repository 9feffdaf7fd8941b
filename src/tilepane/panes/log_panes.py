"""
Console log and action diary panes.

Both panes show a bottom-anchored tail of their entries: the entries are
prepared for the pane's inner width, packed into its content rows, and laid
out as column-aligned rows of styled text.
"""
from typing import Callable, Optional, Sequence

from ..core.game_enums import ColorAttribute
from ..core.records import ConsoleEntry, DiaryEntry
from ..core.renderable import PackedEntry, PaneRenderData, PreparedEntry, StyledText, TextLine
from ..core.renderer import DEFAULT_CONSOLE_HEIGHT, MAX_CONSOLE_HEIGHT, MAX_DIARY_HEIGHT
from .entries import message_width, prepare_console_entries, prepare_diary_entries
from .layout import get_terminal_width, pane_content_rows, pane_inner_width
from .packer import pack_entries_to_height


SEPARATOR = StyledText(" | ", ColorAttribute.GRAY)

CONSOLE_EMPTY_MESSAGE = "No log entries yet..."
DIARY_EMPTY_MESSAGE = "No actions executed yet..."


def _outer_width(available_width: Optional[int], terminal_width: Optional[int]) -> int:
    # Prefer the width handed down by the parent layout
    if available_width is not None and available_width > 0:
        return available_width
    return terminal_width if terminal_width else get_terminal_width()


def _empty_line(message: str) -> TextLine:
    return TextLine([StyledText(message, ColorAttribute.GRAY)])


def _layout_packed(packed: Sequence[PackedEntry],
                   build_line: Callable[[PackedEntry, int, str], TextLine]) -> list[TextLine]:
    lines: list[TextLine] = []
    for entry in packed:
        for index, text in enumerate(entry.wrapped_lines):
            lines.append(build_line(entry, index, text))
        if entry.needs_leading_spacer:
            lines.append(TextLine())
    return lines


def _build_pane(title: str, prepared: list[PreparedEntry], height: int, outer_width: int,
                build_line: Callable[[PackedEntry, int, str], TextLine], empty_message: str) -> PaneRenderData:
    packed = pack_entries_to_height(prepared, pane_content_rows(height))
    if not packed:
        return PaneRenderData(title, [_empty_line(empty_message)], height, outer_width, is_empty=True)
    return PaneRenderData(title, _layout_packed(packed, build_line), height, outer_width)


def console_line(entry: PackedEntry, index: int, text: str) -> TextLine:
    """time | LEVEL | message; labels only on an entry's first row."""
    first = index == 0
    time_label = entry.leading_label if first else ""
    level_label = entry.trailing_label if first else ""
    return TextLine([
        StyledText(time_label.ljust(entry.leading_col_width), ColorAttribute.GRAY, dim=True),
        SEPARATOR,
        StyledText(level_label.ljust(entry.trailing_col_width), entry.color, dim=entry.dim),
        SEPARATOR,
        StyledText(text, entry.color, dim=entry.dim),
    ])


def build_console_pane(entries: Sequence[ConsoleEntry], max_entries: int = 200,
                       max_height: int = DEFAULT_CONSOLE_HEIGHT, title: str = "Console Log",
                       available_width: Optional[int] = None,
                       terminal_width: Optional[int] = None) -> PaneRenderData:
    """Console log pane showing the most recent entries that fit."""
    displayed = list(entries)[-max_entries:] if max_entries > 0 else []
    height = min(max_height, MAX_CONSOLE_HEIGHT)
    outer_width = _outer_width(available_width, terminal_width)

    prepared = prepare_console_entries(displayed, pane_inner_width(outer_width))
    return _build_pane(title, prepared, height, outer_width, console_line, CONSOLE_EMPTY_MESSAGE)


def _diary_line_builder(inner_width: int) -> Callable[[PackedEntry, int, str], TextLine]:
    def diary_line(entry: PackedEntry, index: int, text: str) -> TextLine:
        """turn | description | time; labels only on an entry's first row."""
        first = index == 0
        turn_label = entry.leading_label if first else ""
        time_label = entry.trailing_label if first else ""
        width = message_width(inner_width, entry.leading_col_width, entry.trailing_col_width)
        return TextLine([
            StyledText(turn_label.rjust(entry.leading_col_width), ColorAttribute.CYAN),
            SEPARATOR,
            StyledText(text.ljust(width)),
            SEPARATOR,
            StyledText(time_label.ljust(entry.trailing_col_width), ColorAttribute.GRAY, dim=True),
        ])
    return diary_line


def build_diary_pane(entries: Sequence[DiaryEntry], max_entries: int = 20,
                     max_height: int = 20, title: str = "Action Diary",
                     available_width: Optional[int] = None,
                     terminal_width: Optional[int] = None,
                     include_stat_changes: bool = False) -> PaneRenderData:
    """Action diary pane showing the most recent actions that fit."""
    displayed = list(entries)[-max_entries:] if max_entries > 0 else []
    height = min(max_height, MAX_DIARY_HEIGHT)
    outer_width = _outer_width(available_width, terminal_width)
    inner_width = pane_inner_width(outer_width)

    prepared = prepare_diary_entries(displayed, inner_width, include_stat_changes)
    return _build_pane(title, prepared, height, outer_width,
                       _diary_line_builder(inner_width), DIARY_EMPTY_MESSAGE)
