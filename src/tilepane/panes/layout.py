"""
Pane geometry.

Decides between the side-by-side and the stacked arrangement and computes the
side pane's width and height bounds from the terminal width and the pane
options. Everything here is a pure function of its arguments.
"""
import math
import shutil
from typing import Optional, Union

from ..core.renderable import PaneLayout
from ..core.renderer import DEFAULT_DIARY_HEIGHT, MAX_DIARY_HEIGHT, GameRendererConfig


COLUMN_LAYOUT_BREAKPOINT = 80
FALLBACK_TERMINAL_WIDTH = 80
# Outer padding and borders around the two side-by-side panes
BORDER_PADDING = 4
# Border plus two columns of padding on each side of a text pane
PANE_CHROME_WIDTH = 6
MIN_INNER_WIDTH = 20
# Top border carrying the title, the blank row under it, bottom border
PANE_CHROME_ROWS = 3


def get_terminal_width(fallback: int = FALLBACK_TERMINAL_WIDTH) -> int:
    """Current terminal column count, or fallback when it is unavailable."""
    columns = shutil.get_terminal_size((fallback, 24)).columns
    return columns if columns > 0 else fallback


def should_use_column_layout(terminal_width: int, breakpoint: int = COLUMN_LAYOUT_BREAKPOINT) -> bool:
    """Stack the panes vertically on terminals narrower than the breakpoint."""
    return terminal_width < breakpoint


def _parse_percentage(value: str) -> Optional[float]:
    text = value.strip()
    if not text.endswith("%"):
        return None
    try:
        return float(text[:-1])
    except ValueError:
        return None


def _apply_max_width(width: int, max_width: Optional[Union[int, str]], available: int) -> int:
    if max_width is None:
        return width
    if isinstance(max_width, str):
        percentage = _parse_percentage(max_width)
        if percentage is None:
            return width
        return min(width, math.floor(available * (percentage / 100)))
    return min(width, max_width)


def resolve_diary_layout(config: GameRendererConfig, terminal_width: int,
                         use_column_layout: bool) -> PaneLayout:
    """Geometry of the diary side pane.

    In the column layout the pane spans the full width. Otherwise its width is
    a percentage of the terminal width (minus the border padding), raised to the
    configured minimum and capped by the configured maximum, which may be a
    column count or a percentage string such as "50%".
    """
    height = min(config.diary_max_height or DEFAULT_DIARY_HEIGHT, MAX_DIARY_HEIGHT)

    if use_column_layout:
        return PaneLayout(
            height=height,
            min_width="100%",
            max_width="100%",
            flex_share="0",
            resolved_width=terminal_width,
        )

    available = terminal_width - BORDER_PADDING
    percentage = config.diary_width_percentage
    width_by_percent = math.floor(available * (percentage / 100))
    min_applied = max(width_by_percent, config.min_diary_width)
    resolved = _apply_max_width(min_applied, config.max_diary_width, available)

    return PaneLayout(
        height=height,
        min_width=config.min_diary_width,
        max_width=config.max_diary_width,
        flex_share=f"{percentage}%",
        resolved_width=resolved,
    )


def resolve_map_width(config: GameRendererConfig, terminal_width: int, layout: PaneLayout,
                      use_column_layout: bool) -> int:
    """Columns left for the map panes next to (or above) the diary pane."""
    if use_column_layout:
        return terminal_width
    by_percent = math.floor((terminal_width - BORDER_PADDING) * (config.map_width_percentage / 100))
    return max(min(by_percent, terminal_width - BORDER_PADDING - layout.resolved_width), 0)


def pane_inner_width(outer_width: int) -> int:
    """Text columns inside a bordered, padded pane."""
    return max(outer_width - PANE_CHROME_WIDTH, MIN_INNER_WIDTH)


def pane_content_rows(height: int) -> int:
    """Entry rows inside a pane of the given height, never fewer than one."""
    return max(height - PANE_CHROME_ROWS, 1)
