"""Run-length color compression of grid rows."""
from typing import Optional, Sequence

from ..core.game_enums import ColorAttribute
from ..core.renderable import ColorRun, GridCell
from ..core.tileset_loader import TilesetConfig, get_tileset_config


def cell_attribute(cell: GridCell, tileset: TilesetConfig) -> Optional[ColorAttribute]:
    """Display attribute of one cell: actor color, else its terrain color."""
    if cell.is_actor:
        return tileset.actor_color
    return tileset.get_color(cell.terrain)


def colorize_row(row: Sequence[GridCell], use_colors: bool = True,
                 tileset: Optional[TilesetConfig] = None) -> list[ColorRun]:
    """Merge adjacent cells sharing an attribute into color runs.

    The run texts concatenated in order reproduce the row's glyphs exactly.
    With use_colors off every cell has no attribute, so the whole row
    collapses into a single run.
    """
    tileset = tileset or get_tileset_config()

    runs: list[ColorRun] = []
    current_text: list[str] = []
    current_attribute: Optional[ColorAttribute] = None

    for cell in row:
        attribute = cell_attribute(cell, tileset) if use_colors else None
        if current_text and attribute == current_attribute:
            current_text.append(cell.glyph)
            continue

        if current_text:
            runs.append(ColorRun("".join(current_text), current_attribute))
        current_text = [cell.glyph]
        current_attribute = attribute

    if current_text:
        runs.append(ColorRun("".join(current_text), current_attribute))

    return runs


def colorize_grid(grid: Sequence[Sequence[GridCell]], use_colors: bool = True,
                  tileset: Optional[TilesetConfig] = None) -> list[list[ColorRun]]:
    return [colorize_row(row, use_colors, tileset) for row in grid]
