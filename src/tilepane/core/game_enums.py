"""Centralized enums and constants for pane rendering.

This module contains the enums shared by the grid pane, the log panes and the
renderers, providing a single source of truth for terrain categories, entry
levels and display attributes.
"""

from enum import Enum, auto


class TerrainType(Enum):
    """Terrain categories a map cell can carry."""
    GRASS = auto()
    WATER = auto()
    MOUNTAIN = auto()
    FOREST = auto()
    DESERT = auto()
    ROAD = auto()
    PLAINS = auto()
    SWAMP = auto()
    SNOW = auto()
    SAND = auto()

    @classmethod
    def from_name(cls, name: str) -> "TerrainType":
        """Look up a terrain type by its case-insensitive name.

        Raises:
            KeyError: if the name is not a known terrain category
        """
        return cls[name.upper()]


class EntryLevel(Enum):
    """Severity levels of console log entries."""
    ERROR = "error"
    WARN = "warn"
    INFO = "info"
    DEBUG = "debug"
    TRACE = "trace"


class ColorAttribute(Enum):
    """Foreground colors a styled fragment or color run can carry."""
    GRAY = "gray"
    BLUE = "blue"
    WHITE = "white"
    GREEN = "green"
    YELLOW = "yellow"
    CYAN = "cyan"
    MAGENTA = "magenta"
    RED = "red"


DEFAULT_TERRAIN = TerrainType.GRASS

UNKNOWN_TERRAIN_GLYPH = "?"
