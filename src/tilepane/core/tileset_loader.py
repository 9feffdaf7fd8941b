"""Tileset and renderer configuration loading for data-driven rendering.

This module loads the terrain glyph/color tables and the pane options from YAML
files, so display properties are defined externally rather than hardcoded in
the composers or renderers.
"""

import os
from dataclasses import fields
from pathlib import Path
from typing import Any, Optional

import yaml

from .game_enums import ColorAttribute, TerrainType, UNKNOWN_TERRAIN_GLYPH
from .renderer import GameRendererConfig


class TilesetConfig:
    """Container for tileset configuration data."""

    def __init__(self, config_data: dict[str, Any]):
        self.terrain_symbols: dict[TerrainType, str] = {}
        self.terrain_colors: dict[TerrainType, ColorAttribute] = {}

        terrain_data = config_data.get("terrain", {})
        if not isinstance(terrain_data, dict):
            raise ValueError("Tileset 'terrain' section must be a mapping")

        for terrain_name, tile in terrain_data.items():
            try:
                terrain_type = TerrainType.from_name(str(terrain_name))
            except KeyError:
                raise ValueError(f"Unknown terrain type in tileset: {terrain_name}") from None
            tile = tile or {}
            if "symbol" in tile:
                self.terrain_symbols[terrain_type] = str(tile["symbol"])
            if "color" in tile:
                self.terrain_colors[terrain_type] = _parse_color(tile["color"])

        self.actor_color = _parse_color(config_data.get("actor_color", "green"))

    def get_symbol(self, terrain_type: Optional[TerrainType]) -> str:
        """Glyph for a terrain type, or the sentinel glyph when unknown."""
        if terrain_type is None:
            return UNKNOWN_TERRAIN_GLYPH
        return self.terrain_symbols.get(terrain_type, UNKNOWN_TERRAIN_GLYPH)

    def get_color(self, terrain_type: Optional[TerrainType]) -> Optional[ColorAttribute]:
        if terrain_type is None:
            return None
        return self.terrain_colors.get(terrain_type)


def _parse_color(value: Any) -> ColorAttribute:
    try:
        return ColorAttribute(str(value).lower())
    except ValueError:
        raise ValueError(f"Unknown color in tileset: {value}") from None


# Built-in ASCII tileset, used when no tileset file can be found
FALLBACK_TILESET = {
    "actor_color": "green",
    "terrain": {
        "grass": {"symbol": ".", "color": "gray"},
        "water": {"symbol": "~", "color": "blue"},
        "mountain": {"symbol": "^", "color": "white"},
        "forest": {"symbol": "t", "color": "green"},
        "desert": {"symbol": "#", "color": "yellow"},
        "road": {"symbol": "=", "color": "gray"},
        "plains": {"symbol": ".", "color": "cyan"},
        "swamp": {"symbol": ":", "color": "magenta"},
        "snow": {"symbol": "*", "color": "white"},
        "sand": {"symbol": "-", "color": "yellow"},
    },
}

TILESET_FILE = Path("assets") / "tileset.yaml"


def find_tileset_file(start: Path, max_depth: int = 5) -> Optional[Path]:
    """Nearest assets/tileset.yaml at or above start, if any."""
    for directory in [start, *start.parents][:max_depth]:
        candidate = directory / TILESET_FILE
        if candidate.is_file():
            return candidate
    return None


class TilesetLoader:
    """Reads a tileset file once and keeps the parsed result."""

    def __init__(self, tileset_path: Optional[str] = None):
        found = find_tileset_file(Path(__file__).resolve().parent)
        self.tileset_path = tileset_path or str(found or TILESET_FILE)
        self._config: Optional[TilesetConfig] = None

    def load_config(self, force_reload: bool = False) -> TilesetConfig:
        """Parsed tileset; the built-in table when the file is missing.

        Raises:
            ValueError: if the file holds something other than a valid tileset mapping
        """
        if self._config is None or force_reload:
            self._config = self._read()
        return self._config

    def _read(self) -> TilesetConfig:
        if not os.path.exists(self.tileset_path):
            return TilesetConfig(FALLBACK_TILESET)

        with open(self.tileset_path, "r", encoding="utf-8") as file:
            data = yaml.safe_load(file) or {}
        if not isinstance(data, dict):
            raise ValueError(f"Tileset file must contain a mapping: {self.tileset_path}")
        return TilesetConfig(data)


_default_loader = TilesetLoader()


def get_tileset_config(force_reload: bool = False) -> TilesetConfig:
    """Tileset shared by every composer that is not given its own."""
    return _default_loader.load_config(force_reload)


def load_renderer_config(file_path: str) -> GameRendererConfig:
    """Read pane options from a YAML mapping.

    Keys match the GameRendererConfig field names; unknown keys are rejected.

    Raises:
        FileNotFoundError: if the file does not exist
        ValueError: if the file is not valid YAML or holds unknown keys
    """
    if not os.path.exists(file_path):
        raise FileNotFoundError(f"Renderer config file not found: {file_path}")

    try:
        with open(file_path, "r", encoding="utf-8") as file:
            data = yaml.safe_load(file) or {}
    except yaml.YAMLError as e:
        raise ValueError(f"Failed to parse YAML renderer config: {e}") from e

    if not isinstance(data, dict):
        raise ValueError("Renderer config must be a mapping")

    known = {f.name for f in fields(GameRendererConfig)}
    unknown = sorted(set(data) - known)
    if unknown:
        raise ValueError(f"Unknown renderer config keys: {', '.join(unknown)}")

    return GameRendererConfig(**data)
