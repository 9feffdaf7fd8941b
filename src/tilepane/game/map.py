from dataclasses import dataclass, field
from typing import Optional, Union

import numpy as np

from ..core.exceptions import InvalidDimensions
from ..core.game_enums import DEFAULT_TERRAIN, TerrainType


@dataclass(frozen=True)
class Cell:
    """Terrain data for one map cell, as returned by GameMap.get_cell."""
    terrain: TerrainType


@dataclass(eq=False)
class GameMap:
    width: int
    height: int
    name: str = "Map"
    terrain: np.ndarray = field(init=False, repr=False)
    # Bumped on every terrain edit so cached grids can tell the map changed
    revision: int = field(default=0, init=False)

    def __post_init__(self):
        if self.width <= 0 or self.height <= 0:
            raise InvalidDimensions(self.width, self.height)

        # uint8 is plenty for the terrain enum; indexed [y, x]
        self.terrain = np.full((self.height, self.width), DEFAULT_TERRAIN.value, dtype=np.uint8)

    def is_valid_position(self, x: int, y: int) -> bool:
        return 0 <= x < self.width and 0 <= y < self.height

    def get_cell(self, x: int, y: int) -> Optional[Cell]:
        """Terrain at (x, y), or None outside the map."""
        if not self.is_valid_position(x, y):
            return None
        return Cell(TerrainType(int(self.terrain[y, x])))

    def set_terrain(self, x: int, y: int, terrain: Union[TerrainType, str]) -> None:
        """Set the terrain at (x, y).

        Args:
            terrain: A TerrainType or its case-insensitive name

        Raises:
            IndexError: if the position is outside the map
            KeyError: if a terrain name is unknown
        """
        if not self.is_valid_position(x, y):
            raise IndexError(f"Position ({x}, {y}) is outside map '{self.name}' ({self.width}x{self.height})")
        if isinstance(terrain, str):
            terrain = TerrainType.from_name(terrain)
        self.terrain[y, x] = terrain.value
        self.revision += 1

    def fill_terrain(self, x0: int, y0: int, x1: int, y1: int, terrain: Union[TerrainType, str]) -> None:
        """Set the terrain of the inclusive rectangle (x0, y0)-(x1, y1), clipped to the map."""
        if isinstance(terrain, str):
            terrain = TerrainType.from_name(terrain)
        xs = slice(max(0, min(x0, x1)), min(self.width, max(x0, x1) + 1))
        ys = slice(max(0, min(y0, y1)), min(self.height, max(y0, y1) + 1))
        self.terrain[ys, xs] = terrain.value
        self.revision += 1


class World:
    """Registry of maps by name, in insertion order."""

    def __init__(self):
        self._maps: dict[str, GameMap] = {}

    def add_map(self, game_map: GameMap) -> None:
        if game_map.name in self._maps:
            raise ValueError(f"A map named '{game_map.name}' already exists")
        self._maps[game_map.name] = game_map

    def get_map(self, name: str) -> Optional[GameMap]:
        return self._maps.get(name)

    def get_all_maps(self) -> list[GameMap]:
        return list(self._maps.values())

    def __len__(self) -> int:
        return len(self._maps)
