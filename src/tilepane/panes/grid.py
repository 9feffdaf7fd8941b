"""
Grid composition for the map pane.

Resolves the glyph and visual category of every map cell. Actors standing on a
cell take precedence over its terrain. Actor positions are indexed once per
composition pass so the pass costs O(actors + cells).
"""
from dataclasses import dataclass
from typing import Any, Iterable, Optional, Protocol, TYPE_CHECKING

from ..core.data_structures import position_key
from ..core.exceptions import InvalidDimensions
from ..core.game_enums import DEFAULT_TERRAIN, TerrainType
from ..core.renderable import GridCell
from ..core.tileset_loader import TilesetConfig, get_tileset_config

if TYPE_CHECKING:
    from ..game.log_manager import LogManager


class MapLike(Protocol):
    width: int
    height: int
    name: str

    def get_cell(self, x: int, y: int) -> Any: ...


class ActorLike(Protocol):
    id: str
    name: Optional[str]

    def get_property_value(self, name: str) -> Any: ...


@dataclass(frozen=True)
class GridOptions:
    """Display options for one map pane."""
    show_coordinates: bool = True
    cell_width: int = 1
    show_units: bool = True
    show_terrain: bool = True
    compact_view: bool = True
    use_colors: bool = True


def build_actor_positions(actors: Iterable[ActorLike], map_name: str) -> dict[str, ActorLike]:
    """Index the actors standing on map_name by their "x,y" key.

    Actors without a position, or positioned on another map, are left out.
    When two actors share a cell the one listed last wins.
    """
    positions: dict[str, ActorLike] = {}
    for actor in actors:
        info = actor.get_property_value("position")
        if info is None or info.map_id != map_name:
            continue
        positions[info.position.to_key()] = actor
    return positions


def actor_signature(actors: Iterable[ActorLike]) -> str:
    """Content signature of every placed actor: its id, name and cell.

    The name is part of the signature because it decides the glyph. Two
    registries with the same actors on the same cells produce the same
    signature regardless of iteration order or object identity.
    """
    parts = []
    for actor in actors:
        info = actor.get_property_value("position")
        if info is None:
            continue
        parts.append(f"{actor.id}:{actor.name or ''}:{info.map_id}:{info.x},{info.y}")
    return "|".join(sorted(parts))


def actor_glyph(actor: ActorLike) -> str:
    """First character of the actor's name (or id), uppercased."""
    label = actor.name or actor.id
    return label[:1].upper()


def resolve_terrain(map_cell: Any) -> Optional[TerrainType]:
    """Terrain category of a map cell.

    Missing cells fall back to the default terrain. Categories given by name
    are looked up; unknown names resolve to None, which renders the sentinel.
    """
    if map_cell is None or getattr(map_cell, "terrain", None) is None:
        return DEFAULT_TERRAIN
    terrain = map_cell.terrain
    if isinstance(terrain, TerrainType):
        return terrain
    try:
        return TerrainType.from_name(str(terrain))
    except KeyError:
        return None


def coordinate_label(y: int, compact_view: bool) -> GridCell:
    label = f"{y:>2}"
    return GridCell(f"{label}|" if compact_view else f"{label} |")


def pad_glyph(glyph: str, options: GridOptions) -> str:
    """Apply exactly one padding policy to a cell glyph."""
    if options.cell_width > 1:
        return glyph.ljust(options.cell_width)
    if not options.compact_view:
        return glyph + " "
    return glyph


class GridComposer:
    """Composes map grids, reusing the last grid when nothing moved."""

    def __init__(self, tileset: Optional[TilesetConfig] = None,
                 log_manager: Optional["LogManager"] = None):
        self.tileset = tileset or get_tileset_config()
        self.log_manager = log_manager
        # map name -> (map identity and revision, options, actor signature, grid)
        self._cache: dict[str, tuple[tuple[int, int], GridOptions, str, list[list[GridCell]]]] = {}

    def compose(self, game_map: MapLike, actors: Iterable[ActorLike],
                options: Optional[GridOptions] = None) -> list[list[GridCell]]:
        """Compose the grid of game_map, one row of GridCells per map row.

        Raises:
            InvalidDimensions: if the map has a non-positive width or height
        """
        options = options or GridOptions()
        if game_map.width <= 0 or game_map.height <= 0:
            raise InvalidDimensions(game_map.width, game_map.height)

        actors = list(actors)
        signature = actor_signature(actors)
        map_key = (id(game_map), getattr(game_map, "revision", 0))
        cached = self._cache.get(game_map.name)
        if cached and cached[0] == map_key and cached[1] == options and cached[2] == signature:
            if self.log_manager:
                self.log_manager.map(f"Reusing grid for '{game_map.name}'")
            return cached[3]

        actor_positions = build_actor_positions(actors, game_map.name) if options.show_units else {}
        grid = [self._compose_row(game_map, y, actor_positions, options)
                for y in range(game_map.height)]

        self._cache[game_map.name] = (map_key, options, signature, grid)
        if self.log_manager:
            self.log_manager.map(
                f"Composed '{game_map.name}' ({game_map.width}x{game_map.height}, "
                f"{len(actor_positions)} actors)"
            )
        return grid

    def _compose_row(self, game_map: MapLike, y: int,
                     actor_positions: dict[str, ActorLike], options: GridOptions) -> list[GridCell]:
        row: list[GridCell] = []
        if options.show_coordinates:
            row.append(coordinate_label(y, options.compact_view))

        for x in range(game_map.width):
            actor = actor_positions.get(position_key(x, y))
            if actor is not None:
                cell = GridCell(actor_glyph(actor), is_actor=True)
            elif options.show_terrain:
                terrain = resolve_terrain(game_map.get_cell(x, y))
                cell = GridCell(self.tileset.get_symbol(terrain), terrain=terrain)
            else:
                cell = GridCell("")

            row.append(GridCell(pad_glyph(cell.glyph, options), cell.is_actor, cell.terrain))
        return row

    def invalidate(self, map_name: Optional[str] = None) -> None:
        """Drop cached grids, for one map or all of them."""
        if map_name is None:
            self._cache.clear()
        else:
            self._cache.pop(map_name, None)
