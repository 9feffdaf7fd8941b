"""
Render context building for the game view.

This module converts one snapshot of the world (maps, actors, diary and log
entries) into a RenderContext that any renderer implementation can paint. It
is invoked by the host once per frame with all of its inputs passed in.
"""
from collections.abc import Mapping
from datetime import datetime
from typing import Callable, Iterable, Optional, Sequence, Union, TYPE_CHECKING

from ..core.records import ConsoleEntry, DiaryEntry
from ..core.renderable import MapPaneRenderData, RenderContext, StyledText, TextLine
from ..core.renderer import GameRendererConfig, RendererConfig
from ..panes.colorizer import colorize_grid
from ..panes.grid import ActorLike, GridComposer, GridOptions, MapLike
from ..panes.layout import (
    get_terminal_width, resolve_diary_layout, resolve_map_width, should_use_column_layout
)
from ..panes.log_panes import build_console_pane, build_diary_pane

if TYPE_CHECKING:
    from .log_manager import LogManager
    from .map import World


NO_MAPS_MESSAGE = "No maps available"

Actors = Union[Mapping, Iterable[ActorLike]]


def map_title(game_map: MapLike) -> str:
    return f"Map: {game_map.name} ({game_map.width}x{game_map.height})"


def unit_position_lines(actors: Sequence[ActorLike]) -> list[TextLine]:
    """Build the "Unit Positions:" summary, one line per positioned actor."""
    lines = []
    for actor in actors:
        info = actor.get_property_value("position")
        if info is None:
            continue
        name = actor.name or actor.id
        lines.append(TextLine([StyledText(
            f"{name} ({actor.id[:8]}...) at {info.map_id} ({info.x}, {info.y})"
        )]))
    if not lines:
        return []
    return [TextLine([StyledText("Unit Positions:", bold=True)])] + lines


class RenderBuilder:
    """Builds render contexts from world snapshots."""

    def __init__(
        self,
        config: Optional[GameRendererConfig] = None,
        renderer_config: Optional[RendererConfig] = None,
        grid_options: Optional[GridOptions] = None,
        composer: Optional[GridComposer] = None,
        log_manager: Optional["LogManager"] = None,
        clock: Callable[[], datetime] = datetime.now,
    ):
        self.config = config or GameRendererConfig()
        self.renderer_config = renderer_config or RendererConfig()
        self.log_manager = log_manager
        self.composer = composer or GridComposer(log_manager=log_manager)
        self.grid_options = grid_options or GridOptions(use_colors=self.renderer_config.use_colors)
        self.clock = clock

    def build_render_context(
        self,
        world: "World",
        actors: Actors = (),
        diary_entries: Sequence[DiaryEntry] = (),
        console_entries: Optional[Sequence[ConsoleEntry]] = None,
        terminal_width: Optional[int] = None,
    ) -> RenderContext:
        """Build the complete render context for one frame.

        Args:
            actors: The actor registry, as a mapping of id to actor or any iterable
            console_entries: Entries for the console pane; defaults to the log
                manager's visible messages
            terminal_width: Overrides the configured and detected terminal width
        """
        width = terminal_width or self.renderer_config.width or get_terminal_width()
        use_column_layout = should_use_column_layout(width)
        actor_list = list(actors.values()) if isinstance(actors, Mapping) else list(actors)

        context = RenderContext(
            terminal_width=width,
            use_column_layout=use_column_layout,
            header_title=self.renderer_config.title,
            header_time=self.clock().strftime("%I:%M:%S %p"),
        )

        maps = world.get_all_maps()
        if self.config.selected_map:
            maps = [game_map for game_map in maps if game_map.name == self.config.selected_map]

        if not maps:
            context.no_maps_message = NO_MAPS_MESSAGE
        for game_map in maps:
            context.maps.append(self.build_map_pane(game_map, actor_list))

        if self.config.show_unit_positions:
            context.unit_summary = unit_position_lines(actor_list)

        if self.config.show_diary:
            layout = resolve_diary_layout(self.config, width, use_column_layout)
            context.diary_layout = layout
            context.map_column_width = resolve_map_width(self.config, width, layout, use_column_layout)
            context.diary = build_diary_pane(
                diary_entries,
                max_entries=self.config.diary_max_entries,
                max_height=layout.height,
                title=self.config.diary_title,
                available_width=layout.resolved_width,
                include_stat_changes=self.config.diary_include_stat_changes,
            )
            if self.log_manager:
                arrangement = "column" if use_column_layout else "row"
                self.log_manager.layout(
                    f"Diary pane {layout.resolved_width}x{layout.height} ({arrangement} layout, width {width})"
                )

        if self.config.show_console:
            if console_entries is None:
                console_entries = self.log_manager.to_console_entries() if self.log_manager else []
            context.console = build_console_pane(
                console_entries,
                max_entries=self.config.console_max_entries,
                max_height=self.config.console_max_height,
                title=self.config.console_title,
                available_width=width,
            )

        return context

    def build_map_pane(self, game_map: MapLike, actors: Sequence[ActorLike]) -> MapPaneRenderData:
        """Compose and colorize one map."""
        grid = self.composer.compose(game_map, actors, self.grid_options)
        rows = colorize_grid(grid, self.grid_options.use_colors, self.composer.tileset)
        return MapPaneRenderData(map_name=game_map.name, title=map_title(game_map), rows=rows)
