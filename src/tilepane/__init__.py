"""Bounded terminal panes for turn-based simulations.

Two kinds of panes are provided: height-constrained log panes (console log and
action diary) and tile grid panes (terrain with an actor overlay). The
convenience functions below render one frame to stdout.
"""
from collections.abc import Mapping
from typing import Optional, Sequence

from .core.records import ConsoleEntry, DiaryEntry
from .core.renderer import GameRendererConfig, RendererConfig
from .game.render_builder import Actors, RenderBuilder
from .panes.grid import GridOptions, MapLike
from .renderers.simple_renderer import SimpleRenderer
from .renderers.terminal_renderer import TerminalRenderer

__all__ = [
    "render_map",
    "render_game",
]


def _make_renderer(renderer_config: RendererConfig) -> TerminalRenderer:
    if renderer_config.use_colors:
        return TerminalRenderer(renderer_config)
    return SimpleRenderer(renderer_config)


def render_map(game_map: MapLike, units: Actors = (),
               options: Optional[GridOptions] = None) -> str:
    """Render a single map to stdout and return the painted frame."""
    options = options or GridOptions()
    renderer = _make_renderer(RendererConfig(use_colors=options.use_colors))
    builder = RenderBuilder(renderer_config=renderer.config, grid_options=options)

    actors = list(units.values()) if isinstance(units, Mapping) else list(units)
    renderer.render_map_frame(builder.build_map_pane(game_map, actors))
    frame = renderer.last_frame
    renderer.present()
    return frame


def render_game(world, units: Actors = (), config: Optional[GameRendererConfig] = None,
                diary_entries: Sequence[DiaryEntry] = (),
                console_entries: Optional[Sequence[ConsoleEntry]] = None,
                renderer_config: Optional[RendererConfig] = None) -> str:
    """Render the whole game view to stdout and return the painted frame."""
    renderer = _make_renderer(renderer_config or RendererConfig())
    builder = RenderBuilder(config=config, renderer_config=renderer.config)

    renderer.render_frame(builder.build_render_context(
        world, units, diary_entries=diary_entries, console_entries=console_entries
    ))
    frame = renderer.last_frame
    renderer.present()
    return frame
