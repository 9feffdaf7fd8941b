"""
Integration tests for painting frames.

Tests the terminal renderers end to end: world snapshot in, painted lines
out, including borders, pane heights, arrangement and escape codes.
"""
from datetime import datetime

import pytest

from tilepane import render_game, render_map
from tilepane.core.game_enums import ColorAttribute
from tilepane.core.renderable import PaneRenderData, StyledText, TextLine
from tilepane.core.renderer import GameRendererConfig, RendererConfig
from tilepane.game.map import GameMap, World
from tilepane.game.render_builder import RenderBuilder
from tilepane.panes.grid import GridOptions
from tilepane.renderers.simple_renderer import SimpleRenderer
from tilepane.renderers.terminal_renderer import TerminalRenderer


def render_plain(world, actors=(), config=None, width=100, clock=datetime.now, **kwargs):
    renderer = SimpleRenderer()
    builder = RenderBuilder(config=config, renderer_config=renderer.config, clock=clock)
    renderer.render_frame(builder.build_render_context(world, actors, terminal_width=width, **kwargs))
    return renderer.lines


class TestSimpleRenderer:
    """Test plain text frames."""

    def test_frame_contains_map(self, world, small_map, test_unit, fixed_clock):
        small_map.set_terrain(1, 1, "water")

        lines = render_plain(world, [test_unit], clock=fixed_clock)

        frame = "\n".join(lines)
        assert "Map: Test Map (5x5)" in frame
        assert " 1|.~..." in lines
        assert " 2|..T.." in lines

    def test_header_line(self, world, fixed_clock):
        lines = render_plain(world, clock=fixed_clock, width=60)

        assert lines[0].startswith("Takao Engine - Game View")
        assert lines[0].endswith("09:05:00 PM")
        assert len(lines[0]) == 60

    def test_no_escape_codes(self, world, test_unit):
        config = GameRendererConfig(show_unit_positions=True, show_diary=True, show_console=True)

        frame = "\n".join(render_plain(world, [test_unit], config=config))

        assert "\033[" not in frame

    def test_does_not_modify_caller_config(self):
        config = RendererConfig()

        SimpleRenderer(config)

        assert config.use_colors is True

    def test_unit_summary(self, world, test_unit):
        config = GameRendererConfig(show_unit_positions=True)

        frame = "\n".join(render_plain(world, [test_unit], config=config))

        assert "Unit Positions:" in frame
        assert "TestUnit (TEST_UNI...) at Test Map (2, 2)" in frame

    def test_no_maps(self):
        assert "No maps available" in render_plain(World())

    @pytest.mark.parametrize("width", [60, 100, 140])
    def test_lines_fit_terminal(self, world, test_unit, diary_entry_factory, width):
        config = GameRendererConfig(show_unit_positions=True, show_diary=True, show_console=True)
        entries = [diary_entry_factory(i, "Goblin ambushes the Hero from behind the ridge "
                                          "and strikes with a rusty blade") for i in range(10)]

        lines = render_plain(world, [test_unit], config=config, width=width, diary_entries=entries)

        assert all(len(line) <= width for line in lines)


class TestPaneArrangement:
    """Test side-by-side and stacked diary placement."""

    def test_side_by_side(self, world):
        lines = render_plain(world, config=GameRendererConfig(show_diary=True), width=100)

        top = next(line for line in lines if "Map: Test Map" in line)
        assert "╭─ Action Diary ─" in top

    def test_stacked_on_narrow_terminal(self, world):
        lines = render_plain(world, config=GameRendererConfig(show_diary=True), width=70)

        map_index = next(i for i, line in enumerate(lines) if "Map: Test Map" in line)
        diary_index = next(i for i, line in enumerate(lines) if "Action Diary" in line)
        assert diary_index > map_index
        assert "Action Diary" not in lines[map_index]

    def test_diary_pane_is_full_height(self, world):
        """Test that a pane spans exactly its height, empty or not."""
        lines = render_plain(world, config=GameRendererConfig(show_diary=True), width=70)

        pane = [line for line in lines if line[:1] in ("╭", "│", "╰")]
        assert len(pane) == 30
        assert pane[0].startswith("╭") and pane[-1].startswith("╰")
        assert all(len(line) == 70 for line in pane)

    def test_empty_diary_message(self, world):
        frame = "\n".join(render_plain(world, config=GameRendererConfig(show_diary=True), width=70))

        assert "No actions executed yet..." in frame

    def test_console_below(self, world, console_entry_factory):
        config = GameRendererConfig(show_console=True, console_max_height=8)

        lines = render_plain(world, config=config, width=70,
                             console_entries=[console_entry_factory("Map loaded")])

        assert lines[-1].startswith("╰")
        assert any("09:05 PM | INFO  | Map loaded" in line for line in lines)
        assert len([line for line in lines if line[:1] in ("╭", "│", "╰")]) == 8


class TestPaneClipping:
    """Test clipping of content that overflows a pane."""

    def test_oversized_entry_clipped_to_height(self):
        lines = [TextLine([StyledText(f"row {i}")]) for i in range(10)]
        pane = PaneRenderData("Console Log", lines, height=5, width=30)

        block = SimpleRenderer()._pane_block(pane)

        assert len(block) == 5
        assert "row 1" in block[3].plain
        assert all("row 2" not in line.plain for line in block)

    def test_long_line_clipped_to_inner_width(self):
        pane = PaneRenderData("Log", [TextLine([StyledText("x" * 100)])], height=4, width=30)

        block = SimpleRenderer()._pane_block(pane)

        assert {line.width for line in block} == {30}


class TestColorRenderer:
    """Test ANSI painting."""

    def test_runs_painted_with_codes(self, world, small_map, fixed_clock):
        small_map.set_terrain(1, 1, "water")
        renderer = TerminalRenderer()
        builder = RenderBuilder(renderer_config=renderer.config, clock=fixed_clock)

        renderer.render_frame(builder.build_render_context(world, terminal_width=100))

        assert "\033[94m~\033[0m" in renderer.last_frame
        assert "\033[90m.\033[0m" in renderer.last_frame

    def test_paint_styles(self):
        renderer = TerminalRenderer()
        line = TextLine([StyledText("title", ColorAttribute.CYAN, bold=True), StyledText(" plain")])

        assert renderer._paint(line) == "\033[1m\033[96mtitle\033[0m plain"

    def test_present_flushes_buffer(self, world, capsys):
        renderer = TerminalRenderer(RendererConfig(use_colors=False))
        renderer.render_frame(RenderBuilder(renderer_config=renderer.config)
                              .build_render_context(world, terminal_width=80))

        renderer.present()

        assert "Map: Test Map (5x5)" in capsys.readouterr().out
        assert renderer.lines == []


class TestRenderFunctions:
    """Test the package level convenience functions."""

    def test_render_map(self, capsys, test_unit):
        game_map = GameMap(4, 2, "Test World Map")

        frame = render_map(game_map, [test_unit], GridOptions(use_colors=False))

        out = capsys.readouterr().out
        assert "Map: Test World Map (4x2)" in out
        assert frame.splitlines()[2:] == [" 0|....", " 1|...."]

    def test_render_map_with_water(self, capsys, small_map):
        small_map.set_terrain(2, 2, "water")

        frame = render_map(small_map, options=GridOptions(use_colors=False))

        assert "Test Map" in frame
        assert " 2|..~.." in frame.splitlines()
        capsys.readouterr()

    def test_render_map_colored(self, capsys, small_map, test_unit):
        frame = render_map(small_map, {test_unit.id: test_unit})

        assert "\033[92mT\033[0m" in frame
        capsys.readouterr()

    def test_render_game(self, capsys, world, test_unit, diary_entry_factory):
        frame = render_game(
            world, [test_unit],
            config=GameRendererConfig(show_diary=True, show_unit_positions=True),
            diary_entries=[diary_entry_factory(1, "Hero moves north")],
            renderer_config=RendererConfig(width=100, use_colors=False),
        )

        assert "Hero moves" in frame
        assert "TestUnit" in frame
        assert frame in capsys.readouterr().out
