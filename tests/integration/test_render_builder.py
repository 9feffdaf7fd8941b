"""
Integration tests for render context building.

Tests how the builder combines map composition, colorization, pane layout
and the log panes into one RenderContext per frame.
"""
from dataclasses import replace

import pytest

from tilepane.core.game_enums import ColorAttribute
from tilepane.core.records import StatChange
from tilepane.core.renderer import GameRendererConfig, RendererConfig
from tilepane.game.log_manager import LogCategory, LogManager
from tilepane.game.map import GameMap, World
from tilepane.game.render_builder import NO_MAPS_MESSAGE, RenderBuilder, map_title
from tilepane.panes.log_panes import DIARY_EMPTY_MESSAGE


@pytest.fixture
def builder(fixed_clock):
    return RenderBuilder(clock=fixed_clock)


class TestMapPanes:
    """Test the map panes of the context."""

    def test_map_rows(self, builder, world, small_map, test_unit):
        small_map.set_terrain(1, 1, "water")

        context = builder.build_render_context(world, [test_unit], terminal_width=100)

        pane = context.maps[0]
        assert pane.title == "Map: Test Map (5x5)"
        assert pane.plain_rows == [" 0|.....", " 1|.~...", " 2|..T..", " 3|.....", " 4|....."]

    def test_actor_registry_mapping(self, builder, world, test_unit):
        """Test that actors may be passed as an id to actor mapping."""
        context = builder.build_render_context(world, {test_unit.id: test_unit}, terminal_width=100)

        assert context.maps[0].plain_rows[2] == " 2|..T.."

    def test_colored_runs(self, builder, world, small_map):
        small_map.set_terrain(1, 1, "water")

        context = builder.build_render_context(world, terminal_width=100)

        attributes = [run.attribute for run in context.maps[0].rows[1]]
        assert attributes == [None, ColorAttribute.GRAY, ColorAttribute.BLUE, ColorAttribute.GRAY]

    def test_plain_renderer_config_disables_colors(self, world, fixed_clock):
        builder = RenderBuilder(renderer_config=RendererConfig(use_colors=False), clock=fixed_clock)

        context = builder.build_render_context(world, terminal_width=100)

        assert all(len(row) == 1 for row in context.maps[0].rows)

    def test_no_maps(self, builder):
        context = builder.build_render_context(World(), terminal_width=100)

        assert context.maps == []
        assert context.no_maps_message == NO_MAPS_MESSAGE

    def test_selected_map(self, fixed_clock, world):
        world.add_map(GameMap(3, 2, "Other"))
        builder = RenderBuilder(GameRendererConfig(selected_map="Other"), clock=fixed_clock)

        context = builder.build_render_context(world, terminal_width=100)

        assert [pane.map_name for pane in context.maps] == ["Other"]

    def test_map_title(self):
        assert map_title(GameMap(12, 8, "Forest Path")) == "Map: Forest Path (12x8)"


class TestContextHeader:
    """Test header and width decisions."""

    def test_header(self, builder, world):
        context = builder.build_render_context(world, terminal_width=100)

        assert context.header_title == "Takao Engine - Game View"
        assert context.header_time == "09:05:00 PM"

    def test_width_argument_overrides_config(self, world, fixed_clock):
        builder = RenderBuilder(renderer_config=RendererConfig(width=60), clock=fixed_clock)

        assert builder.build_render_context(world).terminal_width == 60
        assert builder.build_render_context(world, terminal_width=120).terminal_width == 120

    @pytest.mark.parametrize("width,expected", [(70, True), (100, False)])
    def test_column_layout(self, builder, world, width, expected):
        assert builder.build_render_context(world, terminal_width=width).use_column_layout is expected


class TestUnitSummary:
    """Test the unit position summary."""

    def test_summary_lines(self, fixed_clock, world, test_unit):
        builder = RenderBuilder(GameRendererConfig(show_unit_positions=True), clock=fixed_clock)

        context = builder.build_render_context(world, [test_unit], terminal_width=100)

        assert [line.plain for line in context.unit_summary] == [
            "Unit Positions:",
            "TestUnit (TEST_UNI...) at Test Map (2, 2)",
        ]

    def test_summary_hidden_by_default(self, builder, world, test_unit):
        assert builder.build_render_context(world, [test_unit], terminal_width=100).unit_summary == []


class TestSidePanes:
    """Test the diary and console panes of the context."""

    def test_diary_side_by_side(self, fixed_clock, world, diary_entry_factory):
        log_manager = LogManager()
        builder = RenderBuilder(GameRendererConfig(show_diary=True), log_manager=log_manager,
                                clock=fixed_clock)

        context = builder.build_render_context(
            world, diary_entries=[diary_entry_factory(1, "Hero moves")], terminal_width=100
        )

        assert context.diary_layout.resolved_width == 33
        assert context.diary.width == 33
        assert context.diary.height == 30
        assert context.map_column_width == 62
        layout_logs = log_manager.get_messages(categories={LogCategory.LAYOUT})
        assert [msg.text for msg in layout_logs] == ["Diary pane 33x30 (row layout, width 100)"]

    def test_diary_stacked_on_narrow_terminal(self, fixed_clock, world):
        builder = RenderBuilder(GameRendererConfig(show_diary=True), clock=fixed_clock)

        context = builder.build_render_context(world, terminal_width=70)

        assert context.diary.width == 70
        assert context.map_column_width == 70
        assert context.diary.lines[0].plain == DIARY_EMPTY_MESSAGE

    @pytest.mark.parametrize("include,visible", [(True, True), (False, False)])
    def test_diary_stat_changes_option(self, fixed_clock, world, diary_entry_factory,
                                       include, visible):
        """Test that the config decides whether stat changes reach the diary."""
        entry = replace(diary_entry_factory(1, "Goblin strikes"),
                        stat_changes=(StatChange("P1", "Hero", "hp", 20, 14),))
        config = GameRendererConfig(show_diary=True, diary_include_stat_changes=include)
        builder = RenderBuilder(config, clock=fixed_clock)

        context = builder.build_render_context(world, diary_entries=[entry], terminal_width=70)

        text = " ".join(line.plain for line in context.diary.lines)
        assert "Goblin strikes" in text
        assert ("(Hero: hp 20 -> 14)" in text) is visible

    def test_console_defaults_to_log_messages(self, fixed_clock, world):
        log_manager = LogManager()
        log_manager.system("World ready")
        builder = RenderBuilder(GameRendererConfig(show_console=True), log_manager=log_manager,
                                clock=fixed_clock)

        context = builder.build_render_context(world, terminal_width=100)

        assert context.console.lines[0].plain.endswith("[SYS] World ready")

    def test_explicit_console_entries(self, fixed_clock, world, console_entry_factory):
        log_manager = LogManager()
        log_manager.system("from the log")
        builder = RenderBuilder(GameRendererConfig(show_console=True), log_manager=log_manager,
                                clock=fixed_clock)

        context = builder.build_render_context(
            world, console_entries=[console_entry_factory("given")], terminal_width=100
        )

        assert [line.plain for line in context.console.lines] == ["09:05 PM | INFO  | given"]

    def test_panes_hidden_by_default(self, builder, world):
        context = builder.build_render_context(world, terminal_width=100)

        assert context.diary is None
        assert context.console is None
