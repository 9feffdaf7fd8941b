"""
Basic test fixtures for the tilepane test suite.

Provides simple fixtures and builders for testing the panes, the world model
and the renderers.
"""

import sys
import os
from datetime import datetime, timedelta

import pytest

# Add the source root to the Python path
project_root = os.path.dirname(os.path.dirname(os.path.abspath(__file__)))
sys.path.insert(0, os.path.join(project_root, "src"))

from tilepane.core.game_enums import EntryLevel
from tilepane.core.records import ConsoleEntry, DiaryAction, DiaryEntry
from tilepane.core.renderable import PreparedEntry
from tilepane.game.map import GameMap, World
from tilepane.game.unit import Actor


BASE_TIME = datetime(2024, 1, 1, 21, 5)


def make_prepared(lines_needed: int, sequence: int = 0) -> PreparedEntry:
    """Build a prepared entry occupying lines_needed rows."""
    source = ConsoleEntry(BASE_TIME, EntryLevel.INFO, f"entry {sequence}", sequence=sequence)
    lines = tuple(f"line {i}" for i in range(lines_needed))
    return PreparedEntry(
        source=source,
        leading_label="09:05 PM",
        trailing_label="INFO",
        leading_col_width=8,
        trailing_col_width=5,
        wrapped_lines=lines,
        lines_needed=lines_needed,
    )


def make_console_entry(message: str, level: EntryLevel = EntryLevel.INFO,
                       sequence: int = 0, prefix=None) -> ConsoleEntry:
    return ConsoleEntry(BASE_TIME + timedelta(minutes=sequence), level, message,
                        prefix=prefix, sequence=sequence)


def make_diary_entry(turn: int, description: str, player: str = "Hero") -> DiaryEntry:
    return DiaryEntry(turn, BASE_TIME + timedelta(minutes=turn),
                      DiaryAction(player=player, type="move", description=description))


@pytest.fixture
def small_map():
    """Create a small 5x5 map for testing."""
    return GameMap(5, 5, "Test Map")


@pytest.fixture
def world(small_map):
    """Create a world holding the small test map."""
    world = World()
    world.add_map(small_map)
    return world


@pytest.fixture
def test_unit():
    """Create an actor standing at (2, 2) on the small test map."""
    unit = Actor("TEST_UNIT", "TestUnit")
    unit.place("Test Map", 2, 2)
    return unit


@pytest.fixture
def fixed_clock():
    """Clock returning a constant time, for stable frame headers."""
    return lambda: BASE_TIME


@pytest.fixture
def prepared_factory():
    """Factory for prepared entries of a given height."""
    return make_prepared


@pytest.fixture
def console_entry_factory():
    """Factory for console entries."""
    return make_console_entry


@pytest.fixture
def diary_entry_factory():
    """Factory for diary entries."""
    return make_diary_entry
