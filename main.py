#!/usr/bin/env python3

import os
import sys
from datetime import datetime, timedelta

sys.path.insert(0, os.path.join(os.path.dirname(os.path.abspath(__file__)), "src"))

from tilepane.core.records import StatChange
from tilepane.core.renderer import GameRendererConfig, RendererConfig
from tilepane.game.diary_manager import DiaryManager, GameAction
from tilepane.game.log_manager import LogManager
from tilepane.game.map import GameMap, World
from tilepane.game.render_builder import RenderBuilder
from tilepane.game.unit import Actor
from tilepane.renderers.terminal_renderer import TerminalRenderer


def create_demo_world() -> World:
    world = World()

    main_map = GameMap(15, 10, "Main Realm")
    main_map.fill_terrain(2, 2, 4, 4, "water")
    main_map.set_terrain(6, 6, "mountain")
    main_map.set_terrain(7, 6, "mountain")
    main_map.fill_terrain(8, 8, 10, 8, "forest")
    main_map.set_terrain(2, 8, "desert")
    main_map.set_terrain(12, 2, "road")
    world.add_map(main_map)

    forest_path = GameMap(12, 8, "Forest Path")
    forest_path.fill_terrain(0, 0, 11, 7, "forest")
    forest_path.fill_terrain(5, 0, 6, 7, "road")
    world.add_map(forest_path)

    return world


def create_demo_actors() -> dict[str, Actor]:
    placements = [
        ("PLAYER1", "Hero", "Main Realm", 1, 1),
        ("ENEMY1", "Goblin", "Main Realm", 8, 2),
        ("NPC1", "Merchant", "Main Realm", 10, 5),
        ("GUARD1", "Guard", "Forest Path", 5, 3),
        ("TRADER1", "Trader", "Forest Path", 6, 4),
    ]
    actors = {}
    for actor_id, name, map_id, x, y in placements:
        actor = Actor(actor_id, name)
        actor.place(map_id, x, y)
        actors[actor_id] = actor
    return actors


def record_demo_actions(diary: DiaryManager) -> None:
    start = datetime.now() - timedelta(minutes=10)
    diary.record_action(GameAction("a1", "Hero", "move", "Hero moves north along the old road", start))
    diary.record_action(
        GameAction("a2", "Goblin", "attack",
                   "Goblin ambushes the Hero from behind the ridge and strikes with a rusty blade",
                   start + timedelta(minutes=2)),
        [StatChange("PLAYER1", "Hero", "hp", 20, 14)],
    )
    diary.advance_turn()
    diary.record_action(GameAction("a3", "Merchant", "trade", "Merchant offers potions",
                                   start + timedelta(minutes=5)))


def main():
    log_manager = LogManager()
    log_manager.system("Demo world created")

    diary = DiaryManager(log_manager=log_manager)
    record_demo_actions(diary)

    renderer = TerminalRenderer(RendererConfig(title="Tilepane Rendering Demo"))
    builder = RenderBuilder(
        config=GameRendererConfig(show_unit_positions=True, show_diary=True, show_console=True,
                                  diary_include_stat_changes=True),
        renderer_config=renderer.config,
        log_manager=log_manager,
    )

    try:
        context = builder.build_render_context(
            create_demo_world(), create_demo_actors(), diary_entries=diary.get_entries()
        )
        renderer.render_frame(context)
        renderer.present()
    except KeyboardInterrupt:
        print("\n\nDemo interrupted by user")


if __name__ == "__main__":
    main()
