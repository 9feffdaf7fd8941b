"""In-tree world model and per-frame orchestration.

- map.py: GameMap and World
- unit.py: Actor
- log_manager.py: categorized message buffer feeding the console pane
- diary_manager.py: per-turn action diary
- render_builder.py: world snapshot -> RenderContext
"""
