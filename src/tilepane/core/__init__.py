"""Core data types and configuration.

This package contains the types shared by the panes and the renderers:
- game_enums.py: terrain categories, entry levels and color attributes
- data_structures.py: Vector2 and actor position info
- records.py: raw console and diary entries
- renderable.py: render data produced by the panes
- renderer.py: renderer base class and configuration dataclasses
- tileset_loader.py: YAML-driven glyph/color tables and pane options
"""
