from abc import ABC, abstractmethod
from typing import Optional, Union
from dataclasses import dataclass

from .renderable import RenderContext


DEFAULT_DIARY_HEIGHT = 30
MAX_DIARY_HEIGHT = 50
DEFAULT_CONSOLE_HEIGHT = 12
MAX_CONSOLE_HEIGHT = 30


@dataclass
class RendererConfig:
    width: Optional[int] = None  # None means ask the terminal
    title: str = "Takao Engine - Game View"
    use_colors: bool = True


@dataclass
class GameRendererConfig:
    """Options for the panes of the game view."""
    show_unit_positions: bool = False
    selected_map: Optional[str] = None

    show_diary: bool = False
    diary_max_entries: int = 20
    diary_title: str = "Action Diary"
    diary_max_height: Optional[int] = None
    diary_include_stat_changes: bool = False

    show_console: bool = False
    console_max_entries: int = 200
    console_title: str = "Console Log"
    console_max_height: int = DEFAULT_CONSOLE_HEIGHT

    map_width_percentage: int = 65
    diary_width_percentage: int = 35
    min_diary_width: int = 30
    max_diary_width: Optional[Union[int, str]] = None


class Renderer(ABC):

    def __init__(self, config: Optional[RendererConfig] = None):
        self.config = config or RendererConfig()
        self._buffer: list[str] = []

    @abstractmethod
    def render_frame(self, context: RenderContext) -> None:
        pass

    def present(self) -> None:
        for line in self._buffer:
            print(line)
        self._buffer.clear()

    @property
    def lines(self) -> list[str]:
        """Lines produced by the last render_frame call."""
        return list(self._buffer)

    @property
    def last_frame(self) -> str:
        return "\n".join(self._buffer)
