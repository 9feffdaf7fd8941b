from dataclasses import replace
from typing import Optional

from ..core.renderer import RendererConfig
from .terminal_renderer import TerminalRenderer


class SimpleRenderer(TerminalRenderer):
    """Plain-text renderer: same frame layout, no escape codes.

    Suited to pipes and to tests that inspect the frame text.
    """

    def __init__(self, config: Optional[RendererConfig] = None):
        super().__init__(replace(config or RendererConfig(), use_colors=False))
