from typing import Optional

from ..core.game_enums import ColorAttribute
from ..core.renderer import Renderer, RendererConfig
from ..core.renderable import (
    MapPaneRenderData, PaneRenderData, RenderContext, StyledText, TextLine
)
from ..panes.layout import get_terminal_width, pane_content_rows, pane_inner_width


PANE_GAP = "  "


class TerminalRenderer(Renderer):
    """Paints a RenderContext as ANSI-colored terminal lines.

    Every styled fragment, and so every color run of a map row, costs one
    escape sequence and one reset.
    """

    def __init__(self, config: Optional[RendererConfig] = None):
        super().__init__(config)

        # Terminal-specific color mappings (ANSI codes)
        self.color_codes = {
            ColorAttribute.GRAY: "\033[90m",
            ColorAttribute.BLUE: "\033[94m",
            ColorAttribute.WHITE: "\033[97m",
            ColorAttribute.GREEN: "\033[92m",
            ColorAttribute.YELLOW: "\033[93m",
            ColorAttribute.CYAN: "\033[96m",
            ColorAttribute.MAGENTA: "\033[95m",
            ColorAttribute.RED: "\033[91m",
        }

        # Terminal control codes
        self.terminal_codes = {
            "reset": "\033[0m",
            "bold": "\033[1m",
            "dim": "\033[2m",
        }

        # Rounded pane borders
        self.border_chars = {
            "top_left": "╭",
            "top_right": "╮",
            "bottom_left": "╰",
            "bottom_right": "╯",
            "horizontal": "─",
            "vertical": "│",
        }

    def render_frame(self, context: RenderContext) -> None:
        self._buffer.clear()
        width = context.terminal_width or self.config.width or get_terminal_width()

        lines: list[TextLine] = [self._header_line(context, width), TextLine()]

        left = self._map_block(context)
        if context.diary is not None:
            right = self._pane_block(context.diary)
            if context.use_column_layout:
                lines.extend(left)
                lines.extend(right)
            else:
                lines.extend(self._side_by_side(left, right, context.map_column_width))
        else:
            lines.extend(left)

        if context.console is not None:
            lines.append(TextLine())
            lines.extend(self._pane_block(context.console))

        for line in lines:
            self._buffer.append(self._paint(self._clip(line, width)))

    def render_map_frame(self, map_pane: MapPaneRenderData) -> None:
        """Render a single map pane on its own, without header or side panes."""
        self._buffer.clear()
        for line in self._map_lines(map_pane):
            self._buffer.append(self._paint(line))

    def _paint(self, line: TextLine) -> str:
        """Convert a line of fragments to a string with escape codes."""
        parts = []
        for fragment in line.fragments:
            codes = ""
            if self.config.use_colors:
                if fragment.bold:
                    codes += self.terminal_codes["bold"]
                if fragment.dim:
                    codes += self.terminal_codes["dim"]
                if fragment.color is not None:
                    codes += self.color_codes[fragment.color]
            if codes and fragment.text:
                parts.append(codes + fragment.text + self.terminal_codes["reset"])
            else:
                parts.append(fragment.text)
        return "".join(parts)

    def _clip(self, line: TextLine, width: int) -> TextLine:
        """Truncate a line to width visible columns."""
        if line.width <= width:
            return line
        clipped: list[StyledText] = []
        remaining = width
        for fragment in line.fragments:
            if remaining <= 0:
                break
            text = fragment.text[:remaining]
            clipped.append(StyledText(text, fragment.color, fragment.bold, fragment.dim))
            remaining -= len(text)
        return TextLine(clipped)

    def _header_line(self, context: RenderContext, width: int) -> TextLine:
        title = context.header_title or self.config.title
        gap = max(width - len(title) - len(context.header_time), 1)
        return TextLine([
            StyledText(title, ColorAttribute.CYAN, bold=True),
            StyledText(" " * gap),
            StyledText(context.header_time, ColorAttribute.GRAY),
        ])

    def _map_block(self, context: RenderContext) -> list[TextLine]:
        lines: list[TextLine] = []
        if context.no_maps_message:
            lines.append(TextLine([StyledText(context.no_maps_message, ColorAttribute.YELLOW)]))

        for index, map_pane in enumerate(context.maps):
            if index > 0:
                lines.append(TextLine())
            lines.extend(self._map_lines(map_pane))

        if context.unit_summary:
            lines.append(TextLine())
            lines.extend(context.unit_summary)
        return lines

    def _map_lines(self, map_pane: MapPaneRenderData) -> list[TextLine]:
        lines = [TextLine([StyledText(map_pane.title, bold=True)]), TextLine()]
        for row in map_pane.rows:
            lines.append(TextLine([StyledText(run.text, run.attribute) for run in row]))
        return lines

    def _pane_block(self, pane: PaneRenderData) -> list[TextLine]:
        """Draw a bordered pane of exactly pane.height rows.

        Rows past the content area, such as an oversized single entry, are
        clipped here.
        """
        inner_width = pane_inner_width(pane.width)
        border = self.border_chars
        dim = ColorAttribute.GRAY

        title = f" {pane.title} "[:inner_width + 2]
        top = TextLine([
            StyledText(border["top_left"] + border["horizontal"], dim),
            StyledText(title, pane.title_color, bold=True),
            StyledText(border["horizontal"] * (inner_width + 3 - len(title)) + border["top_right"], dim),
        ])
        bottom = TextLine([StyledText(
            border["bottom_left"] + border["horizontal"] * (inner_width + 4) + border["bottom_right"], dim
        )])

        content_rows = pane_content_rows(pane.height)
        body = [TextLine()] + list(pane.lines[:content_rows])
        body.extend(TextLine() for _ in range(content_rows + 1 - len(body)))

        lines = [top]
        for line in body:
            line = self._clip(line, inner_width)
            lines.append(TextLine(
                [StyledText(border["vertical"] + "  ", dim)]
                + line.fragments
                + [StyledText(" " * (inner_width - line.width) + "  " + border["vertical"], dim)]
            ))
        lines.append(bottom)
        return lines

    def _side_by_side(self, left: list[TextLine], right: list[TextLine],
                      max_left_width: Optional[int] = None) -> list[TextLine]:
        if max_left_width:
            left = [self._clip(line, max_left_width) for line in left]
        left_width = max((line.width for line in left), default=0)
        merged = []
        for index in range(max(len(left), len(right))):
            left_line = left[index] if index < len(left) else TextLine()
            right_line = right[index] if index < len(right) else TextLine()
            padding = StyledText(" " * (left_width - left_line.width) + PANE_GAP)
            merged.append(TextLine(left_line.fragments + [padding] + right_line.fragments))
        return merged
