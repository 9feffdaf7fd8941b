from dataclasses import dataclass, field, fields
from typing import Optional, Union

from .game_enums import ColorAttribute, TerrainType
from .records import ConsoleEntry, DiaryEntry


RawEntry = Union[ConsoleEntry, DiaryEntry]
WidthValue = Union[int, str]


@dataclass(frozen=True)
class StyledText:
    """A fragment of text sharing one style."""
    text: str
    color: Optional[ColorAttribute] = None
    bold: bool = False
    dim: bool = False


@dataclass
class TextLine:
    """One rendered row made of styled fragments, left to right."""
    fragments: list[StyledText] = field(default_factory=list)

    @property
    def plain(self) -> str:
        return "".join(fragment.text for fragment in self.fragments)

    @property
    def width(self) -> int:
        return len(self.plain)


@dataclass(frozen=True)
class PreparedEntry:
    """Entry with its label columns laid out and its message wrapped.

    Derived deterministically from a raw entry and the available width.
    """
    source: RawEntry
    leading_label: str
    trailing_label: str
    leading_col_width: int
    trailing_col_width: int
    wrapped_lines: tuple[str, ...]
    lines_needed: int
    color: Optional[ColorAttribute] = None
    dim: bool = False


@dataclass(frozen=True)
class PackedEntry(PreparedEntry):
    """Prepared entry selected by the packer for one render pass."""
    needs_leading_spacer: bool = False

    @classmethod
    def from_prepared(cls, entry: PreparedEntry, needs_leading_spacer: bool) -> "PackedEntry":
        values = {f.name: getattr(entry, f.name) for f in fields(PreparedEntry)}
        return cls(needs_leading_spacer=needs_leading_spacer, **values)


@dataclass(frozen=True)
class GridCell:
    """Display data for one map cell.

    terrain is None for cells that are neither terrain nor actor, such as the
    coordinate label column.
    """
    glyph: str
    is_actor: bool = False
    terrain: Optional[TerrainType] = None


@dataclass(frozen=True)
class ColorRun:
    """A maximal run of adjacent same-attribute cells in one row."""
    text: str
    attribute: Optional[ColorAttribute] = None


@dataclass(frozen=True)
class PaneLayout:
    """Geometry of the side (diary) pane."""
    height: int
    min_width: WidthValue
    max_width: Optional[WidthValue]
    flex_share: str
    resolved_width: int


@dataclass
class PaneRenderData:
    """A bordered text pane: the console log or the action diary."""
    title: str
    lines: list[TextLine]
    height: int
    width: int
    title_color: ColorAttribute = ColorAttribute.YELLOW
    is_empty: bool = False


@dataclass
class MapPaneRenderData:
    """A composed and colorized map ready for painting."""
    map_name: str
    title: str
    rows: list[list[ColorRun]]

    @property
    def plain_rows(self) -> list[str]:
        return ["".join(run.text for run in row) for row in self.rows]


@dataclass
class RenderContext:
    """Everything a renderer needs to paint one frame."""
    terminal_width: int = 80
    use_column_layout: bool = False
    map_column_width: Optional[int] = None

    header_title: str = ""
    header_time: str = ""

    maps: list[MapPaneRenderData] = field(default_factory=list)
    no_maps_message: Optional[str] = None
    unit_summary: list[TextLine] = field(default_factory=list)

    diary: Optional[PaneRenderData] = None
    diary_layout: Optional[PaneLayout] = None
    console: Optional[PaneRenderData] = None
