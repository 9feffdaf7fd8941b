"""
Renderer log for the pane engine.

Collects categorized messages from the composers, the layout resolver and the
diary bookkeeping into a bounded buffer. Reads are filtered by category and
severity, and the visible messages double as the console pane's entries.
"""
from collections import deque
from dataclasses import dataclass, field
from datetime import datetime
from enum import Enum, auto
from typing import Iterable, Optional

from ..core.game_enums import EntryLevel
from ..core.records import ConsoleEntry


class LogCategory(Enum):
    """Where a log message came from."""
    SYSTEM = auto()     # Startup and configuration
    RENDER = auto()     # Frame building
    LAYOUT = auto()     # Pane geometry decisions
    MAP = auto()        # Grid composition and cache reuse
    DIARY = auto()      # Action diary bookkeeping
    DEBUG = auto()
    WARNING = auto()
    ERROR = auto()


class LogLevel(Enum):
    """Severity threshold for reads."""
    DEBUG = 0
    INFO = 1
    WARNING = 2
    ERROR = 3


# Short tags shown in front of console lines
CATEGORY_TAGS = {
    LogCategory.SYSTEM: "SYS",
    LogCategory.RENDER: "RND",
    LogCategory.LAYOUT: "LAY",
    LogCategory.MAP: "MAP",
    LogCategory.DIARY: "DRY",
    LogCategory.DEBUG: "DBG",
    LogCategory.WARNING: "WRN",
    LogCategory.ERROR: "ERR",
}

# Per-frame chatter sits at DEBUG; anything not listed is INFO
CATEGORY_LEVELS = {
    LogCategory.LAYOUT: LogLevel.DEBUG,
    LogCategory.MAP: LogLevel.DEBUG,
    LogCategory.DEBUG: LogLevel.DEBUG,
    LogCategory.WARNING: LogLevel.WARNING,
    LogCategory.ERROR: LogLevel.ERROR,
}

ENTRY_LEVELS = {
    LogLevel.DEBUG: EntryLevel.DEBUG,
    LogLevel.INFO: EntryLevel.INFO,
    LogLevel.WARNING: EntryLevel.WARN,
    LogLevel.ERROR: EntryLevel.ERROR,
}


@dataclass
class LogMessage:
    """One logged line and where it came from."""
    text: str
    category: LogCategory
    timestamp: datetime = field(default_factory=datetime.now)
    sequence: int = 0

    @property
    def level(self) -> LogLevel:
        return CATEGORY_LEVELS.get(self.category, LogLevel.INFO)

    @property
    def tag(self) -> str:
        return f"[{CATEGORY_TAGS.get(self.category, '???')}]"

    def format(self, include_timestamp: bool = False, include_category: bool = True) -> str:
        """Single-line text form, e.g. "[12:00:01] [MAP] Composed grid"."""
        pieces = [self.text]
        if include_category:
            pieces.insert(0, self.tag)
        if include_timestamp:
            pieces.insert(0, self.timestamp.strftime("[%H:%M:%S]"))
        return " ".join(pieces)

    def to_console_entry(self) -> ConsoleEntry:
        """The message as a console pane entry, tagged with its category."""
        return ConsoleEntry(
            timestamp=self.timestamp,
            level=ENTRY_LEVELS[self.level],
            message=self.text,
            prefix=self.tag,
            sequence=self.sequence,
        )


class LogManager:
    """Bounded, filterable log shared by the renderer components."""

    def __init__(self, max_messages: int = 1000, default_level: LogLevel = LogLevel.INFO):
        """
        Args:
            max_messages: Capacity of the buffer; the oldest messages drop first
            default_level: Lowest severity returned by unfiltered reads
        """
        self.messages: deque[LogMessage] = deque(maxlen=max_messages)
        self.log_level = default_level
        self.enabled_categories: set[LogCategory] = set(LogCategory)
        self._sequence = 0

    def log(self, text: str, category: LogCategory = LogCategory.SYSTEM) -> None:
        """Store a message. Filters apply on read, never on write."""
        self.messages.append(LogMessage(text, category, sequence=self._sequence))
        self._sequence += 1

    def system(self, text: str) -> None:
        self.log(text, LogCategory.SYSTEM)

    def render(self, text: str) -> None:
        self.log(text, LogCategory.RENDER)

    def layout(self, text: str) -> None:
        self.log(text, LogCategory.LAYOUT)

    def map(self, text: str) -> None:
        self.log(text, LogCategory.MAP)

    def diary(self, text: str) -> None:
        self.log(text, LogCategory.DIARY)

    def debug(self, text: str) -> None:
        self.log(text, LogCategory.DEBUG)

    def warning(self, text: str) -> None:
        self.log(text, LogCategory.WARNING)

    def error(self, text: str) -> None:
        self.log(text, LogCategory.ERROR)

    def _is_visible(self, message: LogMessage, categories: Optional[Iterable[LogCategory]]) -> bool:
        if message.category not in self.enabled_categories:
            return False
        # An explicit category selection overrides the severity threshold
        if categories:
            return message.category in categories
        return message.level.value >= self.log_level.value

    def get_messages(self, count: Optional[int] = None,
                     categories: Optional[set[LogCategory]] = None) -> list[LogMessage]:
        """Visible messages, oldest first.

        Args:
            count: Keep only the newest count messages
            categories: Only these categories, regardless of the log level
        """
        visible = [msg for msg in self.messages if self._is_visible(msg, categories)]
        if count is None:
            return visible
        return visible[-count:] if count > 0 else []

    def to_console_entries(self, count: Optional[int] = None) -> list[ConsoleEntry]:
        return [msg.to_console_entry() for msg in self.get_messages(count)]

    def clear(self) -> None:
        self.messages.clear()

    def enable_category(self, category: LogCategory) -> None:
        self.enabled_categories.add(category)

    def disable_category(self, category: LogCategory) -> None:
        self.enabled_categories.discard(category)

    def set_log_level(self, level: LogLevel) -> None:
        self.log_level = level

    def is_debug_enabled(self) -> bool:
        return self.log_level is LogLevel.DEBUG and LogCategory.DEBUG in self.enabled_categories

    def toggle_debug(self) -> None:
        """Flip between the default view and the full debug view."""
        debug_on = not self.is_debug_enabled()
        if debug_on:
            self.enable_category(LogCategory.DEBUG)
        else:
            self.disable_category(LogCategory.DEBUG)
        self.set_log_level(LogLevel.DEBUG if debug_on else LogLevel.INFO)
