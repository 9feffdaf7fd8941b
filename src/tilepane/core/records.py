"""Raw entry records produced by the simulation and consumed by the log panes.

Records are immutable once created. The console pane shows ConsoleEntry
records, the action diary shows DiaryEntry records.
"""
from dataclasses import dataclass, field
from datetime import datetime
from typing import Any, Optional

from .game_enums import EntryLevel


@dataclass(frozen=True)
class ConsoleEntry:
    """A single leveled console message."""
    timestamp: datetime
    level: EntryLevel
    message: str
    prefix: Optional[str] = None
    sequence: int = 0

    @property
    def display_message(self) -> str:
        """Message text with the optional prefix prepended."""
        return " ".join(part for part in (self.prefix, self.message) if part)


@dataclass(frozen=True)
class DiaryAction:
    """The action a diary entry describes."""
    player: str
    type: str
    description: str


@dataclass(frozen=True)
class StatChange:
    """A single property change caused by an action."""
    unit_id: str
    unit_name: str
    property_name: str
    old_value: Any
    new_value: Any

    def describe(self) -> str:
        return f"{self.property_name} {self.old_value} -> {self.new_value}"


@dataclass(frozen=True)
class DiaryEntry:
    """One executed action as recorded in the action diary."""
    turn: int
    timestamp: datetime
    action: DiaryAction
    stat_changes: tuple[StatChange, ...] = field(default_factory=tuple)

    @property
    def sequence(self) -> int:
        return self.turn

    @property
    def stat_changes_summary(self) -> list[str]:
        """One "Unit: change, change" line per affected unit, in first-seen order."""
        by_unit: dict[str, list[str]] = {}
        for change in self.stat_changes:
            by_unit.setdefault(change.unit_name, []).append(change.describe())
        return [f"{unit}: {', '.join(changes)}" for unit, changes in by_unit.items()]
