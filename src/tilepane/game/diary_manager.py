"""
Action diary bookkeeping.

Records executed actions against the current turn and exposes them as diary
entries for the action diary pane.
"""
from collections import deque
from dataclasses import dataclass, field
from datetime import datetime
from typing import Iterable, Optional, TYPE_CHECKING

from ..core.records import DiaryAction, DiaryEntry, StatChange

if TYPE_CHECKING:
    from .log_manager import LogManager


@dataclass(frozen=True)
class GameAction:
    """An action executed by a player during a turn."""
    id: str
    player_id: str
    type: str
    description: str
    timestamp: datetime = field(default_factory=datetime.now)
    success: Optional[bool] = None


class DiaryManager:
    """Keeps the action diary for the current game."""

    def __init__(self, max_entries: int = 500, log_manager: Optional["LogManager"] = None):
        self.entries: deque[DiaryEntry] = deque(maxlen=max_entries)
        self.current_turn = 1
        self.log_manager = log_manager

    def advance_turn(self) -> int:
        """Move to the next turn and return its number."""
        self.current_turn += 1
        return self.current_turn

    def record_action(self, action: GameAction,
                      stat_changes: Iterable[StatChange] = ()) -> DiaryEntry:
        """Record an executed action against the current turn."""
        description = action.description
        if action.success is False:
            description = f"{description} (failed)"

        entry = DiaryEntry(
            turn=self.current_turn,
            timestamp=action.timestamp,
            action=DiaryAction(player=action.player_id, type=action.type, description=description),
            stat_changes=tuple(stat_changes),
        )
        self.entries.append(entry)

        if self.log_manager:
            self.log_manager.diary(f"Turn {entry.turn}: {action.player_id} {action.type}")
        return entry

    def get_entries(self, count: Optional[int] = None) -> list[DiaryEntry]:
        """Most recent entries, oldest first."""
        entries = list(self.entries)
        if count is not None:
            return entries[-count:] if count > 0 else []
        return entries

    def clear(self) -> None:
        self.entries.clear()
        self.current_turn = 1
