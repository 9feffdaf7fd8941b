from typing import Any, Optional

from ..core.data_structures import PositionInfo, Vector2


POSITION_PROPERTY = "position"


class Actor:
    """A simulation actor as seen by the panes: an id, a name and properties.

    The position lives in the "position" property as a PositionInfo.
    """

    def __init__(self, actor_id: str, name: Optional[str] = None):
        self.id = actor_id
        self.name = name
        self._properties: dict[str, Any] = {}

    def set_property(self, name: str, value: Any) -> None:
        self._properties[name] = value

    def get_property_value(self, name: str) -> Any:
        return self._properties.get(name)

    def place(self, map_id: str, x: int, y: int) -> None:
        """Put the actor on a map cell."""
        self.set_property(POSITION_PROPERTY, PositionInfo(map_id, Vector2.from_xy(x, y)))

    def __repr__(self) -> str:
        return f"Actor({self.id!r}, {self.name!r})"
