"""Core data structures shared between the world model and the panes.

Data Flow:
1. Actor (world model) -> PositionInfo (where the actor stands)
2. PositionInfo -> position key ("x,y") -> GridCell (display)
"""

from dataclasses import dataclass


@dataclass
class Vector2:
    """Grid coordinate stored row first, matching the map's [y, x] arrays.

    Use from_xy when starting from column and row in (x, y) order.
    """
    y: int
    x: int

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, Vector2):
            return False
        return self.y == other.y and self.x == other.x

    def __hash__(self) -> int:
        return hash((self.y, self.x))

    def __repr__(self) -> str:
        return f"Vector2({self.y}, {self.x})"

    @classmethod
    def from_xy(cls, x: int, y: int) -> "Vector2":
        """Create a Vector2 from column/row arguments given in (x, y) order."""
        return cls(y, x)

    def to_key(self) -> str:
        """Return the "x,y" string key used by actor position lookups."""
        return position_key(self.x, self.y)


def position_key(x: int, y: int) -> str:
    """Build the "x,y" lookup key for a grid coordinate."""
    return f"{x},{y}"


@dataclass(frozen=True)
class PositionInfo:
    """Where an actor currently stands: the map it is on and its cell."""
    map_id: str
    position: Vector2

    @property
    def x(self) -> int:
        return self.position.x

    @property
    def y(self) -> int:
        return self.position.y
