from __future__ import annotations

from enum import Enum
from typing import Tuple


class Direction(Enum):
    """Compass directions on the grid; values are (row offset, column offset).

    Rows grow downward, so NORTH moves to the previous row.
    """

    NORTH = (-1, 0)
    EAST = (0, 1)
    SOUTH = (1, 0)
    WEST = (0, -1)

    @property
    def row_offset(self) -> int:
        return self.value[0]

    @property
    def column_offset(self) -> int:
        return self.value[1]

    @property
    def offset(self) -> Tuple[int, int]:
        return self.value

    def opposite(self) -> "Direction":
        return Direction((-self.row_offset, -self.column_offset))

    def __repr__(self) -> str:
        return f"Direction.{self.name}"
