from __future__ import annotations

from dataclasses import dataclass, field
from typing import FrozenSet, Tuple

from .direction import Direction


@dataclass(frozen=True)
class Cell:
    """Read-only snapshot of one maze cell.

    Two cells compare equal when they sit at the same coordinates; wall state
    and the terminus flag are not part of equality or hashing.
    """

    row: int
    column: int
    walls: FrozenSet[Direction] = field(default=frozenset(Direction), compare=False)
    terminus: bool = field(default=False, compare=False)

    @property
    def coords(self) -> Tuple[int, int]:
        return (self.row, self.column)

    @property
    def is_terminus(self) -> bool:
        return self.terminus

    def has_wall(self, direction: Direction) -> bool:
        return direction in self.walls

    def openings(self) -> FrozenSet[Direction]:
        """Directions in which this cell has no wall."""
        return frozenset(d for d in Direction if d not in self.walls)
