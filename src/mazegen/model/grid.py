from __future__ import annotations

import logging
from typing import Callable, FrozenSet, Iterator, List, Optional, Set, Tuple

from ..errors import InvalidDimensionsError, MazeInvariantError
from .direction import Direction

logger = logging.getLogger(__name__)

DirectionFilter = Callable[[Direction], bool]


class Grid:
    """
    Mutable H x W grid of wall sets, addressed by linear index.

    - index = row * width + column, 0-based.
    - Every cell starts with all four walls.
    - Neighbor lookup is a pure function of (index, direction, dimensions); stepping
      outside the grid yields None, never an error.
    """

    def __init__(self, width: int, height: int) -> None:
        for name, value in (("width", width), ("height", height)):
            if isinstance(value, bool) or not isinstance(value, int):
                raise InvalidDimensionsError(f"Maze {name} must be an int, got {value!r}")
            if value < 1:
                raise InvalidDimensionsError(f"Maze {name} must be >= 1, got {value}")
        self._width = width
        self._height = height
        self._walls: List[Set[Direction]] = [set(Direction) for _ in range(width * height)]
        logger.debug("Grid created: %dx%d", width, height)

    @property
    def width(self) -> int:
        return self._width

    @property
    def height(self) -> int:
        return self._height

    @property
    def size(self) -> int:
        return self._width * self._height

    def in_bounds(self, row: int, column: int) -> bool:
        return 0 <= row < self._height and 0 <= column < self._width

    def index(self, row: int, column: int) -> int:
        if not self.in_bounds(row, column):
            raise IndexError(f"Cell ({row}, {column}) out of bounds")
        return row * self._width + column

    def coords(self, index: int) -> Tuple[int, int]:
        return divmod(index, self._width)

    def walls(self, index: int) -> FrozenSet[Direction]:
        return frozenset(self._walls[index])

    def has_wall(self, index: int, direction: Direction) -> bool:
        return direction in self._walls[index]

    def neighbor(
        self, index: int, direction: Direction, allowed: Optional[DirectionFilter] = None
    ) -> Optional[int]:
        """Return the index adjacent to `index` in `direction`, or None.

        A direction rejected by `allowed` yields None regardless of bounds.
        """
        if allowed is not None and not allowed(direction):
            return None
        row, column = self.coords(index)
        row += direction.row_offset
        column += direction.column_offset
        if not self.in_bounds(row, column):
            return None
        return row * self._width + column

    def neighbors(
        self, index: int, allowed: Optional[DirectionFilter] = None
    ) -> Iterator[Tuple[Direction, int]]:
        for direction in Direction:
            other = self.neighbor(index, direction, allowed)
            if other is not None:
                yield direction, other

    def open_neighbors(self, index: int) -> Iterator[Tuple[Direction, int]]:
        """Neighbors reachable through an absent wall."""
        walls = self._walls[index]
        return self.neighbors(index, lambda d: d not in walls)

    def remove_wall(self, index: int, direction: Direction) -> int:
        """Carve a passage from `index` toward `direction` on both sides.

        Returns the neighbor's index.
        """
        other = self.neighbor(index, direction)
        if other is None:
            raise MazeInvariantError(
                f"Cannot remove boundary wall {direction.name} of cell {self.coords(index)}"
            )
        self._walls[index].discard(direction)
        self._walls[other].discard(direction.opposite())
        return other

    def edge_count(self) -> int:
        # Each passage is counted from its EAST or SOUTH side only.
        return sum(
            1
            for walls in self._walls
            for direction in (Direction.EAST, Direction.SOUTH)
            if direction not in walls
        )

    def __repr__(self) -> str:
        return f"Grid({self._width}x{self._height})"
