from __future__ import annotations

import logging
from typing import Dict, FrozenSet, List, Optional, Tuple

from ..maze import Maze
from ..model.cell import Cell
from ..model.direction import Direction

logger = logging.getLogger(__name__)

N, E, S, W = Direction.NORTH, Direction.EAST, Direction.SOUTH, Direction.WEST

HORIZONTAL_WALL = "━"
VERTICAL_WALL = "┃"
NO_WALL = " "

# Glyph for a grid intersection keyed by the wall segments leaving it
# (NORTH = segment going up, EAST = segment going right, ...).
CORNER_GLYPHS: Dict[FrozenSet[Direction], str] = {
    frozenset(): NO_WALL,
    frozenset({N}): "╹",
    frozenset({E}): "╺",
    frozenset({S}): "╻",
    frozenset({W}): "╸",
    frozenset({N, E}): "┗",
    frozenset({N, S}): "┃",
    frozenset({N, W}): "┛",
    frozenset({E, S}): "┏",
    frozenset({E, W}): "━",
    frozenset({S, W}): "┓",
    frozenset({N, E, S}): "┣",
    frozenset({N, E, W}): "┻",
    frozenset({N, S, W}): "┫",
    frozenset({E, S, W}): "┳",
    frozenset({N, E, S, W}): "╋",
}


class TextMaze:
    """
    Renders a Maze as lines of box-drawing characters.

    - Each cell becomes a block of cell_width x cell_height characters; its top-left
      character is the grid intersection, the rest of its top row is the north wall
      and the rest of its left column is the west wall.
    - The east and south edges of the maze are closed by one extra column and row.
    - Terminus cells carry `terminus_char` on their first interior line when the block
      is at least 2x2 (pass None to leave them unmarked).

    The rendering is cached per (cell_width, cell_height).
    """

    def __init__(self, maze: Maze, terminus_char: Optional[str] = "*") -> None:
        if terminus_char is not None and len(terminus_char) != 1:
            raise ValueError("terminus_char must be a single character or None")
        self._cells = maze.cells()
        self._width = maze.width
        self._height = maze.height
        self._terminus_char = terminus_char
        self._cache: Dict[Tuple[int, int], List[str]] = {}

    def lines(self, cell_width: int = 5, cell_height: int = 2) -> List[str]:
        if cell_width < 1 or cell_height < 1:
            raise ValueError("cell_width and cell_height must be >= 1")
        key = (cell_width, cell_height)
        if key not in self._cache:
            self._cache[key] = self._build(cell_width, cell_height)
            logger.debug("Rendered %dx%d maze with %dx%d cells", self._width, self._height, *key)
        return list(self._cache[key])

    def render(self, cell_width: int = 5, cell_height: int = 2) -> str:
        return "\n".join(self.lines(cell_width, cell_height))

    def _build(self, cell_width: int, cell_height: int) -> List[str]:
        out: List[str] = []
        for row in range(self._height):
            out.append(self._wall_line(row, cell_width))
            for spacer in range(cell_height - 1):
                out.append(self._interior_line(row, cell_width, mark=spacer == 0))
        out.append(self._wall_line(self._height, cell_width))
        return out

    def _wall_line(self, row: int, cell_width: int) -> str:
        parts = []
        for column in range(self._width):
            arms = self._corner_arms(row, column)
            parts.append(CORNER_GLYPHS[arms])
            fill = HORIZONTAL_WALL if E in arms else NO_WALL
            parts.append(fill * (cell_width - 1))
        parts.append(CORNER_GLYPHS[self._corner_arms(row, self._width)])
        return "".join(parts)

    def _interior_line(self, row: int, cell_width: int, mark: bool) -> str:
        parts = []
        for cell in self._cells[row]:
            parts.append(VERTICAL_WALL if cell.has_wall(W) else NO_WALL)
            spacer = [NO_WALL] * (cell_width - 1)
            if mark and spacer and cell.terminus and self._terminus_char is not None:
                spacer[(cell_width - 1) // 2] = self._terminus_char
            parts.append("".join(spacer))
        parts.append(VERTICAL_WALL if self._cells[row][-1].has_wall(E) else NO_WALL)
        return "".join(parts)

    def _corner_arms(self, row: int, column: int) -> FrozenSet[Direction]:
        """Wall segments meeting at the intersection above-left of cell (row, column)."""
        arms = set()
        if row > 0 and self._vertical_wall(row - 1, column):
            arms.add(N)
        if row < self._height and self._vertical_wall(row, column):
            arms.add(S)
        if column > 0 and self._horizontal_wall(row, column - 1):
            arms.add(W)
        if column < self._width and self._horizontal_wall(row, column):
            arms.add(E)
        return frozenset(arms)

    def _vertical_wall(self, row: int, column: int) -> bool:
        # Wall on the line left of `column`; column == width is the east boundary.
        if column < self._width:
            return self._cell(row, column).has_wall(W)
        return self._cell(row, column - 1).has_wall(E)

    def _horizontal_wall(self, row: int, column: int) -> bool:
        # Wall on the line above `row`; row == height is the south boundary.
        if row < self._height:
            return self._cell(row, column).has_wall(N)
        return self._cell(row - 1, column).has_wall(S)

    def _cell(self, row: int, column: int) -> Cell:
        return self._cells[row][column]
