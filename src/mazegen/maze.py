from __future__ import annotations

import logging
from typing import FrozenSet, Optional, Tuple, Union

from .diameter import Diameter, find_termini
from .errors import InvalidStartError
from .generator import MazeGenerator, RecursiveBacktracker
from .model.cell import Cell
from .model.grid import Grid
from .rng import RandomLike, as_random_source

logger = logging.getLogger(__name__)

START_RANDOM = "random"
START_ORIGIN = "origin"

StartPolicy = Union[str, Tuple[int, int], None]


class Maze:
    """A carved perfect maze together with its two longest-path endpoints.

    Usage:
      maze = Maze.build(20, 20, rng=1234)
      for row in maze.cells():
          ...

    Instances are only produced by build(), which carves and selects termini before
    returning, so callers never see a partially carved grid. Nothing mutates a Maze
    afterwards.
    """

    def __init__(self, grid: Grid, diameter: Diameter) -> None:
        self._grid = grid
        self._diameter = diameter
        endpoints = set(diameter.endpoints)
        self._cells: Tuple[Tuple[Cell, ...], ...] = tuple(
            tuple(
                Cell(
                    row,
                    column,
                    grid.walls(row * grid.width + column),
                    (row * grid.width + column) in endpoints,
                )
                for column in range(grid.width)
            )
            for row in range(grid.height)
        )

    @classmethod
    def build(
        cls,
        width: int,
        height: int,
        rng: RandomLike = None,
        *,
        start: StartPolicy = None,
        generator: Optional[MazeGenerator] = None,
    ) -> "Maze":
        """Carve a width x height perfect maze and mark its termini.

        `rng` may be a seed, a random.Random, a RandomSource or None (unseeded).
        `start` selects the carving start cell: None or "random" draws one cell from
        `rng`, "origin" uses (0, 0), and a (row, column) tuple picks that cell.
        """
        grid = Grid(width, height)
        source = as_random_source(rng)
        start_index = cls._resolve_start(grid, source, start)
        (generator or RecursiveBacktracker()).carve(grid, source, start_index)
        diameter = find_termini(grid)
        logger.debug("Built %dx%d maze, diameter %d", width, height, diameter.length)
        return cls(grid, diameter)

    @staticmethod
    def _resolve_start(grid: Grid, source, start: StartPolicy) -> int:
        if start is None or start == START_RANDOM:
            return source.randrange(grid.size)
        if start == START_ORIGIN:
            return 0
        if isinstance(start, tuple) and len(start) == 2:
            row, column = start
            if not grid.in_bounds(row, column):
                raise InvalidStartError(f"Start cell {start} outside {grid.width}x{grid.height} grid")
            return grid.index(row, column)
        raise InvalidStartError(f"Unknown start policy: {start!r}")

    @property
    def width(self) -> int:
        return self._grid.width

    @property
    def height(self) -> int:
        return self._grid.height

    def cells(self) -> Tuple[Tuple[Cell, ...], ...]:
        """Immutable snapshot of the grid, indexed [row][column]."""
        return self._cells

    def cell(self, row: int, column: int) -> Cell:
        if not self._grid.in_bounds(row, column):
            raise IndexError(f"Cell ({row}, {column}) out of bounds")
        return self._cells[row][column]

    @property
    def termini(self) -> FrozenSet[Cell]:
        return frozenset(self.cell(*self._grid.coords(i)) for i in self._diameter.endpoints)

    @property
    def diameter(self) -> int:
        """Number of steps along the path between the termini."""
        return self._diameter.length

    def edge_count(self) -> int:
        return self._grid.edge_count()

    def __repr__(self) -> str:
        return f"Maze({self.width}x{self.height})"
