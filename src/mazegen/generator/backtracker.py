from __future__ import annotations
import logging
import random
from typing import Iterator, List, Tuple, Union

from ..errors import InvalidStartError, MazeInvariantError
from ..model.direction import Direction
from ..model.grid import Grid
from ..rng import RandomSource
from .base import MazeGenerator

logger = logging.getLogger(__name__)

Frame = Tuple[int, Iterator[Tuple[Direction, int]]]


class RecursiveBacktracker(MazeGenerator):
    """Randomized depth-first carving ("recursive backtracker").

    Algorithm:
    - Mark the start cell visited.
    - On entering a cell, list its in-bounds neighbors in Direction order and shuffle
      them with the maze's random source.
    - Walk the shuffled candidates; the first unvisited one gets the shared wall removed,
      is marked visited and entered. When a cell runs out of candidates, back up.

    The recursion is kept on an explicit stack of (cell, remaining candidates) frames,
    so a grid that degenerates into a single corridor of W*H cells needs no call depth.
    A passage is only carved into a cell on its first visit, hence the result is a
    spanning tree.
    """

    def carve(self, grid: Grid, rng: Union[RandomSource, random.Random], start: int) -> None:
        if not 0 <= start < grid.size:
            raise InvalidStartError(f"Start index {start} outside grid of {grid.size} cells")

        visited: List[bool] = [False] * grid.size
        visited[start] = True
        stack: List[Frame] = [(start, self._candidates(grid, rng, start))]
        max_depth = 1

        while stack:
            index, candidates = stack[-1]
            for direction, other in candidates:
                if visited[other]:
                    continue
                grid.remove_wall(index, direction)
                visited[other] = True
                stack.append((other, self._candidates(grid, rng, other)))
                max_depth = max(max_depth, len(stack))
                break
            else:
                stack.pop()

        if not all(visited):
            raise MazeInvariantError(
                f"Carving left {visited.count(False)} of {grid.size} cells unvisited"
            )
        edges = grid.edge_count()
        if edges != grid.size - 1:
            raise MazeInvariantError(f"Carving produced {edges} passages, expected {grid.size - 1}")
        logger.debug(
            "RecursiveBacktracker: carved %r from %s, %d passages, max stack depth %d",
            grid,
            grid.coords(start),
            edges,
            max_depth,
        )

    @staticmethod
    def _candidates(
        grid: Grid, rng: Union[RandomSource, random.Random], index: int
    ) -> Iterator[Tuple[Direction, int]]:
        neighborhood = list(grid.neighbors(index))
        rng.shuffle(neighborhood)
        return iter(neighborhood)
