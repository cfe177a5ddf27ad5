"""Longest-path endpoints of a carved maze.

In a tree, a breadth-first flood fill from any cell ends on one end of a longest
path, and a second flood fill from that end ends on the other. Both passes only
step through absent walls.
"""
from __future__ import annotations

import logging
import sys
from collections import deque
from dataclasses import dataclass
from typing import List, Optional, Tuple

from .errors import MazeInvariantError
from .model.grid import Grid

logger = logging.getLogger(__name__)

# Sentinel distance for cells a pass has not reached yet.
INFINITE = sys.maxsize


@dataclass(frozen=True)
class FloodFill:
    origin: int
    distances: Tuple[int, ...]
    farthest: int

    @property
    def max_distance(self) -> int:
        return self.distances[self.farthest]


@dataclass(frozen=True)
class Diameter:
    endpoints: Tuple[int, ...]  # one index for a 1x1 grid, two otherwise
    length: int


def flood_fill(grid: Grid, origin: int, distances: Optional[List[int]] = None) -> FloodFill:
    """Breadth-first distances from `origin` through open walls.

    `distances` is an optional scratch list of grid.size entries; it is reset to
    INFINITE before the pass. The cell dequeued last is the farthest one.
    """
    if distances is None:
        distances = [INFINITE] * grid.size
    else:
        distances[:] = [INFINITE] * grid.size

    distances[origin] = 0
    frontier = deque([origin])
    farthest = origin
    while frontier:
        current = frontier.popleft()
        farthest = current
        step = distances[current] + 1
        for _, other in grid.open_neighbors(current):
            if distances[other] > step:
                distances[other] = step
                frontier.append(other)

    unreached = distances.count(INFINITE)
    if unreached:
        raise MazeInvariantError(
            f"Flood fill from {grid.coords(origin)} left {unreached} cells unreachable"
        )
    logger.debug(
        "Flood fill from %s: farthest %s at distance %d",
        grid.coords(origin),
        grid.coords(farthest),
        distances[farthest],
    )
    return FloodFill(origin=origin, distances=tuple(distances), farthest=farthest)


def find_termini(grid: Grid) -> Diameter:
    """Run two flood fills: from (0, 0), then from the first pass's farthest cell."""
    scratch: List[int] = [INFINITE] * grid.size
    first = flood_fill(grid, 0, scratch)
    second = flood_fill(grid, first.farthest, scratch)
    if first.farthest == second.farthest:
        endpoints: Tuple[int, ...] = (first.farthest,)
    else:
        endpoints = (first.farthest, second.farthest)
    logger.debug(
        "Termini %s, path length %d",
        [grid.coords(i) for i in endpoints],
        second.max_distance,
    )
    return Diameter(endpoints=endpoints, length=second.max_distance)
