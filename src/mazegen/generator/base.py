from __future__ import annotations
from abc import ABC, abstractmethod
from typing import Union
import random

from ..model.grid import Grid
from ..rng import RandomSource


class MazeGenerator(ABC):
    """Abstract base for spanning-tree carvers."""

    @abstractmethod
    def carve(self, grid: Grid, rng: Union[RandomSource, random.Random], start: int) -> None:
        """Remove walls from a fresh grid, beginning at linear index `start`."""
        raise NotImplementedError
