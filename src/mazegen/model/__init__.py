from .cell import Cell
from .direction import Direction
from .grid import Grid

__all__ = ["Cell", "Direction", "Grid"]
