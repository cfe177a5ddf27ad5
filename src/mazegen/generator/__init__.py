from .base import MazeGenerator
from .backtracker import RecursiveBacktracker

__all__ = ["MazeGenerator", "RecursiveBacktracker"]
