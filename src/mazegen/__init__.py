from importlib.metadata import version, PackageNotFoundError

from .errors import InvalidDimensionsError, InvalidStartError, MazeError, MazeInvariantError
from .maze import Maze
from .model import Cell, Direction

__all__ = [
    "Cell",
    "Direction",
    "InvalidDimensionsError",
    "InvalidStartError",
    "Maze",
    "MazeError",
    "MazeInvariantError",
    "__version__",
]

try:
    __version__ = version("mazegen")
except PackageNotFoundError:  # pragma: no cover - during tests without packaging
    __version__ = "0.0.0"
