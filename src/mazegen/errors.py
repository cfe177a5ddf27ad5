class MazeError(Exception):
    """Base error for maze construction and presentation."""


class InvalidDimensionsError(MazeError, ValueError):
    """Raised when a maze is requested with a width or height below 1."""


class InvalidStartError(MazeError, ValueError):
    """Raised when the carving start cell is unknown or outside the grid."""


class MazeInvariantError(MazeError, AssertionError):
    """Raised when carving or flood filling leaves the grid in an impossible state.

    This always indicates a defect; callers should not try to recover from it.
    """


class SettingsError(MazeError, ValueError):
    """Raised when settings loaded from YAML or the environment are invalid."""
