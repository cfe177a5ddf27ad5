from .text import TextMaze

__all__ = ["TextMaze"]
