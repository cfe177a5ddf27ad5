import logging
import os
import sys
from typing import Optional, TextIO

LOG_LEVEL_ENV = "MAZEGEN_LOG_LEVEL"


def configure_logging(default_level: int = logging.INFO, stream: Optional[TextIO] = None) -> None:
    """Send log records to stderr so they never mix with a printed maze.

    MAZEGEN_LOG_LEVEL (e.g. "debug") overrides `default_level` when set. Calling it
    again replaces the previous root handler.
    """
    level_name = os.getenv(LOG_LEVEL_ENV)
    level = default_level
    if level_name:
        level = getattr(logging, level_name.upper(), default_level)
    logging.basicConfig(
        level=level,
        stream=stream or sys.stderr,
        format="[%(asctime)s] [%(levelname)s] %(name)s: %(message)s",
        datefmt="%H:%M:%S",
        force=True,
    )
