"""Logging setup for command-line runs.

Library modules only create module loggers; handlers are installed by the
application through :func:`configure_logging`.
"""

from __future__ import annotations

import logging

from rich.logging import RichHandler

FORMAT = "%(message)s"


def configure_logging(level: int | str = logging.WARNING) -> logging.Logger:
    """Route log records through a rich handler and return the package logger."""
    logging.basicConfig(
        level="NOTSET", format=FORMAT, datefmt="[%X]", handlers=[RichHandler()], force=True
    )
    logging.getLogger("numpy").setLevel(logging.WARNING)

    logger = logging.getLogger("heliosim")
    logger.setLevel(level)
    return logger
