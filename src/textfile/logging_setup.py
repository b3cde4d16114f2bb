"""Logging configuration for command-line use.

Library modules only create loggers; handlers are installed here, by the
CLI, so embedding applications keep control of their own logging.
"""

from __future__ import annotations

import logging

from rich.console import Console
from rich.logging import RichHandler

_ROOT_LOGGER = "textfile"


def configure_logging(level: str | int = logging.WARNING) -> logging.Logger:
    """Attach a stderr ``RichHandler`` to the ``textfile`` logger.

    Calling it again only changes the level.
    """
    logger = logging.getLogger(_ROOT_LOGGER)
    logger.setLevel(level)
    if not any(isinstance(h, RichHandler) for h in logger.handlers):
        handler = RichHandler(
            console=Console(stderr=True),
            show_path=False,
            rich_tracebacks=True,
        )
        handler.setFormatter(logging.Formatter("%(message)s"))
        logger.addHandler(handler)
    return logger
