"""Logging setup for command-line use."""

import logging

from rich.console import Console
from rich.logging import RichHandler

LOGGER_NAME = "flexver"


def setup_logging(level: str = "WARNING", console: Console | None = None) -> None:
    """Attach a rich handler to the ``flexver`` logger.

    Safe to call repeatedly; an existing rich handler is reused.

    Args:
        level: Log level name.
        console: Console to render to. Defaults to stderr.
    """
    logger = logging.getLogger(LOGGER_NAME)
    logger.setLevel(level.upper())

    for handler in logger.handlers:
        if isinstance(handler, RichHandler):
            handler.setLevel(level.upper())
            return

    handler = RichHandler(
        console=console or Console(stderr=True),
        show_time=False,
        show_path=False,
    )
    handler.setLevel(level.upper())
    logger.addHandler(handler)
