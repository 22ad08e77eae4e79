"""Logging setup for the toolkit and its command line tools."""

from __future__ import annotations

import logging
from typing import Optional

from rich.console import Console
from rich.logging import RichHandler

PACKAGE_LOGGER = "textvision"


def configure_logging(level: str = "WARNING", console: Optional[Console] = None) -> logging.Logger:
    """
    Route the package logger through rich.

    Calling this more than once replaces the previous handler rather than
    stacking a second one.
    """
    logger = logging.getLogger(PACKAGE_LOGGER)
    for handler in list(logger.handlers):
        if isinstance(handler, RichHandler):
            logger.removeHandler(handler)

    handler = RichHandler(
        console=console or Console(stderr=True),
        show_path=False,
        markup=False,
    )
    handler.setFormatter(logging.Formatter("%(name)s: %(message)s"))
    logger.addHandler(handler)
    logger.setLevel(level.upper())
    return logger
