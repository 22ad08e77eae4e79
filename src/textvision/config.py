"""Toolkit defaults and environment-driven settings.

Environment variables:
    TEXTVISION_LOG_LEVEL: logging level name for the package logger
    TEXTVISION_BORDER_MARGIN: rows/columns a window reserves for its frame
"""

from __future__ import annotations

import os
from dataclasses import dataclass
from typing import Mapping, Optional

# Window frame: one row/column on each side
BORDER_MARGIN = 2

DEFAULT_SCREEN_WIDTH = 80
DEFAULT_SCREEN_HEIGHT = 24
DEFAULT_LOG_LEVEL = "WARNING"

LOG_LEVEL_ENV = "TEXTVISION_LOG_LEVEL"
BORDER_MARGIN_ENV = "TEXTVISION_BORDER_MARGIN"

_LOG_LEVELS = ("DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL")


@dataclass(frozen=True)
class Settings:
    """Runtime settings for applications built on the toolkit."""
    log_level: str = DEFAULT_LOG_LEVEL
    border_margin: int = BORDER_MARGIN

    @classmethod
    def from_env(cls, environ: Optional[Mapping[str, str]] = None) -> Settings:
        """
        Load settings from the environment.

        Malformed or missing values fall back to the defaults.
        """
        env = os.environ if environ is None else environ

        log_level = env.get(LOG_LEVEL_ENV, DEFAULT_LOG_LEVEL).strip().upper()
        if log_level not in _LOG_LEVELS:
            log_level = DEFAULT_LOG_LEVEL

        try:
            border_margin = int(env.get(BORDER_MARGIN_ENV, BORDER_MARGIN))
        except ValueError:
            border_margin = BORDER_MARGIN
        if border_margin < 0:
            border_margin = BORDER_MARGIN

        return cls(log_level=log_level, border_margin=border_margin)
