"""Logging utilities for pngchunk."""

from __future__ import annotations

import logging
import os
from typing import Optional

DEFAULT_LOG_LEVEL = "INFO"
LOG_LEVEL_ENV = "PNGCHUNK_LOG_LEVEL"


def configure_logging(level: Optional[str] = None) -> None:
    """Configure the root logger for the command-line tool."""
    log_level = (level or os.getenv(LOG_LEVEL_ENV) or DEFAULT_LOG_LEVEL).upper()
    logging.basicConfig(level=getattr(logging, log_level, logging.INFO))
