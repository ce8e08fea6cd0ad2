"""Logging setup for the plugin entry points.

stdout carries the hamr protocol, so log records always go to stderr.
"""

from __future__ import annotations

import logging
import os
import sys

LOG_FORMAT = "%(asctime)s %(levelname)s %(name)s: %(message)s"
DATE_FORMAT = "%Y-%m-%d %H:%M:%S"


def configure_logging(level_name: str | None = None) -> None:
    if level_name is None:
        level_name = os.environ.get("HAMR_WEATHER_LOG_LEVEL", "WARNING")
    level = getattr(logging, level_name.upper(), logging.WARNING)

    handler = logging.StreamHandler(sys.stderr)
    handler.setLevel(level)
    handler.setFormatter(logging.Formatter(LOG_FORMAT, datefmt=DATE_FORMAT))
    logging.basicConfig(level=level, handlers=[handler])
    # basicConfig is a no-op once the root logger has handlers
    logging.getLogger().setLevel(level)
