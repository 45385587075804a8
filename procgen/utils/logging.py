"""Logging configuration shared by the server and the CLI."""

from __future__ import annotations

import logging
import sys
from typing import TextIO

LOG_FORMAT = "%(asctime)s [%(levelname)-5s] %(name)-25s | %(message)s"


def setup_logging(level: str | int = "INFO", stream: TextIO | None = None) -> None:
    """Configure the root logger.

    Logs go to stdout unless *stream* is given; ``generate`` sends them to
    stderr so a JSON dump on stdout stays clean.
    """
    if isinstance(level, str):
        numeric_level = getattr(logging, level.upper(), logging.INFO)
    else:
        numeric_level = level

    handler = logging.StreamHandler(stream or sys.stdout)
    handler.setLevel(numeric_level)
    handler.setFormatter(logging.Formatter(fmt=LOG_FORMAT, datefmt="%H:%M:%S"))

    root = logging.getLogger()
    root.setLevel(numeric_level)
    root.handlers.clear()
    root.addHandler(handler)
