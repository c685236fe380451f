"""Logging configuration for the interactive console."""
from __future__ import annotations

import logging
import sys


class _ConsoleNoiseFilter(logging.Filter):
    """
    Keep the menu readable:
    - allow console_todo records at the handler's level
    - suppress third-party records unless ERROR+
    """

    def filter(self, record: logging.LogRecord) -> bool:
        if record.name.startswith("console_todo"):
            return True
        return record.levelno >= logging.ERROR


def setup_logging(*, console_level: int = logging.WARNING) -> None:
    """
    Install a single stderr handler on the root logger.

    Call this ONCE, before the first task file is loaded.
    """
    root = logging.getLogger()
    root.setLevel(logging.DEBUG)

    for h in list(root.handlers):
        root.removeHandler(h)

    fmt = logging.Formatter(
        fmt="%(asctime)s %(levelname)s %(name)s: %(message)s",
        datefmt="%Y-%m-%d %H:%M:%S",
    )

    ch = logging.StreamHandler(sys.stderr)
    ch.setLevel(console_level)
    ch.setFormatter(fmt)
    ch.addFilter(_ConsoleNoiseFilter())
    root.addHandler(ch)

    logging.captureWarnings(True)
