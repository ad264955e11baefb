"""Logging utilities for the unscrambler.

The engine reports each query at DEBUG. The dictionary loader reports
loads at INFO, a fallback to the sample word list at WARNING, and a
dictionary that cannot be read at all at ERROR.
"""

from __future__ import annotations

import logging
from typing import Optional


def configure_logging(level: int = logging.INFO) -> None:
    """Send log records to stderr as ``time | level | logger | message``.

    ``main.py`` calls this once with the ``--log-level`` given on the command
    line. Library code never calls it directly.
    """

    handler = logging.StreamHandler()
    formatter = logging.Formatter(
        fmt="%(asctime)s | %(levelname)-7s | %(name)s | %(message)s",
        datefmt="%H:%M:%S",
    )
    handler.setFormatter(formatter)

    root = logging.getLogger()
    root.handlers.clear()
    root.addHandler(handler)
    root.setLevel(level)


def get_logger(name: Optional[str] = None) -> logging.Logger:
    """Return a logger under the ``unscrambler`` namespace.

    When the package is imported without the command line, only warnings
    and errors are shown, so a missing word list is still visible.
    """

    if not logging.getLogger().handlers:
        configure_logging(logging.WARNING)
    return logging.getLogger(name or "unscrambler")
