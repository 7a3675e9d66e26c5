"""Console logging for the command-line scripts."""

from __future__ import annotations

import logging
import sys

from . import config

LOG_FORMAT = "%(asctime)s %(levelname)s [%(name)s] %(message)s"
DATE_FORMAT = "%Y-%m-%d %H:%M:%S"
HANDLER_NAME = "onenote_kit"


def setup_logging(level: str | None = None) -> None:
    """Send log records to stderr, leaving stdout for JSON output.

    Does nothing if this handler is already installed on the root logger.
    """
    root = logging.getLogger()
    if any(h.get_name() == HANDLER_NAME for h in root.handlers):
        return

    handler = logging.StreamHandler(sys.stderr)
    handler.set_name(HANDLER_NAME)
    handler.setFormatter(logging.Formatter(fmt=LOG_FORMAT, datefmt=DATE_FORMAT))

    level_name = (level or config.LOG_LEVEL).upper()
    root.setLevel(getattr(logging, level_name, logging.WARNING))
    root.addHandler(handler)
