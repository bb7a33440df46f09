"""Centralized logging configuration for ticket-board.

Board output goes to stdout; log records go to stderr so they never mix
with a rendered frame.
"""

from __future__ import annotations

import logging
import os
import sys
from typing import TextIO

DEFAULT_LOG_LEVEL = "WARNING"
LOG_LEVEL_ENV = "TICKET_BOARD_LOG_LEVEL"

LOG_FORMAT = "%(asctime)s | %(levelname)-8s | %(name)s | %(message)s"
DATE_FORMAT = "%Y-%m-%d %H:%M:%S"


def setup_logging(level: str | None = None, stream: TextIO | None = None) -> logging.Logger:
    """Set up the package logger.

    Args:
        level: Log level name (DEBUG, INFO, WARNING, ERROR). Defaults to
               WARNING; can be overridden with TICKET_BOARD_LOG_LEVEL.
        stream: Destination for records. Defaults to stderr.

    Returns:
        The root ticket_board logger.
    """
    if level is None:
        level = os.environ.get(LOG_LEVEL_ENV) or DEFAULT_LOG_LEVEL
    log_level = getattr(logging, level.upper(), logging.WARNING)

    logger = logging.getLogger("ticket_board")
    logger.setLevel(log_level)

    # Remove existing handlers to avoid duplicates on repeated runs
    logger.handlers.clear()

    handler = logging.StreamHandler(stream or sys.stderr)
    handler.setLevel(log_level)
    handler.setFormatter(logging.Formatter(LOG_FORMAT, datefmt=DATE_FORMAT))
    logger.addHandler(handler)
    logger.propagate = False

    return logger


def get_logger(name: str) -> logging.Logger:
    """Get a logger for a component.

    Args:
        name: Component name (e.g., 'collectors', 'columns').
              Will be prefixed with 'ticket_board.'.

    Returns:
        Logger instance for the component.
    """
    if not name.startswith("ticket_board."):
        name = f"ticket_board.{name}"
    return logging.getLogger(name)
