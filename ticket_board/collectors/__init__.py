"""Collector helpers: locating the ticket directory and the current worker."""

from __future__ import annotations

import os
from collections.abc import Mapping
from pathlib import Path

from ticket_board.exceptions import TicketsDirNotFoundError
from ticket_board.logging import get_logger

logger = get_logger("collectors")

TICKETS_DIR_NAME = ".tickets"
TICKETS_DIR_ENV = "TICKETS_DIR"


def read_text(path: Path) -> str | None:
    try:
        return path.read_text(encoding="utf-8")
    except (OSError, UnicodeDecodeError) as exc:
        logger.debug("skipping %s: %s", path.name, exc)
        return None


def env_tickets_dir(env: Mapping[str, str] | None = None) -> Path | None:
    value = (os.environ if env is None else env).get(TICKETS_DIR_ENV)
    return Path(value) if value else None


def find_tickets_dir(start: Path, env: Mapping[str, str] | None = None) -> Path:
    """Return the tickets directory for a run started in ``start``.

    ``TICKETS_DIR`` wins when set; otherwise the nearest ``.tickets``
    directory in ``start`` or any of its parents.
    """
    configured = env_tickets_dir(env)
    if configured is not None:
        return configured

    start = start.resolve()
    for directory in (start, *start.parents):
        candidate = directory / TICKETS_DIR_NAME
        if candidate.is_dir():
            logger.debug("found %s", candidate)
            return candidate
    raise TicketsDirNotFoundError(start)


def infer_me(cwd: Path) -> str:
    """The current worker is named after the working directory."""
    return cwd.resolve().name
