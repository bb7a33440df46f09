"""Column geometry derived from the terminal width."""

from __future__ import annotations

import os
import sys
from collections.abc import Mapping
from typing import TextIO

from rich.console import Console

from ticket_board.color import is_terminal

DEFAULT_WIDTH = 80
GAP = 2


def column_width(terminal_width: int, count: int) -> int:
    """Uniform width shared by ``count`` columns separated by ``GAP`` spaces."""
    if count <= 0:
        return 0
    return max(0, (terminal_width - GAP * (count - 1)) // count)


def _columns_hint(env: Mapping[str, str]) -> int | None:
    columns = env.get("COLUMNS", "").strip()
    if columns.isdigit() and int(columns) > 0:
        return int(columns)
    return None


def terminal_width(stream: TextIO | None = None, env: Mapping[str, str] | None = None) -> int:
    """Width of the terminal ``stream`` writes to.

    A stream that is not a terminal has no width of its own: ``COLUMNS`` is
    used when set, otherwise ``DEFAULT_WIDTH``. Other std streams are never
    consulted, so redirected output does not pick up the width of stdin.
    """
    stream = sys.stdout if stream is None else stream
    env = os.environ if env is None else env
    if not is_terminal(stream):
        return _columns_hint(env) or DEFAULT_WIDTH
    try:
        width = Console(file=stream, width=_columns_hint(env)).size.width
    except (OSError, ValueError):
        return DEFAULT_WIDTH
    return width if width and width > 0 else DEFAULT_WIDTH
