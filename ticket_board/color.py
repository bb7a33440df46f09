"""Color policy resolution.

Precedence, highest first: an explicit ``--color`` mode, ``FORCE_COLOR``
(non-empty), ``NO_COLOR`` (present, any value), then whether the output
stream is a terminal.
"""

from __future__ import annotations

from collections.abc import Mapping
from typing import TextIO

from ticket_board.models import ColorPolicy

COLOR_MODES = ("always", "never", "auto")


def is_terminal(stream: TextIO | None) -> bool:
    isatty = getattr(stream, "isatty", None)
    if isatty is None:
        return False
    try:
        return bool(isatty())
    except ValueError:
        # closed stream
        return False


def resolve_color(mode: str | None, env: Mapping[str, str], stream: TextIO | None) -> ColorPolicy:
    if mode == "always":
        return ColorPolicy(enabled=True)
    if mode == "never":
        return ColorPolicy(enabled=False)
    if mode not in (None, "auto"):
        raise ValueError(f"unknown color mode: {mode}")

    if env.get("FORCE_COLOR"):
        return ColorPolicy(enabled=True)
    if "NO_COLOR" in env:
        return ColorPolicy(enabled=False)
    return ColorPolicy(enabled=is_terminal(stream))
