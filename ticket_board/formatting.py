"""Width-aware text helpers for cells that may carry ANSI style codes.

Measurement and editing are separate passes: the visible width of a string is
taken from a copy with the escape sequences stripped, and truncation/padding
then work on the original string so its codes survive into the output.
"""

from __future__ import annotations

import re

from rich.cells import cell_len, get_character_cell_size

ANSI_RE = re.compile(r"\x1b\[[0-9;]*m")
ANSI_SPLIT_RE = re.compile(r"(\x1b\[[0-9;]*m)")
ELLIPSIS = "…"
RESET = "\x1b[0m"
# C0 controls and DEL; ESC only when it does not start a style code
CONTROL_RE = re.compile(r"[\x00-\x1a\x1c-\x1f\x7f]|\x1b(?!\[[0-9;]*m)")


def strip_ansi(text: str) -> str:
    return ANSI_RE.sub("", text)


def clean_text(text: str) -> str:
    """Replace tabs and other control characters with a single space."""
    return CONTROL_RE.sub(" ", text)


def visible_length(text: str) -> int:
    return cell_len(strip_ansi(text))


def _crop(text: str, cells: int) -> tuple[str, int]:
    """Keep at most ``cells`` visible cells of ``text``, escape codes included.

    Returns the cropped string and the number of cells it occupies, which can
    be one short of ``cells`` when a double-width character would straddle
    the boundary.
    """
    out: list[str] = []
    used = 0
    styled = False
    # re.split with a capture group puts the codes at odd indexes
    for index, chunk in enumerate(ANSI_SPLIT_RE.split(text)):
        if index % 2:
            out.append(chunk)
            styled = chunk != RESET
            continue
        for char in chunk:
            size = get_character_cell_size(char)
            if used + size > cells:
                if styled:
                    out.append(RESET)
                return "".join(out), used
            out.append(char)
            used += size
    return "".join(out), used


def truncate_text(text: str, limit: int) -> str:
    """Fit ``text`` into ``limit`` visible cells.

    Text that already fits is returned unchanged. Longer text is cut so that
    the kept part plus a trailing ellipsis is exactly ``limit`` cells wide.
    """
    if limit <= 0:
        return ""
    if visible_length(text) <= limit:
        return text
    cropped, used = _crop(text, limit - 1)
    return cropped + " " * (limit - 1 - used) + ELLIPSIS


def pad_right(text: str, width: int) -> str:
    return text + " " * max(0, width - visible_length(text))


def fit_cell(text: str, width: int) -> str:
    """Return ``text`` occupying exactly ``width`` visible cells."""
    return pad_right(truncate_text(text, width), width)


def blank_cell(width: int) -> str:
    return " " * max(0, width)
