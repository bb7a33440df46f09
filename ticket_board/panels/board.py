"""Board renderer: headers and cards interleaved into fixed-width rows."""

from __future__ import annotations

from collections.abc import Sequence

from ticket_board.formatting import blank_cell, fit_cell
from ticket_board.layout import GAP
from ticket_board.models import ColorPolicy, Column
from ticket_board.panels import HEADER_STYLE, paint
from ticket_board.panels.card import render_card

RULE = "─"
GAP_TEXT = " " * GAP


def _join(cells: Sequence[str]) -> str:
    return GAP_TEXT.join(cells)


def render_header(columns: Sequence[Column], width: int, policy: ColorPolicy) -> list[str]:
    labels = [fit_cell(paint(column.label, HEADER_STYLE, policy), width) for column in columns]
    rules = [RULE * width for _ in columns]
    return [_join(labels), _join(rules)]


def render_rows(columns: Sequence[Column], width: int, policy: ColorPolicy) -> list[str]:
    """Interleave the columns' cards slot by slot.

    Slot ``i`` holds the ``i``-th card of every column and is as tall as the
    tallest of them; shorter or missing cards are filled with blank cells.
    Consecutive slots are separated by one empty line.
    """
    cards = [[render_card(ticket, width, policy) for ticket in column.tickets] for column in columns]
    slots = max((len(column_cards) for column_cards in cards), default=0)
    blank = blank_cell(width)

    rows: list[str] = []
    for slot in range(slots):
        present = [column_cards[slot] for column_cards in cards if slot < len(column_cards)]
        height = max(len(card) for card in present)
        for line_index in range(height):
            cells: list[str] = []
            for column_cards in cards:
                if slot < len(column_cards) and line_index < len(column_cards[slot]):
                    cells.append(fit_cell(column_cards[slot][line_index], width))
                else:
                    cells.append(blank)
            rows.append(_join(cells))
        if slot < slots - 1:
            rows.append("")
    return rows


def render_board(columns: Sequence[Column], width: int, policy: ColorPolicy) -> list[str]:
    if not columns:
        return []
    return render_header(columns, width, policy) + render_rows(columns, width, policy)
