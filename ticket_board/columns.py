"""Status columns: fixed order, priority-sorted contents."""

from __future__ import annotations

from collections.abc import Iterable, Sequence

from ticket_board.logging import get_logger
from ticket_board.models import Column, ColumnSpec, Ticket

logger = get_logger("columns")

OPEN = ColumnSpec("open", "OPEN")
IN_PROGRESS = ColumnSpec("in_progress", "IN PROGRESS")
CLOSED = ColumnSpec("closed", "CLOSED")


def column_specs(show_closed: bool = True) -> list[ColumnSpec]:
    specs = [OPEN, IN_PROGRESS]
    if show_closed:
        specs.append(CLOSED)
    return specs


def group_tickets(tickets: Iterable[Ticket], specs: Sequence[ColumnSpec]) -> list[Column]:
    columns = [Column(key=spec.key, label=spec.label) for spec in specs]
    by_key = {column.key: column for column in columns}

    for ticket in tickets:
        column = by_key.get(ticket.status)
        if column is None:
            logger.debug("ticket %s has no column for status %r", ticket.id, ticket.status)
            continue
        column.tickets.append(ticket)

    for column in columns:
        # list.sort is stable, so equal priorities keep file order
        column.tickets.sort(key=lambda ticket: ticket.priority)
    return columns
