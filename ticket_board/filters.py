"""Assignee and tag predicates over a ticket list."""

from __future__ import annotations

from collections.abc import Iterable

from ticket_board.models import Ticket, TicketFilter


def build_filter(assignee: str | None = None, tag: str | None = None, me: str | None = None) -> TicketFilter:
    """Build the filter for one run.

    ``me`` is the resolved current-worker name; when given it replaces
    ``assignee`` rather than combining with it.
    """
    return TicketFilter(assignee=(me if me is not None else assignee) or None, tag=tag or None)


def _same(left: str, right: str) -> bool:
    return left.casefold() == right.casefold()


def matches(ticket: Ticket, spec: TicketFilter) -> bool:
    if spec.assignee and not (ticket.assignee and _same(ticket.assignee, spec.assignee)):
        return False
    if spec.tag and not any(_same(tag, spec.tag) for tag in ticket.tags):
        return False
    return True


def filter_tickets(tickets: Iterable[Ticket], spec: TicketFilter) -> list[Ticket]:
    return [ticket for ticket in tickets if matches(ticket, spec)]
