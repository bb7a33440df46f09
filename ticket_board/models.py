"""Shared model contracts for the board data flow."""

from __future__ import annotations

from dataclasses import dataclass, field

DEFAULT_PRIORITY = 2
DEFAULT_STATUS = "open"


@dataclass(frozen=True)
class Ticket:
    id: str
    title: str
    status: str = DEFAULT_STATUS
    priority: int = DEFAULT_PRIORITY
    assignee: str | None = None
    tags: tuple[str, ...] = ()
    pr: str | None = None


@dataclass(frozen=True)
class ColumnSpec:
    key: str
    label: str


@dataclass
class Column:
    key: str
    label: str
    tickets: list[Ticket] = field(default_factory=list)


@dataclass(frozen=True)
class TicketFilter:
    assignee: str | None = None
    tag: str | None = None


@dataclass(frozen=True)
class ColorPolicy:
    """Resolved once per run; rendering code only ever reads ``enabled``."""

    enabled: bool = False
