"""Exceptions for ticket-board."""

from __future__ import annotations

from pathlib import Path


class TicketBoardError(Exception):
    """Base exception for ticket-board errors."""


class TicketSourceError(TicketBoardError):
    """Raised when the ticket directory cannot be used."""


class TicketsDirNotFoundError(TicketSourceError):
    """Raised when no tickets directory is configured or found."""

    def __init__(self, start: Path) -> None:
        self.start = start
        super().__init__("no .tickets directory found (searched parent directories)")


class TicketParseError(TicketBoardError):
    """Raised when a ticket file has no usable frontmatter."""

    def __init__(self, source: str, reason: str) -> None:
        self.source = source
        self.reason = reason
        super().__init__(f"{source}: {reason}")
