"""Ticket file collector: markdown files with a ``key: value`` frontmatter block."""

from __future__ import annotations

import re
from pathlib import Path

from ticket_board.collectors import read_text
from ticket_board.exceptions import TicketParseError, TicketSourceError
from ticket_board.logging import get_logger
from ticket_board.models import DEFAULT_PRIORITY, DEFAULT_STATUS, Ticket

logger = get_logger("collectors.tickets")

FRONTMATTER_BOUNDARY = "---"
TICKET_SUFFIX = ".md"
NO_TITLE = "(no title)"
PR_FIELDS = ("pull_request", "pull-request")

FIELD_RE = re.compile(r"^([a-z][a-z0-9_-]*): ?(.*)$")
HEADING_RE = re.compile(r"^# (.+)$", re.MULTILINE)
PRIORITY_RE = re.compile(r"^\s*([+-]?\d+)")


def split_frontmatter(text: str, source: str) -> tuple[dict[str, str], str]:
    lines = text.splitlines()
    if not lines or lines[0].strip() != FRONTMATTER_BOUNDARY:
        raise TicketParseError(source, "missing frontmatter")

    end = next(
        (i for i in range(1, len(lines)) if lines[i].strip() == FRONTMATTER_BOUNDARY),
        None,
    )
    if end is None:
        raise TicketParseError(source, "unterminated frontmatter")

    fields: dict[str, str] = {}
    for line in lines[1:end]:
        match = FIELD_RE.match(line)
        if match:
            fields[match.group(1)] = match.group(2).strip()
    return fields, "\n".join(lines[end + 1 :])


def _priority(raw: str | None) -> int:
    if raw is None:
        return DEFAULT_PRIORITY
    match = PRIORITY_RE.match(raw)
    return int(match.group(1)) if match else DEFAULT_PRIORITY


def _tags(raw: str | None) -> tuple[str, ...]:
    if not raw:
        return ()
    inner = raw.strip()
    if inner.startswith("["):
        inner = inner[1:]
    if inner.endswith("]"):
        inner = inner[:-1]
    return tuple(tag for tag in (part.strip() for part in inner.split(",")) if tag)


def _title(body: str) -> str:
    match = HEADING_RE.search(body)
    if match:
        title = match.group(1).strip()
        if title:
            return title
    return NO_TITLE


def parse_ticket(text: str, stem: str) -> Ticket:
    """Parse one ticket file's contents; ``stem`` is the fallback id."""
    fields, body = split_frontmatter(text, stem)
    pr = next((fields[name] for name in PR_FIELDS if fields.get(name)), None)
    return Ticket(
        id=fields.get("id") or stem,
        title=_title(body),
        status=fields.get("status") or DEFAULT_STATUS,
        priority=_priority(fields.get("priority")),
        assignee=fields.get("assignee") or None,
        tags=_tags(fields.get("tags")),
        pr=pr,
    )


def list_ticket_files(directory: Path) -> list[Path]:
    try:
        return sorted(
            path for path in directory.iterdir() if path.name.endswith(TICKET_SUFFIX) and path.is_file()
        )
    except OSError as exc:
        raise TicketSourceError(f"cannot read {directory}") from exc


def load_tickets(directory: Path) -> list[Ticket]:
    """Load every parseable ticket in ``directory`` in file name order.

    Unreadable or malformed files are skipped; only an unreadable directory
    is fatal.
    """
    tickets: list[Ticket] = []
    for path in list_ticket_files(directory):
        text = read_text(path)
        if text is None:
            continue
        try:
            tickets.append(parse_ticket(text, path.stem))
        except TicketParseError as exc:
            logger.debug("skipping %s", exc)
    logger.debug("loaded %d tickets from %s", len(tickets), directory)
    return tickets
