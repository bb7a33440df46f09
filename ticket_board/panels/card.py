"""Card renderer: one ticket as up to four display lines."""

from __future__ import annotations

from ticket_board.formatting import clean_text, truncate_text
from ticket_board.models import ColorPolicy, Ticket
from ticket_board.panels import ASSIGNEE_STYLE, LINK_STYLE, TAG_STYLE, paint, priority_label

PART_SEP = "  "


def _people_and_tags(ticket: Ticket, policy: ColorPolicy) -> str | None:
    parts: list[str] = []
    if ticket.assignee:
        parts.append(paint(f"@{clean_text(ticket.assignee)}", ASSIGNEE_STYLE, policy))
    for tag in ticket.tags:
        parts.append(paint(f"#{clean_text(tag)}", TAG_STYLE, policy))
    return PART_SEP.join(parts) if parts else None


def render_card(ticket: Ticket, width: int, policy: ColorPolicy) -> list[str]:
    """Render ``ticket`` for a column ``width`` cells wide.

    Lines: id and priority, title, then assignee/tags and the PR link when
    the ticket has them. Title and link keep one cell free at the right edge.
    Control characters in ticket fields are shown as spaces.
    """
    text_width = width - 1
    lines = [
        f"{clean_text(ticket.id)}  {priority_label(ticket.priority, policy)}",
        truncate_text(clean_text(ticket.title), text_width),
    ]

    meta = _people_and_tags(ticket, policy)
    if meta is not None:
        lines.append(meta)

    if ticket.pr:
        lines.append(paint(truncate_text(clean_text(ticket.pr), text_width), LINK_STYLE, policy))
    return lines
