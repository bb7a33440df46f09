"""Style palette and painting helpers shared by the board renderers."""

from __future__ import annotations

from rich.color import ColorSystem
from rich.style import Style

from ticket_board.models import ColorPolicy

HEADER_STYLE = Style(bold=True)
ALERT_STYLE = Style(color="red")
MUTED_STYLE = Style(dim=True)
ASSIGNEE_STYLE = Style(color="green")
TAG_STYLE = Style(color="cyan")
LINK_STYLE = Style(color="blue", underline=True)

# Plain 16-color codes: every terminal that takes color understands them.
COLOR_SYSTEM = ColorSystem.STANDARD


def paint(text: str, style: Style | None, policy: ColorPolicy) -> str:
    if style is None or not policy.enabled:
        return text
    return style.render(text, color_system=COLOR_SYSTEM)


def priority_style(priority: int) -> Style | None:
    if priority <= 1:
        return ALERT_STYLE
    if priority == 2:
        return None
    return MUTED_STYLE


def priority_label(priority: int, policy: ColorPolicy) -> str:
    return paint(f"P{priority}", priority_style(priority), policy)
