"""Command-line entrypoint: load tickets, filter, group, and print the board."""

from __future__ import annotations

import argparse
import os
import sys
from collections.abc import Mapping
from pathlib import Path

from ticket_board.collectors import find_tickets_dir, infer_me
from ticket_board.collectors.tickets import load_tickets
from ticket_board.color import COLOR_MODES, resolve_color
from ticket_board.columns import column_specs, group_tickets
from ticket_board.exceptions import TicketBoardError
from ticket_board.filters import build_filter, filter_tickets
from ticket_board.layout import column_width, terminal_width
from ticket_board.logging import get_logger, setup_logging
from ticket_board.models import ColorPolicy, Column, Ticket
from ticket_board.panels.board import render_board

logger = get_logger("app")

DESCRIBE = "tk-plugin: Kanban-style board view"

ENVIRONMENT_HELP = """\
Environment:
  TICKETS_DIR             Tickets directory (skips the .tickets lookup)
  FORCE_COLOR=1           Enable colors even when not a TTY
  NO_COLOR                Disable colors
  TICKET_BOARD_LOG_LEVEL  Diagnostics on stderr (default: WARNING)"""


class BoardArgumentParser(argparse.ArgumentParser):
    """Usage errors exit with status 1 instead of argparse's 2."""

    def error(self, message: str):
        self.print_usage(sys.stderr)
        self.exit(1, f"{self.prog}: error: {message}\n")


def _positive_int(value: str) -> int:
    try:
        number = int(value)
    except ValueError:
        raise argparse.ArgumentTypeError(f"invalid width: {value}") from None
    if number < 1:
        raise argparse.ArgumentTypeError(f"width must be at least 1: {value}")
    return number


def build_parser() -> argparse.ArgumentParser:
    parser = BoardArgumentParser(
        prog="ticket-board",
        description="Display tickets grouped by status in a kanban-style board view.",
        epilog=ENVIRONMENT_HELP,
        formatter_class=argparse.RawDescriptionHelpFormatter,
        allow_abbrev=False,
    )
    parser.add_argument("-a", "--assignee", metavar="NAME", help="Filter to a single assignee")
    parser.add_argument("-T", "--tag", metavar="TAG", help="Filter to tickets with a specific tag")
    parser.add_argument("--no-closed", dest="show_closed", action="store_false", help="Hide the closed column")
    parser.add_argument("--me", action="store_true", help="Filter to tickets assigned to current worker")
    parser.add_argument(
        "--color",
        choices=COLOR_MODES,
        default="auto",
        metavar="MODE",
        help="Color output: always, never, auto (default: auto)",
    )
    parser.add_argument("--tickets-dir", metavar="PATH", help="Read tickets from PATH")
    parser.add_argument("--width", type=_positive_int, metavar="N", help="Terminal width override")
    parser.add_argument("--tk-describe", action="store_true", help=argparse.SUPPRESS)
    return parser


def _collect(args: argparse.Namespace, cwd: Path, env: Mapping[str, str]) -> list[Ticket]:
    tickets_dir = Path(args.tickets_dir) if args.tickets_dir else find_tickets_dir(cwd, env)
    logger.debug("tickets directory: %s", tickets_dir)
    return load_tickets(tickets_dir)


def _board_columns(args: argparse.Namespace, tickets: list[Ticket], cwd: Path) -> list[Column]:
    me = infer_me(cwd) if args.me else None
    spec = build_filter(args.assignee, args.tag, me=me)
    return group_tickets(filter_tickets(tickets, spec), column_specs(args.show_closed))


def _render(columns: list[Column], total_width: int, policy: ColorPolicy) -> list[str]:
    width = column_width(total_width, len(columns))
    logger.debug("terminal width %d, column width %d, color %s", total_width, width, policy.enabled)
    return render_board(columns, width, policy)


def main(argv: list[str] | None = None) -> int:
    parser = build_parser()
    args, extras = parser.parse_known_args(argv)

    if args.tk_describe:
        print(DESCRIBE)
        return 0

    unknown = [extra for extra in extras if extra.startswith("-")]
    if unknown:
        print(f"Unknown option: {unknown[0]}", file=sys.stderr)
        return 1

    setup_logging()
    env = os.environ
    stream = sys.stdout
    cwd = Path.cwd()

    try:
        tickets = _collect(args, cwd, env)
    except TicketBoardError as exc:
        print(f"Error: {exc}", file=sys.stderr)
        return 1

    policy = resolve_color(args.color, env, stream)
    columns = _board_columns(args, tickets, cwd)
    for line in _render(columns, args.width or terminal_width(stream), policy):
        print(line, file=stream)
    return 0


if __name__ == "__main__":
    raise SystemExit(main())
