"""Thin entrypoint for ``python -m ticket_board``."""

from __future__ import annotations

from ticket_board.app import main


if __name__ == "__main__":
    raise SystemExit(main())
