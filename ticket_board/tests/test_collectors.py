from __future__ import annotations

import tempfile
import unittest
from pathlib import Path
import sys

sys.path.insert(0, str(Path(__file__).resolve().parents[2]))

from ticket_board.collectors import find_tickets_dir, infer_me  # noqa: E402
from ticket_board.collectors.tickets import NO_TITLE, load_tickets, parse_ticket  # noqa: E402
from ticket_board.exceptions import (  # noqa: E402
    TicketParseError,
    TicketSourceError,
    TicketsDirNotFoundError,
)


def make_ticket(tickets_dir: Path, tid: str, fields: dict[str, object], title: str = "Test ticket") -> Path:
    frontmatter = "\n".join(f"{key}: {value}" for key, value in fields.items())
    path = tickets_dir / f"{tid}.md"
    path.write_text(f"---\nid: {tid}\n{frontmatter}\n---\n# {title}\n\nDescription.\n", encoding="utf-8")
    return path


class ParseTicketTests(unittest.TestCase):
    def test_full_record(self):
        text = (
            "---\n"
            "id: ab-1234\n"
            "status: in_progress\n"
            "priority: 0\n"
            "assignee: ham\n"
            "tags: [blocked, in_review]\n"
            "pull_request: https://github.com/org/repo/pull/12\n"
            "---\n"
            "# Fix auth\n\nBody.\n"
        )
        ticket = parse_ticket(text, "ignored")
        self.assertEqual(ticket.id, "ab-1234")
        self.assertEqual(ticket.status, "in_progress")
        self.assertEqual(ticket.priority, 0)
        self.assertEqual(ticket.assignee, "ham")
        self.assertEqual(ticket.tags, ("blocked", "in_review"))
        self.assertEqual(ticket.pr, "https://github.com/org/repo/pull/12")
        self.assertEqual(ticket.title, "Fix auth")

    def test_defaults(self):
        ticket = parse_ticket("---\nfoo: bar\n---\nno heading here\n", "ab-nop")
        self.assertEqual(ticket.id, "ab-nop")
        self.assertEqual(ticket.status, "open")
        self.assertEqual(ticket.priority, 2)
        self.assertIsNone(ticket.assignee)
        self.assertEqual(ticket.tags, ())
        self.assertIsNone(ticket.pr)
        self.assertEqual(ticket.title, NO_TITLE)

    def test_empty_values_fall_back(self):
        ticket = parse_ticket("---\nid:\nstatus:\nassignee:\npriority: high\ntags: []\n---\n# T\n", "stem")
        self.assertEqual(ticket.id, "stem")
        self.assertEqual(ticket.status, "open")
        self.assertIsNone(ticket.assignee)
        self.assertEqual(ticket.priority, 2)
        self.assertEqual(ticket.tags, ())

    def test_leading_integer_priority(self):
        self.assertEqual(parse_ticket("---\npriority: 3 # later\n---\n", "x").priority, 3)

    def test_hyphenated_pr_field(self):
        ticket = parse_ticket("---\npull-request: https://gh.io/pr/1\n---\n# T\n", "x")
        self.assertEqual(ticket.pr, "https://gh.io/pr/1")

    def test_tags_without_brackets(self):
        self.assertEqual(parse_ticket("---\ntags: a, , b\n---\n", "x").tags, ("a", "b"))

    def test_crlf_line_endings(self):
        ticket = parse_ticket("---\r\nid: ab-1\r\nstatus: closed\r\n---\r\n# Done\r\n", "x")
        self.assertEqual((ticket.id, ticket.status, ticket.title), ("ab-1", "closed", "Done"))

    def test_title_is_first_h1_in_body(self):
        ticket = parse_ticket("---\nid: a\n---\nintro\n## Sub\n# Real title  \n# Second\n", "a")
        self.assertEqual(ticket.title, "Real title")

    def test_missing_frontmatter(self):
        with self.assertRaises(TicketParseError):
            parse_ticket("# Just markdown\n", "x")

    def test_unterminated_frontmatter(self):
        with self.assertRaises(TicketParseError) as ctx:
            parse_ticket("---\nid: a\n# Title\n", "x")
        self.assertEqual(ctx.exception.source, "x")


class LoadTicketsTests(unittest.TestCase):
    def test_loads_in_name_order_and_skips_bad_files(self):
        with tempfile.TemporaryDirectory() as tmp:
            tickets_dir = Path(tmp)
            make_ticket(tickets_dir, "ab-2", {"status": "open"})
            make_ticket(tickets_dir, "ab-1", {"status": "closed"})
            (tickets_dir / "broken.md").write_text("no frontmatter\n", encoding="utf-8")
            (tickets_dir / "binary.md").write_bytes(b"\xff\xfe\x00garbage")
            (tickets_dir / "notes.txt").write_text("---\nid: nope\n---\n", encoding="utf-8")
            (tickets_dir / "dir.md").mkdir()

            tickets = load_tickets(tickets_dir)
            self.assertEqual([t.id for t in tickets], ["ab-1", "ab-2"])

    def test_empty_directory(self):
        with tempfile.TemporaryDirectory() as tmp:
            self.assertEqual(load_tickets(Path(tmp)), [])

    def test_missing_directory_is_fatal(self):
        with tempfile.TemporaryDirectory() as tmp:
            with self.assertRaises(TicketSourceError) as ctx:
                load_tickets(Path(tmp) / "absent")
            self.assertIn("cannot read", str(ctx.exception))


class FindTicketsDirTests(unittest.TestCase):
    def test_env_wins(self):
        with tempfile.TemporaryDirectory() as tmp:
            found = find_tickets_dir(Path(tmp), {"TICKETS_DIR": "/somewhere/else"})
            self.assertEqual(found, Path("/somewhere/else"))

    def test_ascends_from_subdirectory(self):
        with tempfile.TemporaryDirectory() as tmp:
            root = Path(tmp).resolve()
            (root / ".tickets").mkdir()
            nested = root / "deep" / "nested"
            nested.mkdir(parents=True)
            self.assertEqual(find_tickets_dir(nested, {}), root / ".tickets")

    def test_nearest_directory_wins(self):
        with tempfile.TemporaryDirectory() as tmp:
            root = Path(tmp).resolve()
            (root / ".tickets").mkdir()
            inner = root / "project"
            (inner / ".tickets").mkdir(parents=True)
            self.assertEqual(find_tickets_dir(inner, {"TICKETS_DIR": ""}), inner / ".tickets")

    def test_not_found(self):
        with tempfile.TemporaryDirectory() as tmp:
            with self.assertRaises(TicketsDirNotFoundError) as ctx:
                find_tickets_dir(Path(tmp), {})
            self.assertIn("no .tickets directory found", str(ctx.exception))

    def test_infer_me_is_directory_name(self):
        with tempfile.TemporaryDirectory() as tmp:
            user_dir = Path(tmp) / "alice"
            user_dir.mkdir()
            self.assertEqual(infer_me(user_dir), "alice")


if __name__ == "__main__":
    unittest.main()
