"""Tests for mapping parsed command lines onto submission requests.

The body is served by an in-memory text source; no files or stdin are
touched.
"""

from __future__ import annotations

from typing import Any
from unittest.mock import MagicMock

import pytest

from logentry.core.entry_builder import EntryBuilder, join_values
from logentry.core.models import Attachment, BodyFormat, Reference
from logentry.core.options import ParsedLine
from logentry.exceptions import EntryIOError, MissingOptionsError


def _line(**values: Any) -> ParsedLine:
    defaults: dict[str, list[str]] = {"title": ["Test"], "logbook": ["TLOG"]}
    defaults.update(values)
    return ParsedLine(defaults)


# ---------------------------------------------------------------------------
# Required fields
# ---------------------------------------------------------------------------

class TestRequiredFields:
    def test_minimal_request(self, stub_text_source: Any) -> None:
        request = EntryBuilder(stub_text_source).build(_line())
        assert request.title == "Test"
        assert request.logbook == "TLOG"
        assert request.body_text is None
        assert request.body_format is BodyFormat.TEXT
        assert request.attachments == ()
        assert request.tags == ()
        assert request.references == ()
        assert request.notify_addresses == ()
        assert request.entry_makers == ()
        assert request.credential_path is None

    def test_missing_fields_raise_before_any_read(self) -> None:
        source = MagicMock()
        with pytest.raises(MissingOptionsError):
            EntryBuilder(source).build(ParsedLine({"body": ["-"]}))
        source.read_stdin.assert_not_called()


# ---------------------------------------------------------------------------
# Logbook join
# ---------------------------------------------------------------------------

class TestLogbookJoin:
    def test_two_logbooks(self, stub_text_source: Any) -> None:
        request = EntryBuilder(stub_text_source).build(
            _line(logbook=["Lab A", "Lab B"]),
        )
        assert request.logbook == "Lab A, Lab B"
        assert request.logbooks == ("Lab A", "Lab B")

    def test_join_values_single(self) -> None:
        assert join_values(("TLOG",)) == "TLOG"


# ---------------------------------------------------------------------------
# Body
# ---------------------------------------------------------------------------

class TestBody:
    def test_dash_reads_stdin(self, stub_text_source: Any) -> None:
        stub_text_source.stdin = "hello"
        request = EntryBuilder(stub_text_source).build(_line(body=["-"]))
        assert request.body_text == "hello"
        assert stub_text_source.stdin_reads == 1

    def test_path_reads_file(self, stub_text_source: Any) -> None:
        stub_text_source.files["/tmp/body.txt"] = "from file ✓"
        request = EntryBuilder(stub_text_source).build(_line(body=["/tmp/body.txt"]))
        assert request.body_text == "from file ✓"
        assert stub_text_source.stdin_reads == 0

    def test_html_flag_sets_format(self, stub_text_source: Any) -> None:
        stub_text_source.stdin = "<p>hi</p>"
        request = EntryBuilder(stub_text_source).build(
            _line(body=["-"], html=[]),
        )
        assert request.body_format is BodyFormat.HTML

    def test_read_failure_propagates_as_io_error(self) -> None:
        source = MagicMock()
        source.read_file.side_effect = EntryIOError("nope")
        with pytest.raises(EntryIOError, match="nope"):
            EntryBuilder(source).build(_line(body=["/missing"]))


# ---------------------------------------------------------------------------
# Lists
# ---------------------------------------------------------------------------

class TestLists:
    def test_lists_copied_verbatim(self, stub_text_source: Any) -> None:
        request = EntryBuilder(stub_text_source).build(
            _line(
                tag=["Readme", "Readme"],
                notify=["a@example.org", "b@example.org"],
                entrymaker=["alice", "bob"],
            ),
        )
        assert request.tags == ("Readme", "Readme")
        assert request.notify_addresses == ("a@example.org", "b@example.org")
        assert request.entry_makers == ("alice", "bob")

    def test_links_become_logbook_references(self, stub_text_source: Any) -> None:
        request = EntryBuilder(stub_text_source).build(_line(link=["100", "200"]))
        assert request.references == (
            Reference(target="100", kind="logbook"),
            Reference(target="200", kind="logbook"),
        )

    def test_attachments_paired_with_captions(self, stub_text_source: Any) -> None:
        request = EntryBuilder(stub_text_source).build(
            _line(attach=["a.png", "b.png"], caption=["A"]),
        )
        assert request.attachments == (
            Attachment("a.png", "A"),
            Attachment("b.png", None),
        )

    def test_attachments_without_captions(self, stub_text_source: Any) -> None:
        request = EntryBuilder(stub_text_source).build(_line(attach=["a.png"]))
        assert request.attachments == (Attachment("a.png", None),)

    def test_cert_sets_credential_path(self, stub_text_source: Any) -> None:
        request = EntryBuilder(stub_text_source).build(_line(cert=["/tmp/c.pem"]))
        assert request.credential_path == "/tmp/c.pem"
