"""Entry builder: maps a validated command line onto a request.

The builder reads the body through a
:class:`~logentry.core.protocols.TextSource` injected at construction
time, so the core never touches the filesystem or stdin itself.

Guarantees
----------
* The returned :class:`SubmissionRequest` always has a title and a
  logbook; missing ones are reported as
  :class:`~logentry.exceptions.MissingOptionsError`.
* Read failures surface as :class:`~logentry.exceptions.EntryIOError`.
"""

from __future__ import annotations

import logging

from logentry.core.models import BodyFormat, Reference, SubmissionRequest
from logentry.core.options import ParsedLine
from logentry.core.pairing import pair_attachments
from logentry.core.protocols import TextSource
from logentry.core.validation import validate_required

logger = logging.getLogger(__name__)

STDIN_MARKER = "-"
LOGBOOK_SEPARATOR = ", "


def join_values(values: tuple[str, ...]) -> str:
    """Join repeated option values with a comma and a space."""
    return LOGBOOK_SEPARATOR.join(values)


class EntryBuilder:
    """Builds :class:`SubmissionRequest` objects from parsed lines.

    Parameters
    ----------
    text_source:
        Any object satisfying the :class:`TextSource` protocol.
    """

    def __init__(self, text_source: TextSource) -> None:
        self._text_source: TextSource = text_source

    # ------------------------------------------------------------------
    # Public API
    # ------------------------------------------------------------------

    def build(self, line: ParsedLine) -> SubmissionRequest:
        """Assemble a request from *line*.

        Raises
        ------
        MissingOptionsError
            If title or logbook is absent.
        EntryIOError
            If the body cannot be read.
        """
        validate_required(line)

        body_format = BodyFormat.HTML if line.has_option("html") else BodyFormat.TEXT
        body_text = self._read_body(line.get_value("body"))

        captions = line.get_values("caption") if line.has_option("caption") else None
        attachments = pair_attachments(line.get_values("attach"), captions)

        request = SubmissionRequest(
            title=line.get_value("title") or "",
            logbook=join_values(line.get_values("logbook")),
            body_text=body_text,
            body_format=body_format,
            attachments=attachments,
            tags=line.get_values("tag"),
            references=tuple(
                Reference(target=link) for link in line.get_values("link")
            ),
            notify_addresses=line.get_values("notify"),
            entry_makers=line.get_values("entrymaker"),
            credential_path=line.get_value("cert"),
        )
        logger.debug(
            "Built entry %r for %s (%d attachment(s))",
            request.title,
            request.logbook,
            len(request.attachments),
        )
        return request

    # ------------------------------------------------------------------
    # Body
    # ------------------------------------------------------------------

    def _read_body(self, source: str | None) -> str | None:
        if source is None:
            return None
        if source == STDIN_MARKER:
            logger.debug("Reading body from standard input")
            return self._text_source.read_stdin()
        logger.debug("Reading body from %s", source)
        return self._text_source.read_file(source)
