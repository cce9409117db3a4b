"""Protocols (interfaces) consumed by the core layer.

These define the contracts that infrastructure adapters must satisfy.
Core code depends ONLY on these protocols, never on concrete
implementations, following the dependency inversion principle.
"""

from __future__ import annotations

from typing import Protocol

from logentry.core.models import SubmissionRequest


class TextSource(Protocol):
    """Contract for reading entry body text."""

    def read_file(self, path: str) -> str:
        """Return the UTF-8 decoded contents of the file at *path*.

        Raises
        ------
        EntryIOError
            When the file is missing, unreadable, or not valid UTF-8.
        """
        ...  # pragma: no cover

    def read_stdin(self) -> str:
        """Return everything available on standard input, decoded as UTF-8.

        Raises
        ------
        EntryIOError
            When standard input cannot be read.
        """
        ...  # pragma: no cover


class EntrySerializer(Protocol):
    """Contract for rendering a request as the server's entry document."""

    def to_xml(self, request: SubmissionRequest) -> str:
        """Serialize *request* without modifying it.

        Raises
        ------
        EntryIOError
            When an attachment cannot be read.
        """
        ...  # pragma: no cover


class LogbookTransport(Protocol):
    """Contract for delivering entries to the logbook server.

    Both methods return a signed result code: a positive lognumber when
    the server accepted the entry immediately, ``0`` when the entry was
    placed in the queue.  Implementations raise
    :class:`~logentry.exceptions.SubmissionError` for every failure.
    """

    def submit(
        self,
        request: SubmissionRequest,
        *,
        certificate: str | None = None,
    ) -> int:
        """Submit *request*, queueing it when the server is unavailable.

        Parameters
        ----------
        request:
            The entry to deliver.
        certificate:
            Alternate client certificate path.  ``None`` selects the
            default credential.
        """
        ...  # pragma: no cover

    def submit_now(
        self,
        request: SubmissionRequest,
        *,
        certificate: str | None = None,
    ) -> int:
        """Submit *request* immediately; never queue.

        Raises
        ------
        SubmissionError
            When immediate submission is not possible.
        """
        ...  # pragma: no cover
