"""Custom exception hierarchy for logentry.

All exceptions that cross layer boundaries must inherit from
:class:`LogEntryError`.  Raw third-party exceptions (``httpx``,
``OSError`` from file reads, XML parse errors) must NEVER propagate
beyond the infrastructure layer. They are caught there and re-raised
as a typed subclass defined here.

Hierarchy
---------
LogEntryError
├── ParseError
│   └── MissingOptionsError
├── EntryIOError
├── SubmissionError
│   ├── ServerUnavailableError
│   ├── CertificateError
│   └── QueueError
└── EnvironmentError
"""

from __future__ import annotations

from collections.abc import Sequence


class LogEntryError(Exception):
    """Base exception for all logentry errors.

    Every user-visible error condition maps to a subclass of this
    exception so that the CLI error boundary can render a clean message
    without leaking internal stack traces.
    """

    def __init__(self, message: str, *, hint: str | None = None) -> None:
        super().__init__(message)
        self.hint: str | None = hint
        """Optional actionable guidance shown below the error message."""


# --- Command line ----------------------------------------------------------

class ParseError(LogEntryError):
    """Raised for malformed or unknown flags.

    The CLI boundary reports every parse error together with the usage
    text.
    """


class MissingOptionsError(ParseError):
    """Raised when one or more required options are absent."""

    def __init__(self, missing: Sequence[str]) -> None:
        super().__init__("Missing required option(s): " + ", ".join(missing))
        self.missing: tuple[str, ...] = tuple(missing)
        """Labels of the missing options, e.g. ``"title (-t)"``."""


# --- Local input -----------------------------------------------------------

class EntryIOError(LogEntryError):
    """Raised when the body, stdin, or an attachment cannot be read."""


# --- Submission ------------------------------------------------------------

class SubmissionError(LogEntryError):
    """Raised when the entry could not be submitted or queued."""


class ServerUnavailableError(SubmissionError):
    """Raised when the logbook server cannot be reached or is failing."""


class CertificateError(SubmissionError):
    """Raised when the client certificate is missing or unusable."""


class QueueError(SubmissionError):
    """Raised when an entry cannot be written to the local queue."""


# --- Environment / tooling -------------------------------------------------

class EnvironmentError(LogEntryError):
    """Raised when a required runtime dependency is not available."""
