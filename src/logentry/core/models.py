"""Domain models for logentry.

All models are **frozen** dataclasses: immutable value objects with no
behaviour beyond data access.  They carry zero I/O, zero dependencies on
external packages, and must remain pure across the entire lifecycle.
"""

from __future__ import annotations

from dataclasses import dataclass
from enum import Enum


class BodyFormat(Enum):
    """Content type of the entry body."""

    TEXT = "text"
    HTML = "html"


class OutcomeMode(Enum):
    """How the logbook accepted a submitted entry."""

    QUEUED = "queued"
    IMMEDIATE = "immediate"


# ---------------------------------------------------------------------------
# Entry parts
# ---------------------------------------------------------------------------

@dataclass(frozen=True, slots=True)
class Attachment:
    """A file to attach, paired with its caption by position."""

    path: str
    """Filesystem path of the file to attach."""

    caption: str | None = None
    """Caption text.  ``None`` means omitted; ``""`` is an explicitly
    empty caption."""


@dataclass(frozen=True, slots=True)
class Reference:
    """A link from the new entry to an existing one."""

    target: str
    """Identifier of the referenced item (e.g. a lognumber)."""

    kind: str = "logbook"
    """Reference type understood by the server."""


# ---------------------------------------------------------------------------
# Submission request
# ---------------------------------------------------------------------------

@dataclass(frozen=True, slots=True)
class SubmissionRequest:
    """A fully populated entry ready to be previewed or submitted."""

    title: str
    logbook: str
    """Comma-space joined logbook names, e.g. ``"Lab A, Lab B"``."""

    body_text: str | None = None
    body_format: BodyFormat = BodyFormat.TEXT
    attachments: tuple[Attachment, ...] = ()
    tags: tuple[str, ...] = ()
    references: tuple[Reference, ...] = ()
    notify_addresses: tuple[str, ...] = ()
    entry_makers: tuple[str, ...] = ()
    credential_path: str | None = None
    """Alternate client certificate; ``None`` selects the default one."""

    def __post_init__(self) -> None:
        if not self.title:
            raise ValueError("title must not be empty")
        if not self.logbook:
            raise ValueError("logbook must not be empty")

    @property
    def logbooks(self) -> tuple[str, ...]:
        """Individual logbook names split out of :attr:`logbook`."""
        names = (name.strip() for name in self.logbook.split(","))
        return tuple(name for name in names if name)


# ---------------------------------------------------------------------------
# Submission outcome
# ---------------------------------------------------------------------------

@dataclass(frozen=True, slots=True)
class SubmissionOutcome:
    """Result of a successful submission call."""

    mode: OutcomeMode
    assigned_number: int | None = None
    """Lognumber assigned by the server; ``None`` for queued entries."""

    @property
    def message(self) -> str:
        """User-facing description of the outcome."""
        if self.mode is OutcomeMode.IMMEDIATE:
            return f"The Entry was saved with lognumber {self.assigned_number}"
        return "The Entry was placed in the entry queue"
