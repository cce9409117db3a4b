"""Core / service layer: pure business logic and data transformations.

Rules
-----
* No ``print()`` calls.
* No filesystem or network I/O; reads and submission go through the
  protocols in :mod:`logentry.core.protocols`.
* No imports from ``cli`` or ``infra``.
"""

from logentry.core.dispatcher import Pathway, SubmissionDispatcher, select_pathway
from logentry.core.entry_builder import EntryBuilder
from logentry.core.models import (
    Attachment,
    BodyFormat,
    OutcomeMode,
    Reference,
    SubmissionOutcome,
    SubmissionRequest,
)
from logentry.core.options import OptionSpec, ParsedLine, SchemaVersion, build_option_schema
from logentry.core.pairing import pair_attachments
from logentry.core.protocols import EntrySerializer, LogbookTransport, TextSource
from logentry.core.validation import validate_required

__all__: list[str] = [
    "Attachment",
    "BodyFormat",
    "EntryBuilder",
    "EntrySerializer",
    "LogbookTransport",
    "OptionSpec",
    "OutcomeMode",
    "ParsedLine",
    "Pathway",
    "Reference",
    "SchemaVersion",
    "SubmissionDispatcher",
    "SubmissionOutcome",
    "SubmissionRequest",
    "TextSource",
    "build_option_schema",
    "pair_attachments",
    "select_pathway",
    "validate_required",
]
