"""Infrastructure layer: external system integration.

This layer wraps all interaction with the filesystem, standard input,
and the logbook server.  Every raw third-party exception must be caught
here and re-raised as a :class:`~logentry.exceptions.LogEntryError`
subclass.

Rules
-----
* No imports from ``cli``.
* No user-facing output (no ``print()``, no Rich rendering).
* Must expose clean, typed interfaces consumed by the core layer.
"""

from logentry.infra.entry_queue import EntryQueue
from logentry.infra.http_transport import HttpLogbookTransport
from logentry.infra.text_source import LocalTextSource
from logentry.infra.xml_serializer import LogEntryXmlSerializer

__all__: list[str] = [
    "EntryQueue",
    "HttpLogbookTransport",
    "LocalTextSource",
    "LogEntryXmlSerializer",
]
