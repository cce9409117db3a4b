"""Option schema and parsed-line access.

The schema is pure data: which flags exist, whether they take a value,
whether they may repeat, and how they are described in ``--help``.
Parsing itself happens in the CLI layer; the result is exposed to the
core as a read-only :class:`ParsedLine`.
"""

from __future__ import annotations

from collections.abc import Iterable, Mapping, Sequence
from dataclasses import dataclass
from enum import IntEnum
from types import MappingProxyType


class SchemaVersion(IntEnum):
    """Generations of the command-line contract."""

    LEGACY = 1
    """Original option set, without client certificate selection."""

    CURRENT = 2
    """Adds ``--cert``."""


@dataclass(frozen=True, slots=True)
class OptionSpec:
    """Declaration of a single command-line option."""

    name: str
    """Canonical option name, also the key in :class:`ParsedLine`."""

    long: str
    """Long flag, e.g. ``--title``."""

    short: str | None = None
    """Single-dash flag, e.g. ``-t`` or ``-nosubmit``."""

    takes_value: bool = False
    repeatable: bool = False
    metavar: str | None = None
    description: str = ""
    since: SchemaVersion = SchemaVersion.LEGACY

    @property
    def flags(self) -> tuple[str, ...]:
        """All flag spellings, single-dash form first."""
        if self.short is None:
            return (self.long,)
        return (self.short, self.long)


_ALL_OPTIONS: tuple[OptionSpec, ...] = (
    OptionSpec("help", "--help", "-h", description="Prints this message"),
    OptionSpec(
        "logbook", "--logbook", "-l",
        takes_value=True, repeatable=True, metavar="NAME",
        description="(required) A valid logbook name",
    ),
    OptionSpec(
        "title", "--title", "-t",
        takes_value=True, metavar="TITLE",
        description="(required) The title/keywords for the entry (max 255 chars)",
    ),
    OptionSpec(
        "attach", "--attach", "-a",
        takes_value=True, repeatable=True, metavar="PATH",
        description="A /path/to/a/file to attach",
    ),
    OptionSpec(
        "body", "--body", "-b",
        takes_value=True, metavar="PATH",
        description="A /path/to/a/text/file or '-' to read StdIn",
    ),
    OptionSpec(
        "tag", "--tag", "-g",
        takes_value=True, repeatable=True, metavar="TAG",
        description="A valid tag",
    ),
    OptionSpec(
        "entrymaker", "--entrymaker", "-e",
        takes_value=True, repeatable=True, metavar="NAME",
        description="Name(s) of person(s) making the entry",
    ),
    OptionSpec(
        "notify", "--notify", "-n",
        takes_value=True, repeatable=True, metavar="EMAIL",
        description="An email address",
    ),
    OptionSpec(
        "caption", "--caption", "-c",
        takes_value=True, repeatable=True, metavar="TEXT",
        description="Caption(s) to go with attachment(s)",
    ),
    OptionSpec(
        "link", "--link", "-link",
        takes_value=True, repeatable=True, metavar="LOGNUMBER",
        description="Link to the specified existing lognumber",
    ),
    OptionSpec("html", "--html", "-html", description="Interpret body as HTML instead of text"),
    OptionSpec("xml", "--xml", "-xml", description="Print XML version of logentry to StdOut"),
    OptionSpec(
        "noqueue", "--noqueue", "-noqueue",
        description="Do not queue entry. Exit with error if immediate submit fails",
    ),
    OptionSpec("nosubmit", "--nosubmit", "-nosubmit", description="Do not submit entry."),
    OptionSpec(
        "cert", "--cert", "-cert",
        takes_value=True, metavar="PATH",
        description="The path to a PEM format logbook SSL certificate file to use",
        since=SchemaVersion.CURRENT,
    ),
)


def build_option_schema(
    version: SchemaVersion = SchemaVersion.CURRENT,
) -> tuple[OptionSpec, ...]:
    """Return the options recognised by schema *version*, in help order.

    Required options are deliberately not marked as required here: the
    help flag must work even when they are absent.
    """
    return tuple(spec for spec in _ALL_OPTIONS if spec.since <= version)


# ---------------------------------------------------------------------------
# Parsed line
# ---------------------------------------------------------------------------

class ParsedLine:
    """Read-only view of the options given on one command line.

    Values are stored as tuples in command-line order.  A flag that was
    given is stored as an empty tuple; an option that was not given is
    absent.
    """

    def __init__(self, values: Mapping[str, Sequence[str]]) -> None:
        self._values: Mapping[str, tuple[str, ...]] = MappingProxyType(
            {name: tuple(vals) for name, vals in values.items()},
        )

    @classmethod
    def from_pairs(cls, pairs: Iterable[tuple[str, str | None]]) -> ParsedLine:
        """Build a line from ``(name, value)`` pairs; ``None`` marks a flag."""
        collected: dict[str, list[str]] = {}
        for name, value in pairs:
            bucket = collected.setdefault(name, [])
            if value is not None:
                bucket.append(value)
        return cls(collected)

    def has_option(self, name: str) -> bool:
        return name in self._values

    def get_value(self, name: str) -> str | None:
        """Return the first value of *name*, or ``None`` if absent."""
        values = self._values.get(name, ())
        return values[0] if values else None

    def get_values(self, name: str) -> tuple[str, ...]:
        """Return every value of *name* in command-line order."""
        return self._values.get(name, ())

    def __repr__(self) -> str:
        return f"ParsedLine({dict(self._values)!r})"
