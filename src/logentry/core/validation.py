"""Required-option validation.

Required options are checked here rather than by the flag parser so
that ``--help`` keeps working when they are missing.  Callers must
handle the help flag before calling :func:`validate_required`.
"""

from __future__ import annotations

from logentry.core.options import ParsedLine
from logentry.exceptions import MissingOptionsError

REQUIRED_OPTIONS: tuple[tuple[str, str], ...] = (
    ("title", "-t"),
    ("logbook", "-l"),
)
"""``(option name, short flag)`` pairs, in reporting order."""


def find_missing(line: ParsedLine) -> list[str]:
    """Return labels such as ``"title (-t)"`` for every absent required option.

    An option given only with empty values counts as absent.
    """
    return [
        f"{name} ({flag})"
        for name, flag in REQUIRED_OPTIONS
        if not any(line.get_values(name))
    ]


def validate_required(line: ParsedLine) -> None:
    """Raise :class:`MissingOptionsError` listing all absent required options."""
    missing = find_missing(line)
    if missing:
        raise MissingOptionsError(missing)
