"""argparse adapter for the option schema.

Turns :class:`~logentry.core.options.OptionSpec` declarations into an
``argparse`` parser and its results into a
:class:`~logentry.core.options.ParsedLine`.  Parse failures raise
:class:`~logentry.exceptions.ParseError` instead of exiting, so the
single error boundary in :mod:`logentry.cli.app` decides the exit code.
"""

from __future__ import annotations

import argparse
from collections.abc import Sequence
from typing import NoReturn

from logentry.core.options import OptionSpec, ParsedLine, SchemaVersion, build_option_schema
from logentry.exceptions import ParseError
from logentry.version import __version__

PROG = "logentry"
BANNER = f"{PROG} command line utility version {__version__}"
EPILOG = (
    "The options tag, logbook, attachment, and notify may be included more "
    "than once to make multiple inclusions. For more help see: "
    "https://logbooks.jlab.org/content/unix-command-line"
)


class OptionParser(argparse.ArgumentParser):
    """ArgumentParser that raises :class:`ParseError` on bad input."""

    def error(self, message: str) -> NoReturn:
        raise ParseError(message)


def build_parser(
    schema_version: SchemaVersion = SchemaVersion.CURRENT,
) -> OptionParser:
    """Construct the argument parser for *schema_version*.

    The help flag is an ordinary option so that the driver can honour
    it before required options are validated.
    """
    parser = OptionParser(
        prog=PROG,
        usage=f"{PROG} [options]",
        description="Create a logbook entry from the command line.",
        epilog=EPILOG,
        add_help=False,
        allow_abbrev=False,
    )
    for option in build_option_schema(schema_version):
        _add_option(parser, option)

    parser.add_argument(
        "-v",
        "--verbose",
        action="store_true",
        help="Log debugging details to stderr",
    )
    parser.add_argument(
        "-V",
        "--version",
        action="version",
        version=f"%(prog)s {__version__}",
    )
    return parser


def _add_option(parser: argparse.ArgumentParser, option: OptionSpec) -> None:
    if not option.takes_value:
        parser.add_argument(
            *option.flags, dest=option.name, action="store_true", help=option.description,
        )
        return
    # Single-valued options keep every occurrence too; ParsedLine.get_value
    # then yields the first one given.
    parser.add_argument(
        *option.flags,
        dest=option.name,
        action="append",
        metavar=option.metavar,
        help=option.description,
    )


def parse_line(
    parser: argparse.ArgumentParser,
    argv: Sequence[str] | None,
    schema_version: SchemaVersion = SchemaVersion.CURRENT,
) -> tuple[ParsedLine, bool]:
    """Parse *argv* and return the line plus the ``--verbose`` switch.

    Raises
    ------
    ParseError
        For unknown flags, missing values, or stray positional arguments.
    """
    namespace = parser.parse_args(argv)
    pairs: list[tuple[str, str | None]] = []
    for option in build_option_schema(schema_version):
        raw = getattr(namespace, option.name)
        if raw is True:
            pairs.append((option.name, None))
        elif raw:
            pairs.extend((option.name, value) for value in raw)
    return ParsedLine.from_pairs(pairs), bool(namespace.verbose)
