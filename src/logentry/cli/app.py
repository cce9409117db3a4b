"""CLI application entry point for logentry.

This module is the **sole error boundary** for the entire application.
It catches :class:`~logentry.exceptions.LogEntryError`,
``KeyboardInterrupt``, and any unexpected ``Exception``, rendering
user-friendly messages and returning well-defined exit codes.

Flow
----
1. Parse the command line.
2. Honour ``--help`` before anything else.
3. Validate and build the entry.
4. Optionally print the XML preview.
5. Stop here for ``--nosubmit``; otherwise dispatch and report.

Architecture notes
------------------
* No business logic lives here; all work is delegated to the core and
  infrastructure layers.
* This module is the only place that translates between the domain
  world and the OS process exit code.
"""

from __future__ import annotations

import logging
import sys
from collections.abc import Sequence

from logentry.cli import exit_codes
from logentry.cli.console import console, output
from logentry.cli.logging_config import configure_logging
from logentry.cli.parser import BANNER, build_parser, parse_line
from logentry.config import LogbookSettings, load_settings
from logentry.core.dispatcher import SubmissionDispatcher
from logentry.core.entry_builder import EntryBuilder
from logentry.core.options import SchemaVersion
from logentry.core.protocols import EntrySerializer, LogbookTransport, TextSource
from logentry.exceptions import LogEntryError, ParseError

logger = logging.getLogger(__name__)


# ---------------------------------------------------------------------------
# Help / usage
# ---------------------------------------------------------------------------

def _show_help(schema_version: SchemaVersion) -> None:
    output.print_plain(BANNER)
    output.print_plain(build_parser(schema_version).format_help())


def _show_usage_error(exc: ParseError, schema_version: SchemaVersion) -> None:
    console.print_plain(str(exc))
    console.print_plain(BANNER)
    console.print_plain(build_parser(schema_version).format_help())


# ---------------------------------------------------------------------------
# Main entry point
# ---------------------------------------------------------------------------

def main(
    argv: Sequence[str] | None = None,
    *,
    settings: LogbookSettings | None = None,
    transport: LogbookTransport | None = None,
    text_source: TextSource | None = None,
    serializer: EntrySerializer | None = None,
) -> int:
    """Run the logentry CLI.

    Parameters
    ----------
    argv:
        Explicit argument list.  When ``None`` (default), ``sys.argv[1:]``
        is used.
    settings:
        Configuration; loaded from the environment when ``None``.
    transport, text_source, serializer:
        Collaborators; the local/HTTP implementations are used when
        ``None``.  Accepting them enables deterministic testing without
        monkeypatching.

    Returns
    -------
    int
        OS process exit code.

    Raises
    ------
    ParseError
        For unknown flags or missing required options.
    LogEntryError
        For I/O and submission failures.
    """
    settings = settings or load_settings()
    schema_version = SchemaVersion(settings.option_schema)

    parser = build_parser(schema_version)
    line, verbose = parse_line(parser, argv, schema_version)
    configure_logging(logging.DEBUG if verbose else settings.log_level)

    if line.has_option("help"):
        _show_help(schema_version)
        return exit_codes.SUCCESS

    if text_source is None:
        from logentry.infra.text_source import LocalTextSource

        text_source = LocalTextSource()

    request = EntryBuilder(text_source).build(line)

    if line.has_option("xml"):
        if serializer is None:
            from logentry.infra.xml_serializer import LogEntryXmlSerializer

            serializer = LogEntryXmlSerializer()
        output.print_plain(serializer.to_xml(request))

    if line.has_option("nosubmit"):
        logger.info("--nosubmit given; entry not submitted")
        return exit_codes.SUCCESS

    if transport is None:
        from logentry.infra.http_transport import HttpLogbookTransport

        transport = HttpLogbookTransport(settings, serializer=serializer)

    outcome = SubmissionDispatcher(transport).dispatch(
        request,
        no_queue=line.has_option("noqueue"),
    )
    output.print_plain(outcome.message)
    return exit_codes.SUCCESS


# ---------------------------------------------------------------------------
# Script-level error boundary
# ---------------------------------------------------------------------------

def run(
    argv: Sequence[str] | None = None,
    *,
    settings: LogbookSettings | None = None,
    transport: LogbookTransport | None = None,
    text_source: TextSource | None = None,
    serializer: EntrySerializer | None = None,
) -> int:
    """Run :func:`main` and convert every failure into an exit code."""
    schema_version = SchemaVersion.CURRENT
    try:
        settings = settings or load_settings()
        schema_version = SchemaVersion(settings.option_schema)
        return main(
            argv,
            settings=settings,
            transport=transport,
            text_source=text_source,
            serializer=serializer,
        )
    except ParseError as exc:
        _show_usage_error(exc, schema_version)
        return exit_codes.GENERAL_ERROR
    except LogEntryError as exc:
        console.print(f"[bold red]Error:[/bold red] {exc}", highlight=False)
        if exc.hint:
            console.print(f"[yellow]Hint:[/yellow] {exc.hint}", highlight=False)
        return exit_codes.GENERAL_ERROR
    except KeyboardInterrupt:
        console.print("\n[yellow]Aborted by user.[/yellow]")
        return exit_codes.KEYBOARD_INTERRUPT
    except Exception as exc:  # noqa: BLE001
        console.print(
            "[bold red]Unexpected error.[/bold red] "
            "Please report this issue.\n"
            f"  {type(exc).__name__}: {exc}",
            highlight=False,
        )
        return exit_codes.UNEXPECTED_ERROR


def cli() -> None:
    """Top-level entry point invoked by the console script.

    Guarantees the process never exits with a raw stack trace during
    normal usage.
    """
    sys.exit(run())
