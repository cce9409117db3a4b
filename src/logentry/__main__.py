"""Allow ``python -m logentry`` invocation.

Delegates to the CLI error-boundary entry point so that
``python -m logentry`` behaves identically to the ``logentry``
console script.
"""

from __future__ import annotations

from logentry.cli.app import cli

if __name__ == "__main__":
    cli()
