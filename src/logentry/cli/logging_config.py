"""Logging setup for the CLI.

Records go to stderr through ``rich.logging.RichHandler`` when Rich is
installed, and through a plain stream handler otherwise.
"""

from __future__ import annotations

import logging
import sys

LOGGER_NAME = "logentry"
PLAIN_FORMAT = "%(levelname)s %(name)s: %(message)s"


def configure_logging(level: int | str = logging.WARNING) -> logging.Logger:
    """Attach a single stderr handler to the ``logentry`` logger.

    Calling this again replaces the previous handler, so repeated
    invocations in one process (tests) do not duplicate output.
    """
    logger = logging.getLogger(LOGGER_NAME)
    for handler in list(logger.handlers):
        logger.removeHandler(handler)

    try:
        from rich.console import Console
        from rich.logging import RichHandler
    except ModuleNotFoundError:
        handler: logging.Handler = logging.StreamHandler(sys.stderr)
        handler.setFormatter(logging.Formatter(PLAIN_FORMAT))
    else:
        handler = RichHandler(
            console=Console(stderr=True),
            show_time=False,
            show_path=False,
            markup=False,
        )

    logger.addHandler(handler)
    logger.setLevel(level.upper() if isinstance(level, str) else level)
    logger.propagate = False
    return logger
