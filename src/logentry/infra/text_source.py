"""Local implementation of :class:`~logentry.core.protocols.TextSource`.

Reads body text from files and standard input as UTF-8.  Every
``OSError`` and decoding failure is re-raised as
:class:`~logentry.exceptions.EntryIOError`.
"""

from __future__ import annotations

import sys
from pathlib import Path
from typing import TextIO

from logentry.exceptions import EntryIOError

ENCODING = "utf-8"


class LocalTextSource:
    """Concrete :class:`TextSource` backed by the local filesystem.

    Parameters
    ----------
    stdin:
        Stream to read for ``-b -``.  Defaults to :data:`sys.stdin` at
        read time.
    """

    def __init__(self, stdin: TextIO | None = None) -> None:
        self._stdin: TextIO | None = stdin

    def read_file(self, path: str) -> str:
        try:
            return Path(path).read_text(encoding=ENCODING)
        except UnicodeDecodeError as exc:
            raise EntryIOError(
                f"Body file is not valid UTF-8: {path}",
                hint="Convert the file to UTF-8 and try again.",
            ) from exc
        except OSError as exc:
            raise EntryIOError(
                f"Unable to read body file {path}: {exc.strerror or exc}",
                hint="Check that the file exists and is readable.",
            ) from exc

    def read_stdin(self) -> str:
        stream = self._stdin if self._stdin is not None else sys.stdin
        try:
            raw = getattr(stream, "buffer", None)
            if raw is not None:
                return raw.read().decode(ENCODING)
            return stream.read()
        except UnicodeDecodeError as exc:
            raise EntryIOError("Standard input is not valid UTF-8.") from exc
        except OSError as exc:
            raise EntryIOError(
                f"IO error trying to read message from standard input: {exc}",
            ) from exc
