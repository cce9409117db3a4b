"""On-disk queue for entries that could not be submitted right away.

Queued entries are plain XML documents in a single directory; another
process picks them up later.  Writes go to a temporary file first and
are renamed into place so a reader never sees a partial document.
"""

from __future__ import annotations

import logging
import os
import tempfile
from pathlib import Path

from logentry.exceptions import QueueError

logger = logging.getLogger(__name__)

QUEUE_SUFFIX = ".xml"


class EntryQueue:
    """Directory-backed entry queue."""

    def __init__(self, path: Path) -> None:
        self.path: Path = path

    def enqueue(self, filename: str, document: str) -> Path:
        """Write *document* to the queue as *filename* and return its path.

        Raises
        ------
        QueueError
            If the queue directory or file cannot be written.
        """
        target = self.path / filename
        try:
            self.path.mkdir(parents=True, exist_ok=True)
            fd, tmp_name = tempfile.mkstemp(dir=self.path, prefix=".", suffix=".tmp")
            try:
                with os.fdopen(fd, "w", encoding="utf-8") as handle:
                    handle.write(document)
                os.replace(tmp_name, target)
            except BaseException:
                Path(tmp_name).unlink(missing_ok=True)
                raise
        except OSError as exc:
            raise QueueError(
                f"Unable to queue entry in {self.path}: {exc.strerror or exc}",
                hint="Check LOGENTRY_QUEUE_PATH points at a writable directory.",
            ) from exc
        logger.info("Queued entry as %s (%d pending)", target, len(self.pending()))
        return target

    def pending(self) -> list[Path]:
        """Queued entry files in name (and therefore creation) order."""
        if not self.path.is_dir():
            return []
        return sorted(self.path.glob(f"*{QUEUE_SUFFIX}"))
