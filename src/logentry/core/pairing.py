"""Positional pairing of attachments with captions.

The first caption goes with the first attachment, the second with the
second, and so on.  Index is the only correspondence key.
"""

from __future__ import annotations

from collections.abc import Sequence

from logentry.core.models import Attachment


def pair_attachments(
    paths: Sequence[str],
    captions: Sequence[str] | None = None,
) -> tuple[Attachment, ...]:
    """Pair each attachment path with the caption at the same index.

    Rules
    -----
    * No paths: empty result.
    * ``captions is None`` (no caption option): every caption is omitted.
    * Attachments past the end of *captions* get an omitted (``None``)
      caption, never an empty string.
    * Captions past the end of *paths* are ignored.

    Neither sequence is reordered, and no length mismatch is an error.
    """
    if captions is None:
        captions = ()
    return tuple(
        Attachment(
            path=path,
            caption=captions[index] if index < len(captions) else None,
        )
        for index, path in enumerate(paths)
    )
