"""XML rendering of entries.

Produces the document the logbook server accepts, also used for the
``--xml`` preview.  Serialization reads attachment files but never
modifies the request.
"""

from __future__ import annotations

import base64
import mimetypes
import xml.etree.ElementTree as ET
from pathlib import Path

from logentry.core.models import Attachment, SubmissionRequest
from logentry.exceptions import EntryIOError

DEFAULT_MIME_TYPE = "application/octet-stream"
XML_DECLARATION = '<?xml version="1.0" encoding="UTF-8"?>\n'


class LogEntryXmlSerializer:
    """Concrete :class:`EntrySerializer` using :mod:`xml.etree.ElementTree`."""

    def to_xml(self, request: SubmissionRequest) -> str:
        root = ET.Element("Logentry")
        ET.SubElement(root, "title").text = request.title

        self._add_list(root, "Logbooks", "logbook", request.logbooks)

        if request.entry_makers:
            makers = ET.SubElement(root, "Entrymakers")
            for name in request.entry_makers:
                maker = ET.SubElement(makers, "Entrymaker")
                ET.SubElement(maker, "username").text = name

        self._add_list(root, "Tags", "tag", request.tags)
        self._add_list(root, "Notifications", "email", request.notify_addresses)

        if request.references:
            refs = ET.SubElement(root, "References")
            for ref in request.references:
                ET.SubElement(refs, "reference", type=ref.kind).text = ref.target

        if request.body_text is not None:
            body = ET.SubElement(root, "Body", type=request.body_format.value)
            body.text = request.body_text

        if request.attachments:
            attachments = ET.SubElement(root, "Attachments")
            for attachment in request.attachments:
                attachments.append(self._attachment_element(attachment))

        ET.indent(root)
        return XML_DECLARATION + ET.tostring(root, encoding="unicode")

    # ------------------------------------------------------------------
    # Helpers
    # ------------------------------------------------------------------

    @staticmethod
    def _add_list(
        parent: ET.Element,
        container: str,
        item: str,
        values: tuple[str, ...],
    ) -> None:
        if not values:
            return
        holder = ET.SubElement(parent, container)
        for value in values:
            ET.SubElement(holder, item).text = value

    @staticmethod
    def _attachment_element(attachment: Attachment) -> ET.Element:
        path = Path(attachment.path)
        try:
            data = path.read_bytes()
        except OSError as exc:
            raise EntryIOError(
                f"Unable to read attachment {attachment.path}: {exc.strerror or exc}",
                hint="Check that the file exists and is readable.",
            ) from exc

        element = ET.Element("Attachment")
        if attachment.caption is not None:
            ET.SubElement(element, "caption").text = attachment.caption
        ET.SubElement(element, "filename").text = path.name
        mime_type, _ = mimetypes.guess_type(path.name)
        ET.SubElement(element, "type").text = mime_type or DEFAULT_MIME_TYPE
        ET.SubElement(element, "encoding").text = "base64"
        ET.SubElement(element, "data").text = base64.b64encode(data).decode("ascii")
        return element
