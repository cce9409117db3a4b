"""httpx backed implementation of :class:`~logentry.core.protocols.LogbookTransport`.

This module is the **only** place in the codebase that talks to the
logbook server.  The entry document is sent with ``PUT
<submit_url>/<filename>`` over TLS with a client certificate; the server
answers with a small XML document::

    <Response stat="ok"><msg>Success</msg><lognumber>3290013</lognumber></Response>

All ``httpx`` and ``ssl`` exceptions are caught here and re-raised as
:class:`~logentry.exceptions.SubmissionError` subclasses.
"""

from __future__ import annotations

import logging
import os
import ssl
import time
import uuid
import xml.etree.ElementTree as ET
from pathlib import Path

import httpx

from logentry.config import LogbookSettings
from logentry.core.models import SubmissionRequest
from logentry.core.protocols import EntrySerializer
from logentry.exceptions import CertificateError, ServerUnavailableError, SubmissionError
from logentry.infra.entry_queue import EntryQueue
from logentry.infra.xml_serializer import LogEntryXmlSerializer

logger = logging.getLogger(__name__)


def new_entry_filename() -> str:
    """Return a unique ``<YYYYmmdd_HHMMSS>_<pid>_<hex>.xml`` document name."""
    stamp = time.strftime("%Y%m%d_%H%M%S")
    return f"{stamp}_{os.getpid()}_{uuid.uuid4().hex[:8]}.xml"


class HttpLogbookTransport:
    """Concrete :class:`LogbookTransport` backed by ``httpx``.

    Parameters
    ----------
    settings:
        Server URL, default certificate, CA bundle, timeout and queue
        location.
    serializer:
        Renders the request as the server's XML document.
    queue:
        Receives entries that :meth:`submit` could not deliver.
    http_transport:
        Optional ``httpx`` transport; when given, TLS setup is skipped
        and requests go through it (used by tests).
    """

    def __init__(
        self,
        settings: LogbookSettings,
        *,
        serializer: EntrySerializer | None = None,
        queue: EntryQueue | None = None,
        http_transport: httpx.BaseTransport | None = None,
    ) -> None:
        self._settings = settings
        self._serializer: EntrySerializer = serializer or LogEntryXmlSerializer()
        self._queue = queue or EntryQueue(settings.queue_path)
        self._http_transport = http_transport

    # ------------------------------------------------------------------
    # Protocol methods
    # ------------------------------------------------------------------

    def submit_now(
        self,
        request: SubmissionRequest,
        *,
        certificate: str | None = None,
    ) -> int:
        """Deliver *request* immediately and return the assigned lognumber.

        Raises
        ------
        CertificateError
            If the client certificate is missing or invalid.
        ServerUnavailableError
            If the server cannot be reached or reports a server error.
        SubmissionError
            If the server rejects the entry.
        """
        cert_path = self._resolve_certificate(certificate)
        document = self._serializer.to_xml(request)
        return self._put(new_entry_filename(), document, cert_path)

    def submit(
        self,
        request: SubmissionRequest,
        *,
        certificate: str | None = None,
    ) -> int:
        """Deliver *request*, queueing it when the server is unavailable.

        Returns the lognumber, or ``0`` when the entry was queued.
        Certificate problems and server rejections are not queued.
        """
        cert_path = self._resolve_certificate(certificate)
        document = self._serializer.to_xml(request)
        filename = new_entry_filename()
        try:
            return self._put(filename, document, cert_path)
        except ServerUnavailableError as exc:
            logger.warning("Immediate submission failed (%s); queueing entry", exc)
            self._queue.enqueue(filename, document)
            return 0

    # ------------------------------------------------------------------
    # Certificate / client
    # ------------------------------------------------------------------

    def _resolve_certificate(self, certificate: str | None) -> Path:
        path = Path(certificate).expanduser() if certificate else self._settings.certificate_path
        if not path.is_file():
            raise CertificateError(
                f"Client certificate not found: {path}",
                hint="Pass --cert /path/to/cert.pem or set LOGENTRY_CERTIFICATE_PATH.",
            )
        return path

    def _client(self, cert_path: Path) -> httpx.Client:
        timeout = httpx.Timeout(self._settings.http_timeout_seconds)
        if self._http_transport is not None:
            return httpx.Client(transport=self._http_transport, timeout=timeout)

        ca_bundle = self._settings.ca_bundle_path
        try:
            context = ssl.create_default_context(
                cafile=str(ca_bundle) if ca_bundle else None,
            )
            context.load_cert_chain(str(cert_path))
        except (ssl.SSLError, OSError) as exc:
            raise CertificateError(
                f"Unable to load client certificate {cert_path}: {exc}",
                hint="The file must contain a PEM certificate and its private key.",
            ) from exc
        return httpx.Client(verify=context, timeout=timeout)

    # ------------------------------------------------------------------
    # HTTP exchange
    # ------------------------------------------------------------------

    def _put(self, filename: str, document: str, cert_path: Path) -> int:
        url = f"{self._settings.submit_url.rstrip('/')}/{filename}"
        logger.debug("PUT %s", url)
        try:
            with self._client(cert_path) as client:
                response = client.put(
                    url,
                    content=document.encode("utf-8"),
                    headers={"Content-Type": "text/xml; charset=utf-8"},
                )
        except httpx.TransportError as exc:
            raise ServerUnavailableError(
                f"Unable to reach logbook server: {exc}",
                hint="Check your network connection and LOGENTRY_SUBMIT_URL.",
            ) from exc
        logger.debug("Server answered HTTP %d", response.status_code)

        if response.is_server_error:
            raise ServerUnavailableError(
                f"Logbook server error (HTTP {response.status_code}).",
            )
        return self._parse_response(response)

    @staticmethod
    def _parse_response(response: httpx.Response) -> int:
        """Extract the lognumber from a server response."""
        try:
            root = ET.fromstring(response.content)
        except ET.ParseError as exc:
            raise SubmissionError(
                f"Unexpected response from logbook server (HTTP {response.status_code}).",
            ) from exc

        message = (root.findtext("msg") or "").strip()
        if root.get("stat") != "ok":
            raise SubmissionError(
                message or f"Entry rejected by logbook server (HTTP {response.status_code}).",
            )

        raw_number = (root.findtext("lognumber") or "").strip()
        try:
            lognumber = int(raw_number)
        except ValueError as exc:
            raise SubmissionError(
                f"Logbook server returned an invalid lognumber: {raw_number!r}",
            ) from exc
        if lognumber <= 0:
            raise SubmissionError(
                f"Logbook server returned an invalid lognumber: {lognumber}",
            )
        return lognumber
