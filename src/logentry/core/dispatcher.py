"""Submission dispatcher: picks a pathway and interprets the result.

Two independent switches select one of four pathways:

==========================  ===========  ==========================
alternate credential        ``noqueue``  pathway
==========================  ===========  ==========================
no                          no           :attr:`Pathway.DEFAULT_QUEUED`
no                          yes          :attr:`Pathway.DEFAULT_IMMEDIATE`
yes                         no           :attr:`Pathway.ALTERNATE_QUEUED`
yes                         yes          :attr:`Pathway.ALTERNATE_IMMEDIATE`
==========================  ===========  ==========================

The transport returns a signed result code: ``> 0`` is the assigned
lognumber, ``0`` means the entry was queued.  Every other failure is a
:class:`~logentry.exceptions.SubmissionError`.  No retries happen here.
"""

from __future__ import annotations

import logging
from enum import Enum

from logentry.core.models import OutcomeMode, SubmissionOutcome, SubmissionRequest
from logentry.core.protocols import LogbookTransport
from logentry.exceptions import LogEntryError, SubmissionError

logger = logging.getLogger(__name__)


class Pathway(Enum):
    """The four ways an entry can be handed to the transport."""

    DEFAULT_QUEUED = (False, True)
    DEFAULT_IMMEDIATE = (False, False)
    ALTERNATE_QUEUED = (True, True)
    ALTERNATE_IMMEDIATE = (True, False)

    @property
    def uses_alternate_credential(self) -> bool:
        return self.value[0]

    @property
    def allows_queue(self) -> bool:
        return self.value[1]


def select_pathway(has_alternate_credential: bool, no_queue: bool) -> Pathway:
    """Map the two switches onto exactly one :class:`Pathway`."""
    if has_alternate_credential:
        return Pathway.ALTERNATE_IMMEDIATE if no_queue else Pathway.ALTERNATE_QUEUED
    return Pathway.DEFAULT_IMMEDIATE if no_queue else Pathway.DEFAULT_QUEUED


def interpret_result(result: int, pathway: Pathway) -> SubmissionOutcome:
    """Translate a transport result code into an outcome.

    Raises
    ------
    SubmissionError
        For negative codes, and for ``0`` on a pathway that forbids
        queueing.
    """
    if result > 0:
        return SubmissionOutcome(mode=OutcomeMode.IMMEDIATE, assigned_number=result)
    if result == 0 and pathway.allows_queue:
        return SubmissionOutcome(mode=OutcomeMode.QUEUED)
    if result == 0:
        raise SubmissionError(
            "The entry could not be submitted immediately.",
            hint="Retry later, or omit --noqueue to queue the entry.",
        )
    raise SubmissionError(f"Submission failed with result code {result}.")


class SubmissionDispatcher:
    """Stateless service that submits a request through one pathway.

    Parameters
    ----------
    transport:
        Any object satisfying the :class:`LogbookTransport` protocol.
    """

    def __init__(self, transport: LogbookTransport) -> None:
        self._transport: LogbookTransport = transport

    def dispatch(
        self,
        request: SubmissionRequest,
        *,
        no_queue: bool = False,
    ) -> SubmissionOutcome:
        """Submit *request* and return the interpreted outcome.

        The alternate credential is used when ``request.credential_path``
        is set.

        Raises
        ------
        SubmissionError
            When the transport fails or returns an unusable result.
        """
        pathway = select_pathway(request.credential_path is not None, no_queue)
        logger.debug("Submitting %r via %s", request.title, pathway.name)
        result = self._call_transport(request, pathway)
        logger.debug("Transport returned %d", result)
        return interpret_result(result, pathway)

    # ------------------------------------------------------------------
    # Transport delegation (safe boundary)
    # ------------------------------------------------------------------

    def _call_transport(self, request: SubmissionRequest, pathway: Pathway) -> int:
        """Call the transport and ensure only our exceptions escape."""
        certificate = request.credential_path if pathway.uses_alternate_credential else None
        submit = (
            self._transport.submit if pathway.allows_queue else self._transport.submit_now
        )
        try:
            return int(submit(request, certificate=certificate))
        except LogEntryError:
            # Already one of ours, propagate unchanged.
            raise
        except Exception as exc:
            raise SubmissionError(f"Unexpected transport error: {exc}") from exc
