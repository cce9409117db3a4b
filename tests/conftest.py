"""Shared pytest fixtures and configuration for the logentry test suite.

Guidelines
----------
* No network access in any test; the logbook server is replaced by a
  stub transport or ``httpx.MockTransport``.
* Core tests must be pure, with no side effects.
* Filesystem state lives under ``tmp_path`` only.
"""

from __future__ import annotations

from pathlib import Path

import pytest

from logentry.config import LogbookSettings
from logentry.core.models import SubmissionRequest


class StubTransport:
    """Records calls and returns a fixed result code."""

    def __init__(self, result: int = 42, error: Exception | None = None) -> None:
        self.result = result
        self.error = error
        self.calls: list[tuple[str, SubmissionRequest, str | None]] = []

    def submit(self, request: SubmissionRequest, *, certificate: str | None = None) -> int:
        return self._record("submit", request, certificate)

    def submit_now(
        self, request: SubmissionRequest, *, certificate: str | None = None,
    ) -> int:
        return self._record("submit_now", request, certificate)

    def _record(
        self, method: str, request: SubmissionRequest, certificate: str | None,
    ) -> int:
        self.calls.append((method, request, certificate))
        if self.error is not None:
            raise self.error
        return self.result


class StubTextSource:
    """Serves body text from memory."""

    def __init__(self, stdin: str = "", files: dict[str, str] | None = None) -> None:
        self.stdin = stdin
        self.files = files or {}
        self.stdin_reads = 0

    def read_file(self, path: str) -> str:
        return self.files[path]

    def read_stdin(self) -> str:
        self.stdin_reads += 1
        return self.stdin


@pytest.fixture
def settings(tmp_path: Path) -> LogbookSettings:
    cert = tmp_path / "elogcert.pem"
    cert.write_text("dummy", encoding="utf-8")
    return LogbookSettings(
        submit_url="https://logbook.example.org/incoming",
        certificate_path=cert,
        queue_path=tmp_path / "queue",
        http_timeout_seconds=5.0,
    )


@pytest.fixture
def stub_transport() -> StubTransport:
    return StubTransport()


@pytest.fixture
def stub_text_source() -> StubTextSource:
    return StubTextSource()
