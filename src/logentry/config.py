"""Runtime configuration for logentry.

Settings are read from ``LOGENTRY_*`` environment variables and an
optional ``.env`` file in the working directory, validated with
pydantic-settings.  Only the CLI layer constructs settings; the
infrastructure adapters receive them by injection.
"""

from __future__ import annotations

import tempfile
from pathlib import Path

from pydantic import Field, ValidationError
from pydantic_settings import BaseSettings, SettingsConfigDict

from logentry.exceptions import LogEntryError

ENV_PREFIX = "LOGENTRY_"


def default_certificate_path() -> Path:
    """Return the per-user client certificate location (``~/.elogcert``)."""
    return Path.home() / ".elogcert"


def default_queue_path() -> Path:
    """Return the default directory for entries awaiting submission."""
    return Path(tempfile.gettempdir()) / "logentry-queue"


class LogbookSettings(BaseSettings):
    """Central application settings."""

    model_config = SettingsConfigDict(
        env_prefix=ENV_PREFIX,
        extra="ignore",
        case_sensitive=False,
        env_file=".env",
        env_file_encoding="utf-8",
    )

    submit_url: str = Field(
        default="https://logbooks.jlab.org/incoming",
        min_length=8,
        description="Base URL that receives entry documents via PUT.",
    )
    certificate_path: Path = Field(
        default_factory=default_certificate_path,
        description="Default PEM client certificate used for submission.",
    )
    ca_bundle_path: Path | None = Field(
        default=None,
        description="Optional CA bundle used to verify the logbook server.",
    )
    queue_path: Path = Field(
        default_factory=default_queue_path,
        description="Directory holding entries queued for later submission.",
    )
    http_timeout_seconds: float = Field(
        default=20.0,
        gt=0,
        description="Timeout per HTTP request (seconds).",
    )
    option_schema: int = Field(
        default=2,
        ge=1,
        le=2,
        description="Command-line option schema version (1 legacy, 2 current).",
    )
    log_level: str = Field(
        default="WARNING",
        pattern=r"(?i)^(DEBUG|INFO|WARNING|ERROR|CRITICAL)$",
        description="Default logging level when --verbose is not given.",
    )


def load_settings() -> LogbookSettings:
    """Build settings from the environment.

    Raises
    ------
    LogEntryError
        When an environment value fails validation.
    """
    try:
        return LogbookSettings()
    except ValidationError as exc:
        raise LogEntryError(
            f"Invalid configuration: {exc.error_count()} error(s)\n{exc}",
            hint=f"Check the {ENV_PREFIX}* environment variables and .env file.",
        ) from exc
