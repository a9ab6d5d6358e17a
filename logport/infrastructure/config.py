"""Process-wide configuration read once at resolution time."""

from __future__ import annotations

import logging
import os
from collections.abc import Mapping
from enum import Enum
from typing import Any

from pydantic import BaseModel, ConfigDict, Field, ValidationError, field_validator

from ..domain.enums import Level
from ..domain.models import normalize_selector
from ..domain.services import SELECTOR_ENV_VAR

logger = logging.getLogger(__name__)

STATUS_STREAM_ENV_VAR = "LOGPORT_STATUS_STREAM"
STATUS_LEVEL_ENV_VAR = "LOGPORT_STATUS_LEVEL"


class StatusStream(str, Enum):
    """Stream the status logger writes to."""

    STDERR = "stderr"
    STDOUT = "stdout"


class LogportConfig(BaseModel):
    """Strongly-typed configuration for provider location and status output."""

    model_config = ConfigDict(
        frozen=True,
        extra="forbid",
        str_strip_whitespace=True,
    )

    provider_selector: str | None = Field(
        default=None,
        description="Fully qualified class name of the provider to use",
    )
    status_stream: StatusStream = Field(
        default=StatusStream.STDERR,
        description="Stream receiving status lines",
    )
    status_level: Level = Field(
        default=Level.INFO,
        description="Minimum level of status lines that are written",
    )

    @field_validator("provider_selector", mode="before")
    @classmethod
    def parse_provider_selector(cls, v: Any) -> str | None:
        """Treat blank selectors as absent."""
        if v is None or isinstance(v, str):
            return normalize_selector(v)
        raise ValueError(f"Invalid provider selector type: {type(v)}")

    @field_validator("status_stream", mode="before")
    @classmethod
    def parse_status_stream(cls, v: Any) -> StatusStream:
        """Parse the stream name case-insensitively."""
        if isinstance(v, StatusStream):
            return v
        if isinstance(v, str):
            try:
                return StatusStream(v.strip().lower())
            except ValueError:
                pass
        raise ValueError(f"Invalid status stream: {v!r}. Must be 'stderr' or 'stdout'")

    @field_validator("status_level", mode="before")
    @classmethod
    def parse_status_level(cls, v: Any) -> Level:
        """Parse the level name case-insensitively."""
        return Level.parse(v)

    @classmethod
    def from_env(cls, environ: Mapping[str, str] | None = None) -> LogportConfig:
        """Build the configuration from environment variables.

        Invalid status settings are reported as a warning and replaced by
        their defaults so that logger access never fails on them.

        Args:
            environ: Mapping to read instead of ``os.environ``

        Returns:
            The configuration
        """
        environ = os.environ if environ is None else environ
        selector = normalize_selector(environ.get(SELECTOR_ENV_VAR))
        values: dict[str, Any] = {"provider_selector": selector}
        for field, variable in (
            ("status_stream", STATUS_STREAM_ENV_VAR),
            ("status_level", STATUS_LEVEL_ENV_VAR),
        ):
            value = environ.get(variable, "")
            if value.strip():
                values[field] = value

        try:
            return cls(**values)
        except ValidationError as e:
            logger.warning("Ignoring invalid logport status settings: %s", e)
            return cls(provider_selector=selector)
