"""Pytest configuration and shared fixtures."""

import io
import uuid

import pytest

from logport.application.logging_service import LoggingService
from logport.domain.enums import Level
from logport.infrastructure.status_logger import StatusSink
from tests.builders import AcmeLogServiceProvider, OtherLogServiceProvider, RecordingBackend


@pytest.fixture(autouse=True)
def reset_logging_service():
    """Drop any locator installed by a test."""
    yield
    LoggingService.reset()


@pytest.fixture
def status_stream():
    """Stream capturing status lines."""
    return io.StringIO()


@pytest.fixture
def status_sink(status_stream):
    """Status sink writing to the captured stream through a fresh stdlib logger."""
    return StatusSink(
        stream=status_stream,
        min_level=Level.TRACE,
        name=f"logport.status.test.{uuid.uuid4().hex}",
    )


@pytest.fixture
def acme_provider():
    """Provider named Acme with its own recording backend."""
    return AcmeLogServiceProvider(RecordingBackend())


@pytest.fixture
def other_provider():
    """Second provider with a different identity."""
    return OtherLogServiceProvider(RecordingBackend())
