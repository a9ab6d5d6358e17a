"""Infrastructure layer - Concrete implementations of ports."""

from .bootstrap import bootstrap_defaults, create_default_locator, reset_defaults
from .config import LogportConfig, StatusStream
from .entry_point_provider_source import PROVIDER_ENTRY_POINT_GROUP, EntryPointProviderSource
from .in_memory_provider_source import InMemoryProviderSource
from .noop import NOOP_PROVIDER, NoopLogger, NoopLogServiceProvider
from .status_logger import StatusLogger, StatusSink
from .stdlib_provider import StdlibLogger, StdlibLogServiceProvider

__all__ = [
    "NOOP_PROVIDER",
    "PROVIDER_ENTRY_POINT_GROUP",
    "EntryPointProviderSource",
    "InMemoryProviderSource",
    "LogportConfig",
    "NoopLogServiceProvider",
    "NoopLogger",
    "StatusLogger",
    "StatusSink",
    "StatusStream",
    "StdlibLogServiceProvider",
    "StdlibLogger",
    "bootstrap_defaults",
    "create_default_locator",
    "reset_defaults",
]
