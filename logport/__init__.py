"""logport - Minimal logging facade with one-shot provider location."""

from .application.logging_service import LoggingService, instance
from .domain.enums import Level
from .domain.exceptions import LogportError, ProviderDiscoveryError, UnrecognizedLevelError
from .infrastructure.bootstrap import bootstrap_defaults
from .ports.logger import Logger
from .ports.provider import LogServiceProvider

bootstrap_defaults()

__all__ = [
    "Level",
    "LogServiceProvider",
    "Logger",
    "LoggingService",
    "LogportError",
    "ProviderDiscoveryError",
    "UnrecognizedLevelError",
    "instance",
]
__version__ = "0.1.0"
