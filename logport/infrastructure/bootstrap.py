"""Bootstrap module for initializing default dependencies.

This module is responsible for registering the default locator factory
with the application layer's LoggingService.
"""

from collections.abc import Mapping

from ..application.logging_service import LoggingService
from ..application.provider_locator import ProviderLocator
from ..domain.services import SelectionResolver
from .config import LogportConfig
from .entry_point_provider_source import EntryPointProviderSource
from .noop import NOOP_PROVIDER
from .status_logger import StatusSink


def create_default_locator(environ: Mapping[str, str] | None = None) -> ProviderLocator:
    """Build a locator over installed entry points, configured from the environment.

    Args:
        environ: Mapping to read configuration from instead of ``os.environ``

    Returns:
        A locator that has not resolved yet
    """
    config = LogportConfig.from_env(environ)
    return ProviderLocator(
        source=EntryPointProviderSource(),
        resolver=SelectionResolver(NOOP_PROVIDER),
        selector=config.provider_selector,
        status_logger=StatusSink.from_config(config).logger(config.status_level),
    )


def bootstrap_defaults() -> None:
    """Register the default locator factory.

    Called when the package is imported; the factory itself only runs on the
    first logger request.
    """
    LoggingService.register_defaults(locator_factory=create_default_locator)


def reset_defaults() -> None:
    """Drop the installed locator so the next request builds a new one.

    This is mainly useful for testing.
    """
    LoggingService.reset()
