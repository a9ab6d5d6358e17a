"""Logger access API.

This module holds the process-wide provider locator without the
application layer importing from infrastructure: the infrastructure layer
registers a factory for the default locator, which is only invoked on the
first logger request.
"""

from __future__ import annotations

import threading
from collections.abc import Callable
from typing import ClassVar

from ..ports.logger import Logger
from .provider_locator import ProviderLocator


class LoggingService:
    """Registry for the process-wide provider locator.

    Hosts and tests may register their own locator before the first logger
    request; otherwise the registered factory builds the default one.
    """

    _locator: ClassVar[ProviderLocator | None] = None
    _locator_factory: ClassVar[Callable[[], ProviderLocator] | None] = None
    _lock: ClassVar[threading.Lock] = threading.Lock()

    @classmethod
    def register_defaults(cls, locator_factory: Callable[[], ProviderLocator]) -> None:
        """Register the factory building the default locator.

        This method is called by the infrastructure layer during package
        initialization.

        Args:
            locator_factory: Zero-argument callable returning a locator
        """
        cls._locator_factory = locator_factory

    @classmethod
    def register_locator(cls, locator: ProviderLocator) -> None:
        """Use the given locator for all subsequent logger requests.

        Args:
            locator: The locator to install
        """
        with cls._lock:
            cls._locator = locator

    @classmethod
    def get_locator(cls) -> ProviderLocator:
        """Get the process-wide locator, building the default one if needed.

        Returns:
            The installed locator

        Raises:
            RuntimeError: If no locator is installed and no factory has been registered
        """
        locator = cls._locator
        if locator is None:
            with cls._lock:
                if cls._locator is None:
                    if cls._locator_factory is None:
                        raise RuntimeError(
                            "No default locator factory registered. "
                            "Call LoggingService.register_defaults() during initialization."
                        )
                    cls._locator = cls._locator_factory()
                locator = cls._locator
        return locator

    @classmethod
    def reset(cls) -> None:
        """Drop the installed locator, keeping the registered factory.

        This is mainly useful for testing.
        """
        with cls._lock:
            cls._locator = None


def instance() -> Logger:
    """Return a logger from the located provider.

    Each call asks the provider for a logger; callers that log often should
    keep the returned logger.
    """
    return LoggingService.get_locator().get_provider().logger()
