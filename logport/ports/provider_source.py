"""Provider source port - Interface for querying registered providers."""

from __future__ import annotations

from abc import ABC, abstractmethod

from .provider import LogServiceProvider


class ProviderSourcePort(ABC):
    """Abstract interface over the host's plugin-discovery mechanism.

    The provider locator depends only on this contract, so the real
    mechanism can be swapped for an in-memory list.
    """

    @abstractmethod
    def discover_all(self) -> list[LogServiceProvider]:
        """Return every registered provider.

        Returns:
            Providers in the order the mechanism yields them, empty if none

        Raises:
            ProviderDiscoveryError: If the underlying mechanism fails
        """
        ...
