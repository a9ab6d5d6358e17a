"""In-memory provider source for tests and embedding hosts.

Stands in for the plugin-discovery mechanism with a fixed list of
providers, recording how often it was queried.
"""

from collections.abc import Iterable

from ..ports.provider import LogServiceProvider
from ..ports.provider_source import ProviderSourcePort


class InMemoryProviderSource(ProviderSourcePort):
    """Provider source returning a fixed list of providers."""

    def __init__(self, providers: Iterable[LogServiceProvider] = ()):
        """Initialize the source.

        Args:
            providers: Providers to report, in discovery order
        """
        self._providers = list(providers)
        self.discovery_count = 0

    def discover_all(self) -> list[LogServiceProvider]:
        self.discovery_count += 1
        return list(self._providers)
