"""Provider locator - one-shot discovery and resolution of the logging provider."""

from __future__ import annotations

import threading

from ..domain.models import ResolutionOutcome, normalize_selector
from ..domain.services import SelectionResolver
from ..ports.logger import Logger
from ..ports.provider import LogServiceProvider
from ..ports.provider_source import ProviderSourcePort


class ProviderLocator:
    """Locates the provider loggers are obtained from.

    The first call to ``get_provider`` queries the provider source, resolves
    the result against the selector and reports the outcome on the status
    logger. The outcome is then cached for the lifetime of the locator; there
    is no refresh. Concurrent first calls resolve exactly once.
    """

    def __init__(
        self,
        source: ProviderSourcePort,
        resolver: SelectionResolver,
        selector: str | None = None,
        status_logger: Logger | None = None,
    ):
        """Initialize the locator.

        Args:
            source: Where providers are discovered
            resolver: Decides which discovered provider to use
            selector: Identity of the desired provider, blank or None for none
            status_logger: Receives the status line of the resolution, if given
        """
        self._source = source
        self._resolver = resolver
        self._selector = normalize_selector(selector)
        self._status_logger = status_logger
        self._outcome: ResolutionOutcome | None = None
        self._lock = threading.Lock()

    @property
    def selector(self) -> str | None:
        return self._selector

    @property
    def is_resolved(self) -> bool:
        """Whether resolution has already happened."""
        return self._outcome is not None

    @property
    def outcome(self) -> ResolutionOutcome:
        """The resolution outcome, resolving first if needed."""
        outcome = self._outcome
        if outcome is None:
            with self._lock:
                if self._outcome is None:
                    self._outcome = self._resolve()
                outcome = self._outcome
        return outcome

    def get_provider(self) -> LogServiceProvider:
        """Return the resolved provider, or the no-op fallback.

        Raises:
            ProviderDiscoveryError: If the provider source fails; nothing is
                cached in that case
        """
        return self.outcome.provider

    def _resolve(self) -> ResolutionOutcome:
        discovered = self._source.discover_all()
        outcome = self._resolver.resolve(discovered, self._selector)
        if self._status_logger is not None:
            level, message = self._resolver.describe(outcome)
            self._status_logger.at_level(level).log(message)
        return outcome
