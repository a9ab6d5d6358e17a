"""Domain services containing the provider selection logic.

The selection resolver is pure: it neither discovers providers nor writes
anything. The provider locator feeds it the discovered providers and reports
the status line it describes.
"""

from __future__ import annotations

from collections.abc import Sequence
from typing import Any

from .enums import FallbackReason, Level
from .models import ResolutionOutcome, normalize_selector, provider_identity

SELECTOR_ENV_VAR = "LOGPORT_PROVIDER"


class SelectionResolver:
    """Domain service deciding which discovered provider, if any, to use.

    Uniqueness is strict: exactly one candidate is required, otherwise the
    outcome is a fallback to the no-op provider. There is never a best-guess
    pick such as the first provider in the list.
    """

    def __init__(self, fallback_provider: Any, selector_variable: str = SELECTOR_ENV_VAR):
        """Initialize the resolver.

        Args:
            fallback_provider: Provider carried by every fallback outcome
            selector_variable: Name of the setting users select a provider
                with, quoted in remediation messages
        """
        self._fallback_provider = fallback_provider
        self._selector_variable = selector_variable

    def resolve(self, discovered: Sequence[Any], selector: str | None = None) -> ResolutionOutcome:
        """Resolve the discovered providers against an optional selector.

        Args:
            discovered: Providers in discovery order
            selector: Identity of the desired provider; blank means none

        Returns:
            The resolution outcome
        """
        selector = normalize_selector(selector)
        identities = tuple(provider_identity(provider) for provider in discovered)

        if selector is not None:
            matches = [p for p, identity in zip(discovered, identities) if identity == selector]
            if len(matches) == 1:
                return ResolutionOutcome.resolved(matches[0], identities, selector)
            return ResolutionOutcome.fallback(
                self._fallback_provider, FallbackReason.AMBIGUOUS_SELECTION, identities, selector
            )

        if not discovered:
            return ResolutionOutcome.fallback(
                self._fallback_provider, FallbackReason.NO_PROVIDER_DISCOVERED, identities
            )
        if len(discovered) == 1:
            return ResolutionOutcome.resolved(discovered[0], identities)
        return ResolutionOutcome.fallback(
            self._fallback_provider, FallbackReason.AMBIGUOUS_DEFAULT, identities
        )

    def describe(self, outcome: ResolutionOutcome) -> tuple[Level, str]:
        """Return the status level and line reporting an outcome."""
        listed = "[" + ", ".join(outcome.discovered) + "]"

        if outcome.is_resolved:
            identity = provider_identity(outcome.provider)
            if outcome.selector is not None:
                return Level.INFO, f"As selected, using logport provider: {identity}"
            return Level.INFO, f"As discovered, using logport provider: {identity}"

        if outcome.reason is FallbackReason.AMBIGUOUS_SELECTION:
            matched = outcome.discovered.count(outcome.selector)
            return Level.ERROR, (
                f"Expected one and only one logport provider matching selected "
                f"'{outcome.selector}' but found {matched} among discovered {listed}, "
                "falling back to no-op logging..."
            )
        if outcome.reason is FallbackReason.NO_PROVIDER_DISCOVERED:
            return Level.INFO, (
                "No logport provider discovered, this is OK only when no logging is "
                "expected via logport, falling back to no-op logging..."
            )
        return Level.ERROR, (
            f"Expected one and only one logport provider but discovered "
            f"{len(outcome.discovered)}: {listed}, please either register only one "
            "provider, or select the desired one by its fully qualified class name "
            f"using '{self._selector_variable}', falling back to no-op logging..."
        )
