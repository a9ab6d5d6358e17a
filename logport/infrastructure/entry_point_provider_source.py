"""Provider source backed by installed package entry points."""

from __future__ import annotations

from importlib.metadata import EntryPoint, entry_points
from typing import Any

from ..domain.exceptions import ProviderDiscoveryError
from ..ports.provider import LogServiceProvider
from ..ports.provider_source import ProviderSourcePort

PROVIDER_ENTRY_POINT_GROUP = "logport.providers"


class EntryPointProviderSource(ProviderSourcePort):
    """Discovers providers registered under an entry-point group.

    An entry point may reference a provider class, a zero-argument factory
    returning a provider, or a provider instance. The group is queried afresh
    on every call.
    """

    def __init__(self, group: str = PROVIDER_ENTRY_POINT_GROUP):
        """Initialize the source.

        Args:
            group: Entry-point group to read (default: "logport.providers")
        """
        self._group = group

    @property
    def group(self) -> str:
        return self._group

    def discover_all(self) -> list[LogServiceProvider]:
        return [self._load(entry_point) for entry_point in entry_points(group=self._group)]

    def _load(self, entry_point: EntryPoint) -> LogServiceProvider:
        try:
            target: Any = entry_point.load()
        except Exception as e:
            raise ProviderDiscoveryError(
                f"Failed to load logport provider entry point '{entry_point.name}'",
                details={"group": self._group, "value": entry_point.value, "error": str(e)},
            ) from e

        if isinstance(target, LogServiceProvider):
            return target

        if callable(target):
            try:
                target = target()
            except Exception as e:
                raise ProviderDiscoveryError(
                    f"Failed to instantiate logport provider '{entry_point.value}'",
                    details={"group": self._group, "name": entry_point.name, "error": str(e)},
                ) from e
            if isinstance(target, LogServiceProvider):
                return target

        raise ProviderDiscoveryError(
            f"Entry point '{entry_point.name}' does not provide a LogServiceProvider",
            details={"group": self._group, "value": entry_point.value, "type": type(target).__name__},
        )
