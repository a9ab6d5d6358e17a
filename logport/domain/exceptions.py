"""Domain-specific exceptions.

Misconfiguration of the provider setup is never raised to callers; only
programming-contract violations and failures of the discovery mechanism
itself surface as exceptions.
"""


class LogportError(Exception):
    """Base exception for all logport errors."""

    def __init__(self, message: str, details: dict | None = None):
        super().__init__(message)
        self.message = message
        self.details = details or {}


class UnrecognizedLevelError(LogportError, ValueError):
    """A value outside the known set of levels was given where a level is required."""

    pass


class ProviderDiscoveryError(LogportError):
    """The provider registry could not be queried or yielded an invalid entry."""

    pass
