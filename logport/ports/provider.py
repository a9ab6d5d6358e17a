"""Provider port - the service-provider interface logging backends implement."""

from __future__ import annotations

from abc import ABC, abstractmethod

from .logger import Logger


class LogServiceProvider(ABC):
    """Abstract interface for a pluggable logging backend.

    A host application registers concrete providers; the facade picks exactly
    one at first use and asks it for loggers.
    """

    @abstractmethod
    def logger(self) -> Logger:
        """Return a logger at this provider's default level and name."""
        ...

    @property
    def identity(self) -> str:
        """Fully qualified class name identifying this provider's implementation."""
        cls = type(self)
        return f"{cls.__module__}.{cls.__qualname__}"

    def __repr__(self) -> str:
        return self.identity
