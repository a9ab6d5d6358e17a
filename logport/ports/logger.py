"""Logger port - the facade interface calling code logs through."""

from __future__ import annotations

import inspect
from abc import ABC, abstractmethod
from typing import Any

from ..domain.enums import Level


def is_deferred(value: Any) -> bool:
    """Whether a value is a deferred message or argument.

    Callables other than classes that accept being called with no arguments
    are deferred; they are only called when the logger they are passed to is
    enabled. Callables needing arguments, and those without an inspectable
    signature, are logged as they are.
    """
    if not callable(value) or isinstance(value, type):
        return False
    try:
        inspect.signature(value).bind()
    except (TypeError, ValueError):
        return False
    return True


def supply(value: Any) -> Any:
    """Force a deferred value, returning anything else unchanged."""
    return value() if is_deferred(value) else value


class Logger(ABC):
    """Abstract interface for a named, leveled logging channel.

    A logger's level never changes; ``at_level`` hands out a differently
    leveled logger sharing the same name and backend binding. Implementations
    must be safe for concurrent use without external synchronization.

    Implementations supply ``level``, ``at_level``, ``is_enabled`` and the
    single output primitive ``emit``. Everything else is composed from those.
    """

    @property
    @abstractmethod
    def level(self) -> Level:
        """The severity level of this logger."""
        ...

    @abstractmethod
    def at_level(self, level: Level) -> Logger:
        """Return a logger at the given level.

        Args:
            level: Target severity level

        Returns:
            ``self`` if the level matches, otherwise the logger for that level

        Raises:
            UnrecognizedLevelError: If level is not a Level member
        """
        ...

    @abstractmethod
    def is_enabled(self) -> bool:
        """Whether log calls on this logger have any effect."""
        ...

    @abstractmethod
    def emit(self, message: Any, args: tuple[Any, ...], exc: BaseException | None) -> None:
        """Write one fully resolved log entry.

        Only called when the logger is enabled and after every deferred value
        has been forced. Formatting ``message`` with ``args`` is up to the
        implementation.
        """
        ...

    def is_enabled_at(self, level: Level) -> bool:
        """Whether this logger would log at the given level."""
        return self.at_level(level).is_enabled()

    def log(self, message: Any = None, *args: Any, exc: BaseException | None = None) -> None:
        """Log a message, an exception, or both.

        Deferred message and arguments are not evaluated when the logger is
        disabled. An exception passed as the message is logged as ``exc``.

        Args:
            message: Message object, format string, or deferred value
            *args: Format arguments, each possibly deferred
            exc: Exception to attach to the entry
        """
        if not self.is_enabled():
            return
        if exc is None and isinstance(message, BaseException):
            exc, message = message, None
        self.emit(supply(message), tuple(supply(arg) for arg in args), exc)

    def __repr__(self) -> str:
        return f"{type(self).__name__}(level={self.level.value})"
