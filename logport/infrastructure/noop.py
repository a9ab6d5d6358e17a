"""No-op logging backend used whenever provider resolution falls back."""

from __future__ import annotations

from typing import Any, ClassVar

from ..domain.enums import Level
from ..ports.logger import Logger
from ..ports.provider import LogServiceProvider


class NoopLogger(Logger):
    """Logger that is disabled at every level.

    One flyweight instance exists per level; ``at_level`` is a lookup, never
    an allocation.
    """

    _instances: ClassVar[dict[Level, NoopLogger]] = {}

    def __init__(self, level: Level):
        self._level = level

    @classmethod
    def of(cls, level: Level) -> NoopLogger:
        """Return the no-op logger for a level."""
        return cls._instances[Level.require(level)]

    @property
    def level(self) -> Level:
        return self._level

    def at_level(self, level: Level) -> Logger:
        if level is self._level:
            return self
        return NoopLogger.of(level)

    def is_enabled(self) -> bool:
        return False

    def emit(self, message: Any, args: tuple[Any, ...], exc: BaseException | None) -> None:
        pass

    def log(self, message: Any = None, *args: Any, exc: BaseException | None = None) -> None:
        pass


NoopLogger._instances.update({level: NoopLogger(level) for level in Level})


class NoopLogServiceProvider(LogServiceProvider):
    """Provider handing out the OFF no-op logger."""

    def logger(self) -> Logger:
        return NoopLogger.of(Level.OFF)


NOOP_PROVIDER = NoopLogServiceProvider()
