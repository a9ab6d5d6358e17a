"""Reference provider bridging the facade onto Python's standard logging.

Hosts opt in by registering the provider in their own packaging metadata::

    [project.entry-points."logport.providers"]
    stdlib = "logport.infrastructure.stdlib_provider:StdlibLogServiceProvider"
"""

from __future__ import annotations

import logging
from typing import Any

from ..domain.enums import Level
from ..ports.logger import Logger
from ..ports.provider import LogServiceProvider

TRACE = 5
logging.addLevelName(TRACE, "TRACE")

_STDLIB_LEVELS = {
    Level.TRACE: TRACE,
    Level.DEBUG: logging.DEBUG,
    Level.INFO: logging.INFO,
    Level.WARN: logging.WARNING,
    Level.ERROR: logging.ERROR,
}


def to_stdlib_level(level: Level) -> int | None:
    """Map a level to its stdlib numeric level, None for OFF."""
    return _STDLIB_LEVELS.get(Level.require(level))


class StdlibLogger(Logger):
    """Logger writing through a ``logging.Logger``.

    Messages are formatted by the stdlib with %-style arguments. Enablement
    follows the wrapped logger's effective level, so it tracks whatever
    logging configuration the host applies.
    """

    def __init__(self, name: str = "logport", level: Level = Level.INFO):
        """Initialize the logger.

        Args:
            name: Name of the wrapped stdlib logger (default: "logport")
            level: Level this logger logs at (default: INFO)
        """
        self._name = name
        self._level = Level.require(level)
        self._logger = logging.getLogger(name)

    @property
    def name(self) -> str:
        return self._name

    @property
    def level(self) -> Level:
        return self._level

    def at_level(self, level: Level) -> Logger:
        if level is self._level:
            return self
        return StdlibLogger(self._name, Level.require(level))

    def is_enabled(self) -> bool:
        stdlib_level = to_stdlib_level(self._level)
        return stdlib_level is not None and self._logger.isEnabledFor(stdlib_level)

    def emit(self, message: Any, args: tuple[Any, ...], exc: BaseException | None) -> None:
        self._logger.log(
            to_stdlib_level(self._level),
            "" if message is None else message,
            *args,
            exc_info=exc,
        )


class StdlibLogServiceProvider(LogServiceProvider):
    """Provider handing out ``StdlibLogger`` instances."""

    def __init__(self, name: str = "logport", level: Level = Level.INFO):
        self._name = name
        self._level = Level.require(level)

    def logger(self) -> Logger:
        return StdlibLogger(self._name, self._level)
