"""Internal status logger reporting on the facade's own setup.

Status lines are kept apart from any provider's output: each sink owns a
private, non-propagating stdlib logger with its own stream handler. The
logger is not registered with ``logging.getLogger``, so host logging
configuration cannot redirect it and a new sink never inherits an earlier
sink's stream.
"""

from __future__ import annotations

import logging
import sys
from datetime import datetime
from typing import Any, TextIO

from ..domain.enums import Level
from ..ports.logger import Logger
from .config import LogportConfig, StatusStream
from .stdlib_provider import to_stdlib_level

STATUS_LOGGER_NAME = "logport.status"
STATUS_FORMAT = "%(asctime)s %(logport_level)s [%(threadName)s,%(thread)d] logport - %(message)s"


class StatusFormatter(logging.Formatter):
    """Formatter rendering ``asctime`` as an ISO 8601 local timestamp with offset."""

    def formatTime(self, record: logging.LogRecord, datefmt: str | None = None) -> str:
        return datetime.fromtimestamp(record.created).astimezone().isoformat(timespec="milliseconds")


class StatusSink:
    """Stdlib logging pipeline shared by the status loggers of every level."""

    def __init__(
        self,
        stream: TextIO | None = None,
        min_level: Level = Level.INFO,
        name: str = STATUS_LOGGER_NAME,
    ):
        """Initialize the sink.

        Args:
            stream: Stream to write to (default: sys.stderr)
            min_level: Lowest level that is written (default: INFO)
            name: Name of the underlying stdlib logger
        """
        self.min_level = Level.require(min_level)
        self._logger = logging.Logger(name)
        self._logger.setLevel(1)
        self._logger.propagate = False

        handler = logging.StreamHandler(stream if stream is not None else sys.stderr)
        handler.setFormatter(StatusFormatter(STATUS_FORMAT))
        self._logger.addHandler(handler)

        self._loggers = {level: StatusLogger(level, self) for level in Level}

    @classmethod
    def from_config(cls, config: LogportConfig) -> StatusSink:
        """Create the sink described by a configuration."""
        stream = sys.stdout if config.status_stream is StatusStream.STDOUT else sys.stderr
        return cls(stream=stream, min_level=config.status_level)

    def logger(self, level: Level) -> StatusLogger:
        """Return the status logger for a level."""
        return self._loggers[Level.require(level)]

    def write(self, level: Level, message: Any, args: tuple[Any, ...], exc: BaseException | None):
        if level is Level.OFF:
            return
        # The handler lock keeps a message and its traceback together
        self._logger.log(
            to_stdlib_level(level),
            "" if message is None else message,
            *args,
            exc_info=exc,
            extra={"logport_level": level.value},
        )


class StatusLogger(Logger):
    """Leveled logger writing timestamped, thread-tagged status lines."""

    def __init__(self, level: Level, sink: StatusSink):
        self._level = level
        self._sink = sink

    @property
    def level(self) -> Level:
        return self._level

    def at_level(self, level: Level) -> Logger:
        if level is self._level:
            return self
        return self._sink.logger(level)

    def is_enabled(self) -> bool:
        return self._level is not Level.OFF and self._level >= self._sink.min_level

    def emit(self, message: Any, args: tuple[Any, ...], exc: BaseException | None) -> None:
        self._sink.write(self._level, message, args, exc)
