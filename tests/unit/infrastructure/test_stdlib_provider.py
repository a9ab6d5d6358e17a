"""Tests for the stdlib logging provider."""

import logging
from unittest.mock import Mock, patch

import pytest

from logport.domain.enums import Level
from logport.domain.exceptions import UnrecognizedLevelError
from logport.infrastructure.stdlib_provider import (
    TRACE,
    StdlibLogger,
    StdlibLogServiceProvider,
    to_stdlib_level,
)
from logport.ports.logger import Logger
from logport.ports.provider import LogServiceProvider
from tests.builders import CountingSupplier


class TestLevelMapping:
    """Test cases for to_stdlib_level."""

    @pytest.mark.parametrize(
        "level, expected",
        [
            (Level.TRACE, TRACE),
            (Level.DEBUG, logging.DEBUG),
            (Level.INFO, logging.INFO),
            (Level.WARN, logging.WARNING),
            (Level.ERROR, logging.ERROR),
            (Level.OFF, None),
        ],
    )
    def test_mapping(self, level, expected):
        assert to_stdlib_level(level) == expected

    def test_unrecognized_level(self):
        with pytest.raises(UnrecognizedLevelError):
            to_stdlib_level("INFO")


class TestStdlibLogger:
    """Test cases for StdlibLogger."""

    def test_implements_logger_port(self):
        assert isinstance(StdlibLogger(), Logger)

    def test_initialization_default_values(self):
        with patch("logging.getLogger") as mock_get_logger:
            logger = StdlibLogger()

            mock_get_logger.assert_called_once_with("logport")
            assert logger.name == "logport"
            assert logger.level is Level.INFO

    def test_log_delegates_with_arguments(self):
        with patch("logging.getLogger") as mock_get_logger:
            mock_logger = Mock()
            mock_logger.isEnabledFor.return_value = True
            mock_get_logger.return_value = mock_logger

            StdlibLogger("app", Level.WARN).log("user %s from %s", "alice", "10.0.0.1")

            mock_logger.isEnabledFor.assert_called_once_with(logging.WARNING)
            mock_logger.log.assert_called_once_with(
                logging.WARNING, "user %s from %s", "alice", "10.0.0.1", exc_info=None
            )

    def test_exception_is_passed_as_exc_info(self):
        with patch("logging.getLogger") as mock_get_logger:
            mock_logger = Mock()
            mock_logger.isEnabledFor.return_value = True
            mock_get_logger.return_value = mock_logger
            error = ValueError("bad input")

            StdlibLogger("app", Level.ERROR).log(error)

            mock_logger.log.assert_called_once_with(logging.ERROR, "", exc_info=error)

    def test_disabled_logger_skips_deferred_values(self):
        with patch("logging.getLogger") as mock_get_logger:
            mock_logger = Mock()
            mock_logger.isEnabledFor.return_value = False
            mock_get_logger.return_value = mock_logger
            supplier = CountingSupplier()

            StdlibLogger("app", Level.DEBUG).log("value %s", supplier)

            assert supplier.calls == 0
            mock_logger.log.assert_not_called()

    def test_off_is_never_enabled(self):
        with patch("logging.getLogger") as mock_get_logger:
            mock_logger = Mock()
            mock_get_logger.return_value = mock_logger

            assert not StdlibLogger("app", Level.OFF).is_enabled()
            mock_logger.isEnabledFor.assert_not_called()

    def test_at_level(self):
        logger = StdlibLogger("app", Level.INFO)

        assert logger.at_level(Level.INFO) is logger
        debug = logger.at_level(Level.DEBUG)
        assert debug.level is Level.DEBUG
        assert debug.name == "app"

    def test_at_level_rejects_unknown_values(self):
        with pytest.raises(UnrecognizedLevelError):
            StdlibLogger().at_level(20)

    def test_writes_through_real_logging(self, caplog):
        logger = StdlibLogger("logport.test.stdlib", Level.WARN)

        with caplog.at_level(logging.INFO, logger="logport.test.stdlib"):
            logger.log("disk at %d%%", 91)
            logger.at_level(Level.DEBUG).log("not shown")

        assert [(r.levelno, r.getMessage()) for r in caplog.records] == [
            (logging.WARNING, "disk at 91%")
        ]

    def test_callable_argument_is_formatted_not_called(self, caplog):
        logger = StdlibLogger("logport.test.callables", Level.ERROR)

        with caplog.at_level(logging.ERROR, logger="logport.test.callables"):
            logger.log("callback %s", dict.get)
            logger.log("handler is %s", len)

        assert [r.getMessage() for r in caplog.records] == [
            f"callback {dict.get}",
            f"handler is {len}",
        ]


class TestStdlibLogServiceProvider:
    """Test cases for StdlibLogServiceProvider."""

    def test_is_a_provider(self):
        assert isinstance(StdlibLogServiceProvider(), LogServiceProvider)

    def test_identity(self):
        assert (
            StdlibLogServiceProvider().identity
            == "logport.infrastructure.stdlib_provider.StdlibLogServiceProvider"
        )

    def test_logger_defaults(self):
        logger = StdlibLogServiceProvider().logger()

        assert isinstance(logger, StdlibLogger)
        assert logger.name == "logport"
        assert logger.level is Level.INFO

    def test_logger_custom_values(self):
        logger = StdlibLogServiceProvider(name="billing", level=Level.DEBUG).logger()

        assert logger.name == "billing"
        assert logger.level is Level.DEBUG
