"""Tests for the logger access API."""

import pytest

import logport
from logport.application.logging_service import LoggingService, instance
from logport.application.provider_locator import ProviderLocator
from logport.domain.enums import Level
from logport.domain.services import SelectionResolver
from logport.infrastructure.in_memory_provider_source import InMemoryProviderSource
from logport.infrastructure.noop import NOOP_PROVIDER, NoopLogger
from tests.builders import ACME_IDENTITY, OTHER_IDENTITY, CountingSupplier, RecordingBackend


def install(providers, selector=None, status=None):
    """Install a locator over an in-memory source and return the source."""
    source = InMemoryProviderSource(providers)
    LoggingService.register_locator(
        ProviderLocator(
            source,
            SelectionResolver(NOOP_PROVIDER),
            selector=selector,
            status_logger=status.logger(Level.INFO) if status else None,
        )
    )
    return source


class TestLoggerAccessScenarios:
    """End-to-end scenarios through instance()."""

    def test_no_provider_gives_disabled_logger(self):
        install([])

        logger = instance()

        assert isinstance(logger, NoopLogger)
        assert all(not logger.is_enabled_at(level) for level in Level)

    def test_single_provider_is_used(self, acme_provider):
        install([acme_provider])

        logger = instance()
        logger.log("hello %s", "acme")

        assert logger is acme_provider.backend.logger(Level.INFO)
        assert acme_provider.backend.records == [(Level.INFO, "hello %s", ("acme",), None)]

    def test_selector_picks_second_provider(self, acme_provider, other_provider):
        install([acme_provider, other_provider], selector=OTHER_IDENTITY)

        instance().log("routed")

        assert acme_provider.backend.records == []
        assert other_provider.backend.records == [(Level.INFO, "routed", (), None)]

    def test_unmatched_selector_falls_back(self, acme_provider, other_provider):
        install([acme_provider, other_provider], selector="com.example.Missing")

        logger = instance()
        logger.log("dropped")

        assert not logger.is_enabled()
        assert acme_provider.backend.records == []
        assert other_provider.backend.records == []

    def test_ambiguous_default_falls_back_and_reports(self, acme_provider, other_provider):
        status = RecordingBackend()
        install([acme_provider, other_provider], status=status)

        logger = instance()

        assert not logger.is_enabled()
        [(level, message, _, _)] = status.records
        assert level is Level.ERROR
        assert ACME_IDENTITY in message
        assert OTHER_IDENTITY in message


class TestLoggerAccessBehavior:
    """Test cases for repeated and lazy access."""

    def test_repeated_calls_do_not_rediscover(self, acme_provider):
        source = install([acme_provider])

        for _ in range(10):
            instance()

        assert source.discovery_count == 1

    def test_fallback_does_not_force_deferred_values(self):
        install([])
        supplier = CountingSupplier()

        instance().log(supplier, supplier)
        instance().at_level(Level.ERROR).log("%s", supplier)

        assert supplier.calls == 0

    def test_package_level_instance(self, acme_provider):
        install([acme_provider])

        assert logport.instance() is acme_provider.logger()


class TestLoggingService:
    """Test cases for the locator registry."""

    def test_register_locator_replaces_installed_one(self, acme_provider):
        install([])
        assert isinstance(instance(), NoopLogger)

        install([acme_provider])

        assert instance() is acme_provider.logger()

    def test_default_factory_is_used_when_nothing_installed(self, monkeypatch):
        locator = ProviderLocator(InMemoryProviderSource(), SelectionResolver(NOOP_PROVIDER))
        monkeypatch.setattr(LoggingService, "_locator_factory", lambda: locator)

        assert LoggingService.get_locator() is locator
        assert LoggingService.get_locator() is locator

    def test_missing_factory_raises(self, monkeypatch):
        monkeypatch.setattr(LoggingService, "_locator_factory", None)

        with pytest.raises(RuntimeError) as exc_info:
            LoggingService.get_locator()
        assert "register_defaults" in str(exc_info.value)

    def test_reset_keeps_factory(self, monkeypatch):
        built = []

        def factory():
            built.append(ProviderLocator(InMemoryProviderSource(), SelectionResolver(NOOP_PROVIDER)))
            return built[-1]

        monkeypatch.setattr(LoggingService, "_locator_factory", factory)

        first = LoggingService.get_locator()
        LoggingService.reset()
        second = LoggingService.get_locator()

        assert first is not second
        assert built == [first, second]
