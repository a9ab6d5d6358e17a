"""Application layer - Provider location and logger access."""

from .logging_service import LoggingService, instance
from .provider_locator import ProviderLocator

__all__ = ["LoggingService", "ProviderLocator", "instance"]
