"""Ports layer - Interfaces between the facade and its backends."""

from .logger import Logger
from .provider import LogServiceProvider
from .provider_source import ProviderSourcePort

__all__ = [
    "LogServiceProvider",
    "Logger",
    "ProviderSourcePort",
]
