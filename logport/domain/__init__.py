"""Domain layer - Levels, resolution outcomes and the selection logic."""

from .enums import FallbackReason, Level, ResolutionStatus
from .exceptions import LogportError, ProviderDiscoveryError, UnrecognizedLevelError
from .models import ResolutionOutcome, normalize_selector, provider_identity
from .services import SELECTOR_ENV_VAR, SelectionResolver

__all__ = [
    "SELECTOR_ENV_VAR",
    "FallbackReason",
    "Level",
    "LogportError",
    "ProviderDiscoveryError",
    "ResolutionOutcome",
    "ResolutionStatus",
    "SelectionResolver",
    "UnrecognizedLevelError",
    "normalize_selector",
    "provider_identity",
]
