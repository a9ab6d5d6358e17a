"""Domain enums for type safety and consistency.

This module centralizes the enumeration types used across the facade:
severity levels and the vocabulary describing how provider resolution ended.
"""

from __future__ import annotations

from enum import Enum
from typing import Any

from .exceptions import UnrecognizedLevelError


class Level(str, Enum):
    """Logging severity level.

    Levels are totally ordered by severity, TRACE being the lowest and OFF
    the highest. Comparisons follow that order rather than the string value.
    """

    TRACE = "TRACE"
    DEBUG = "DEBUG"
    INFO = "INFO"
    WARN = "WARN"
    ERROR = "ERROR"
    OFF = "OFF"

    @property
    def severity(self) -> int:
        """Rank of this level, 0 for TRACE up to 5 for OFF."""
        return _SEVERITY[self]

    @classmethod
    def parse(cls, value: Any) -> Level:
        """Parse a level from a member or a case-insensitive level name.

        Args:
            value: A Level member or its name, surrounding whitespace ignored

        Returns:
            The matching Level

        Raises:
            UnrecognizedLevelError: If the value names no known level
        """
        if isinstance(value, Level):
            return value
        if isinstance(value, str):
            try:
                return cls[value.strip().upper()]
            except KeyError:
                pass
        raise UnrecognizedLevelError(
            f"Unrecognized level: {value!r}",
            details={"value": repr(value), "known": [level.value for level in cls]},
        )

    @classmethod
    def require(cls, value: Any) -> Level:
        """Return the value if it is a Level member, raise otherwise.

        Unlike ``parse`` this never coerces strings.
        """
        if not isinstance(value, Level):
            raise UnrecognizedLevelError(
                f"Unrecognized level: {value!r}",
                details={"value": repr(value), "known": [level.value for level in cls]},
            )
        return value

    def __lt__(self, other: Any) -> bool:
        if not isinstance(other, Level):
            return NotImplemented
        return self.severity < other.severity

    def __le__(self, other: Any) -> bool:
        if not isinstance(other, Level):
            return NotImplemented
        return self.severity <= other.severity

    def __gt__(self, other: Any) -> bool:
        if not isinstance(other, Level):
            return NotImplemented
        return self.severity > other.severity

    def __ge__(self, other: Any) -> bool:
        if not isinstance(other, Level):
            return NotImplemented
        return self.severity >= other.severity

    def __str__(self) -> str:
        return self.value


_SEVERITY = {level: rank for rank, level in enumerate(Level)}


class ResolutionStatus(str, Enum):
    """Final state of the provider locator."""

    RESOLVED = "RESOLVED"  # Exactly one provider was established
    FALLBACK = "FALLBACK"  # No-op logging is in effect


class FallbackReason(str, Enum):
    """Why resolution fell back to no-op logging.

    None of these are raised as exceptions; they are recorded on the
    resolution outcome and reported on the status stream.
    """

    AMBIGUOUS_SELECTION = "ambiguous_selection"  # Selector matched zero or several providers
    NO_PROVIDER_DISCOVERED = "no_provider_discovered"  # Nothing registered, nothing selected
    AMBIGUOUS_DEFAULT = "ambiguous_default"  # Several registered, nothing selected
