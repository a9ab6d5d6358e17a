"""Domain models using Pydantic for validation."""

from __future__ import annotations

from typing import Any

from pydantic import BaseModel, ConfigDict, Field, model_validator

from .enums import FallbackReason, ResolutionStatus


def provider_identity(provider: Any) -> str:
    """Return the identity of a provider: its fully qualified class name.

    Providers may expose their own ``identity``; anything else is identified
    by the module and qualified name of its type.
    """
    identity = getattr(provider, "identity", None)
    if isinstance(identity, str) and identity:
        return identity
    provider_type = type(provider)
    return f"{provider_type.__module__}.{provider_type.__qualname__}"


def normalize_selector(value: str | None) -> str | None:
    """Trim a selector, mapping blank values to None."""
    if value is None:
        return None
    value = value.strip()
    return value or None


class ResolutionOutcome(BaseModel):
    """Immutable result of locating a provider.

    Either the provider locator resolved to exactly one provider, or it fell
    back to no-op logging for a recorded reason. ``provider`` always holds a
    usable provider: the resolved one, or the no-op fallback.
    """

    model_config = ConfigDict(
        frozen=True,
        extra="forbid",
        arbitrary_types_allowed=True,
    )

    status: ResolutionStatus
    provider: Any = Field(..., description="Resolved provider or the no-op fallback")
    reason: FallbackReason | None = Field(default=None)
    selector: str | None = Field(default=None, description="Selector in effect, if any")
    discovered: tuple[str, ...] = Field(
        default=(), description="Identities of all discovered providers, in discovery order"
    )

    @model_validator(mode="after")
    def validate_reason_consistency(self) -> ResolutionOutcome:
        """Ensure a reason is present exactly when falling back."""
        if self.status is ResolutionStatus.RESOLVED and self.reason is not None:
            raise ValueError("Reason must be None when status is RESOLVED")
        if self.status is ResolutionStatus.FALLBACK and self.reason is None:
            raise ValueError("Reason required when status is FALLBACK")
        return self

    @property
    def is_resolved(self) -> bool:
        return self.status is ResolutionStatus.RESOLVED

    @property
    def is_fallback(self) -> bool:
        return self.status is ResolutionStatus.FALLBACK

    @classmethod
    def resolved(
        cls, provider: Any, discovered: tuple[str, ...], selector: str | None = None
    ) -> ResolutionOutcome:
        """Create an outcome for a successfully resolved provider."""
        return cls(
            status=ResolutionStatus.RESOLVED,
            provider=provider,
            selector=selector,
            discovered=discovered,
        )

    @classmethod
    def fallback(
        cls,
        fallback_provider: Any,
        reason: FallbackReason,
        discovered: tuple[str, ...],
        selector: str | None = None,
    ) -> ResolutionOutcome:
        """Create an outcome for no-op fallback."""
        return cls(
            status=ResolutionStatus.FALLBACK,
            provider=fallback_provider,
            reason=reason,
            selector=selector,
            discovered=discovered,
        )
