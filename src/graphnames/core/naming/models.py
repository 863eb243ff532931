"""Naming result models.

Naming never raises on inconsistent graph state. Failures come back as
values so the caller decides whether to surface, ignore or escalate them.

Usage:
    result = namer.get_unique_display_name(handle)
    if not result.ok:
        print(result.error, result.message)
    label = result.unwrap_or("")
"""

from __future__ import annotations

from dataclasses import dataclass
from enum import Enum, auto


class NameErrorKind(Enum):
    """Why a naming operation could not produce its normal value."""

    UNKNOWN_MODEL = auto()  # Handle does not resolve in the graph
    NOT_A_SYSTEM = auto()  # Context with no resolvable data container
    NOT_REGISTERED = auto()  # System absent from the last sync


@dataclass(frozen=True, slots=True)
class NameResult:
    """Outcome of a naming operation.

    Attributes:
        value: Produced name. On failure this is the best-effort fallback,
            None when nothing could be read.
        error: Failure kind, None on success.
        message: Human-readable failure description.
    """

    value: str | None = None
    error: NameErrorKind | None = None
    message: str = ""

    @classmethod
    def success(cls, value: str) -> NameResult:
        return cls(value=value)

    @classmethod
    def failure(
        cls, kind: NameErrorKind, message: str, value: str | None = None
    ) -> NameResult:
        return cls(value=value, error=kind, message=message)

    @property
    def ok(self) -> bool:
        """True if the operation succeeded."""
        return self.error is None

    def unwrap_or(self, default: str) -> str:
        """Get the value, substituting ``default`` when it is None.

        The fallback value of a failed result is returned as is, so a
        NOT_REGISTERED display name still yields the raw base name.

        Args:
            default: Replacement for a missing value.

        Returns:
            The carried value or ``default``.
        """
        return default if self.value is None else self.value
