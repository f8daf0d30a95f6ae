"""Exception hierarchy for stepanim.

The animation engine itself is total: running animations never raise. These
errors are reserved for invalid values handed to constructors and builders,
unknown animation keys, and broken configuration.
"""

from __future__ import annotations

from typing import Any


class StepAnimError(Exception):
    """Base exception for all stepanim errors."""

    def __init__(self, message: str, details: dict[str, Any] | None = None):
        """Initialize stepanim error."""
        super().__init__(message)
        self.message = message
        self.details = details or {}

    def __str__(self) -> str:
        """Return string representation of the error."""
        if self.details:
            return f"{self.message} (Details: {self.details})"
        return self.message


class ValidationError(StepAnimError):
    """Data validation errors."""


class ConfigurationError(ValidationError):
    """Configuration validation errors."""


class AnimationError(StepAnimError):
    """Animation lookup and control errors."""


class AnimationNotFoundError(AnimationError):
    """No animation style is registered under the requested key."""
