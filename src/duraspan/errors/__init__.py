"""Centralized error definitions for duraspan.

Every failure the command line or library callers can act on is a
``DuraspanError`` carrying a stable code, so it can be rendered with a
hint instead of a traceback. The extraction pipeline never raises for "no
match"; these errors cover settings, cultures and input around it.

Usage:
    from duraspan.errors import (
        DuraspanError,
        UnsupportedCultureError,
        handle_error,
    )

    try:
        config = get_configuration(culture)
    except DuraspanError as e:
        typer.echo(handle_error(e), err=True)
"""

from __future__ import annotations

from typing import Iterable

from duraspan.errors.user_messages import (
    get_user_message,
    get_recovery_suggestion,
    format_error_for_user,
    format_error_for_cli,
)


# =============================================================================
# Base Error
# =============================================================================


class DuraspanError(Exception):
    """Base exception for all duraspan errors.

    Attributes:
        code: Stable identifier used by the message catalogue
        user_message: Message shown to people (catalogue text unless overridden)
        recoverable: Whether retrying with different input or settings can help
        details: Context values printed under "Details:" by the CLI
    """

    code: str = "DURASPAN_ERROR"
    default_message: str = "An unexpected error occurred"
    recoverable: bool = True

    def __init__(
        self,
        message: str | None = None,
        *,
        user_message: str | None = None,
        details: dict | None = None,
    ) -> None:
        self.message = message or self.default_message
        self._user_message = user_message
        self.details = details or {}
        super().__init__(self.message)

    @property
    def user_message(self) -> str:
        """Get user-friendly message."""
        if self._user_message:
            return self._user_message
        return get_user_message(self)

    @property
    def recovery_suggestion(self) -> str:
        """Get recovery suggestion."""
        return get_recovery_suggestion(self)

    def to_dict(self) -> dict:
        """Convert to dictionary for serialization."""
        return {
            "code": self.code,
            "message": self.message,
            "user_message": self.user_message,
            "recoverable": self.recoverable,
            "details": self.details,
            "recovery_suggestion": self.recovery_suggestion,
        }


# =============================================================================
# Configuration Errors
# =============================================================================


class ConfigurationError(DuraspanError):
    """Base error for configuration issues."""

    code = "CONFIGURATION_ERROR"
    default_message = "Configuration error"
    recoverable = True


class InvalidConfigError(ConfigurationError):
    """Configuration is invalid."""

    code = "INVALID_CONFIG"
    default_message = "Invalid configuration"


class MissingConfigError(ConfigurationError):
    """Required configuration is missing."""

    code = "MISSING_CONFIG"
    default_message = "Missing required configuration"


class UnsupportedCultureError(ConfigurationError):
    """No duration configuration exists for the requested culture."""

    code = "UNSUPPORTED_CULTURE"
    default_message = "Unsupported culture"

    def __init__(
        self,
        culture: str,
        supported: Iterable[str] = (),
        *,
        message: str | None = None,
    ) -> None:
        self.culture = culture
        self.supported = sorted(supported)
        super().__init__(
            message or f"Unsupported culture: {culture}",
            details={"culture": culture, "supported": ", ".join(self.supported)},
        )


# =============================================================================
# Processing Errors
# =============================================================================


class ProcessingError(DuraspanError):
    """Base error for text processing."""

    code = "PROCESSING_ERROR"
    default_message = "Text processing failed"


class ExtractionError(ProcessingError):
    """Duration extraction could not run."""

    code = "EXTRACTION_ERROR"
    default_message = "Extraction failed"


# =============================================================================
# Error Handler
# =============================================================================


def handle_error(error: Exception) -> str:
    """Handle an error and return a user-friendly message.

    Args:
        error: The exception to handle

    Returns:
        User-friendly error message with recovery suggestion
    """
    return format_error_for_user(error)


def is_recoverable(error: Exception) -> bool:
    """Check if an error is potentially recoverable."""
    if isinstance(error, DuraspanError):
        return error.recoverable
    return False


__all__ = [
    # Base
    "DuraspanError",
    # Configuration
    "ConfigurationError",
    "InvalidConfigError",
    "MissingConfigError",
    "UnsupportedCultureError",
    # Processing
    "ProcessingError",
    "ExtractionError",
    # Handlers
    "handle_error",
    "is_recoverable",
    "format_error_for_cli",
]
