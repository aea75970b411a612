"""
Exception hierarchy for sparkbase.

Provides layered exception structure for mapping and configuration errors.
All exceptions include context for observability and debugging. Driver
errors (pymongo.errors.PyMongoError) are never wrapped and reach callers
unmodified.

Dependencies: None (pure domain layer)
System role: Centralized exception handling across the library
"""

from typing import Any


class SparkbaseException(Exception):
    """Base exception for all sparkbase errors."""

    def __init__(self, message: str, details: dict[str, Any] | None = None) -> None:
        """
        Initialize base exception with message and optional context.

        Args:
            message: Human-readable error message
            details: Optional dictionary of additional context for debugging
        """
        self.message = message
        self.details = details or {}
        super().__init__(message)

    def __str__(self) -> str:
        """Return string representation including details."""
        if self.details:
            return f"{self.message} | Details: {self.details}"
        return self.message


class UnregisteredTypeError(SparkbaseException):
    """Raised when a collection operation runs for a type without an adapter."""

    def __init__(
        self,
        type_name: str,
        operation: str | None = None,
        details: dict[str, Any] | None = None,
    ) -> None:
        """
        Initialize unregistered type error.

        Args:
            type_name: Display name of the type that has no adapter
            operation: Collection operation that needed the adapter
            details: Additional context
        """
        details = details or {}
        details["type"] = type_name
        if operation:
            details["operation"] = operation
        self.type_name = type_name
        super().__init__(f'Type "{type_name}" does not have a registered adapter', details)


class AdapterRegistrationError(SparkbaseException):
    """Raised when a type key already has an adapter registered."""

    def __init__(self, type_name: str, details: dict[str, Any] | None = None) -> None:
        """
        Initialize registration error.

        Args:
            type_name: Display name of the type registered twice
            details: Additional context
        """
        details = details or {}
        details["type"] = type_name
        self.type_name = type_name
        super().__init__(f'Type "{type_name}" already has a registered adapter', details)


class ConfigurationError(SparkbaseException):
    """Raised when connection settings are unusable."""

    def __init__(
        self,
        message: str,
        setting: str | None = None,
        details: dict[str, Any] | None = None,
    ) -> None:
        """
        Initialize configuration error.

        Args:
            message: Error message
            setting: Name of the offending setting
            details: Additional context
        """
        details = details or {}
        if setting:
            details["setting"] = setting
        super().__init__(message, details)
