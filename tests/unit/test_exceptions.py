"""Tests for the exception hierarchy."""

from sparkbase.core.exceptions import (
    AdapterRegistrationError,
    ConfigurationError,
    SparkbaseException,
    UnregisteredTypeError,
)


class TestSparkbaseException:
    """Tests for the base exception."""

    def test_str_without_details(self) -> None:
        """Plain message when no context is attached."""
        assert str(SparkbaseException("failed")) == "failed"

    def test_str_with_details(self) -> None:
        """Details are appended to the message."""
        exc = SparkbaseException("failed", {"collection": "users"})

        assert str(exc) == "failed | Details: {'collection': 'users'}"


class TestSubclasses:
    """Tests for domain-specific errors."""

    def test_unregistered_type_error(self) -> None:
        """Carries the type display name and operation."""
        exc = UnregisteredTypeError("User", operation="push")

        assert isinstance(exc, SparkbaseException)
        assert exc.type_name == "User"
        assert exc.message == 'Type "User" does not have a registered adapter'
        assert exc.details == {"type": "User", "operation": "push"}

    def test_unregistered_type_error_without_operation(self) -> None:
        """Operation is optional."""
        assert UnregisteredTypeError("User").details == {"type": "User"}

    def test_registration_error(self) -> None:
        """Names the duplicated type."""
        exc = AdapterRegistrationError("User")

        assert exc.details == {"type": "User"}
        assert "already" in exc.message

    def test_configuration_error(self) -> None:
        """Records the offending setting."""
        exc = ConfigurationError("bad uri", setting="uri")

        assert exc.details == {"setting": "uri"}
