"""
Tests for error types and user-facing error formatting.
"""

from template_system.error_handling import (
    AssemblySystemError,
    ConstructionError,
    ErrorCategory,
    ErrorCodes,
    ErrorContext,
    ErrorSeverity,
    MissingRequiredConfigurationError,
    format_user_error,
)


class TestErrorTypes:
    """Test custom error types and error context."""

    def test_assembly_system_error_creation(self):
        context = ErrorContext(component_name="zync", operation="assemble")

        error = AssemblySystemError(
            message="Test error message",
            error_code="TEST_ERROR",
            category=ErrorCategory.CONSTRUCTION,
            severity=ErrorSeverity.HIGH,
            context=context,
            remediation="Fix the test error",
        )

        assert error.message == "Test error message"
        assert error.category == ErrorCategory.CONSTRUCTION
        assert error.context.component_name == "zync"
        assert error.remediation == "Fix the test error"
        assert str(error) == "Test error message"

    def test_missing_required_configuration(self):
        error = MissingRequiredConfigurationError("app_label")

        assert error.field_name == "app_label"
        assert error.message == "no app_label has been provided"
        assert error.severity == ErrorSeverity.HIGH
        assert error.remediation == (
            "Set the missing value in the environment or .env file"
        )

    def test_error_to_dict(self):
        error = ConstructionError(
            "Secret missing",
            error_code=ErrorCodes.OBJECT_NOT_FOUND,
            context=ErrorContext(component_name="zync-cron", object_name="zync"),
            cause=KeyError("zync"),
        )

        error_dict = error.to_dict()

        assert error_dict["error_code"] == ErrorCodes.OBJECT_NOT_FOUND
        assert error_dict["category"] == "construction"
        assert error_dict["context"]["object_name"] == "zync"
        assert error_dict["cause"] == "'zync'"


class TestFormatUserError:
    """Test user-friendly error formatting."""

    def test_format_system_error(self):
        error = MissingRequiredConfigurationError(
            "authentication_token",
            message="no Authentication Token has been provided",
            context=ErrorContext(component_name="zync"),
        )

        message = format_user_error(error)

        assert message.splitlines()[0] == (
            "Error [MISSING_REQUIRED_FIELD]: no Authentication Token has been provided"
        )
        assert "  Component: zync" in message
        assert "  Field: authentication_token" in message

    def test_format_plain_exception(self):
        assert format_user_error(ValueError("boom")) == "Error: boom"
