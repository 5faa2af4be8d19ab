"""
Error Types and Exceptions

Defines custom exception types for the template assembly system with detailed
error information and remediation guidance.
"""

from dataclasses import dataclass
from enum import Enum
from typing import Any, Dict, Optional


class ErrorSeverity(Enum):
    """Error severity levels."""

    LOW = "low"
    MEDIUM = "medium"
    HIGH = "high"
    CRITICAL = "critical"


class ErrorCategory(Enum):
    """Error categories for classification."""

    CONFIGURATION = "configuration"
    CONSTRUCTION = "construction"
    COMPOSITION = "composition"
    SERIALIZATION = "serialization"


@dataclass
class ErrorContext:
    """Additional context information for errors."""

    component_name: Optional[str] = None
    field_name: Optional[str] = None
    object_name: Optional[str] = None
    file_path: Optional[str] = None
    operation: Optional[str] = None
    additional_info: Optional[Dict[str, Any]] = None


class AssemblySystemError(Exception):
    """Base exception for template assembly errors."""

    def __init__(
        self,
        message: str,
        error_code: str,
        category: ErrorCategory,
        severity: ErrorSeverity = ErrorSeverity.MEDIUM,
        context: Optional[ErrorContext] = None,
        remediation: Optional[str] = None,
        cause: Optional[Exception] = None,
    ):
        super().__init__(message)
        self.message = message
        self.error_code = error_code
        self.category = category
        self.severity = severity
        self.context = context or ErrorContext()
        self.remediation = remediation or ErrorMessages.get_remediation(error_code)
        self.cause = cause

    def to_dict(self) -> Dict[str, Any]:
        """Convert error to dictionary representation."""
        return {
            "error_code": self.error_code,
            "message": self.message,
            "category": self.category.value,
            "severity": self.severity.value,
            "context": {
                "component_name": self.context.component_name,
                "field_name": self.context.field_name,
                "object_name": self.context.object_name,
                "file_path": self.context.file_path,
                "operation": self.context.operation,
                "additional_info": self.context.additional_info,
            },
            "remediation": self.remediation,
            "cause": str(self.cause) if self.cause else None,
        }


class MissingRequiredConfigurationError(AssemblySystemError):
    """A required options field was absent or empty when building options."""

    def __init__(
        self,
        field_name: str,
        message: Optional[str] = None,
        context: Optional[ErrorContext] = None,
        remediation: Optional[str] = None,
    ):
        context = context or ErrorContext()
        context.field_name = field_name
        super().__init__(
            message=message or f"no {field_name} has been provided",
            error_code=ErrorCodes.MISSING_REQUIRED_FIELD,
            category=ErrorCategory.CONFIGURATION,
            severity=ErrorSeverity.HIGH,
            context=context,
            remediation=remediation,
        )
        self.field_name = field_name


class ConstructionError(AssemblySystemError):
    """A resource factory could not produce an object from valid options."""

    def __init__(
        self,
        message: str,
        error_code: str = "CONSTRUCTION_ERROR",
        context: Optional[ErrorContext] = None,
        remediation: Optional[str] = None,
        cause: Optional[Exception] = None,
    ):
        super().__init__(
            message=message,
            error_code=error_code,
            category=ErrorCategory.CONSTRUCTION,
            severity=ErrorSeverity.HIGH,
            context=context,
            remediation=remediation,
            cause=cause,
        )


class CompositionError(AssemblySystemError):
    """Errors related to registering and composing components."""

    def __init__(
        self,
        message: str,
        error_code: str = "COMPOSITION_ERROR",
        context: Optional[ErrorContext] = None,
        remediation: Optional[str] = None,
        cause: Optional[Exception] = None,
    ):
        super().__init__(
            message=message,
            error_code=error_code,
            category=ErrorCategory.COMPOSITION,
            severity=ErrorSeverity.HIGH,
            context=context,
            remediation=remediation,
            cause=cause,
        )


class ConfigurationError(AssemblySystemError):
    """Errors related to configuration files."""

    def __init__(
        self,
        message: str,
        error_code: str = "CONFIGURATION_ERROR",
        context: Optional[ErrorContext] = None,
        remediation: Optional[str] = None,
        cause: Optional[Exception] = None,
    ):
        super().__init__(
            message=message,
            error_code=error_code,
            category=ErrorCategory.CONFIGURATION,
            severity=ErrorSeverity.HIGH,
            context=context,
            remediation=remediation,
            cause=cause,
        )


class SerializationError(AssemblySystemError):
    """Errors raised while rendering or writing a template."""

    def __init__(
        self,
        message: str,
        error_code: str = "SERIALIZATION_ERROR",
        context: Optional[ErrorContext] = None,
        remediation: Optional[str] = None,
        cause: Optional[Exception] = None,
    ):
        super().__init__(
            message=message,
            error_code=error_code,
            category=ErrorCategory.SERIALIZATION,
            severity=ErrorSeverity.MEDIUM,
            context=context,
            remediation=remediation,
            cause=cause,
        )


class ErrorCodes:
    """Common error codes."""

    # Configuration Errors
    MISSING_REQUIRED_FIELD = "MISSING_REQUIRED_FIELD"
    CONFIG_FILE_NOT_FOUND = "CONFIG_FILE_NOT_FOUND"
    CONFIG_INVALID_FORMAT = "CONFIG_INVALID_FORMAT"

    # Construction Errors
    SIBLING_NOT_FOUND = "SIBLING_NOT_FOUND"
    OBJECT_NOT_FOUND = "OBJECT_NOT_FOUND"

    # Composition Errors
    UNKNOWN_COMPONENT = "UNKNOWN_COMPONENT"
    DUPLICATE_COMPONENT = "DUPLICATE_COMPONENT"

    # Serialization Errors
    UNSUPPORTED_FORMAT = "UNSUPPORTED_FORMAT"
    OUTPUT_WRITE_FAILED = "OUTPUT_WRITE_FAILED"


class ErrorMessages:
    """Default error messages and remediation steps."""

    MESSAGES = {
        ErrorCodes.MISSING_REQUIRED_FIELD: {
            "message": "A required configuration value has not been provided",
            "remediation": "Set the missing value in the environment or .env file",
        },
        ErrorCodes.CONFIG_FILE_NOT_FOUND: {
            "message": "Configuration file not found",
            "remediation": "Check the --config-dir path or create assembly-config.yaml",
        },
        ErrorCodes.CONFIG_INVALID_FORMAT: {
            "message": "Configuration file is not valid",
            "remediation": "Fix the YAML syntax or values in assembly-config.yaml",
        },
        ErrorCodes.SIBLING_NOT_FOUND: {
            "message": "A component this component depends on was not composed",
            "remediation": "Enable the required component in the component list",
        },
        ErrorCodes.OBJECT_NOT_FOUND: {
            "message": "An expected object is missing from the template",
            "remediation": "Ensure the providing component assembles before post-processing",
        },
        ErrorCodes.UNKNOWN_COMPONENT: {
            "message": "Component is not registered",
            "remediation": "Run 'list-components' to see the registered component names",
        },
        ErrorCodes.DUPLICATE_COMPONENT: {
            "message": "Component name is registered twice",
            "remediation": "Register each component under a unique name",
        },
        ErrorCodes.UNSUPPORTED_FORMAT: {
            "message": "Output format is not supported",
            "remediation": "Use 'yaml' or 'json'",
        },
        ErrorCodes.OUTPUT_WRITE_FAILED: {
            "message": "The rendered template could not be written",
            "remediation": "Check that the --output path is writable",
        },
    }

    @classmethod
    def get_message(cls, error_code: str) -> str:
        """Get default message for error code."""
        return cls.MESSAGES.get(error_code, {}).get("message", "Unknown error")

    @classmethod
    def get_remediation(cls, error_code: str) -> str:
        """Get default remediation for error code."""
        return cls.MESSAGES.get(error_code, {}).get(
            "remediation", "No remediation available"
        )


def format_user_error(error: Exception) -> str:
    """Format an error as a user-friendly multi-line message."""
    if not isinstance(error, AssemblySystemError):
        return f"Error: {error}"

    lines = [f"Error [{error.error_code}]: {error.message}"]
    if error.context.component_name:
        lines.append(f"  Component: {error.context.component_name}")
    if error.context.field_name:
        lines.append(f"  Field: {error.context.field_name}")
    if error.context.object_name:
        lines.append(f"  Object: {error.context.object_name}")
    if error.remediation:
        lines.append(f"  Remediation: {error.remediation}")
    return "\n".join(lines)
