"""
Error Handling

Provides the error taxonomy for options building, object construction,
composition and serialization.
"""

from .error_types import (
    AssemblySystemError,
    CompositionError,
    ConfigurationError,
    ConstructionError,
    ErrorCategory,
    ErrorCodes,
    ErrorContext,
    ErrorMessages,
    ErrorSeverity,
    MissingRequiredConfigurationError,
    SerializationError,
    format_user_error,
)

__all__ = [
    "AssemblySystemError",
    "MissingRequiredConfigurationError",
    "ConstructionError",
    "CompositionError",
    "ConfigurationError",
    "SerializationError",
    "ErrorContext",
    "ErrorSeverity",
    "ErrorCategory",
    "ErrorCodes",
    "ErrorMessages",
    "format_user_error",
]
