# ABOUTME: Core exception classes for the pathware middleware engine
# ABOUTME: Provides structured error handling with context and error codes

from typing import Dict, Any


class PathwareException(Exception):
    """Base exception class for the middleware engine.

    Provides structured error handling with optional error codes and contextual
    details. All custom exceptions in the package inherit from this class
    to ensure consistent error handling patterns.

    Attributes:
        message: Human-readable error message
        code: Optional error code for programmatic handling
        details: Optional dictionary containing contextual information
    """

    def __init__(self, message: str, code: str | None = None, details: Dict[str, Any] | None = None):
        """Initialize PathwareException with message, optional code and details.

        Args:
            message: Human-readable error message
            code: Optional error code for programmatic handling
            details: Optional dictionary containing contextual information
        """
        self.message = message
        self.code = code
        self.details = details.copy() if details else {}
        super().__init__(self.message)


class ValidationException(PathwareException):
    """Exception raised for value validation errors.

    Used when a value handed to the engine fails validation, such as:
    - A redirect built with a non-redirect status code
    - A cookie without a name
    - A status code outside the HTTP range

    Should include specific details about what validation failed.
    """

    pass


class ConfigurationException(PathwareException):
    """Exception raised for configuration errors.

    Used when engine configuration is invalid or missing, such as:
    - Invalid settings values
    - Unknown global hook phases
    - Environment setup issues

    Configuration errors are raised at setup time, before any request
    is dispatched.
    """

    pass
