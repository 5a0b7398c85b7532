# ABOUTME: Exception package exports
# ABOUTME: Exports the base exception and the middleware error hierarchy

from pathware.exceptions.base import (
    PathwareException,
    ValidationException,
    ConfigurationException,
)

from pathware.exceptions.middleware import (
    MiddlewareError,
    MiddlewareConfigurationError,
    PathPatternError,
    MiddlewareExecutionError,
    MiddlewareValidationError,
    DispatchCancelledError,
)

__all__ = [
    "PathwareException",
    "ValidationException",
    "ConfigurationException",
    # Middleware exceptions
    "MiddlewareError",
    "MiddlewareConfigurationError",
    "PathPatternError",
    "MiddlewareExecutionError",
    "MiddlewareValidationError",
    "DispatchCancelledError",
]
