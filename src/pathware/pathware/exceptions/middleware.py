# ABOUTME: Middleware-specific exception classes for error handling
# ABOUTME: Provides structured errors for path configuration, middleware execution and cancellation

from pathware.exceptions.base import ConfigurationException, PathwareException


class MiddlewareError(PathwareException):
    """Base exception class for middleware-related errors.

    This is the base class for all middleware-specific exceptions.
    It should be used as a base for more specific middleware exceptions
    rather than being raised directly.
    """

    pass


class MiddlewareConfigurationError(MiddlewareError, ConfigurationException):
    """Exception raised for middleware configuration errors.

    Used when the path map or global hooks are invalid, such as:
    - An empty middleware list for a path entry
    - A middleware that is not callable
    - A global hook phase other than ``before`` or ``after``

    Raised while the configuration is loaded; the engine refuses to start.
    """

    pass


class PathPatternError(MiddlewareConfigurationError):
    """Exception raised when a path pattern cannot be compiled.

    Used for empty patterns, malformed or duplicate parameter names and
    wildcards mixed with literal text where that is not supported.
    """

    pass


class MiddlewareExecutionError(MiddlewareError):
    """Exception raised when a middleware function fails.

    Wraps the original exception (available as ``__cause__``) and carries the
    middleware name, the dispatch phase, the matched pattern and the request
    path in ``details``. The engine does not retry.
    """

    pass


class MiddlewareValidationError(MiddlewareError):
    """Exception raised when a middleware returns something other than an Outcome or None."""

    pass


class DispatchCancelledError(MiddlewareError):
    """Exception raised when the fetch event was cancelled before a middleware ran."""

    pass
