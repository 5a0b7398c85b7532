# ABOUTME: Middleware interfaces package
# ABOUTME: Exports abstract interfaces for middleware and dispatchers

from .middleware import AbstractMiddleware, MiddlewareFunction, get_middleware_name
from .dispatcher import AbstractMiddlewareDispatcher

__all__ = ["AbstractMiddleware", "MiddlewareFunction", "get_middleware_name", "AbstractMiddlewareDispatcher"]
