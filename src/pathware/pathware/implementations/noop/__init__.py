# ABOUTME: NoOp implementations package
# ABOUTME: Implementations that satisfy the interfaces without running any middleware

from .middleware import NoOpMiddlewareDispatcher

__all__ = ["NoOpMiddlewareDispatcher"]
