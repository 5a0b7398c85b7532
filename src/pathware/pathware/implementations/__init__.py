# ABOUTME: Implementations package exports
# ABOUTME: Concrete in-memory and no-op implementations of the engine interfaces

from .memory import InMemoryMiddlewareDispatcher, create_middleware
from .noop import NoOpMiddlewareDispatcher

__all__ = ["InMemoryMiddlewareDispatcher", "create_middleware", "NoOpMiddlewareDispatcher"]
