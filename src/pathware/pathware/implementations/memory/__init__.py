# ABOUTME: In-memory implementations package
# ABOUTME: Holds the middleware engine; configuration lives in process memory only

from .middleware import InMemoryMiddlewareDispatcher, create_middleware

__all__ = ["InMemoryMiddlewareDispatcher", "create_middleware"]
