# ABOUTME: NoOp middleware implementations package
# ABOUTME: Exports the pass-through dispatcher

from .dispatcher import NoOpMiddlewareDispatcher

__all__ = ["NoOpMiddlewareDispatcher"]
