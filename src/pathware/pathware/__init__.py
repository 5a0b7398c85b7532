# ABOUTME: pathware package root
# ABOUTME: Path-keyed middleware composition engine with global hooks and redirect bridging

"""
pathware

Compose independently written request middleware behind URL path patterns,
with optional global ``before``/``after`` hooks.
"""

__version__ = "0.1.0"

from pathware.implementations.memory.middleware import InMemoryMiddlewareDispatcher, create_middleware
from pathware.implementations.noop.middleware import NoOpMiddlewareDispatcher
from pathware.interfaces.middleware import AbstractMiddleware, AbstractMiddlewareDispatcher
from pathware.models.http import Cookie, CookieJar, Exchange, FetchEvent, Headers, Outcome
from pathware.models.middleware import DispatchResult, DispatchTrace, MiddlewareConfig, RedirectIntent

__all__ = [
    "__version__",
    "create_middleware",
    "InMemoryMiddlewareDispatcher",
    "NoOpMiddlewareDispatcher",
    "AbstractMiddleware",
    "AbstractMiddlewareDispatcher",
    "Cookie",
    "CookieJar",
    "Exchange",
    "FetchEvent",
    "Headers",
    "Outcome",
    "DispatchResult",
    "DispatchTrace",
    "MiddlewareConfig",
    "RedirectIntent",
]
