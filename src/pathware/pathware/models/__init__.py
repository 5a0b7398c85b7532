# ABOUTME: Models package initialization
# ABOUTME: Exports the HTTP exchange models and the middleware configuration models

# HTTP exchange models
from .http import Headers, Cookie, CookieJar, Exchange, Outcome, FetchEvent, merge_headers_into, merge_cookies_into

# Middleware models
from .middleware import (
    DispatchPhase,
    DispatchState,
    OutcomeKind,
    StageRecord,
    DispatchTrace,
    DispatchResult,
    RedirectIntent,
    PathEntry,
    MiddlewareConfig,
)
