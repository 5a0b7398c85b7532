# ABOUTME: create_middleware factory building a request handler from a path map and global hooks
# ABOUTME: Validates configuration at setup and optionally maps middleware failures to one 500 outcome

from typing import Any, Awaitable, Callable, Mapping, Optional

from loguru import logger

from pathware.config.settings import PathwareSettings, get_settings
from pathware.exceptions import MiddlewareExecutionError, MiddlewareValidationError
from pathware.interfaces.matching import AbstractPathMatcher
from pathware.models.http import Exchange, FetchEvent, Outcome
from pathware.models.middleware import MiddlewareConfig

from .dispatcher import InMemoryMiddlewareDispatcher

_logger = logger.bind(name=__name__)

Handler = Callable[..., Awaitable[Outcome]]


def create_middleware(
    path_map: Optional[Mapping[str, Any]] = None,
    global_hooks: Optional[Mapping[str, Any]] = None,
    *,
    catch_errors: Optional[bool] = None,
    matcher: Optional[AbstractPathMatcher] = None,
    settings: Optional[PathwareSettings] = None,
) -> Handler:
    """
    Build a request handler from a path map and optional global hooks.

    Example:
        handler = create_middleware(
            {"/": demo_redirect, "/api/*": [auth, add_cors_headers]},
            {"before": maintenance_gate},
        )
        outcome = await handler(Exchange(path="/foo"))

    Args:
        path_map: Pattern -> middleware or non-empty list of middleware.
        global_hooks: Optional ``{"before": mw, "after": mw}``.
        catch_errors: Turn a failing middleware (one that raised or returned
            something other than an Outcome) into a single generic 500
            outcome instead of raising. Cancellation always propagates.
            Defaults to the
            ``CATCH_MIDDLEWARE_ERRORS`` setting.
        matcher: Path matcher; defaults to one built from settings.
        settings: Engine settings. Defaults to ``get_settings()``.

    Returns:
        An async callable ``(exchange, event=None) -> Outcome``. The
        dispatcher is exposed as its ``dispatcher`` attribute.

    Raises:
        MiddlewareConfigurationError: For an invalid configuration, before
            any request is dispatched.
    """
    settings = settings or get_settings()
    if catch_errors is None:
        catch_errors = settings.CATCH_MIDDLEWARE_ERRORS

    config = MiddlewareConfig.from_mapping(path_map, global_hooks, matcher=matcher, settings=settings)
    dispatcher = InMemoryMiddlewareDispatcher(config, settings=settings)

    async def handler(exchange: Exchange, event: Optional[FetchEvent] = None) -> Outcome:
        try:
            return await dispatcher.dispatch(exchange, event)
        except (MiddlewareExecutionError, MiddlewareValidationError) as e:
            if not catch_errors:
                raise
            _logger.error(f"Request {exchange.request_id} {exchange.path} failed: {e.message} [{e.code}]")
            return Outcome.error(500)

    handler.dispatcher = dispatcher  # type: ignore[attr-defined]
    return handler
