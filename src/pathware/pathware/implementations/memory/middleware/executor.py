# ABOUTME: Middleware executor running a single middleware against the current exchange
# ABOUTME: Accumulates prior outcome headers into the new outcome and classifies the result

import asyncio
import inspect
from dataclasses import dataclass
from datetime import datetime, UTC
from typing import Any, Callable, Optional

from loguru import logger

from pathware.config.settings import PathwareSettings, get_settings
from pathware.exceptions import DispatchCancelledError, MiddlewareExecutionError, MiddlewareValidationError
from pathware.interfaces.middleware import get_middleware_name
from pathware.models.http import Exchange, FetchEvent, Outcome, merge_headers_into
from pathware.models.middleware import DispatchPhase, OutcomeKind, StageRecord

_logger = logger.bind(name=__name__)


@dataclass
class ExecutionResult:
    """Outcome of one middleware invocation plus its classification."""

    outcome: Optional[Outcome]
    record: StageRecord

    @property
    def is_redirect(self) -> bool:
        return self.outcome is not None and self.outcome.is_redirect

    @property
    def is_error(self) -> bool:
        return self.outcome is not None and self.outcome.is_error

    @property
    def is_terminal(self) -> bool:
        return self.is_redirect or self.is_error


def accumulate_headers(prior: Outcome, outcome: Outcome) -> Outcome:
    """
    Return a copy of ``outcome`` carrying the prior outcome's headers.

    Headers only set by an earlier stage survive; on a name collision the
    later stage's value wins. Neither argument is modified.
    """
    headers = merge_headers_into(prior.headers.copy(), outcome.headers)
    return outcome.model_copy(update={"headers": headers})


async def execute_middleware(
    exchange: Exchange,
    middleware: Callable[..., Any],
    prior: Optional[Outcome],
    event: FetchEvent,
    *,
    phase: DispatchPhase = DispatchPhase.PATH,
    pattern: Optional[str] = None,
    settings: Optional[PathwareSettings] = None,
) -> ExecutionResult:
    """
    Run one middleware and classify what it produced.

    The executor never stops a chain itself; callers decide what to do with a
    redirect or error classification.

    Args:
        exchange: The request as seen by this stage.
        middleware: Sync or async callable ``(exchange, prior, event)``.
        prior: The running outcome, or None.
        event: The fetch event; checked for cancellation before the call.
        phase: Dispatch phase, for logs and the stage record.
        pattern: Matched path pattern, None for global hooks.
        settings: Engine settings naming the reserved marker header.
            Defaults to ``get_settings()``.

    Returns:
        ExecutionResult: The (possibly None) outcome and its stage record.

    Raises:
        DispatchCancelledError: If the event was cancelled.
        MiddlewareValidationError: If the middleware returned something other
            than an Outcome or None.
        MiddlewareExecutionError: If the middleware raised.
    """
    event.raise_if_cancelled()

    middleware_name = get_middleware_name(middleware)
    start_time = datetime.now(UTC)

    try:
        result = middleware(exchange, prior, event)
        if inspect.isawaitable(result):
            result = await result
    except (DispatchCancelledError, asyncio.CancelledError):
        raise
    except Exception as e:
        execution_time_ms = (datetime.now(UTC) - start_time).total_seconds() * 1000
        _logger.error(
            "Middleware failed",
            middleware=middleware_name,
            phase=phase.value,
            pattern=pattern,
            path=exchange.path,
            execution_time_ms=round(execution_time_ms, 2),
            error=str(e),
            exc_info=e,
        )
        raise MiddlewareExecutionError(
            f"Middleware {middleware_name} failed: {e}",
            code="MIDDLEWARE_FAILED",
            details={
                "middleware_name": middleware_name,
                "phase": phase.value,
                "pattern": pattern,
                "path": exchange.path,
                "request_id": exchange.request_id,
                "exception_type": type(e).__name__,
            },
        ) from e

    if result is not None and not isinstance(result, Outcome):
        raise MiddlewareValidationError(
            f"Middleware {middleware_name} returned {type(result).__name__}, expected Outcome or None",
            code="INVALID_MIDDLEWARE_RESULT",
            details={"middleware_name": middleware_name, "phase": phase.value, "pattern": pattern},
        )

    if result is not None and prior is not None:
        result = accumulate_headers(prior, result)

    settings = settings or get_settings()
    if result is not None and settings.REDIRECT_MARKER_HEADER in result.headers:
        _logger.warning(
            f"Middleware {middleware_name} set reserved header '{settings.REDIRECT_MARKER_HEADER}'; "
            "it is never forwarded to the client"
        )

    execution_time_ms = (datetime.now(UTC) - start_time).total_seconds() * 1000
    record = StageRecord(
        phase=phase,
        middleware_name=middleware_name,
        pattern=pattern,
        kind=OutcomeKind.classify(result),
        status=result.status if result is not None else None,
        started_at=start_time,
        execution_time_ms=execution_time_ms,
    )

    if settings.TRACE_DISPATCH:
        _logger.debug(
            f"Middleware {middleware_name} ({phase.value}, pattern={pattern}) completed in "
            f"{execution_time_ms:.2f}ms: {record.kind.value}"
            + (f" {record.status}" if record.status is not None else "")
        )

    return ExecutionResult(outcome=result, record=record)


__all__ = ["ExecutionResult", "accumulate_headers", "execute_middleware"]
