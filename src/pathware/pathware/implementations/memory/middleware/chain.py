# ABOUTME: Chain runner executing the ordered middleware of one matched path entry
# ABOUTME: Threads the running outcome and derived exchange; stops at a redirect or error

from dataclasses import dataclass
from typing import Callable, Optional, Sequence

from loguru import logger

from pathware.config.settings import PathwareSettings
from pathware.models.http import Exchange, FetchEvent, Outcome
from pathware.models.middleware import DispatchPhase, DispatchTrace

from .executor import execute_middleware

_logger = logger.bind(name=__name__)


@dataclass
class ChainResult:
    """Net result of one chain run."""

    outcome: Optional[Outcome]
    exchange: Exchange
    terminal: bool = False


async def run_chain(
    exchange: Exchange,
    middlewares: Sequence[Callable],
    prior: Optional[Outcome],
    event: FetchEvent,
    *,
    pattern: str,
    trace: Optional[DispatchTrace] = None,
    settings: Optional[PathwareSettings] = None,
) -> ChainResult:
    """
    Run the middleware bound to one pattern, in order.

    Each stage sees the exchange derived from the last non-null outcome and
    that outcome as its prior. A stage returning None leaves both unchanged.
    A redirect or error outcome ends the chain; the remaining stages are not
    invoked.

    Args:
        exchange: The exchange the first stage sees.
        middlewares: Non-empty, ordered middleware chain.
        prior: Running outcome carried in from earlier entries.
        event: The fetch event.
        pattern: The matched pattern, for logs and the trace.
        trace: Optional trace receiving one record per invocation.
        settings: Engine settings handed to the executor.

    Returns:
        ChainResult: The last non-null outcome (or ``prior`` if every stage
        returned None), the exchange the next stage would have seen, and
        whether the chain stopped on a terminal outcome.
    """
    outcome = prior
    current = exchange

    for index, middleware in enumerate(middlewares):
        execution = await execute_middleware(
            current, middleware, outcome, event, phase=DispatchPhase.PATH, pattern=pattern, settings=settings
        )
        if trace is not None:
            trace.add_stage(execution.record)

        if execution.outcome is None:
            continue

        outcome = execution.outcome
        if execution.is_terminal:
            remaining = len(middlewares) - index - 1
            if remaining:
                _logger.debug(
                    f"Chain '{pattern}' stopped by {execution.record.middleware_name} "
                    f"({outcome.status}); skipping {remaining} middleware"
                )
            return ChainResult(outcome=outcome, exchange=current, terminal=True)

        current = current.derive(outcome)

    return ChainResult(outcome=outcome, exchange=current, terminal=False)
