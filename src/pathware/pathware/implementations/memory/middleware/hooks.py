# ABOUTME: Global before/after hook runner and the redirect bridge
# ABOUTME: Turns a hook redirect into a one-shot client redirect through a typed RedirectIntent

from dataclasses import dataclass
from typing import Optional

from loguru import logger

from pathware.config.settings import PathwareSettings, get_settings
from pathware.models.http import Exchange, FetchEvent, Outcome, merge_cookies_into
from pathware.models.middleware import DispatchPhase, DispatchTrace, MiddlewareConfig, RedirectIntent, StageRecord

from .executor import execute_middleware

_logger = logger.bind(name=__name__)


@dataclass
class HookResult:
    """
    Result of one global hook phase.

    ``outcome`` is None when the hook is absent or had no opinion. ``intent``
    is set only for a redirect carrying a location.
    """

    outcome: Optional[Outcome] = None
    intent: Optional[RedirectIntent] = None
    record: Optional[StageRecord] = None

    @property
    def terminal(self) -> bool:
        return self.outcome is not None


async def run_global(
    phase: DispatchPhase,
    exchange: Exchange,
    event: FetchEvent,
    config: MiddlewareConfig,
    trace: Optional[DispatchTrace] = None,
    settings: Optional[PathwareSettings] = None,
) -> HookResult:
    """
    Run the global hook registered for ``phase``.

    The hook always runs with a null prior outcome. A redirect yields a
    RedirectIntent for the bridge; a pass-through outcome or None means the
    pipeline continues; any other outcome is returned as-is and ends the
    dispatch.

    Args:
        phase: ``DispatchPhase.BEFORE`` or ``DispatchPhase.AFTER``.
        exchange: The request as received, without the reserved marker header.
        event: The fetch event.
        config: Engine configuration holding the hooks.
        trace: Optional trace receiving the invocation record.
        settings: Engine settings handed to the executor.

    Returns:
        HookResult: Empty when there is no hook or it had no opinion.
    """
    hook = config.hook(phase)
    if hook is None:
        return HookResult()

    execution = await execute_middleware(exchange, hook, None, event, phase=phase, settings=settings)
    if trace is not None:
        trace.add_stage(execution.record)

    outcome = execution.outcome
    if outcome is None or outcome.pass_through:
        return HookResult(record=execution.record)

    intent = RedirectIntent.from_outcome(outcome, phase)
    if intent is not None:
        _logger.debug(f"Global '{phase.value}' hook redirects {exchange.path} to {intent.location}")
    elif outcome.is_redirect:
        _logger.warning(
            f"Global '{phase.value}' hook returned redirect status {outcome.status} without a location; "
            "returning it unchanged"
        )
    return HookResult(outcome=outcome, intent=intent, record=execution.record)


def bridge(
    exchange: Exchange,
    outcome: Outcome,
    intent: Optional[RedirectIntent] = None,
    marker_header: Optional[str] = None,
) -> Outcome:
    """
    Build the client-facing outcome for a terminal hook result.

    With an intent, a fresh redirect to ``intent.location`` is built: it
    carries the request headers (without the reserved marker header), the
    request cookies, then the cookies the hook set. Without an intent
    ``outcome`` itself is returned. Neither ``exchange`` nor ``outcome`` is
    modified.

    Args:
        exchange: The request the hook saw.
        outcome: The hook's outcome.
        intent: The redirect intent recorded by ``run_global``.
        marker_header: Reserved header name. Defaults to the
            ``REDIRECT_MARKER_HEADER`` setting.

    Returns:
        Outcome: The outcome to return to the client.
    """
    if intent is None:
        return outcome

    marker_header = marker_header or get_settings().REDIRECT_MARKER_HEADER

    headers = exchange.headers.copy()
    if marker_header in headers:
        del headers[marker_header]
    headers["location"] = intent.location

    redirect = Outcome(status=intent.status, headers=headers)
    merge_cookies_into(redirect.cookies, exchange.cookies)
    merge_cookies_into(redirect.cookies, intent.cookies)
    return redirect
