# ABOUTME: InMemoryMiddlewareDispatcher, the public entry point of the middleware engine
# ABOUTME: Runs the before hook, every matching path chain and the after hook for one request

from typing import Any, Dict, Optional

from loguru import logger

from pathware.config.settings import PathwareSettings, get_settings
from pathware.interfaces.middleware import AbstractMiddlewareDispatcher, get_middleware_name
from pathware.models.http import Exchange, FetchEvent, Outcome
from pathware.models.middleware import (
    DispatchPhase,
    DispatchResult,
    DispatchState,
    DispatchTrace,
    MiddlewareConfig,
)

from .chain import run_chain
from .hooks import HookResult, bridge, run_global


class InMemoryMiddlewareDispatcher(AbstractMiddlewareDispatcher):
    """
    In-memory implementation of the middleware dispatcher.

    The configuration is fixed at construction and never mutated afterwards.
    The dispatcher keeps no per-request state on the instance: every dispatch
    builds its own trace, so one instance serves concurrent requests without
    locking.
    """

    def __init__(
        self,
        config: MiddlewareConfig,
        name: str = "InMemoryMiddlewareDispatcher",
        settings: Optional[PathwareSettings] = None,
    ):
        """
        Initialize the dispatcher.

        Args:
            config: Validated engine configuration.
            name: Name of the dispatcher for identification and logging.
            settings: Engine settings. Defaults to ``get_settings()``.
        """
        self.name = name
        self.config = config
        self.settings = settings or get_settings()
        self._logger = logger.bind(name=f"{__name__}.{self.name}")

        self._logger.info(
            f"Dispatcher {self.name} configured with {len(config.entries)} path entries, "
            f"before hook: {config.before is not None}, after hook: {config.after is not None}"
        )

    async def dispatch(self, exchange: Exchange, event: Optional[FetchEvent] = None) -> Outcome:
        """
        Dispatch one request through the configured middleware.

        Args:
            exchange: The inbound request.
            event: Fetch event for cancellation and background work. A fresh
                one is created when omitted; callers that drain ``wait_until``
                work must pass their own, or use ``trace()``, which returns it.

        Returns:
            Outcome: The final outcome, ``Outcome.next()`` if nothing produced one.

        Raises:
            MiddlewareExecutionError: If a middleware raised.
            MiddlewareValidationError: If a middleware returned a non-Outcome.
            DispatchCancelledError: If the event was cancelled mid-dispatch.
        """
        result = await self.trace(exchange, event)
        return result.outcome

    async def trace(self, exchange: Exchange, event: Optional[FetchEvent] = None) -> DispatchResult:
        """
        Dispatch one request and return the outcome together with its trace.

        Args:
            exchange: The inbound request.
            event: Fetch event; a fresh one is created when omitted.

        Returns:
            DispatchResult: The final outcome, the dispatch trace and the
            event the dispatch ran with.
        """
        event = event or FetchEvent()
        # The reserved marker never reaches middleware, whoever set it.
        exchange = exchange.without_headers(self.settings.REDIRECT_MARKER_HEADER)
        path = exchange.path or "/"

        trace = DispatchTrace(request_id=exchange.request_id, path=path)
        self._logger.debug(f"Dispatching {exchange.method} {path} (request {exchange.request_id})")

        # Before hook
        trace.enter(DispatchState.BEFORE_HOOK)
        before = await run_global(DispatchPhase.BEFORE, exchange, event, self.config, trace, self.settings)
        if before.terminal:
            return self._finish(trace, self._bridge(exchange, before), before, event)

        # Path dispatch
        trace.enter(DispatchState.PATH_DISPATCH)
        outcome: Optional[Outcome] = None
        entries = self.config.matching_entries(path)
        for index, entry in enumerate(entries):
            trace.matched_patterns.append(entry.pattern)
            chain = await run_chain(
                exchange, entry.middlewares, outcome, event, pattern=entry.pattern, trace=trace, settings=self.settings
            )
            outcome = chain.outcome
            if chain.terminal:
                skipped = [e.pattern for e in entries[index + 1 :]]
                trace.skipped_patterns.extend(skipped)
                if skipped:
                    self._logger.debug(
                        f"Request {exchange.request_id}: '{entry.pattern}' returned {outcome.status}, "
                        f"skipping patterns {skipped}"
                    )
                break

        # After hook
        trace.enter(DispatchState.AFTER_HOOK)
        after = await run_global(DispatchPhase.AFTER, exchange, event, self.config, trace, self.settings)
        if after.terminal:
            return self._finish(trace, self._bridge(exchange, after), after, event)

        trace.mark_completed(DispatchState.RETURN)
        final = outcome if outcome is not None else Outcome.next()
        self._log_completion(trace, final)
        return DispatchResult(outcome=final, trace=trace, event=event)

    def get_dispatcher_info(self) -> Dict[str, Any]:
        """
        Describe the dispatcher configuration.

        Returns:
            Dict[str, Any]: Name, matcher, hooks and path entries.
        """
        return {
            "name": self.name,
            "type": type(self).__name__,
            "matcher": repr(self.config.matcher),
            "entries": [
                {"pattern": entry.pattern, "middlewares": entry.middleware_names} for entry in self.config.entries
            ],
            "hooks": {
                phase: get_middleware_name(hook) if hook is not None else None
                for phase, hook in (("before", self.config.before), ("after", self.config.after))
            },
            "redirect_marker_header": self.settings.REDIRECT_MARKER_HEADER,
        }

    def _bridge(self, exchange: Exchange, hook: HookResult) -> Outcome:
        return bridge(exchange, hook.outcome, hook.intent, self.settings.REDIRECT_MARKER_HEADER)

    def _finish(
        self, trace: DispatchTrace, outcome: Outcome, hook: HookResult, event: FetchEvent
    ) -> DispatchResult:
        state = DispatchState.ABORT_REDIRECT if hook.outcome.is_redirect else DispatchState.ABORT_RESPONSE
        trace.mark_completed(state)
        self._log_completion(trace, outcome)
        return DispatchResult(outcome=outcome, trace=trace, event=event)

    def _log_completion(self, trace: DispatchTrace, outcome: Outcome) -> None:
        self._logger.info(
            f"Request {trace.request_id} {trace.path} completed in {trace.get_execution_time_ms() or 0.0:.2f}ms: "
            f"{trace.final_state.value}, status {outcome.status}, "
            f"{len(trace.stages)} middleware executed"
        )
