# ABOUTME: NoOp middleware dispatcher for testing and minimal setups
# ABOUTME: Satisfies the dispatcher interface and always lets the request through

from typing import Any, Dict, Optional

from loguru import logger

from pathware.interfaces.middleware import AbstractMiddlewareDispatcher
from pathware.models.http import Exchange, FetchEvent, Outcome
from pathware.models.middleware import DispatchResult, DispatchState, DispatchTrace


class NoOpMiddlewareDispatcher(AbstractMiddlewareDispatcher):
    """
    No-operation implementation of the middleware dispatcher.

    Runs no middleware and returns ``Outcome.next()`` for every request. Useful
    as a baseline in tests and where middleware is switched off.
    """

    def __init__(self, name: str = "NoOpMiddlewareDispatcher"):
        self.name = name
        self._logger = logger.bind(name=f"{__name__}.{self.name}")
        self._logger.debug(f"NoOp middleware dispatcher '{name}' initialized")

    async def dispatch(self, exchange: Exchange, event: Optional[FetchEvent] = None) -> Outcome:
        self._logger.debug(f"NoOp: passing {exchange.method} {exchange.path} through")
        return Outcome.next()

    async def trace(self, exchange: Exchange, event: Optional[FetchEvent] = None) -> DispatchResult:
        event = event or FetchEvent()
        trace = DispatchTrace(request_id=exchange.request_id, path=exchange.path or "/")
        trace.mark_completed(DispatchState.RETURN)
        return DispatchResult(outcome=await self.dispatch(exchange, event), trace=trace, event=event)

    def get_dispatcher_info(self) -> Dict[str, Any]:
        return {"name": self.name, "type": type(self).__name__, "entries": [], "hooks": {"before": None, "after": None}}
