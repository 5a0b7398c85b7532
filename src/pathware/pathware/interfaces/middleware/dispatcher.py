# ABOUTME: Abstract middleware dispatcher interface
# ABOUTME: Defines the contract for dispatching one request through the configured middleware

from abc import ABC, abstractmethod
from typing import TYPE_CHECKING, Any, Dict, Optional

if TYPE_CHECKING:
    from pathware.models.http import Exchange, FetchEvent, Outcome
    from pathware.models.middleware import DispatchResult


class AbstractMiddlewareDispatcher(ABC):
    """
    Abstract base class for middleware dispatchers.

    A dispatcher is stateless between requests: every call to ``dispatch``
    depends only on its arguments and the configuration it was built with.
    """

    @abstractmethod
    async def dispatch(self, exchange: "Exchange", event: Optional["FetchEvent"] = None) -> "Outcome":
        """
        Dispatch one request.

        Args:
            exchange: The inbound request. Never mutated.
            event: The fetch event; a fresh one is created when omitted.

        Returns:
            Outcome: The final outcome, ``Outcome.next()`` when nothing decided.

        Raises:
            MiddlewareExecutionError: If a middleware fails.
            DispatchCancelledError: If the event is cancelled mid-dispatch.
        """
        pass

    @abstractmethod
    async def trace(self, exchange: "Exchange", event: Optional["FetchEvent"] = None) -> "DispatchResult":
        """
        Dispatch one request and return the outcome with its dispatch trace.

        Args:
            exchange: The inbound request.
            event: The fetch event; a fresh one is created when omitted.

        Returns:
            DispatchResult: The final outcome and the trace of the dispatch.
        """
        pass

    @abstractmethod
    def get_dispatcher_info(self) -> Dict[str, Any]:
        """
        Describe the configured path entries and global hooks.

        Returns:
            Dict[str, Any]: Dispatcher name, entries and hooks.
        """
        pass

    async def __call__(self, exchange: "Exchange", event: Optional["FetchEvent"] = None) -> "Outcome":
        return await self.dispatch(exchange, event)
