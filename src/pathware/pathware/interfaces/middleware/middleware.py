# ABOUTME: Abstract middleware interface and the middleware function type
# ABOUTME: Plain callables and AbstractMiddleware subclasses are interchangeable in a chain

from abc import ABC, abstractmethod
from typing import TYPE_CHECKING, Any, Awaitable, Callable, Optional, Union

if TYPE_CHECKING:
    from pathware.models.http import Exchange, FetchEvent, Outcome

MiddlewareFunction = Callable[
    ["Exchange", Optional["Outcome"], "FetchEvent"],
    Union[Optional["Outcome"], Awaitable[Optional["Outcome"]]],
]


class AbstractMiddleware(ABC):
    """
    Abstract base class for class-based middleware.

    Any callable ``(exchange, prior_outcome, event) -> Outcome | None`` (sync
    or async) is a middleware. Subclassing is only needed when the middleware
    keeps configuration, and gives it a stable name for logs and traces.
    """

    def __init__(self, name: Optional[str] = None):
        """
        Initialize middleware.

        Args:
            name: Name used in logs and dispatch traces. Defaults to the class name.
        """
        self.name = name or self.__class__.__name__

    @abstractmethod
    async def process(
        self, exchange: "Exchange", outcome: Optional["Outcome"], event: "FetchEvent"
    ) -> Optional["Outcome"]:
        """
        Process the request.

        Args:
            exchange: The request as seen by this stage, including the header
                and cookie changes of every earlier stage in the chain.
            outcome: The running outcome of this path entry, or None.
            event: The fetch event carrying cancellation.

        Returns:
            Outcome for a decision, ``Outcome.next()`` to pass through, or None
            for no opinion.

        Raises:
            Exception: Failures propagate; the engine does not catch or retry them.
        """
        pass

    async def __call__(
        self, exchange: "Exchange", outcome: Optional["Outcome"], event: "FetchEvent"
    ) -> Optional["Outcome"]:
        return await self.process(exchange, outcome, event)

    def __repr__(self) -> str:
        return f"{self.__class__.__name__}(name={self.name})"


def get_middleware_name(middleware: Any) -> str:
    """Best-effort display name for a middleware callable."""
    name = getattr(middleware, "name", None)
    if isinstance(name, str) and name:
        return name
    name = getattr(middleware, "__name__", None) or getattr(middleware, "__qualname__", None)
    if name:
        return name
    return middleware.__class__.__name__
