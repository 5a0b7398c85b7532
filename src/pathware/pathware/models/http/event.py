# ABOUTME: FetchEvent model, the cancellation and background-work handle passed to middleware
# ABOUTME: The engine checks cancellation before every middleware invocation

import asyncio
from datetime import datetime, UTC
from typing import Any, Awaitable, List, Optional
from uuid import uuid4

from loguru import logger
from pydantic import BaseModel, Field, PrivateAttr

from pathware.exceptions import DispatchCancelledError


class FetchEvent(BaseModel):
    """
    Per-request event handle.

    The surrounding runtime owns cancellation: it calls ``cancel()`` (or
    cancels the asyncio task running the dispatch) and every pending
    middleware invocation observes it. Middleware may register background
    work with ``wait_until``; the runtime awaits it with ``drain`` after the
    response is sent.
    """

    id: str = Field(default_factory=lambda: str(uuid4()), description="Unique event identifier")
    timestamp: datetime = Field(default_factory=lambda: datetime.now(UTC), description="Event creation timestamp")

    is_cancelled: bool = Field(default=False, description="Whether the runtime cancelled this request")
    cancel_reason: Optional[str] = Field(default=None, description="Why the request was cancelled")

    _pending: List[Any] = PrivateAttr(default_factory=list)

    def cancel(self, reason: Optional[str] = None) -> None:
        """Cancel the in-flight dispatch."""
        self.is_cancelled = True
        self.cancel_reason = reason

    def raise_if_cancelled(self) -> None:
        """
        Raise if the event was cancelled.

        Raises:
            DispatchCancelledError: If ``cancel()`` was called.
        """
        if self.is_cancelled:
            raise DispatchCancelledError(
                "Dispatch cancelled",
                code="DISPATCH_CANCELLED",
                details={"event_id": self.id, "reason": self.cancel_reason},
            )

    def wait_until(self, awaitable: Awaitable[Any]) -> None:
        """
        Schedule background work that must finish after the response is produced.

        Must be called from a running event loop.
        """
        self._pending.append(asyncio.ensure_future(awaitable))

    @property
    def pending_count(self) -> int:
        return len(self._pending)

    async def drain(self) -> List[BaseException]:
        """
        Await all background work registered with ``wait_until``.

        Returns:
            List[BaseException]: The exceptions raised by failed tasks, in
            registration order. Each failure is also logged.
        """
        pending, self._pending = self._pending, []
        if not pending:
            return []
        results = await asyncio.gather(*pending, return_exceptions=True)
        errors = [result for result in results if isinstance(result, BaseException)]
        for error in errors:
            logger.bind(name=__name__).error(
                "Background task failed", event_id=self.id, error=str(error), exc_info=error
            )
        return errors
