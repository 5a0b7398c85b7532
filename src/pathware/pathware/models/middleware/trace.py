# ABOUTME: Dispatch phase/state enums and the per-dispatch trace models
# ABOUTME: Records every middleware invocation and the state-machine path of one dispatch

from datetime import datetime, UTC
from enum import Enum
from typing import Any, Dict, List, Optional

from pydantic import BaseModel, ConfigDict, Field

from pathware.models.http import FetchEvent, Outcome


class DispatchPhase(str, Enum):
    """Phase of a dispatch in which a middleware runs."""

    BEFORE = "before"
    PATH = "path"
    AFTER = "after"


class DispatchState(str, Enum):
    """
    States of one dispatch.

    START -> BEFORE_HOOK -> {ABORT_* | PATH_DISPATCH} -> AFTER_HOOK -> {ABORT_* | RETURN}
    """

    START = "start"
    BEFORE_HOOK = "before_hook"
    PATH_DISPATCH = "path_dispatch"
    AFTER_HOOK = "after_hook"
    ABORT_REDIRECT = "abort_redirect"
    ABORT_RESPONSE = "abort_response"
    RETURN = "return"

    @property
    def is_terminal(self) -> bool:
        return self in (DispatchState.ABORT_REDIRECT, DispatchState.ABORT_RESPONSE, DispatchState.RETURN)


class OutcomeKind(str, Enum):
    """Classification of what a middleware produced."""

    NONE = "none"
    PASS_THROUGH = "pass_through"
    RESPONSE = "response"
    REDIRECT = "redirect"
    ERROR = "error"

    @classmethod
    def classify(cls, outcome: Optional[Outcome]) -> "OutcomeKind":
        if outcome is None:
            return cls.NONE
        if outcome.is_redirect:
            return cls.REDIRECT
        if outcome.is_error:
            return cls.ERROR
        if outcome.pass_through:
            return cls.PASS_THROUGH
        return cls.RESPONSE


class StageRecord(BaseModel):
    """One middleware invocation."""

    phase: DispatchPhase = Field(description="Dispatch phase of the invocation")
    middleware_name: str = Field(description="Name of the middleware")
    pattern: Optional[str] = Field(default=None, description="Matched path pattern, None for global hooks")
    kind: OutcomeKind = Field(description="Classification of the produced outcome")
    status: Optional[int] = Field(default=None, description="Status of the produced outcome")
    started_at: datetime = Field(default_factory=lambda: datetime.now(UTC), description="Invocation start")
    execution_time_ms: Optional[float] = Field(default=None, description="Invocation time in milliseconds")

    model_config = ConfigDict(use_enum_values=False)

    def get_summary(self) -> Dict[str, Any]:
        return {
            "phase": self.phase.value,
            "middleware_name": self.middleware_name,
            "pattern": self.pattern,
            "kind": self.kind.value,
            "status": self.status,
            "execution_time_ms": self.execution_time_ms,
        }


class DispatchTrace(BaseModel):
    """
    Trace of one dispatch.

    Created per request by the dispatcher and never shared between requests.
    """

    request_id: str = Field(description="Identifier of the dispatched request")
    path: str = Field(description="Resolved request path")

    started_at: datetime = Field(default_factory=lambda: datetime.now(UTC), description="Dispatch start")
    completed_at: Optional[datetime] = Field(default=None, description="Dispatch end")

    states: List[DispatchState] = Field(default_factory=lambda: [DispatchState.START], description="States visited")
    stages: List[StageRecord] = Field(default_factory=list, description="Middleware invocations in order")
    matched_patterns: List[str] = Field(default_factory=list, description="Patterns whose chain ran")
    skipped_patterns: List[str] = Field(
        default_factory=list, description="Matching patterns skipped after a terminal outcome"
    )

    def enter(self, state: DispatchState) -> None:
        self.states.append(state)

    def add_stage(self, record: StageRecord) -> None:
        self.stages.append(record)

    def mark_completed(self, state: DispatchState) -> None:
        """Record the terminal state and the completion time."""
        self.states.append(state)
        self.completed_at = datetime.now(UTC)

    @property
    def final_state(self) -> DispatchState:
        return self.states[-1]

    def executed_middleware(self, phase: Optional[DispatchPhase] = None) -> List[str]:
        """Names of the middleware invoked, optionally filtered by phase."""
        return [stage.middleware_name for stage in self.stages if phase is None or stage.phase == phase]

    def get_execution_time_ms(self) -> Optional[float]:
        if self.completed_at is None:
            return None
        return (self.completed_at - self.started_at).total_seconds() * 1000

    def get_summary(self) -> Dict[str, Any]:
        return {
            "request_id": self.request_id,
            "path": self.path,
            "states": [state.value for state in self.states],
            "final_state": self.final_state.value,
            "matched_patterns": list(self.matched_patterns),
            "skipped_patterns": list(self.skipped_patterns),
            "stages": [stage.get_summary() for stage in self.stages],
            "execution_time_ms": self.get_execution_time_ms(),
        }


class DispatchResult(BaseModel):
    """
    Final outcome of a dispatch together with its trace.

    ``event`` is the fetch event the dispatch ran with, the caller's or the one
    created for it. Background work registered with ``wait_until`` is awaited
    through ``event.drain()``.
    """

    outcome: Outcome
    trace: DispatchTrace
    event: FetchEvent
