# ABOUTME: Middleware models package
# ABOUTME: Exports configuration, redirect intent and dispatch trace models

from .trace import DispatchPhase, DispatchState, OutcomeKind, StageRecord, DispatchTrace, DispatchResult
from .intent import RedirectIntent
from .config import PathEntry, MiddlewareConfig, HOOK_PHASES

__all__ = [
    "DispatchPhase",
    "DispatchState",
    "OutcomeKind",
    "StageRecord",
    "DispatchTrace",
    "DispatchResult",
    "RedirectIntent",
    "PathEntry",
    "MiddlewareConfig",
    "HOOK_PHASES",
]
