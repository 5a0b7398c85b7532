# ABOUTME: Memory-based middleware engine package
# ABOUTME: Executor, chain runner, global hooks, dispatcher and the create_middleware factory

from .executor import ExecutionResult, accumulate_headers, execute_middleware
from .chain import ChainResult, run_chain
from .hooks import HookResult, bridge, run_global
from .dispatcher import InMemoryMiddlewareDispatcher
from .factory import create_middleware

__all__ = [
    "ExecutionResult",
    "accumulate_headers",
    "execute_middleware",
    "ChainResult",
    "run_chain",
    "HookResult",
    "bridge",
    "run_global",
    "InMemoryMiddlewareDispatcher",
    "create_middleware",
]
