# ABOUTME: Middleware configuration models: path entries, global hooks and the path matcher
# ABOUTME: Normalizes the caller's path map at load time and rejects invalid configuration

from typing import Any, Callable, Dict, List, Mapping, Optional, Tuple

from pydantic import BaseModel, ConfigDict, Field, model_validator

from pathware.components.matching import PatternPathMatcher
from pathware.config.settings import PathwareSettings, get_settings
from pathware.exceptions import MiddlewareConfigurationError
from pathware.interfaces.matching import AbstractPathMatcher
from pathware.interfaces.middleware import get_middleware_name

from .trace import DispatchPhase

HOOK_PHASES = (DispatchPhase.BEFORE, DispatchPhase.AFTER)


def _normalize_chain(pattern: str, value: Any) -> Tuple[Callable[..., Any], ...]:
    """Turn 'one middleware or a list of them' into a non-empty tuple."""
    if callable(value):
        chain: Tuple[Any, ...] = (value,)
    elif isinstance(value, (list, tuple)):
        chain = tuple(value)
    else:
        raise MiddlewareConfigurationError(
            f"Middleware for pattern '{pattern}' must be a callable or a list of callables",
            code="INVALID_MIDDLEWARE",
            details={"pattern": pattern, "type": type(value).__name__},
        )
    if not chain:
        raise MiddlewareConfigurationError(
            f"Middleware list for pattern '{pattern}' is empty",
            code="EMPTY_MIDDLEWARE_LIST",
            details={"pattern": pattern},
        )
    for index, middleware in enumerate(chain):
        if not callable(middleware):
            raise MiddlewareConfigurationError(
                f"Middleware #{index} for pattern '{pattern}' is not callable",
                code="INVALID_MIDDLEWARE",
                details={"pattern": pattern, "index": index, "type": type(middleware).__name__},
            )
    return chain


class PathEntry(BaseModel):
    """A path pattern and the ordered, non-empty chain of middleware bound to it."""

    pattern: str = Field(description="Path pattern")
    middlewares: Tuple[Callable[..., Any], ...] = Field(description="Middleware chain, run in order")

    model_config = ConfigDict(frozen=True, arbitrary_types_allowed=True)

    @model_validator(mode="before")
    @classmethod
    def normalize_middlewares(cls, data: Any) -> Any:
        if isinstance(data, dict) and "middlewares" in data:
            data = dict(data)
            data["middlewares"] = _normalize_chain(data.get("pattern", "?"), data["middlewares"])
        return data

    @property
    def middleware_names(self) -> List[str]:
        return [get_middleware_name(m) for m in self.middlewares]


class MiddlewareConfig(BaseModel):
    """
    Normalized engine configuration.

    Path entries keep the order of the caller's mapping. Every pattern is
    validated by the matcher when the configuration is built, so a bad pattern
    fails at setup rather than per request.
    """

    entries: Tuple[PathEntry, ...] = Field(default=(), description="Path entries in evaluation order")
    before: Optional[Callable[..., Any]] = Field(default=None, description="Global hook run before path dispatch")
    after: Optional[Callable[..., Any]] = Field(default=None, description="Global hook run after path dispatch")
    matcher: AbstractPathMatcher = Field(default_factory=PatternPathMatcher, description="Path matcher")

    model_config = ConfigDict(frozen=True, arbitrary_types_allowed=True)

    @model_validator(mode="after")
    def validate_patterns(self) -> "MiddlewareConfig":
        for entry in self.entries:
            self.matcher.validate(entry.pattern)
        return self

    @classmethod
    def from_mapping(
        cls,
        path_map: Optional[Mapping[str, Any]] = None,
        global_hooks: Optional[Mapping[str, Any]] = None,
        matcher: Optional[AbstractPathMatcher] = None,
        settings: Optional[PathwareSettings] = None,
    ) -> "MiddlewareConfig":
        """
        Build a configuration from the caller's path map and global hooks.

        Args:
            path_map: Pattern -> middleware or non-empty list of middleware.
            global_hooks: Optional ``{"before": mw, "after": mw}``.
            matcher: Path matcher. Defaults to a PatternPathMatcher built from settings.
            settings: Engine settings. Defaults to ``get_settings()``.

        Returns:
            MiddlewareConfig: The normalized configuration.

        Raises:
            MiddlewareConfigurationError: For an invalid map, chain or hook phase.
            PathPatternError: For a pattern the matcher rejects.
        """
        settings = settings or get_settings()
        if matcher is None:
            matcher = PatternPathMatcher(
                mode=settings.PATH_MATCH_MODE, case_sensitive=settings.PATH_MATCH_CASE_SENSITIVE
            )

        if path_map is None:
            path_map = {}
        if not isinstance(path_map, Mapping):
            raise MiddlewareConfigurationError(
                "Path map must be a mapping of pattern to middleware",
                code="INVALID_PATH_MAP",
                details={"type": type(path_map).__name__},
            )

        entries = []
        for pattern, middlewares in path_map.items():
            if not isinstance(pattern, str):
                raise MiddlewareConfigurationError(
                    "Path map keys must be pattern strings",
                    code="INVALID_PATTERN_KEY",
                    details={"key": repr(pattern)},
                )
            entries.append(PathEntry(pattern=pattern, middlewares=middlewares))

        hooks: Dict[str, Any] = {}
        for phase, hook in (global_hooks or {}).items():
            if phase not in {p.value for p in HOOK_PHASES}:
                raise MiddlewareConfigurationError(
                    f"Unknown global hook phase '{phase}'",
                    code="INVALID_HOOK_PHASE",
                    details={"phase": phase, "allowed": [p.value for p in HOOK_PHASES]},
                )
            if hook is None:
                continue
            if not callable(hook):
                raise MiddlewareConfigurationError(
                    f"Global '{phase}' hook is not callable",
                    code="INVALID_MIDDLEWARE",
                    details={"phase": phase, "type": type(hook).__name__},
                )
            hooks[phase] = hook

        return cls(entries=tuple(entries), matcher=matcher, **hooks)

    def hook(self, phase: DispatchPhase) -> Optional[Callable[..., Any]]:
        """The global hook registered for ``phase``, or None."""
        if phase == DispatchPhase.BEFORE:
            return self.before
        if phase == DispatchPhase.AFTER:
            return self.after
        return None

    def matching_entries(self, path: str) -> List[PathEntry]:
        """Every entry whose pattern matches ``path``, in configuration order."""
        return [entry for entry in self.entries if self.matcher.matches(entry.pattern, path)]
