# ABOUTME: Path pattern compiler and matcher used to select middleware chains
# ABOUTME: Supports literal segments, single/multi-segment wildcards and named parameters

"""Path pattern matching.

Patterns are compiled to anchored regular expressions once and cached:

    /api/users        literal segments
    /api/*            exactly one segment (``*`` inside a segment: ``/assets/*.css``)
    /docs/**          zero or more segments
    /users/:id        one segment captured as ``id``
    /files/:path*     zero or more segments captured as ``path`` (``+``: one or more)
    /posts/:slug?     optional segment

In ``prefix`` mode (the default) a pattern also matches every path below it on
a segment boundary, so ``/`` matches everything and ``/api`` matches
``/api/users`` but not ``/apis``. In ``exact`` mode the whole path must match,
with an optional trailing slash. ``**`` matches every path in both modes.
"""

import re
from dataclasses import dataclass, field
from functools import lru_cache
from typing import Dict, Literal, Optional, Tuple

from loguru import logger

from pathware.exceptions import PathPatternError
from pathware.interfaces.matching import AbstractPathMatcher

MatchMode = Literal["prefix", "exact"]

_MATCH_MODES = ("prefix", "exact")
_PARAM_SEGMENT = re.compile(r"^:([A-Za-z_][A-Za-z0-9_]*)([?*+]?)$")
_PARAM_TEMPLATES = {
    "": "/(?P<{name}>[^/]+)",
    "?": "(?:/(?P<{name}>[^/]+))?",
    "*": "(?P<{name}>(?:/[^/]+)*)",
    "+": "(?P<{name}>(?:/[^/]+)+)",
}
_MULTI_SEGMENT = "(?:/.*)?"
_TAILS = {"prefix": "(?:/.*)?$", "exact": "/?$"}


@dataclass(frozen=True)
class PathMatch:
    """Result of a successful match, with the captured parameters."""

    pattern: str
    path: str
    params: Dict[str, str] = field(default_factory=dict)


@dataclass(frozen=True)
class CompiledPattern:
    """A path pattern compiled to a regular expression."""

    pattern: str
    regex: "re.Pattern[str]" = field(repr=False)
    param_names: Tuple[str, ...]
    mode: MatchMode
    case_sensitive: bool

    def match(self, path: str) -> Optional[PathMatch]:
        m = self.regex.match(path or "/")
        if m is None:
            return None
        params = {}
        for name in self.param_names:
            value = m.group(name)
            if value is not None:
                params[name] = value.lstrip("/")
        return PathMatch(pattern=self.pattern, path=path or "/", params=params)

    def matches(self, path: str) -> bool:
        return self.regex.match(path or "/") is not None


def compile_pattern(pattern: str, mode: MatchMode = "prefix", case_sensitive: bool = False) -> CompiledPattern:
    """
    Compile a path pattern.

    Args:
        pattern: The path template. A missing leading ``/`` is added.
        mode: ``prefix`` or ``exact``.
        case_sensitive: Compare literal segments case-sensitively.

    Returns:
        CompiledPattern: The cached compiled pattern.

    Raises:
        PathPatternError: If the pattern is empty, malformed or the mode is unknown.
    """
    if not isinstance(pattern, str) or not pattern.strip():
        raise PathPatternError(
            "Path pattern must be a non-empty string", code="EMPTY_PATTERN", details={"pattern": repr(pattern)}
        )
    if mode not in _MATCH_MODES:
        raise PathPatternError(
            f"Unknown path match mode '{mode}'", code="INVALID_MATCH_MODE", details={"mode": mode}
        )
    return _compile(pattern.strip(), mode, bool(case_sensitive))


@lru_cache(maxsize=512)
def _compile(pattern: str, mode: MatchMode, case_sensitive: bool) -> CompiledPattern:
    normalized = pattern if pattern.startswith("/") else "/" + pattern
    pieces = []
    param_names: list[str] = []

    for segment in (s for s in normalized.split("/") if s):
        if segment == "**":
            pieces.append(_MULTI_SEGMENT)
        elif segment.startswith(":"):
            m = _PARAM_SEGMENT.match(segment)
            if m is None:
                raise PathPatternError(
                    f"Invalid parameter segment '{segment}' in pattern '{pattern}'",
                    code="INVALID_PARAMETER",
                    details={"pattern": pattern, "segment": segment},
                )
            name, modifier = m.groups()
            if name in param_names:
                raise PathPatternError(
                    f"Duplicate parameter '{name}' in pattern '{pattern}'",
                    code="DUPLICATE_PARAMETER",
                    details={"pattern": pattern, "parameter": name},
                )
            param_names.append(name)
            pieces.append(_PARAM_TEMPLATES[modifier].format(name=name))
        elif "**" in segment:
            raise PathPatternError(
                f"'**' must be a whole segment in pattern '{pattern}'",
                code="INVALID_WILDCARD",
                details={"pattern": pattern, "segment": segment},
            )
        elif segment == "*":
            pieces.append("/[^/]+")
        elif "*" in segment:
            pieces.append("/" + "[^/]*".join(re.escape(part) for part in segment.split("*")))
        else:
            pieces.append("/" + re.escape(segment))

    source = "^" + "".join(pieces) + _TAILS[mode]
    flags = 0 if case_sensitive else re.IGNORECASE
    try:
        regex = re.compile(source, flags)
    except re.error as e:
        raise PathPatternError(
            f"Pattern '{pattern}' does not compile: {e}", code="INVALID_PATTERN", details={"pattern": pattern}
        ) from e

    logger.bind(name=__name__).debug(f"Compiled path pattern '{pattern}' ({mode}) to {source}")
    return CompiledPattern(
        pattern=pattern, regex=regex, param_names=tuple(param_names), mode=mode, case_sensitive=case_sensitive
    )


def match(pattern: str, path: str, mode: MatchMode = "prefix", case_sensitive: bool = False) -> Optional[PathMatch]:
    """Match ``path`` against ``pattern`` and return the captured parameters, or None."""
    return compile_pattern(pattern, mode, case_sensitive).match(path)


def matches(pattern: str, path: str, mode: MatchMode = "prefix", case_sensitive: bool = False) -> bool:
    """Whether ``pattern`` matches ``path``."""
    return compile_pattern(pattern, mode, case_sensitive).matches(path)


class PatternPathMatcher(AbstractPathMatcher):
    """
    Default path matcher backed by ``compile_pattern``.

    ``validate`` is called for every pattern while the configuration loads, so
    per-request ``matches`` calls only ever see patterns that compile.
    """

    def __init__(self, mode: MatchMode = "prefix", case_sensitive: bool = False):
        if mode not in _MATCH_MODES:
            raise PathPatternError(
                f"Unknown path match mode '{mode}'", code="INVALID_MATCH_MODE", details={"mode": mode}
            )
        self.mode = mode
        self.case_sensitive = case_sensitive

    def validate(self, pattern: str) -> None:
        compile_pattern(pattern, self.mode, self.case_sensitive)

    def matches(self, pattern: str, path: str) -> bool:
        return compile_pattern(pattern, self.mode, self.case_sensitive).matches(path)

    def match(self, pattern: str, path: str) -> Optional[PathMatch]:
        return compile_pattern(pattern, self.mode, self.case_sensitive).match(path)

    def __repr__(self) -> str:
        return f"PatternPathMatcher(mode={self.mode}, case_sensitive={self.case_sensitive})"
