# ABOUTME: Engine configuration composed on top of the base application settings
# ABOUTME: Path matching mode, redirect defaults, reserved marker header and error policy

from functools import lru_cache
from typing import Literal

from pydantic import Field, field_validator

from ._base import BasePathwareSettings

REDIRECT_STATUSES = frozenset({301, 302, 303, 307, 308})


class PathwareSettings(BasePathwareSettings):
    """Represents the complete configuration for the middleware engine.

    Inherits application identity, environment and logging settings from
    `BasePathwareSettings` and adds the knobs the dispatcher reads.

    Attributes:
        PATH_MATCH_MODE: ``prefix`` mounts a pattern on its path and everything
            below it; ``exact`` requires the whole path to match.
        PATH_MATCH_CASE_SENSITIVE: Whether literal segments are compared case-sensitively.
        DEFAULT_REDIRECT_STATUS: Status used by ``Outcome.redirect`` when none is given.
        REDIRECT_MARKER_HEADER: Header name reserved for the redirect bridge. Stripped
            from every request the dispatcher sees and never forwarded.
        CATCH_MIDDLEWARE_ERRORS: Whether the handler returned by ``create_middleware``
            turns a middleware failure into a generic 500 outcome.
        TRACE_DISPATCH: Emit a debug log line for every middleware invocation.
    """

    PATH_MATCH_MODE: Literal["prefix", "exact"] = Field(
        default="prefix",
        description="How path patterns are anchored against request paths.",
    )
    PATH_MATCH_CASE_SENSITIVE: bool = Field(
        default=False,
        description="Compare literal path segments case-sensitively.",
    )
    DEFAULT_REDIRECT_STATUS: int = Field(
        default=307,
        description="Status code used for redirects built without an explicit status.",
    )
    REDIRECT_MARKER_HEADER: str = Field(
        default="x-redirect-url",
        description="Internal carry key reserved for the redirect bridge.",
    )
    CATCH_MIDDLEWARE_ERRORS: bool = Field(
        default=True,
        description="Convert middleware failures into a single generic 500 outcome.",
    )
    TRACE_DISPATCH: bool = Field(
        default=False,
        description="Log every middleware invocation at debug level.",
    )

    @field_validator("PATH_MATCH_MODE", mode="before")
    @classmethod
    def validate_match_mode_case_insensitive(cls, v: str) -> str:
        """Validate PATH_MATCH_MODE with case-insensitive normalization."""
        if isinstance(v, str):
            return v.lower().strip()
        return v

    @field_validator("DEFAULT_REDIRECT_STATUS")
    @classmethod
    def validate_redirect_status(cls, v: int) -> int:
        """Only the HTTP redirect codes are accepted."""
        if v not in REDIRECT_STATUSES:
            raise ValueError(f"Invalid redirect status {v}. Must be one of {sorted(REDIRECT_STATUSES)}.")
        return v

    @field_validator("REDIRECT_MARKER_HEADER", mode="before")
    @classmethod
    def validate_marker_header(cls, v: str) -> str:
        """The marker is stored lower-cased and must be an ``x-`` extension header."""
        if isinstance(v, str):
            v = v.lower().strip()
            if not v.startswith("x-") or len(v) <= 2:
                raise ValueError(f"Invalid marker header '{v}'. Must be an 'x-' prefixed header name.")
        return v


@lru_cache
def get_settings() -> PathwareSettings:
    """Provides a singleton instance of the engine settings.

    The `lru_cache` ensures the environment and `.env` file are read once.
    Tests that change the environment call ``get_settings.cache_clear()``.

    Returns:
        A single, cached instance of the PathwareSettings class.
    """
    return PathwareSettings()
