# ABOUTME: Outcome model representing a candidate or final response
# ABOUTME: Single response variant with status, headers, cookies, body and pass-through flag

import json
from typing import Any, Optional

from pydantic import BaseModel, ConfigDict, Field, field_validator

from pathware.config.settings import REDIRECT_STATUSES, get_settings
from pathware.exceptions import ValidationException

from .cookies import CookieJar
from .headers import Headers


class Outcome(BaseModel):
    """
    Response side of one middleware invocation.

    Every middleware produces at most one Outcome; the dispatcher returns at
    most one to its caller. A pass-through Outcome (``Outcome.next()``) means
    "no opinion, proceed with the original request".
    """

    status: int = Field(default=200, ge=100, le=599, description="HTTP status code")
    headers: Headers = Field(default_factory=Headers, description="Response headers")
    cookies: CookieJar = Field(default_factory=CookieJar, description="Response cookies")
    body: Optional[Any] = Field(default=None, description="Response body")
    pass_through: bool = Field(default=False, description="Whether the request should continue unchanged")

    model_config = ConfigDict(arbitrary_types_allowed=True)

    @field_validator("headers", mode="before")
    @classmethod
    def validate_headers(cls, v: Any) -> Headers:
        if isinstance(v, Headers):
            return v
        return Headers(v)

    @field_validator("cookies", mode="before")
    @classmethod
    def validate_cookies(cls, v: Any) -> CookieJar:
        if isinstance(v, CookieJar):
            return v
        return CookieJar(v)

    # Factories

    @classmethod
    def next(cls, headers: Optional[Any] = None) -> "Outcome":
        """Pass-through outcome: continue with the request unchanged."""
        return cls(status=200, headers=headers, pass_through=True)

    @classmethod
    def redirect(cls, location: str, status: Optional[int] = None, headers: Optional[Any] = None) -> "Outcome":
        """
        Redirect outcome.

        Args:
            location: Target URL or path, stored in the ``location`` header.
            status: One of 301, 302, 303, 307, 308. Defaults to the
                ``DEFAULT_REDIRECT_STATUS`` setting (307).
            headers: Optional extra headers.

        Raises:
            ValidationException: If ``status`` is not a redirect code.
        """
        if status is None:
            status = get_settings().DEFAULT_REDIRECT_STATUS
        if status not in REDIRECT_STATUSES:
            raise ValidationException(
                f"Invalid redirect status {status}",
                code="INVALID_REDIRECT_STATUS",
                details={"status": status, "allowed": sorted(REDIRECT_STATUSES)},
            )
        outcome = cls(status=status, headers=headers)
        outcome.headers["location"] = location
        return outcome

    @classmethod
    def json_response(cls, data: Any, status: int = 200, headers: Optional[Any] = None) -> "Outcome":
        """JSON response; the body is the compact UTF-8 encoded document."""
        try:
            body = json.dumps(data, separators=(",", ":")).encode("utf-8")
        except (TypeError, ValueError) as e:
            raise ValidationException(
                f"Failed to serialize JSON body: {e}", code="INVALID_JSON_BODY", details={"type": type(data).__name__}
            ) from e
        outcome = cls(status=status, headers=headers, body=body)
        outcome.headers["content-type"] = "application/json"
        return outcome

    @classmethod
    def error(cls, status: int = 500, message: Optional[str] = None) -> "Outcome":
        """Error response with an optional plain-text message."""
        if status < 400:
            raise ValidationException(
                f"Invalid error status {status}", code="INVALID_ERROR_STATUS", details={"status": status}
            )
        outcome = cls(status=status, body=message)
        if message is not None:
            outcome.headers["content-type"] = "text/plain; charset=utf-8"
        return outcome

    # Classification

    @property
    def location(self) -> Optional[str]:
        return self.headers.get("location")

    @property
    def is_redirect(self) -> bool:
        return self.status in REDIRECT_STATUSES

    @property
    def is_error(self) -> bool:
        return self.status >= 400

    @property
    def is_terminal(self) -> bool:
        """Redirect and error outcomes end the phase that produced them."""
        return self.is_redirect or self.is_error
