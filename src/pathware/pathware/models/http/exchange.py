# ABOUTME: Exchange model representing one inbound HTTP request as it flows through the engine
# ABOUTME: Carries method, path, headers, cookies and an opaque body; derive() folds an outcome in

from typing import TYPE_CHECKING, Any, Optional
from uuid import uuid4

from pydantic import BaseModel, ConfigDict, Field, field_validator

from .cookies import CookieJar, merge_cookies_into
from .headers import Headers, merge_headers_into

if TYPE_CHECKING:
    from .outcome import Outcome


class Exchange(BaseModel):
    """
    Request side of one dispatch.

    An Exchange is created when the request arrives and discarded when the
    dispatch completes. The engine never mutates the caller's Exchange; each
    middleware stage receives a fresh one built by ``derive``.
    """

    request_id: str = Field(default_factory=lambda: str(uuid4()), description="Request identifier for tracing")

    method: str = Field(default="GET", description="HTTP method")
    path: str = Field(default="/", description="Absolute URL path")
    query: str = Field(default="", description="Raw query string without the leading '?'")

    headers: Headers = Field(default_factory=Headers, description="Request headers")
    cookies: CookieJar = Field(default_factory=CookieJar, description="Request cookies")

    body: Optional[Any] = Field(default=None, description="Opaque body handle, passed through untouched")
    referrer: Optional[str] = Field(default=None, description="Request referrer")

    model_config = ConfigDict(arbitrary_types_allowed=True)

    @field_validator("method", mode="before")
    @classmethod
    def validate_method(cls, v: Any) -> Any:
        if isinstance(v, str):
            return v.upper().strip()
        return v

    @field_validator("path", mode="before")
    @classmethod
    def validate_path(cls, v: Any) -> Any:
        if v is None or v == "":
            return "/"
        if isinstance(v, str) and not v.startswith("/"):
            return "/" + v
        return v

    @field_validator("query", mode="before")
    @classmethod
    def validate_query(cls, v: Any) -> Any:
        if isinstance(v, str):
            return v.lstrip("?")
        return v

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

    @property
    def url(self) -> str:
        """Path plus query string."""
        return f"{self.path}?{self.query}" if self.query else self.path

    def derive(self, outcome: "Outcome") -> "Exchange":
        """
        Build the Exchange the next middleware stage sees.

        Headers are copied and overlaid with the outcome's headers; cookies are
        copied and the outcome's cookies upserted. Method, path, query, body,
        referrer and request id carry over. ``self`` is left untouched.

        Args:
            outcome: The Outcome produced by the previous stage.

        Returns:
            Exchange: A new Exchange.
        """
        headers = merge_headers_into(self.headers.copy(), outcome.headers)
        cookies = merge_cookies_into(self.cookies.copy(), outcome.cookies)
        return self._rebuild(headers, cookies)

    def without_headers(self, *names: str) -> "Exchange":
        """Return ``self`` if none of ``names`` is present, else a copy without them."""
        present = [name for name in names if name in self.headers]
        if not present:
            return self
        headers = self.headers.copy()
        for name in present:
            del headers[name]
        return self._rebuild(headers, self.cookies.copy())

    def _rebuild(self, headers: Headers, cookies: CookieJar) -> "Exchange":
        return Exchange(
            request_id=self.request_id,
            method=self.method,
            path=self.path,
            query=self.query,
            headers=headers,
            cookies=cookies,
            body=self.body,
            referrer=self.referrer,
        )
