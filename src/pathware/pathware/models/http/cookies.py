# ABOUTME: Cookie model, cookie jar container and the cookie merge operation
# ABOUTME: Cookies are keyed by name; setting an existing name replaces it

from datetime import datetime, UTC
from typing import Any, Dict, Iterable, Iterator, Literal, Mapping, MutableMapping, Optional, Union

from pydantic import BaseModel, ConfigDict, Field, field_validator

_EPOCH = datetime.fromtimestamp(0, UTC)


class Cookie(BaseModel):
    """
    A single cookie.

    Request cookies normally carry only a name and a value; response cookies
    may carry the optional attributes.
    """

    name: str = Field(description="Cookie name")
    value: str = Field(default="", description="Cookie value")

    # Optional attributes
    path: Optional[str] = Field(default=None, description="Path attribute")
    domain: Optional[str] = Field(default=None, description="Domain attribute")
    max_age: Optional[int] = Field(default=None, description="Max-Age attribute in seconds")
    expires: Optional[datetime] = Field(default=None, description="Expires attribute")
    secure: bool = Field(default=False, description="Secure attribute")
    http_only: bool = Field(default=False, description="HttpOnly attribute")
    same_site: Optional[Literal["lax", "strict", "none"]] = Field(default=None, description="SameSite attribute")

    model_config = ConfigDict(frozen=True)

    @field_validator("name")
    @classmethod
    def validate_name(cls, v: str) -> str:
        v = v.strip()
        if not v:
            raise ValueError("Cookie name must not be empty")
        return v

    @field_validator("same_site", mode="before")
    @classmethod
    def validate_same_site_case_insensitive(cls, v: Any) -> Any:
        if isinstance(v, str):
            return v.lower().strip()
        return v

    @property
    def is_expired(self) -> bool:
        """Whether the cookie instructs the client to drop it."""
        if self.max_age is not None and self.max_age <= 0:
            return True
        return self.expires is not None and self.expires <= datetime.now(UTC)


CookieSource = Union["CookieJar", Mapping[str, Union[str, Cookie]], Iterable[Cookie]]


class CookieJar(MutableMapping[str, Cookie]):
    """
    Mapping of cookie name to Cookie.

    Assigning a plain string creates a cookie without attributes:
    ``jar["session"] = "abc"``.
    """

    def __init__(self, initial: Optional[CookieSource] = None):
        self._cookies: Dict[str, Cookie] = {}
        if initial is not None:
            merge_cookies_into(self, initial)

    def __getitem__(self, name: str) -> Cookie:
        return self._cookies[name]

    def __setitem__(self, name: str, value: Union[str, Cookie]) -> None:
        if isinstance(value, Cookie):
            if value.name != name:
                value = value.model_copy(update={"name": name})
        else:
            value = Cookie(name=name, value=str(value))
        self._cookies[name] = value

    def __delitem__(self, name: str) -> None:
        del self._cookies[name]

    def __iter__(self) -> Iterator[str]:
        return iter(self._cookies)

    def __len__(self) -> int:
        return len(self._cookies)

    def __repr__(self) -> str:
        pairs = ", ".join(f"{c.name}={c.value}" for c in self._cookies.values())
        return f"CookieJar({pairs})"

    def set(self, name_or_cookie: Union[str, Cookie], value: str = "", **attributes: Any) -> "CookieJar":
        """
        Upsert a cookie.

        Args:
            name_or_cookie: A Cookie, or the cookie name.
            value: Cookie value when a name is given.
            **attributes: Optional Cookie attributes when a name is given.

        Returns:
            CookieJar: self, for chaining.
        """
        if isinstance(name_or_cookie, Cookie):
            cookie = name_or_cookie
        else:
            cookie = Cookie(name=name_or_cookie, value=value, **attributes)
        self._cookies[cookie.name] = cookie
        return self

    def get_value(self, name: str, default: Optional[str] = None) -> Optional[str]:
        cookie = self._cookies.get(name)
        return cookie.value if cookie is not None else default

    def get_all(self) -> list[Cookie]:
        return list(self._cookies.values())

    def has(self, name: str) -> bool:
        return name in self._cookies

    def expire(self, name: str) -> "CookieJar":
        """Replace ``name`` with an empty, already expired cookie (response-side delete)."""
        self._cookies[name] = Cookie(name=name, value="", max_age=0, expires=_EPOCH)
        return self

    def copy(self) -> "CookieJar":
        return CookieJar(self)

    def to_dict(self) -> Dict[str, str]:
        return {name: cookie.value for name, cookie in self._cookies.items()}


def merge_cookies_into(target: CookieJar, source: Optional[CookieSource]) -> CookieJar:
    """
    Upsert every cookie of ``source`` into ``target`` by name.

    Args:
        target: CookieJar to update in place.
        source: A CookieJar, a mapping of name to value or Cookie, or an
            iterable of Cookies. ``None`` is a no-op.

    Returns:
        CookieJar: ``target``, for chaining.
    """
    if source is None:
        return target
    if isinstance(source, CookieJar):
        cookies: Iterable[Cookie] = source.get_all()
    elif isinstance(source, Mapping):
        cookies = [
            value if isinstance(value, Cookie) else Cookie(name=name, value=str(value))
            for name, value in source.items()
        ]
    else:
        cookies = source
    for cookie in cookies:
        target.set(cookie)
    return target
