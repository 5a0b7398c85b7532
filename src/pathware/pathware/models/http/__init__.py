# ABOUTME: HTTP exchange models package
# ABOUTME: Exports request/outcome value types, header and cookie containers and merge operations

from .headers import Headers, merge_headers_into
from .cookies import Cookie, CookieJar, merge_cookies_into
from .exchange import Exchange
from .outcome import Outcome
from .event import FetchEvent

__all__ = [
    "Headers",
    "merge_headers_into",
    "Cookie",
    "CookieJar",
    "merge_cookies_into",
    "Exchange",
    "Outcome",
    "FetchEvent",
]
