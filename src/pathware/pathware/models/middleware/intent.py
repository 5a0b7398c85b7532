# ABOUTME: RedirectIntent model carried from the global hook runner to the redirect bridge
# ABOUTME: Typed replacement for smuggling the redirect target through a request header

from typing import Optional

from pydantic import BaseModel, ConfigDict, Field

from pathware.models.http import CookieJar, Outcome

from .trace import DispatchPhase


class RedirectIntent(BaseModel):
    """
    A global hook's request to redirect the client.

    Holds the redirect target, its status and the cookies the hook set, so the
    bridge can build the client-facing redirect without touching the request.
    """

    location: str = Field(description="Redirect target")
    status: int = Field(description="Redirect status code")
    cookies: CookieJar = Field(default_factory=CookieJar, description="Cookies set by the hook")
    phase: DispatchPhase = Field(description="Phase of the hook that redirected")

    model_config = ConfigDict(arbitrary_types_allowed=True, frozen=True)

    @classmethod
    def from_outcome(cls, outcome: Outcome, phase: DispatchPhase) -> Optional["RedirectIntent"]:
        """
        Build an intent from a hook's redirect outcome.

        Returns:
            RedirectIntent, or None when the outcome is not a redirect or has
            no ``location`` header.
        """
        if not outcome.is_redirect or not outcome.location:
            return None
        return cls(location=outcome.location, status=outcome.status, cookies=outcome.cookies.copy(), phase=phase)
