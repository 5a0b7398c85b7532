# ABOUTME: Test constants for the pathware test suite
# ABOUTME: Shared paths, patterns, cookies and timeouts used across unit and integration tests

import os
from typing import Final


class TestTimeouts:
    """Configurable timeout constants for different test scenarios."""

    QUICK_OPERATION: Final[float] = float(os.getenv("TEST_QUICK_TIMEOUT", "0.1"))
    STANDARD_OPERATION: Final[float] = float(os.getenv("TEST_STANDARD_TIMEOUT", "0.5"))
    SLOW_MIDDLEWARE_DELAY: Final[float] = float(os.getenv("TEST_SLOW_MIDDLEWARE_DELAY", "5.0"))


class TestPaths:
    """Request paths used in dispatch tests."""

    ROOT: Final[str] = "/"
    FOO: Final[str] = "/foo"
    DEMO_FOO: Final[str] = "/demo/foo"
    API_USERS: Final[str] = "/api/users"
    MAINTENANCE: Final[str] = "/maintenance"
    UNMATCHED: Final[str] = "/nowhere/at/all"


class TestPatterns:
    """Path patterns used in matcher and dispatch tests."""

    CATCH_ALL: Final[str] = "**"
    ROOT: Final[str] = "/"
    API_WILDCARD: Final[str] = "/api/*"
    API_USERS: Final[str] = "/api/users"
    USER_BY_ID: Final[str] = "/users/:id"


class TestCookies:
    """Cookie names and values used in redirect tests."""

    DEMO_NAME: Final[str] = "nemo"
    DEMO_VALUE: Final[str] = "demo"
    REASON_NAME: Final[str] = "reason"
    REASON_VALUE: Final[str] = "down"


# Prevent pytest from trying to collect these as test classes
TestTimeouts.__test__ = False
TestPaths.__test__ = False
TestPatterns.__test__ = False
TestCookies.__test__ = False
