# ABOUTME: pytest configuration and shared fixtures for pathware tests
# ABOUTME: Configures per-marker timeouts and provides example middleware used across suites

import pytest

from pathware.config.settings import get_settings
from pathware.models.http import Exchange, FetchEvent, Outcome


def pytest_configure(config):
    """Configure pytest for pathware tests."""
    config.addinivalue_line("markers", "unit: Unit tests with 20-second timeout")
    config.addinivalue_line("markers", "integration: Integration tests with 60-second timeout")


def pytest_collection_modifyitems(config, items):
    """Modify test items to add appropriate timeouts based on test type."""
    for item in items:
        if item.get_closest_marker("timeout"):
            continue

        if item.get_closest_marker("unit"):
            item.add_marker(pytest.mark.timeout(20))
        elif item.get_closest_marker("integration"):
            item.add_marker(pytest.mark.timeout(60))


@pytest.fixture(autouse=True)
def fresh_settings(monkeypatch):
    """Keep environment-driven settings isolated between tests."""
    for name in ("PATH_MATCH_MODE", "DEFAULT_REDIRECT_STATUS", "REDIRECT_MARKER_HEADER", "TRACE_DISPATCH"):
        monkeypatch.delenv(name, raising=False)
    get_settings.cache_clear()
    yield
    get_settings.cache_clear()


@pytest.fixture
def event() -> FetchEvent:
    return FetchEvent()


@pytest.fixture
def demo_redirect():
    """
    Path-rewrite middleware: sends every request outside ``/demo`` to the
    same path under ``/demo`` and sets ``nemo=demo``. Requests already under
    ``/demo`` pass through, which is what keeps it from looping.
    """

    def demo_redirect(exchange: Exchange, prior, event) -> Outcome:
        if exchange.path.startswith("/demo"):
            return Outcome.next()
        outcome = Outcome.redirect("/demo" + exchange.path)
        outcome.cookies.set("nemo", "demo")
        return outcome

    return demo_redirect


@pytest.fixture
def header_setter():
    """Factory for middleware that set one response header and pass through."""

    def make(name: str, value: str):
        async def set_header(exchange: Exchange, prior, event) -> Outcome:
            return Outcome.next(headers={name: value})

        set_header.__name__ = f"set_{name}"
        return set_header

    return make


@pytest.fixture
def recorder():
    """Factory for middleware that records each call into a shared list."""

    def make(calls: list, label: str, result=None):
        def record(exchange: Exchange, prior, event):
            calls.append((label, exchange, prior))
            return result() if callable(result) else result

        record.__name__ = label
        return record

    return make
