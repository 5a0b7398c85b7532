# ABOUTME: Unit tests for the global hook runner and the redirect bridge
# ABOUTME: Verifies intent recording, no-opinion handling and that bridging is pure and idempotent

import pytest

from pathware.implementations.memory.middleware import bridge, run_global
from pathware.models.http import Exchange, Outcome
from pathware.models.middleware import DispatchPhase, DispatchTrace, MiddlewareConfig, RedirectIntent
from tests.constants import TestCookies, TestPaths


def maintenance(exchange, prior, event):
    outcome = Outcome.redirect(TestPaths.MAINTENANCE)
    outcome.cookies.set(TestCookies.REASON_NAME, TestCookies.REASON_VALUE)
    return outcome


class TestRunGlobal:
    """Test cases for run_global."""

    @pytest.mark.asyncio
    async def test_absent_hook(self, event):
        config = MiddlewareConfig.from_mapping({})

        result = await run_global(DispatchPhase.BEFORE, Exchange(), event, config)

        assert result.outcome is None
        assert result.intent is None
        assert result.record is None
        assert result.terminal is False

    @pytest.mark.asyncio
    async def test_hook_runs_with_null_prior(self, event):
        priors = []

        def hook(exchange, prior, event):
            priors.append(prior)

        config = MiddlewareConfig.from_mapping({}, {"after": hook})

        await run_global(DispatchPhase.AFTER, Exchange(), event, config)

        assert priors == [None]

    @pytest.mark.asyncio
    @pytest.mark.parametrize("returned", [None, Outcome.next(headers={"x-ignored": "1"})])
    async def test_no_opinion_continues(self, event, returned):
        config = MiddlewareConfig.from_mapping({}, {"before": lambda e, p, ev: returned})
        trace = DispatchTrace(request_id="r", path="/")

        result = await run_global(DispatchPhase.BEFORE, Exchange(), event, config, trace)

        assert result.terminal is False
        assert result.outcome is None
        assert result.record is not None
        assert len(trace.stages) == 1
        assert trace.stages[0].phase is DispatchPhase.BEFORE

    @pytest.mark.asyncio
    async def test_redirect_records_intent(self, event):
        config = MiddlewareConfig.from_mapping({}, {"before": maintenance})

        result = await run_global(DispatchPhase.BEFORE, Exchange(path=TestPaths.FOO), event, config)

        assert result.terminal is True
        assert isinstance(result.intent, RedirectIntent)
        assert result.intent.location == TestPaths.MAINTENANCE
        assert result.intent.status == 307
        assert result.intent.cookies.to_dict() == {TestCookies.REASON_NAME: TestCookies.REASON_VALUE}
        assert result.intent.phase is DispatchPhase.BEFORE

    @pytest.mark.asyncio
    async def test_hook_does_not_touch_request(self, event):
        config = MiddlewareConfig.from_mapping({}, {"before": maintenance})
        exchange = Exchange(headers={"x-a": "1"})

        await run_global(DispatchPhase.BEFORE, exchange, event, config)

        assert exchange.headers.to_dict() == {"x-a": "1"}

    @pytest.mark.asyncio
    @pytest.mark.parametrize("returned", [Outcome.error(403, "forbidden"), Outcome(status=200, body="cached")])
    async def test_other_outcomes_are_terminal_without_intent(self, event, returned):
        config = MiddlewareConfig.from_mapping({}, {"after": lambda e, p, ev: returned})

        result = await run_global(DispatchPhase.AFTER, Exchange(), event, config)

        assert result.terminal is True
        assert result.intent is None
        assert result.outcome is returned

    @pytest.mark.asyncio
    async def test_redirect_without_location_has_no_intent(self, event):
        config = MiddlewareConfig.from_mapping({}, {"before": lambda e, p, ev: Outcome(status=302)})

        result = await run_global(DispatchPhase.BEFORE, Exchange(), event, config)

        assert result.terminal is True
        assert result.intent is None


class TestBridge:
    """Test cases for the redirect bridge."""

    @pytest.fixture
    def intent(self) -> RedirectIntent:
        outcome = maintenance(None, None, None)
        return RedirectIntent.from_outcome(outcome, DispatchPhase.BEFORE)

    @pytest.mark.unit
    def test_without_intent_returns_same_object(self):
        outcome = Outcome.error(500)
        exchange = Exchange()

        first = bridge(exchange, outcome)
        second = bridge(exchange, first)

        assert first is outcome
        assert second is outcome
        assert outcome.status == 500
        assert len(outcome.headers) == 0

    @pytest.mark.unit
    def test_builds_fresh_redirect(self, intent):
        hook_outcome = maintenance(None, None, None)
        exchange = Exchange(headers={"accept": "text/html"}, cookies={"session": "s1"})

        result = bridge(exchange, hook_outcome, intent)

        assert result is not hook_outcome
        assert result.status == 307
        assert result.location == TestPaths.MAINTENANCE
        assert result.headers["accept"] == "text/html"
        assert result.cookies.to_dict() == {"session": "s1", TestCookies.REASON_NAME: TestCookies.REASON_VALUE}

    @pytest.mark.unit
    def test_intent_cookies_override_request_cookies(self, intent):
        exchange = Exchange(cookies={TestCookies.REASON_NAME: "old"})

        result = bridge(exchange, Outcome.redirect("/elsewhere"), intent)

        assert result.cookies.get_value(TestCookies.REASON_NAME) == TestCookies.REASON_VALUE

    @pytest.mark.unit
    def test_marker_header_never_forwarded(self, intent):
        exchange = Exchange(headers={"X-Redirect-Url": "/loop", "x-a": "1"})

        result = bridge(exchange, Outcome.redirect("/x"), intent)

        assert "x-redirect-url" not in result.headers
        assert result.headers["x-a"] == "1"

    @pytest.mark.unit
    def test_custom_marker_header(self, intent):
        exchange = Exchange(headers={"x-carry": "/loop"})

        result = bridge(exchange, Outcome.redirect("/x"), intent, marker_header="x-carry")

        assert "x-carry" not in result.headers

    @pytest.mark.unit
    def test_request_location_header_is_replaced(self, intent):
        exchange = Exchange(headers={"location": "/stale"})

        result = bridge(exchange, Outcome.redirect("/x"), intent)

        assert result.location == TestPaths.MAINTENANCE

    @pytest.mark.unit
    def test_inputs_untouched(self, intent):
        exchange = Exchange(headers={"x-a": "1"}, cookies={"c": "v"})
        outcome = Outcome.redirect("/x")

        bridge(exchange, outcome, intent)

        assert exchange.headers.to_dict() == {"x-a": "1"}
        assert exchange.cookies.to_dict() == {"c": "v"}
        assert outcome.location == "/x"
        assert intent.cookies.to_dict() == {TestCookies.REASON_NAME: TestCookies.REASON_VALUE}

    @pytest.mark.unit
    def test_status_comes_from_intent(self):
        intent = RedirectIntent.from_outcome(Outcome.redirect("/moved", status=301), DispatchPhase.AFTER)

        assert bridge(Exchange(), Outcome.redirect("/moved", status=301), intent).status == 301
