# ABOUTME: Unit tests for Cookie, CookieJar and merge_cookies_into
# ABOUTME: Verifies upsert-by-name semantics, attributes, expiry and accepted merge sources

from datetime import datetime, timedelta, UTC

import pytest
from pydantic import ValidationError

from pathware.models.http import Cookie, CookieJar, merge_cookies_into
from tests.constants import TestCookies


class TestCookie:
    """Test cases for the Cookie model."""

    @pytest.mark.unit
    def test_defaults(self):
        cookie = Cookie(name="session", value="abc")

        assert cookie.path is None
        assert cookie.secure is False
        assert cookie.http_only is False
        assert cookie.same_site is None
        assert cookie.is_expired is False

    @pytest.mark.unit
    def test_empty_name_rejected(self):
        with pytest.raises(ValidationError):
            Cookie(name="  ", value="x")

    @pytest.mark.unit
    def test_same_site_normalized(self):
        assert Cookie(name="a", same_site="Strict").same_site == "strict"

    @pytest.mark.unit
    def test_frozen(self):
        cookie = Cookie(name="a", value="1")
        with pytest.raises(ValidationError):
            cookie.value = "2"

    @pytest.mark.unit
    def test_expiry(self):
        assert Cookie(name="a", max_age=0).is_expired
        assert Cookie(name="a", expires=datetime.now(UTC) - timedelta(seconds=1)).is_expired
        assert not Cookie(name="a", expires=datetime.now(UTC) + timedelta(hours=1)).is_expired


class TestCookieJar:
    """Test cases for the CookieJar mapping."""

    @pytest.mark.unit
    def test_set_and_get(self):
        jar = CookieJar()
        jar.set(TestCookies.DEMO_NAME, TestCookies.DEMO_VALUE, path="/", http_only=True)

        assert jar.has(TestCookies.DEMO_NAME)
        assert jar.get_value(TestCookies.DEMO_NAME) == TestCookies.DEMO_VALUE
        assert jar[TestCookies.DEMO_NAME].http_only is True
        assert jar.get_value("missing", "fallback") == "fallback"

    @pytest.mark.unit
    def test_set_returns_self_for_chaining(self):
        jar = CookieJar().set("a", "1").set("b", "2")

        assert jar.to_dict() == {"a": "1", "b": "2"}

    @pytest.mark.unit
    def test_set_replaces_existing_name(self):
        jar = CookieJar({"a": "1"})
        jar.set("a", "2")

        assert len(jar) == 1
        assert jar.get_value("a") == "2"

    @pytest.mark.unit
    def test_item_assignment_accepts_string_or_cookie(self):
        jar = CookieJar()
        jar["plain"] = "v"
        jar["typed"] = Cookie(name="other", value="w")

        assert jar["plain"].value == "v"
        assert jar["typed"].name == "typed"
        assert jar.get_value("typed") == "w"

    @pytest.mark.unit
    def test_delete(self):
        jar = CookieJar({"a": "1"})
        del jar["a"]

        assert not jar.has("a")

    @pytest.mark.unit
    def test_expire(self):
        jar = CookieJar({"session": "abc"})
        jar.expire("session")

        assert jar.has("session")
        assert jar["session"].value == ""
        assert jar["session"].is_expired

    @pytest.mark.unit
    def test_copy_is_independent(self):
        jar = CookieJar({"a": "1"})
        clone = jar.copy()
        clone.set("b", "2")

        assert not jar.has("b")

    @pytest.mark.unit
    def test_repr(self):
        assert repr(CookieJar({"a": "1"})) == "CookieJar(a=1)"


class TestMergeCookiesInto:
    """Test cases for merge_cookies_into."""

    @pytest.mark.unit
    def test_upsert_by_name(self):
        target = CookieJar({"a": "old", "keep": "k"})

        result = merge_cookies_into(target, CookieJar({"a": "new", "b": "b"}))

        assert result is target
        assert target.to_dict() == {"a": "new", "keep": "k", "b": "b"}

    @pytest.mark.unit
    def test_accepts_mapping_and_iterable(self):
        target = CookieJar()
        merge_cookies_into(target, {"m": "1"})
        merge_cookies_into(target, [Cookie(name="i", value="2")])

        assert target.to_dict() == {"m": "1", "i": "2"}

    @pytest.mark.unit
    def test_attributes_survive_merge(self):
        target = CookieJar()
        merge_cookies_into(target, [Cookie(name="s", value="1", secure=True, max_age=60)])

        assert target["s"].secure is True
        assert target["s"].max_age == 60

    @pytest.mark.unit
    def test_idempotent_and_none_is_noop(self):
        source = CookieJar({"a": "1"})
        target = merge_cookies_into(CookieJar(), source)
        merge_cookies_into(target, source)
        merge_cookies_into(target, None)

        assert target.to_dict() == {"a": "1"}
