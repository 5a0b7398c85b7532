# ABOUTME: Unit tests for the Headers container and merge_headers_into
# ABOUTME: Verifies case-insensitive access, copying and last-writer-wins merge semantics

import pytest

from pathware.models.http import Headers, merge_headers_into


class TestHeaders:
    """Test cases for the Headers mapping."""

    @pytest.mark.unit
    def test_case_insensitive_access(self):
        headers = Headers({"Content-Type": "text/html"})

        assert headers["content-type"] == "text/html"
        assert headers["CONTENT-TYPE"] == "text/html"
        assert "Content-type" in headers
        assert list(headers) == ["content-type"]

    @pytest.mark.unit
    def test_values_are_stringified(self):
        headers = Headers()
        headers["Content-Length"] = 42

        assert headers["content-length"] == "42"

    @pytest.mark.unit
    def test_init_from_pairs(self):
        headers = Headers([("X-A", "1"), ("x-a", "2")])

        assert len(headers) == 1
        assert headers["x-a"] == "2"

    @pytest.mark.unit
    def test_delete_ignores_case(self):
        headers = Headers({"X-Token": "t"})
        del headers["x-TOKEN"]

        assert "x-token" not in headers
        assert len(headers) == 0

    @pytest.mark.unit
    def test_non_string_name_rejected(self):
        with pytest.raises(TypeError):
            Headers()[1] = "x"

    @pytest.mark.unit
    def test_non_string_membership_is_false(self):
        assert 1 not in Headers({"a": "b"})

    @pytest.mark.unit
    def test_copy_is_independent(self):
        original = Headers({"a": "1"})
        clone = original.copy()
        clone["b"] = "2"

        assert "b" not in original
        assert clone.to_dict() == {"a": "1", "b": "2"}

    @pytest.mark.unit
    def test_equality_with_plain_mapping(self):
        assert Headers({"A": "1"}) == {"a": "1"}


class TestMergeHeadersInto:
    """Test cases for merge_headers_into."""

    @pytest.mark.unit
    def test_source_wins_on_collision(self):
        target = Headers({"x-a": "old", "x-keep": "k"})

        result = merge_headers_into(target, {"X-A": "new", "x-b": "b"})

        assert result is target
        assert target.to_dict() == {"x-a": "new", "x-keep": "k", "x-b": "b"}

    @pytest.mark.unit
    def test_idempotent(self):
        source = Headers({"x-a": "1", "x-b": "2"})
        once = merge_headers_into(Headers({"x-c": "3"}), source)
        snapshot = once.to_dict()

        twice = merge_headers_into(once, source)

        assert twice.to_dict() == snapshot
        for name, value in source.items():
            assert twice[name] == value

    @pytest.mark.unit
    def test_none_source_is_noop(self):
        target = Headers({"a": "1"})

        assert merge_headers_into(target, None).to_dict() == {"a": "1"}

    @pytest.mark.unit
    def test_source_is_not_modified(self):
        source = Headers({"x-a": "1"})
        merge_headers_into(Headers({"x-b": "2"}), source)

        assert source.to_dict() == {"x-a": "1"}
