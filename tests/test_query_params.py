"""Tests for the QueryParams multimap."""

from __future__ import annotations

import pytest

from cqrs_ddd_url_filters.query_params import QueryParams


class MultiDict:
    """Minimal Starlette-style multidict."""

    def __init__(self, pairs):
        self._pairs = pairs

    def multi_items(self):
        return list(self._pairs)


class TestFromString:
    def test_leading_question_mark_optional(self) -> None:
        assert QueryParams.from_string("?a=1&b=2") == QueryParams.from_string("a=1&b=2")

    def test_repeated_keys_and_blank_values(self) -> None:
        params = QueryParams.from_string("tags=a&tags=b&q=")
        assert params.get_all("tags") == ["a", "b"]
        assert params.get("q") == ""

    def test_percent_decoding(self) -> None:
        params = QueryParams.from_string("q=hello+world&tags=a%2Cb")
        assert params.get("q") == "hello world"
        assert params.get("tags") == "a,b"

    def test_empty(self) -> None:
        assert len(QueryParams.from_string("")) == 0
        assert len(QueryParams.from_string("?")) == 0


class TestMutation:
    def test_set_replaces_first_in_place_and_drops_rest(self) -> None:
        params = QueryParams([("a", "1"), ("b", "2"), ("a", "3")])
        params.set("a", "x")
        assert list(params) == [("a", "x"), ("b", "2")]

    def test_set_appends_new_key(self) -> None:
        params = QueryParams([("a", "1")])
        params.set("b", "2")
        assert list(params) == [("a", "1"), ("b", "2")]

    def test_append_and_delete(self) -> None:
        params = QueryParams()
        params.append("a", "1")
        params.append("a", "2")
        params.append("b", "3")
        params.delete("a")
        assert list(params) == [("b", "3")]
        assert "a" not in params
        assert "b" in params


class TestAccess:
    def test_get_missing(self) -> None:
        assert QueryParams().get("x") is None
        assert QueryParams().get_all("x") == []

    def test_grouped_and_keys_order(self) -> None:
        params = QueryParams([("b", "1"), ("a", "2"), ("b", "3")])
        assert params.grouped() == {"b": ["1", "3"], "a": ["2"]}
        assert params.keys() == ["b", "a"]

    def test_to_string_encoding(self) -> None:
        params = QueryParams([("tags", "a,b"), ("q", "a b"), ("j", '["x"]')])
        assert params.to_string() == "tags=a%2Cb&q=a+b&j=%5B%22x%22%5D"
        assert str(params) == params.to_string()

    def test_empty_to_string(self) -> None:
        assert QueryParams().to_string() == ""


class TestCoerce:
    def test_string(self) -> None:
        assert QueryParams.coerce("?a=1").get("a") == "1"

    def test_same_instance(self) -> None:
        params = QueryParams([("a", "1")])
        assert QueryParams.coerce(params) is params

    def test_mapping_with_lists(self) -> None:
        params = QueryParams.coerce({"tags": ["a", "b"], "q": "x"})
        assert list(params) == [("tags", "a"), ("tags", "b"), ("q", "x")]

    def test_multidict(self) -> None:
        params = QueryParams.coerce(MultiDict([("t", "a"), ("t", "b")]))
        assert params.get_all("t") == ["a", "b"]

    def test_pairs(self) -> None:
        assert QueryParams.coerce([("a", "1"), ("a", "2")]).get_all("a") == ["1", "2"]

    def test_none(self) -> None:
        assert len(QueryParams.coerce(None)) == 0

    @pytest.mark.parametrize("other", [{"a": "1"}, "a=1"])
    def test_eq_only_with_query_params(self, other) -> None:
        assert QueryParams([("a", "1")]) != other
