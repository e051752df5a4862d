"""Tests for QueryBuilder / build_query."""

from __future__ import annotations

import datetime as dt

import pytest

from cqrs_ddd_url_filters import (
    ArrayFormat,
    BuildOptions,
    ParseOptions,
    QueryBuilder,
    build_query,
    parse_query,
)

UTC = dt.timezone.utc


class TestScalars:
    def test_renders_scalars(self, schema) -> None:
        params = build_query(
            schema, {"search": "a b", "price_min": 10, "rating": 4.5, "active": False}
        )
        assert params.to_string() == "search=a+b&price_min=10&rating=4.5&active=false"

    def test_key_order_follows_input(self, schema) -> None:
        params = build_query(schema, {"name": "x", "age": 1, "search": "y"})
        assert params.keys() == ["name", "age", "search"]

    def test_none_is_never_emitted(self, schema) -> None:
        assert build_query(schema, {"name": None, "other": None}).to_string() == ""

    def test_drop_empty_with_trim(self, schema) -> None:
        options = BuildOptions(drop_empty=True, trim_strings=True)
        assert build_query(schema, {"search": "  "}, options).to_string() == ""

    def test_trim_only_keeps_empty_value(self, schema) -> None:
        options = BuildOptions(trim_strings=True)
        assert build_query(schema, {"search": "  "}, options).to_string() == "search="

    def test_scalar_field_given_a_string_for_array(self, schema) -> None:
        assert build_query(schema, {"tags": "solo"}).get_all("tags") == ["solo"]


class TestDates:
    def test_encode_date(self, schema) -> None:
        when = dt.datetime(2024, 1, 1, tzinfo=UTC)
        params = build_query(schema, {"created_after": when}, BuildOptions(encode_date=True))
        assert params.get("created_after") == "2024-01-01T00:00:00.000Z"

    def test_without_encode_date(self, schema) -> None:
        when = dt.datetime(2024, 1, 1, tzinfo=UTC)
        params = build_query(schema, {"created_after": when})
        assert params.get("created_after") == "2024-01-01 00:00:00+00:00"

    def test_dates_in_arrays(self, passthrough) -> None:
        when = dt.datetime(2024, 1, 1, tzinfo=UTC)
        params = build_query(
            passthrough, {"tags": [when, "x"]}, BuildOptions(encode_date=True)
        )
        assert params.get_all("tags") == ["2024-01-01T00:00:00.000Z", "x"]


class TestArrays:
    def test_repeat_default(self, schema) -> None:
        assert build_query(schema, {"tags": ["a", "b"]}).to_string() == "tags=a&tags=b"

    def test_comma(self, schema) -> None:
        options = BuildOptions(array_format=ArrayFormat.COMMA)
        assert build_query(schema, {"tags": ["a", "b"]}, options).to_string() == (
            "tags=a%2Cb"
        )

    def test_json(self, schema) -> None:
        params = build_query(
            schema, {"tags": ["a", "b"]}, BuildOptions(array_format="json")
        )
        assert params.get("tags") == '["a","b"]'
        assert params.to_string() == "tags=%5B%22a%22%2C%22b%22%5D"

    def test_per_field_override(self, schema) -> None:
        options = BuildOptions(array_format="json", array_key_format={"scores": "comma"})
        params = build_query(schema, {"tags": ["a"], "scores": [1, 2]}, options)
        assert list(params) == [("tags", '["a"]'), ("scores", "1,2")]

    def test_unknown_format_falls_back_to_repeat(self, schema) -> None:
        options = BuildOptions(array_format="brackets")
        assert build_query(schema, {"tags": ["a", "b"]}, options).get_all("tags") == [
            "a",
            "b",
        ]

    def test_empty_array_is_kept_by_cleaning(self, schema) -> None:
        options = BuildOptions(drop_empty=True, array_format="json")
        assert build_query(schema, {"tags": []}, options).get("tags") == "[]"

    def test_tuple_items(self, schema) -> None:
        assert build_query(schema, {"tags": ("a", "b")}).get_all("tags") == ["a", "b"]


class TestUnknownKeys:
    def test_included_by_default(self, schema) -> None:
        params = build_query(schema, {"name": "John", "unknown": "value"})
        assert params.get("name") == "John"
        assert params.get("unknown") == "value"

    def test_stripped(self, schema) -> None:
        params = build_query(
            schema, {"name": "John", "unknown": "value"}, BuildOptions(strip_unknown=True)
        )
        assert params.get("name") == "John"
        assert params.get("unknown") is None

    def test_sequence_repeats_key(self, schema) -> None:
        params = build_query(schema, {"extra": ["a", "b"], "flag": True})
        assert params.to_string() == "extra=a&extra=b&flag=true"


class TestRoundTrip:
    @pytest.mark.parametrize(
        "filters",
        [
            {"search": "hello world", "age": 30, "active": True},
            {"name": "a&b=c", "rating": 2.5, "active": False},
            {"sort_by": "newest", "price_min": 0},
        ],
    )
    def test_scalars(self, schema, filters) -> None:
        query = build_query(schema, filters).to_string()
        assert parse_query(schema, query, ParseOptions(coerce_types=True)) == filters

    def test_encoded_dates(self, schema) -> None:
        filters = {"created_after": dt.datetime(2024, 3, 4, 5, 6, 7, tzinfo=UTC)}
        query = build_query(schema, filters, BuildOptions(encode_date=True)).to_string()
        assert parse_query(schema, query, ParseOptions(coerce_types=True)) == filters


def test_builder_exposes_schema_and_options(schema) -> None:
    builder = QueryBuilder(schema, BuildOptions(encode_date=True))
    assert builder.schema is schema
    assert builder.options.encode_date is True
