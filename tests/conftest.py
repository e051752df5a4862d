"""Shared fixtures for url-filters tests."""

from __future__ import annotations

import pytest

from cqrs_ddd_url_filters import Kind, PydanticFilterSchema

from .schemas import ItemFilters, PagedFilters, PassthroughSchema


@pytest.fixture
def schema() -> PydanticFilterSchema:
    return PydanticFilterSchema(ItemFilters)


@pytest.fixture
def paged_schema() -> PydanticFilterSchema:
    return PydanticFilterSchema(PagedFilters)


@pytest.fixture
def passthrough() -> PassthroughSchema:
    return PassthroughSchema(
        {
            "name": Kind.optional(Kind.string()),
            "count": Kind.number(),
            "tags": Kind.optional(Kind.array_of(Kind.string())),
            "flags": Kind.array_of(Kind.optional(Kind.boolean())),
        }
    )
