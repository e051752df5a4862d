"""Schema-driven codec between typed filter mappings and URL query strings."""

from __future__ import annotations

from .builder import QueryBuilder, build_query
from .cleaning import clean_object, is_empty
from .coercion import coerce_value, stringify_value, to_iso8601
from .debounce import (
    DebouncedFunction,
    create_debounced_build_query,
    create_debounced_build_url,
    create_debounced_parse_query,
    debounce,
)
from .exceptions import (
    DebounceCancelledError,
    SchemaError,
    UrlFiltersError,
    ValidationError,
)
from .filters import merge_filters, reset_filters
from .kinds import FieldKind, Kind
from .options import (
    URL_BUILD_DEFAULTS,
    URL_PARSE_DEFAULTS,
    ArrayFormat,
    BuildOptions,
    CleanOptions,
    ParseOptions,
)
from .parser import QueryParser, parse_query
from .pydantic import PydanticFilterSchema, resolve_kind
from .query_params import QueryParams
from .schema import IFilterSchema, ensure_schema
from .serializers import (
    ArraySerializer,
    CommaSerializer,
    JsonSerializer,
    RepeatSerializer,
    resolve_array_serializer,
)
from .urls import (
    build_url,
    compose_url,
    get_filters_from_search,
    get_filters_from_url,
)

__all__ = [
    # Codec
    "QueryParser",
    "QueryBuilder",
    "parse_query",
    "build_query",
    "build_url",
    "compose_url",
    "get_filters_from_url",
    "get_filters_from_search",
    # Cleaning and filter helpers
    "clean_object",
    "is_empty",
    "merge_filters",
    "reset_filters",
    # Values
    "coerce_value",
    "stringify_value",
    "to_iso8601",
    # Schema
    "IFilterSchema",
    "PydanticFilterSchema",
    "ensure_schema",
    "resolve_kind",
    "FieldKind",
    "Kind",
    # Options
    "ArrayFormat",
    "CleanOptions",
    "ParseOptions",
    "BuildOptions",
    "URL_PARSE_DEFAULTS",
    "URL_BUILD_DEFAULTS",
    # Query representation
    "QueryParams",
    # Array serializers
    "ArraySerializer",
    "RepeatSerializer",
    "CommaSerializer",
    "JsonSerializer",
    "resolve_array_serializer",
    # Debounce
    "DebouncedFunction",
    "debounce",
    "create_debounced_parse_query",
    "create_debounced_build_query",
    "create_debounced_build_url",
    # Exceptions
    "UrlFiltersError",
    "ValidationError",
    "SchemaError",
    "DebounceCancelledError",
]
