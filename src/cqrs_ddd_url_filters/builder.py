"""QueryBuilder: filter mapping -> ordered query pairs."""

from __future__ import annotations

import logging
from typing import TYPE_CHECKING, Any

from .cleaning import clean_object
from .coercion import stringify_value
from .options import BuildOptions
from .query_params import QueryParams
from .schema import ensure_schema
from .serializers import resolve_array_serializer

if TYPE_CHECKING:
    from collections.abc import Mapping

    from .schema import IFilterSchema

logger = logging.getLogger("cqrs_ddd.url_filters.builder")


class QueryBuilder:
    """Build :class:`QueryParams` from a (partial) filter mapping."""

    def __init__(self, schema: Any, options: BuildOptions | None = None) -> None:
        self._schema: IFilterSchema = ensure_schema(schema)
        self._options = options or BuildOptions()

    @property
    def schema(self) -> IFilterSchema:
        return self._schema

    @property
    def options(self) -> BuildOptions:
        return self._options

    def build(self, filters: Mapping[str, Any]) -> QueryParams:
        """Return the query pairs for *filters*, not yet stringified.

        Cleaning runs first, so dropped values never reach array or date
        encoding. ``None`` values are never emitted.
        """
        opts = self._options
        params = QueryParams()
        cleaned = clean_object(
            filters, drop_empty=opts.drop_empty, trim_strings=opts.trim_strings
        )
        for key, value in cleaned.items():
            if value is None:
                continue
            kind = self._schema.field_kind(key)
            if kind is None:
                if not opts.strip_unknown:
                    self._add_unknown(params, key, value)
                continue
            if self._schema.is_array(key) and _is_sequence(value):
                serializer = resolve_array_serializer(opts.format_for(key))
                items = [self._render(item) for item in value]
                for pair_key, pair_value in serializer.serialize(key, items):
                    params.append(pair_key, pair_value)
                continue
            params.set(key, self._render(value))
        logger.debug(
            "Built %d query pair(s) from %d field(s)", len(params), len(cleaned)
        )
        return params

    def _add_unknown(self, params: QueryParams, key: str, value: Any) -> None:
        # Sequences repeat the key, matching how the parser groups unknown keys
        if _is_sequence(value):
            for item in value:
                params.append(key, self._render(item))
        else:
            params.set(key, self._render(value))

    def _render(self, value: Any) -> str:
        return stringify_value(value, encode_date=self._options.encode_date)


def _is_sequence(value: Any) -> bool:
    return isinstance(value, list | tuple)


def build_query(
    schema: Any, filters: Mapping[str, Any], options: BuildOptions | None = None
) -> QueryParams:
    """Build query pairs for *filters*; see :class:`QueryBuilder`."""
    return QueryBuilder(schema, options).build(filters)
