"""QueryParser: query string -> validated filter mapping."""

from __future__ import annotations

import logging
from typing import TYPE_CHECKING, Any

from .cleaning import clean_object
from .coercion import coerce_value
from .options import ParseOptions
from .query_params import QueryParams
from .schema import ensure_schema
from .serializers import resolve_array_serializer

if TYPE_CHECKING:
    from .schema import IFilterSchema

logger = logging.getLogger("cqrs_ddd.url_filters.parser")


class QueryParser:
    """Parse query strings into filter mappings validated by a schema.

    Pipeline: group raw values by key, decode arrays and coerce values per
    the schema's field kinds, clean the interim mapping, then hand it to
    the schema for validation. Validation errors propagate unchanged.
    """

    def __init__(self, schema: Any, options: ParseOptions | None = None) -> None:
        """
        Initialize QueryParser.

        Args:
            schema: An ``IFilterSchema`` or a pydantic model class.
            options: Parse options; defaults to ``ParseOptions()``.
        """
        self._schema: IFilterSchema = ensure_schema(schema)
        self._options = options or ParseOptions()

    @property
    def schema(self) -> IFilterSchema:
        return self._schema

    @property
    def options(self) -> ParseOptions:
        return self._options

    def parse(self, source: Any) -> dict[str, Any]:
        """Return the validated mapping for *source*.

        *source* is a query string (leading ``?`` optional) or anything
        :meth:`QueryParams.coerce` accepts.

        Raises:
            ValidationError: The schema rejected the cleaned mapping.
        """
        params = QueryParams.coerce(source)
        interim = self._decode(params)
        cleaned = clean_object(
            interim,
            drop_empty=self._options.drop_empty,
            trim_strings=self._options.trim_strings,
        )
        logger.debug(
            "Parsed %d query key(s) into %d field(s)", len(interim), len(cleaned)
        )
        return self._schema.validate(cleaned)

    def _decode(self, params: QueryParams) -> dict[str, Any]:
        interim: dict[str, Any] = {}
        for key, entries in params.grouped().items():
            kind = self._schema.field_kind(key)
            if kind is None:
                if not self._options.strip_unknown:
                    interim[key] = entries[0] if len(entries) == 1 else entries
                continue
            if self._schema.is_array(key):
                interim[key] = self._decode_array(key, entries)
                continue
            # Last occurrence wins for scalar fields
            raw = entries[-1]
            interim[key] = (
                coerce_value(kind, raw) if self._options.coerce_types else raw
            )
        return interim

    def _decode_array(self, key: str, entries: list[str]) -> list[Any]:
        serializer = resolve_array_serializer(self._options.format_for(key))
        items = serializer.deserialize(key, entries)
        if not self._options.coerce_types:
            return items
        element = self._schema.element_kind(key)
        return [coerce_value(element, item) for item in items]


def parse_query(
    schema: Any, source: Any, options: ParseOptions | None = None
) -> dict[str, Any]:
    """Parse *source* against *schema*; see :class:`QueryParser`."""
    return QueryParser(schema, options).parse(source)
