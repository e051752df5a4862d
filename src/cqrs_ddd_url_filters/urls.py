"""URL helpers: append built filters to a base URL and read filters from URLs."""

from __future__ import annotations

from typing import TYPE_CHECKING, Any
from urllib.parse import urlsplit

from .builder import build_query
from .options import URL_PARSE_DEFAULTS
from .parser import parse_query

if TYPE_CHECKING:
    from collections.abc import Mapping

    from .options import BuildOptions, ParseOptions


def compose_url(base_url: str, query: str) -> str:
    """Append *query* to *base_url*, respecting an existing ``?`` or ``&``."""
    if not query:
        return base_url
    if "?" in base_url:
        sep = "" if base_url.endswith(("?", "&")) else "&"
    else:
        sep = "?"
    return f"{base_url}{sep}{query}"


def build_url(
    base_url: str,
    schema: Any,
    filters: Mapping[str, Any],
    options: BuildOptions | None = None,
) -> str:
    """Build the query for *filters* and append it to *base_url*.

    ``build_url("/api/items", schema, {"tags": ["a", "b"]})`` returns
    ``"/api/items?tags=a&tags=b"``.
    """
    return compose_url(base_url, build_query(schema, filters, options).to_string())


def get_filters_from_url(
    schema: Any, url: str, options: ParseOptions = URL_PARSE_DEFAULTS
) -> dict[str, Any]:
    """Parse the filters in the query component of an absolute or relative URL."""
    return parse_query(schema, urlsplit(url).query, options)


def get_filters_from_search(
    schema: Any, search: str, options: ParseOptions = URL_PARSE_DEFAULTS
) -> dict[str, Any]:
    """Parse a raw search string such as ``"?page=2"``."""
    return parse_query(schema, search, options)
