"""QueryParams: ordered multimap of query-string pairs."""

from __future__ import annotations

from collections.abc import Iterable, Iterator, Mapping
from typing import Any
from urllib.parse import parse_qsl, urlencode


class QueryParams:
    """Ordered ``(key, value)`` pairs in the URL query-string model.

    A key may occur several times; the order of pairs is preserved.
    Percent-encoding is delegated to :mod:`urllib.parse`.

    Usage::

        params = QueryParams.from_string("?tags=a&tags=b")
        params.get_all("tags")  # ["a", "b"]
        params.set("page", "2")
        str(params)  # "tags=a&tags=b&page=2"
    """

    def __init__(self, pairs: Iterable[tuple[str, str]] | None = None) -> None:
        self._pairs: list[tuple[str, str]] = []
        for key, value in pairs or ():
            self.append(key, value)

    # ── Construction ─────────────────────────────────────────────

    @classmethod
    def from_string(cls, query: str) -> QueryParams:
        """Decode *query*; one leading ``?`` is optional."""
        if query.startswith("?"):
            query = query[1:]
        return cls(parse_qsl(query, keep_blank_values=True))

    @classmethod
    def coerce(cls, source: Any) -> QueryParams:
        """Normalise the supported parser inputs to ``QueryParams``.

        Accepts a query string, a ``QueryParams``, a multidict exposing
        ``multi_items()``, a mapping of key to string or list of strings,
        or an iterable of ``(key, value)`` pairs.
        """
        if isinstance(source, QueryParams):
            return source
        if isinstance(source, str):
            return cls.from_string(source)
        if source is None:
            return cls()
        if hasattr(source, "multi_items"):
            return cls(source.multi_items())
        if isinstance(source, Mapping):
            params = cls()
            for key, value in source.items():
                if isinstance(value, list | tuple):
                    for item in value:
                        params.append(key, item)
                else:
                    params.append(key, value)
            return params
        return cls(source)

    # ── Mutation ─────────────────────────────────────────────────

    def append(self, key: str, value: str) -> None:
        self._pairs.append((str(key), str(value)))

    def set(self, key: str, value: str) -> None:
        """Replace the first occurrence of *key* in place and drop the rest."""
        key, value = str(key), str(value)
        out: list[tuple[str, str]] = []
        replaced = False
        for k, v in self._pairs:
            if k != key:
                out.append((k, v))
            elif not replaced:
                out.append((key, value))
                replaced = True
        if not replaced:
            out.append((key, value))
        self._pairs = out

    def delete(self, key: str) -> None:
        self._pairs = [(k, v) for k, v in self._pairs if k != key]

    # ── Access ───────────────────────────────────────────────────

    def get(self, key: str) -> str | None:
        """First value for *key*, or ``None``."""
        for k, v in self._pairs:
            if k == key:
                return v
        return None

    def get_all(self, key: str) -> list[str]:
        return [v for k, v in self._pairs if k == key]

    def keys(self) -> list[str]:
        """Distinct keys in first-seen order."""
        return list(self.grouped())

    def grouped(self) -> dict[str, list[str]]:
        """Map each key to its values in encounter order."""
        groups: dict[str, list[str]] = {}
        for key, value in self._pairs:
            groups.setdefault(key, []).append(value)
        return groups

    def to_string(self) -> str:
        return urlencode(self._pairs)

    # ── Dunder ───────────────────────────────────────────────────

    def __iter__(self) -> Iterator[tuple[str, str]]:
        return iter(list(self._pairs))

    def __len__(self) -> int:
        return len(self._pairs)

    def __contains__(self, key: object) -> bool:
        return any(k == key for k, _ in self._pairs)

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, QueryParams):
            return NotImplemented
        return self._pairs == other._pairs

    __hash__ = None  # type: ignore[assignment]

    def __str__(self) -> str:
        return self.to_string()

    def __repr__(self) -> str:
        return f"QueryParams({self._pairs!r})"
