"""ArraySerializer: pluggable wire encodings for array fields (repeat, comma, JSON)."""

from __future__ import annotations

import json
import logging
from typing import TYPE_CHECKING, Any, ClassVar

from .options import ArrayFormat

if TYPE_CHECKING:
    from collections.abc import Sequence

logger = logging.getLogger("cqrs_ddd.url_filters.serializers")


class ArraySerializer:
    """Base for array serializers.

    ``serialize`` turns ordered string items into query pairs;
    ``deserialize`` turns the raw values collected for one key back into
    ordered string items. Deserializing never raises.
    """

    format: ClassVar[ArrayFormat]

    def serialize(self, key: str, values: Sequence[str]) -> list[tuple[str, str]]:
        raise NotImplementedError

    def deserialize(self, key: str, entries: Sequence[str]) -> list[str]:
        raise NotImplementedError


class RepeatSerializer(ArraySerializer):
    """One pair per item, key repeated: ``tags=a&tags=b``."""

    format = ArrayFormat.REPEAT

    def serialize(self, key: str, values: Sequence[str]) -> list[tuple[str, str]]:
        return [(key, value) for value in values]

    def deserialize(self, key: str, entries: Sequence[str]) -> list[str]:
        return list(entries)


class CommaSerializer(ArraySerializer):
    """Single comma-joined pair: ``tags=a,b``.

    Only the first raw value is read; an empty first value decodes to ``[]``
    rather than ``[""]``.
    """

    format = ArrayFormat.COMMA

    def serialize(self, key: str, values: Sequence[str]) -> list[tuple[str, str]]:
        return [(key, ",".join(values))]

    def deserialize(self, key: str, entries: Sequence[str]) -> list[str]:
        if not entries or not entries[0]:
            return []
        return entries[0].split(",")


class JsonSerializer(ArraySerializer):
    """Single JSON array literal: ``tags=["a","b"]``.

    Malformed JSON, or JSON that is not an array, decodes to ``[]``.
    """

    format = ArrayFormat.JSON

    def serialize(self, key: str, values: Sequence[str]) -> list[tuple[str, str]]:
        return [(key, json.dumps(list(values), separators=(",", ":")))]

    def deserialize(self, key: str, entries: Sequence[str]) -> list[str]:
        payload = entries[0] if entries else "[]"
        try:
            data = json.loads(payload)
        except (ValueError, RecursionError):
            logger.debug("Malformed JSON array for %r: %r", key, payload)
            return []
        if not isinstance(data, list):
            logger.debug("JSON value for %r is not an array: %r", key, payload)
            return []
        return [_item_to_str(item) for item in data]


def _item_to_str(item: Any) -> str:
    if isinstance(item, str):
        return item
    return json.dumps(item, separators=(",", ":"))


_SERIALIZERS: dict[ArrayFormat, ArraySerializer] = {
    ArrayFormat.REPEAT: RepeatSerializer(),
    ArrayFormat.COMMA: CommaSerializer(),
    ArrayFormat.JSON: JsonSerializer(),
}


def resolve_array_serializer(fmt: ArrayFormat | str | None = None) -> ArraySerializer:
    """Return the serializer for *fmt*; unknown or missing formats use repeat."""
    return _SERIALIZERS[ArrayFormat.parse(fmt)]
