"""
Options for cleaning, parsing and building filter query strings.

Options are immutable; derive variants with ``with_overrides``::

    opts = ParseOptions(coerce_types=True)
    comma = opts.with_overrides(array_format=ArrayFormat.COMMA)
"""

from __future__ import annotations

import dataclasses
import logging
from collections.abc import Mapping
from dataclasses import dataclass, field
from enum import Enum
from typing import Any, TypeVar

logger = logging.getLogger("cqrs_ddd.url_filters.options")

_OptionsT = TypeVar("_OptionsT", bound="CleanOptions")


class ArrayFormat(str, Enum):
    """Wire encodings for sequence-valued fields."""

    REPEAT = "repeat"  # ?tags=a&tags=b
    COMMA = "comma"  # ?tags=a,b
    JSON = "json"  # ?tags=["a","b"]

    @classmethod
    def parse(cls, value: ArrayFormat | str | None) -> ArrayFormat:
        """Return the matching format; unrecognised values fall back to REPEAT."""
        if isinstance(value, ArrayFormat):
            return value
        if value is None:
            return cls.REPEAT
        try:
            return cls(str(value).lower())
        except ValueError:
            logger.debug("Unknown array format %r, using %s", value, cls.REPEAT.value)
            return cls.REPEAT


def default_key_formats_factory() -> dict[str, ArrayFormat | str]:
    return {}


@dataclass(frozen=True)
class CleanOptions:
    """
    Object-cleaning switches.

    Attributes:
        drop_empty: Omit entries whose value is ``None`` or an empty
            (or whitespace-only) string.
        trim_strings: Strip surrounding whitespace from string values
            before the emptiness check.
    """

    drop_empty: bool = False
    trim_strings: bool = False

    def with_overrides(self: _OptionsT, **changes: Any) -> _OptionsT:
        """Return a copy with *changes* applied."""
        return dataclasses.replace(self, **changes)


@dataclass(frozen=True)
class _CodecOptions(CleanOptions):
    strip_unknown: bool = False
    array_format: ArrayFormat | str | None = None
    array_key_format: Mapping[str, ArrayFormat | str] = field(
        default_factory=default_key_formats_factory
    )

    def format_for(self, key: str) -> ArrayFormat:
        """Array format for *key*: per-field override, then call-level, then REPEAT."""
        override = self.array_key_format.get(key)
        if override:
            return ArrayFormat.parse(override)
        return ArrayFormat.parse(self.array_format)


@dataclass(frozen=True)
class ParseOptions(_CodecOptions):
    """
    Options for :func:`~cqrs_ddd_url_filters.parser.parse_query`.

    Attributes:
        strip_unknown: Drop query keys that are not schema fields.
        coerce_types: Convert raw strings to each field's declared kind.
        array_format: Default array format for every array field.
        array_key_format: Per-field array format overrides.
    """

    coerce_types: bool = False


@dataclass(frozen=True)
class BuildOptions(_CodecOptions):
    """
    Options for :func:`~cqrs_ddd_url_filters.builder.build_query`.

    Attributes:
        strip_unknown: Leave out keys that are not schema fields.
        encode_date: Render dates as ISO-8601 instead of ``str(value)``.
        array_format: Default array format for every array field.
        array_key_format: Per-field array format overrides.
    """

    encode_date: bool = False


# Presets for browser-facing URLs
URL_PARSE_DEFAULTS = ParseOptions(
    coerce_types=True,
    drop_empty=True,
    trim_strings=True,
    strip_unknown=True,
)

URL_BUILD_DEFAULTS = BuildOptions(
    encode_date=True,
    drop_empty=True,
    trim_strings=True,
    strip_unknown=True,
)
