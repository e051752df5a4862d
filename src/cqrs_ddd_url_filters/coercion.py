"""
Conversion between raw query-string values and typed filter values.

Coercion is best effort and never raises: a value that cannot be converted
is returned as the original string, and schema validation decides whether
it is acceptable.
"""

from __future__ import annotations

import datetime
import logging
import math
import re
from enum import Enum
from typing import Any

from .kinds import FieldKind, Kind

logger = logging.getLogger("cqrs_ddd.url_filters.coercion")

_TRUE_VALUES = frozenset({"1", "true", "yes"})
_FALSE_VALUES = frozenset({"0", "false", "no"})

# Plain decimal literals only: no underscores, no non-ASCII digits
_NUMBER_RE = re.compile(r"[+-]?(?:\d+\.?\d*|\.\d+)(?:[eE][+-]?\d+)?", re.ASCII)
_INTEGER_RE = re.compile(r"[+-]?\d+", re.ASCII)


# ---------------------------------------------------------------------------
# Parsing direction: str -> typed value
# ---------------------------------------------------------------------------


def coerce_value(kind: Kind, raw: Any) -> Any:
    """
    Convert *raw* to the kind declared by a schema field.

    Optional/nullable wrappers are unwrapped first. Array kinds coerce each
    item of a list with the element kind; a bare string for an array kind
    is returned unchanged.
    """
    kind = kind.unwrap()
    if kind.type is FieldKind.ARRAY:
        if isinstance(raw, list):
            return [coerce_value(kind.element, item) for item in raw]
        return raw
    if not isinstance(raw, str):
        return raw
    if kind.type is FieldKind.NUMBER:
        return _coerce_number(raw)
    if kind.type is FieldKind.BOOLEAN:
        return _coerce_boolean(raw)
    if kind.type is FieldKind.DATE:
        return _coerce_date(raw, date_only=kind.date_only)
    return raw


def _coerce_number(raw: str) -> Any:
    text = raw.strip()
    if not _NUMBER_RE.fullmatch(text):
        logger.debug("Cannot coerce %r to a number", raw)
        return raw
    try:
        number = int(text) if _INTEGER_RE.fullmatch(text) else float(text)
    except ValueError:
        # int() refuses literals over the interpreter's digit limit
        logger.debug("Cannot coerce %r to a number", raw)
        return raw
    if isinstance(number, float) and not math.isfinite(number):
        logger.debug("Number %r is not finite", raw)
        return raw
    return number


def _coerce_boolean(raw: str) -> Any:
    low = raw.strip().lower()
    if low in _TRUE_VALUES:
        return True
    if low in _FALSE_VALUES:
        return False
    logger.debug("Cannot coerce %r to a boolean", raw)
    return raw


def _coerce_date(raw: str, *, date_only: bool = False) -> Any:
    text = raw.strip()
    if date_only:
        try:
            return datetime.date.fromisoformat(text)
        except ValueError:
            pass
    if text[-1:] in ("Z", "z"):
        text = text[:-1] + "+00:00"
    try:
        value = datetime.datetime.fromisoformat(text)
    except ValueError:
        logger.debug("Cannot coerce %r to a date", raw)
        return raw
    if not date_only:
        return value
    if value.time() != datetime.time():
        logger.debug("Date %r carries a time of day", raw)
        return raw
    return value.date()


# ---------------------------------------------------------------------------
# Building direction: typed value -> str
# ---------------------------------------------------------------------------


def to_iso8601(value: datetime.date) -> str:
    """
    Render a date or datetime as ISO-8601.

    Aware datetimes are converted to UTC and rendered with millisecond
    precision and a ``Z`` suffix (``2024-01-01T00:00:00.000Z``). Naive
    datetimes keep their wall-clock time without an offset.
    """
    if not isinstance(value, datetime.datetime):
        return value.isoformat()
    if value.tzinfo is not None:
        value = value.astimezone(datetime.timezone.utc)
        return value.replace(tzinfo=None).isoformat(timespec="milliseconds") + "Z"
    return value.isoformat(timespec="milliseconds")


def stringify_value(value: Any, *, encode_date: bool = False) -> str:
    """Render a single filter value for the query string."""
    if isinstance(value, bool):
        return "true" if value else "false"
    if isinstance(value, Enum):
        return str(value.value)
    if encode_date and isinstance(value, datetime.date):
        return to_iso8601(value)
    return str(value)
