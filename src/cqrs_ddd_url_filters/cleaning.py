"""Object cleaning: trim string values and drop empty entries."""

from __future__ import annotations

from typing import TYPE_CHECKING, Any

if TYPE_CHECKING:
    from collections.abc import Mapping


def is_empty(value: Any) -> bool:
    """``None`` and blank strings are empty. ``False``, ``0`` and ``[]`` are not."""
    return value is None or (isinstance(value, str) and value.strip() == "")


def clean_object(
    data: Mapping[str, Any],
    *,
    drop_empty: bool = False,
    trim_strings: bool = False,
) -> dict[str, Any]:
    """Return a cleaned shallow copy of *data*.

    Each entry is handled on its own: strings are trimmed when
    *trim_strings* is set, then the entry is left out when *drop_empty* is
    set and the (trimmed) value is empty. Everything else passes through.
    """
    out: dict[str, Any] = {}
    for key, value in data.items():
        if trim_strings and isinstance(value, str):
            value = value.strip()
        if drop_empty and is_empty(value):
            continue
        out[key] = value
    return out
