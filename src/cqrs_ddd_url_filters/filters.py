"""Filter mapping helpers: merge and reset."""

from __future__ import annotations

from typing import TYPE_CHECKING, Any

from .cleaning import clean_object

if TYPE_CHECKING:
    from collections.abc import Mapping


def merge_filters(
    current: Mapping[str, Any],
    incoming: Mapping[str, Any],
    *,
    drop_empty: bool = False,
) -> dict[str, Any]:
    """Shallow merge where *incoming* wins per key; optionally drop empty values."""
    merged = {**current, **incoming}
    if drop_empty:
        return clean_object(merged, drop_empty=True)
    return merged


def reset_filters(
    schema: Any, defaults: Mapping[str, Any] | None = None
) -> dict[str, Any]:
    """Return a shallow copy of *defaults*, or an empty mapping.

    *schema* is accepted for call-site symmetry and is not consulted.
    """
    _ = schema
    return dict(defaults or {})
