"""Field kinds: the declared type of a filter schema field."""

from __future__ import annotations

from dataclasses import dataclass
from enum import Enum


class FieldKind(str, Enum):
    """Tags for the supported field kinds."""

    STRING = "string"
    NUMBER = "number"
    BOOLEAN = "boolean"
    DATE = "date"
    ARRAY = "array"
    # Optional/nullable wrapper around another kind
    OPTIONAL = "optional"


@dataclass(frozen=True)
class Kind:
    """Tagged field kind.

    ``ARRAY`` and ``OPTIONAL`` kinds wrap an ``inner`` kind; the primitive
    kinds never do. A ``DATE`` kind with ``date_only`` set holds calendar
    dates without a time of day.

    Usage::

        Kind.array_of(Kind.number())
        Kind.optional(Kind.date())
    """

    type: FieldKind
    inner: Kind | None = None
    date_only: bool = False

    def __post_init__(self) -> None:
        wraps = self.type in (FieldKind.ARRAY, FieldKind.OPTIONAL)
        if wraps and self.inner is None:
            raise ValueError(f"{self.type.value} kind requires an inner kind")
        if not wraps and self.inner is not None:
            raise ValueError(f"{self.type.value} kind cannot wrap another kind")
        if self.date_only and self.type is not FieldKind.DATE:
            raise ValueError("only date kinds can be date-only")

    # ── Factory methods ──────────────────────────────────────────

    @classmethod
    def string(cls) -> Kind:
        return cls(FieldKind.STRING)

    @classmethod
    def number(cls) -> Kind:
        return cls(FieldKind.NUMBER)

    @classmethod
    def boolean(cls) -> Kind:
        return cls(FieldKind.BOOLEAN)

    @classmethod
    def date(cls, *, date_only: bool = False) -> Kind:
        return cls(FieldKind.DATE, date_only=date_only)

    @classmethod
    def array_of(cls, element: Kind) -> Kind:
        return cls(FieldKind.ARRAY, element)

    @classmethod
    def optional(cls, inner: Kind) -> Kind:
        return cls(FieldKind.OPTIONAL, inner)

    # ── Introspection ────────────────────────────────────────────

    def unwrap(self) -> Kind:
        """Strip every optional/nullable layer."""
        kind = self
        while kind.type is FieldKind.OPTIONAL and kind.inner is not None:
            kind = kind.inner
        return kind

    @property
    def is_optional(self) -> bool:
        return self.type is FieldKind.OPTIONAL

    @property
    def is_array(self) -> bool:
        return self.unwrap().type is FieldKind.ARRAY

    @property
    def element(self) -> Kind:
        """Element kind of an array, unwrapped; ``STRING`` for anything else."""
        kind = self.unwrap()
        if kind.type is FieldKind.ARRAY and kind.inner is not None:
            return kind.inner.unwrap()
        return Kind.string()
