"""IFilterSchema: the schema capability consumed by the query codec."""

from __future__ import annotations

from typing import TYPE_CHECKING, Any, Protocol, runtime_checkable

from pydantic import BaseModel

from .exceptions import SchemaError
from .pydantic import PydanticFilterSchema

if TYPE_CHECKING:
    from collections.abc import Mapping

    from .kinds import Kind


@runtime_checkable
class IFilterSchema(Protocol):
    """Describe a fixed set of named filter fields.

    The codec only asks for field kinds and delegates the final verdict on
    a mapping to :meth:`validate`. Schemas are never mutated.
    """

    def field_kind(self, name: str) -> Kind | None:
        """Declared kind of *name* (wrappers included), or ``None`` if unknown."""
        ...

    def is_array(self, name: str) -> bool:
        """``True`` when *name* is declared as an array, after unwrapping."""
        ...

    def element_kind(self, name: str) -> Kind:
        """Unwrapped element kind of the array field *name*."""
        ...

    def validate(self, data: Mapping[str, Any]) -> dict[str, Any]:
        """Return the conforming typed mapping.

        Must raise :class:`~cqrs_ddd_url_filters.exceptions.ValidationError`
        on failure.
        """
        ...


def ensure_schema(schema: Any) -> IFilterSchema:
    """Accept an ``IFilterSchema`` or a pydantic model class."""
    if isinstance(schema, IFilterSchema):
        return schema
    if isinstance(schema, type) and issubclass(schema, BaseModel):
        return PydanticFilterSchema(schema)
    raise SchemaError(
        f"Expected an IFilterSchema or a pydantic model class, got {schema!r}"
    )
