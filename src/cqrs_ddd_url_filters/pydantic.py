"""PydanticFilterSchema: field kinds and validation from a pydantic model."""

from __future__ import annotations

import datetime
import types
from collections.abc import Mapping, Sequence
from decimal import Decimal
from enum import Enum
from typing import Annotated, Any, Literal, Union, get_args, get_origin

from pydantic import BaseModel
from pydantic import ValidationError as PydanticValidationError

from .exceptions import ValidationError
from .kinds import Kind

_NONE_TYPE = type(None)
_ARRAY_ORIGINS = (list, tuple, set, frozenset, Sequence)


class PydanticFilterSchema:
    """Filter schema backed by a pydantic model class.

    Kinds are resolved once from the model's field annotations::

        class ProductFilters(BaseModel):
            search: str | None = None
            price_min: int | None = None
            tags: list[str] | None = None

        schema = PydanticFilterSchema(ProductFilters)
        schema.is_array("tags")  # True

    Unknown keys follow the model's ``extra`` setting (ignored by default).
    ``strict`` is forwarded to ``model_validate``; ``None`` keeps the
    model's own setting.
    """

    def __init__(
        self, model: type[BaseModel], *, strict: bool | None = None
    ) -> None:
        self._model = model
        self._strict = strict
        self._kinds: dict[str, Kind] = {
            name: resolve_kind(info.annotation)
            for name, info in model.model_fields.items()
        }

    @property
    def model(self) -> type[BaseModel]:
        return self._model

    def field_kind(self, name: str) -> Kind | None:
        return self._kinds.get(name)

    def is_array(self, name: str) -> bool:
        kind = self._kinds.get(name)
        return kind is not None and kind.is_array

    def element_kind(self, name: str) -> Kind:
        kind = self._kinds.get(name)
        return kind.element if kind is not None else Kind.string()

    def validate(self, data: Mapping[str, Any]) -> dict[str, Any]:
        try:
            instance = self._model.model_validate(dict(data), strict=self._strict)
        except PydanticValidationError as exc:
            errors: dict[str, list[str]] = {}
            for error in exc.errors():
                loc = ".".join(str(p) for p in error.get("loc", ("__root__",)))
                msg = error.get("msg", "validation error")
                errors.setdefault(loc or "__root__", []).append(msg)
            raise ValidationError(errors) from exc
        # Unset fields that default to None are left out, like absent keys.
        dumped = instance.model_dump()
        supplied = instance.model_fields_set
        return {
            key: value
            for key, value in dumped.items()
            if key in supplied or value is not None
        }

    def __repr__(self) -> str:
        return f"PydanticFilterSchema({self._model.__name__})"


def resolve_kind(annotation: Any) -> Kind:
    """Map a type annotation to a :class:`Kind`."""
    origin = get_origin(annotation)
    args = get_args(annotation)

    if origin is Annotated:
        return resolve_kind(args[0])
    if origin is Union or origin is types.UnionType:
        members = [a for a in args if a is not _NONE_TYPE]
        inner = resolve_kind(members[0]) if len(members) == 1 else Kind.string()
        if len(members) < len(args):
            return Kind.optional(inner)
        return inner
    if origin is Literal:
        return _kind_of_values(args)
    if origin in _ARRAY_ORIGINS:
        return Kind.array_of(resolve_kind(args[0]) if args else Kind.string())
    if annotation in _ARRAY_ORIGINS:
        return Kind.array_of(Kind.string())
    if not isinstance(annotation, type):
        return Kind.string()
    if issubclass(annotation, Enum):
        return _kind_of_values([member.value for member in annotation])
    return _kind_of_type(annotation)


def _kind_of_type(tp: type) -> Kind:
    # bool before int: bool is an int subclass
    if issubclass(tp, bool):
        return Kind.boolean()
    if issubclass(tp, int | float | Decimal):
        return Kind.number()
    if issubclass(tp, datetime.datetime):
        return Kind.date()
    if issubclass(tp, datetime.date):
        return Kind.date(date_only=True)
    return Kind.string()


def _kind_of_values(values: Sequence[Any]) -> Kind:
    value_types = {type(v) for v in values}
    if len(value_types) == 1:
        return _kind_of_type(value_types.pop())
    if value_types and all(
        issubclass(t, int | float) and not issubclass(t, bool) for t in value_types
    ):
        return Kind.number()
    return Kind.string()
