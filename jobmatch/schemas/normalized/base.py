from __future__ import annotations

import types
from typing import Any, Union, get_args, get_origin

from pydantic import BaseModel, ConfigDict, ValidationInfo, field_validator, model_validator
from pydantic.alias_generators import to_camel


def _is_number(value: Any) -> bool:
    return isinstance(value, (int, float)) and not isinstance(value, bool)


def _is_model(annotation: Any) -> bool:
    return isinstance(annotation, type) and issubclass(annotation, BaseModel)


def _unwrap_optional(annotation: Any) -> Any:
    if get_origin(annotation) in (Union, types.UnionType):
        args = [arg for arg in get_args(annotation) if arg is not type(None)]
        if len(args) == 1:
            return args[0]
    return annotation


def _usable(annotation: Any, value: Any) -> bool:
    if annotation is str:
        return isinstance(value, str) or _is_number(value)
    if _is_model(annotation):
        return isinstance(value, (dict, annotation))
    if get_origin(annotation) is dict:
        return isinstance(value, dict)
    return True


def _loosen(annotation: Any, value: Any) -> tuple[bool, Any]:
    """Return ``(ok, value)`` with ``value`` bent toward ``annotation`` where possible."""
    annotation = _unwrap_optional(annotation)
    if get_origin(annotation) is list:
        (item_type,) = get_args(annotation) or (Any,)
        if isinstance(value, (str, dict)) or _is_number(value):
            value = [value]
        if not isinstance(value, list):
            return False, value
        return True, [item for item in value if _usable(item_type, item)]
    return _usable(annotation, value), value


class WireModel(BaseModel):
    """Base for entities exchanged with the model and the HTTP client.

    Attributes are snake_case, the JSON wire names camelCase. Model output is
    taken loosely: ``null`` values are dropped, a lone string or object where a
    list is expected becomes a one-item list, unusable list items are dropped
    and any other mistyped value falls back to the field's default.
    """

    model_config = ConfigDict(
        alias_generator=to_camel,
        populate_by_name=True,
        coerce_numbers_to_str=True,
    )

    @model_validator(mode="before")
    @classmethod
    def _drop_nulls(cls, data: Any) -> Any:
        if not isinstance(data, dict):
            return data
        clean: dict[str, Any] = {}
        for key, value in data.items():
            if value is None:
                continue
            if isinstance(value, list):
                value = [item for item in value if item is not None]
            clean[key] = value
        return clean

    @field_validator("*", mode="before")
    @classmethod
    def _loosen_field(cls, value: Any, info: ValidationInfo) -> Any:
        field = cls.model_fields[info.field_name]
        ok, value = _loosen(field.annotation, value)
        if not ok:
            return field.get_default(call_default_factory=True)
        return value
