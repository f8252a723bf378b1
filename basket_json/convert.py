"""
Typed conversion of parsed values.

Turns the dynamic value produced by the parser into a Pydantic model (or any
other type a Pydantic TypeAdapter understands). Because the input may be
truncated, required model fields are either reported as missing or filled
with None, depending on validate_required_fields. Filling applies at every
depth, so models nested in other models or in lists are relaxed too.
"""

from __future__ import annotations

import logging
import types
from functools import lru_cache
from typing import Annotated, Any, Dict, List, Optional, Set, Type, TypeVar, Union, get_args, get_origin

from pydantic import BaseModel, Field, TypeAdapter, ValidationError, create_model

from basket_json.errors import ConversionError, MissingFieldsError, NullValueError
from basket_json.types import JsonValue

logger = logging.getLogger(__name__)

T = TypeVar("T")


def _is_model(target: Any) -> bool:
    return isinstance(target, type) and get_origin(target) is None and issubclass(target, BaseModel)


def _target_name(target: Any) -> str:
    return getattr(target, "__name__", repr(target))


def missing_required_fields(model: Type[BaseModel], data: Dict[str, Any]) -> List[str]:
    """
    List required fields of ``model`` that are absent from ``data``.

    Fields are looked up by alias when they have one.

    Args:
        model: Pydantic model class
        data: Parsed object

    Returns:
        Missing field names, in declaration order
    """
    missing = []
    for name, field in model.model_fields.items():
        if not field.is_required():
            continue
        key = field.alias or name
        if key not in data:
            missing.append(key)
    return missing


_RELAXING: Set[type] = set()


def relax_annotation(annotation: Any) -> Any:
    """
    Rewrite ``annotation`` so every model inside it is its partial model.

    Models nested in generics (``List[Item]``, ``Optional[Address]``,
    ``Dict[str, Item]``) are replaced in place; anything without a model
    in it is returned unchanged.
    """
    if _is_model(annotation):
        return partial_model(annotation)

    args = get_args(annotation)
    if not args:
        return annotation

    relaxed = tuple(relax_annotation(arg) for arg in args)
    if all(new is old for new, old in zip(relaxed, args)):
        return annotation

    origin = get_origin(annotation)
    if origin is Union or origin is types.UnionType:
        return Union[relaxed]
    if origin is Annotated:
        return Annotated[relaxed]
    return origin[relaxed]


@lru_cache(maxsize=None)
def partial_model(model: Type[BaseModel]) -> Type[BaseModel]:
    """
    Derive a subclass of ``model`` whose fields all accept None.

    Used to validate objects that were cut off before every field arrived.
    Required fields default to None, and nested models (directly or inside
    lists, dicts and optionals) are replaced by their own partial models.
    The result is still an instance of ``model``.

    A model that refers to itself keeps its original type at the inner
    reference.
    """
    if model in _RELAXING or not model.model_fields:
        return model

    _RELAXING.add(model)
    try:
        overrides: Dict[str, Any] = {}
        for name, field in model.model_fields.items():
            field_kwargs: Dict[str, Any] = {"alias": field.alias} if field.alias else {}
            if field.is_required():
                field_kwargs["default"] = None
            elif field.default_factory is not None:
                field_kwargs["default_factory"] = field.default_factory
            else:
                field_kwargs["default"] = field.default
            overrides[name] = (Optional[relax_annotation(field.annotation)], Field(**field_kwargs))
    finally:
        _RELAXING.discard(model)

    return create_model(f"Partial{model.__name__}", __base__=model, **overrides)


def convert_value(
    value: JsonValue,
    target: Type[T],
    validate_required_fields: bool = False,
) -> T:
    """
    Convert a parsed value into ``target``.

    Args:
        value: Value returned by IncompleteJsonParser.current_value()
        target: Pydantic model class or other TypeAdapter-compatible type
        validate_required_fields: Report absent required fields instead of
            filling them with None

    Returns:
        Validated instance of ``target``

    Raises:
        NullValueError: If value is None
        MissingFieldsError: If required fields are absent (strict mode only)
        ConversionError: If Pydantic validation fails
    """
    if value is None:
        raise NullValueError(_target_name(target))

    adapter_target: Any = target
    if _is_model(target):
        if not isinstance(value, dict):
            raise ConversionError(
                f"expected JSON object for {_target_name(target)}, got {type(value).__name__}"
            )
        if validate_required_fields:
            missing = missing_required_fields(target, value)
            if missing:
                raise MissingFieldsError(missing)

    if not validate_required_fields:
        adapter_target = relax_annotation(target)

    try:
        return TypeAdapter(adapter_target).validate_python(value)
    except ValidationError as e:
        logger.debug("Conversion into %s failed: %s", _target_name(target), e)
        raise ConversionError(f"cannot convert value into {_target_name(target)}: {e}") from e


__all__ = [
    "convert_value",
    "missing_required_fields",
    "partial_model",
    "relax_annotation",
]
