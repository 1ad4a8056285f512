"""Conversion of resolved values to caller-requested types."""

from __future__ import annotations

import enum
import types
import uuid
from collections.abc import Hashable
from typing import Any, Union, cast, get_args, get_origin

from pydantic import PydanticUserError, TypeAdapter, ValidationError

from .cache import BoundedStore
from .errors import InvalidObjectPathError, PathErrorKind
from .members import first_casefold_match
from .results import Failed, Outcome, Resolved

_ADAPTERS: BoundedStore[Hashable, TypeAdapter[Any]] = BoundedStore("adapter")

_CONVERSION_ERRORS = (
    ValidationError,
    PydanticUserError,
    ValueError,
    TypeError,
    KeyError,
    OverflowError,
    ArithmeticError,
)


def coerce(
    value: object,
    target_type: object,
    *,
    ignore_case: bool = True,
    path: str = "",
) -> Outcome:
    """Convert ``value`` to ``target_type``.

    Rules, in order: values that already match are returned unchanged;
    ``Optional[X]`` is treated as ``X``; enums are parsed by member name from
    text or built from their value otherwise; ``uuid.UUID`` is parsed from
    text; ``str`` uses ``str()``; everything else goes through a pydantic
    ``TypeAdapter`` in lax mode.
    """
    if value is None or target_type is Any or target_type is object:
        return Resolved(value)

    target = unwrap_optional(target_type)
    if _already_satisfies(value, target):
        return Resolved(value)

    try:
        converted = _convert(value, target, ignore_case=ignore_case)
    except _CONVERSION_ERRORS as exc:
        error = InvalidObjectPathError(
            f"Cannot convert value of type '{type(value).__name__}' to "
            f"'{type_name(target_type)}' at path '{path}'.",
            kind=PathErrorKind.COERCION_FAILURE,
            path=path,
        )
        error.__cause__ = exc
        return Failed(error)
    return Resolved(converted)


def unwrap_optional(target_type: object) -> object:
    """Strip ``None`` from ``Optional[X]`` and ``X | None`` annotations."""
    origin = get_origin(target_type)
    if origin is not Union and origin is not types.UnionType:
        return target_type

    members = get_args(target_type)
    remaining = tuple(member for member in members if member is not type(None))
    if len(remaining) == len(members) or not remaining:
        return target_type
    if len(remaining) == 1:
        return remaining[0]
    return Union[remaining]


def type_name(target_type: object) -> str:
    name = getattr(target_type, "__name__", None)
    if isinstance(name, str) and get_origin(target_type) is None:
        return name
    return repr(target_type)


def clear_adapter_cache() -> None:
    _ADAPTERS.clear()


def _already_satisfies(value: object, target: object) -> bool:
    if not isinstance(target, type) or get_origin(target) is not None:
        return False
    if target is int and isinstance(value, bool):
        return False
    return isinstance(value, target)


def _convert(value: object, target: object, *, ignore_case: bool) -> object:
    if isinstance(target, type) and issubclass(target, enum.Enum):
        if isinstance(value, str):
            return _enum_member_by_name(target, value, ignore_case=ignore_case)
        return target(value)

    if target is uuid.UUID and isinstance(value, str):
        return uuid.UUID(value)

    if target is str:
        if isinstance(value, enum.Enum):
            return value.name
        return str(value)

    return _adapter_for(target).validate_python(value)


def _enum_member_by_name(
    enum_type: type[enum.Enum], name: str, *, ignore_case: bool
) -> enum.Enum:
    members = enum_type.__members__
    if name in members:
        return members[name]
    if ignore_case:
        match = first_casefold_match(members, name)
        if match is not None:
            return members[match]
    raise ValueError(f"{name!r} is not a member name of {enum_type.__name__}")


def _adapter_for(target: object) -> TypeAdapter[Any]:
    try:
        hash(target)
    except TypeError:
        return TypeAdapter(target)
    return _ADAPTERS.get_or_compute(
        cast(Hashable, target), lambda: TypeAdapter(target)
    )


__all__ = ["clear_adapter_cache", "coerce", "type_name", "unwrap_optional"]
