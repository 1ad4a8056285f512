"""Public entry points.

Throwing and non-throwing variants share ``_lookup``/``_lookup_as``; the
throwing ones raise the recorded ``InvalidObjectPathError``, the others turn
it into ``(False, None)``.
"""

from __future__ import annotations

from typing import TypeVar, cast

from .cache import get_member_cache
from .coerce import clear_adapter_cache, coerce
from .config import OBJPATH_CONFIG
from .errors import InvalidObjectPathError
from .resolver import resolve
from .results import Failed, Outcome, Resolved, unwrap
from .runtime.logging import get_logger
from .tokenizer import tokenize

T = TypeVar("T")


def _case_rule(ignore_case: bool | None) -> bool:
    return OBJPATH_CONFIG.ignore_case if ignore_case is None else ignore_case


def _lookup(obj: object, path: str | None, ignore_case: bool) -> Outcome:
    if not path:
        return Resolved(obj)
    try:
        segments = tokenize(path, strict=OBJPATH_CONFIG.strict_literals)
    except InvalidObjectPathError as exc:
        return Failed(exc)
    return resolve(
        obj,
        segments,
        ignore_case=ignore_case,
        path=path,
        cache=get_member_cache(),
    )


def _lookup_as(
    obj: object, path: str | None, target_type: object, ignore_case: bool
) -> Outcome:
    outcome = _lookup(obj, path, ignore_case)
    if isinstance(outcome, Failed) or outcome.value is None:
        return outcome
    return coerce(
        outcome.value, target_type, ignore_case=ignore_case, path=path or ""
    )


def get_value(
    obj: object, path: str | None, ignore_case: bool | None = None
) -> object:
    """Return the value at ``path`` inside ``obj``.

    ``None`` for a ``None`` root, ``obj`` itself for an empty path. Raises
    ``InvalidObjectPathError`` when the path cannot be resolved.

    >>> get_value({"Address": {"City": "Seoul"}}, "address.city")
    'Seoul'
    """
    if obj is None:
        return None
    return unwrap(_lookup(obj, path, _case_rule(ignore_case)))


def get_value_as(
    obj: object,
    path: str | None,
    target_type: type[T],
    ignore_case: bool | None = None,
) -> T | None:
    """Like ``get_value``, then convert the result to ``target_type``.

    ``None`` roots and ``None`` results come back as ``None`` without
    conversion. Conversion problems raise ``InvalidObjectPathError`` with
    ``kind=PathErrorKind.COERCION_FAILURE``.
    """
    if obj is None:
        return None
    outcome = _lookup_as(obj, path, target_type, _case_rule(ignore_case))
    return cast("T | None", unwrap(outcome))


def try_get_value(
    obj: object, path: str | None, ignore_case: bool | None = None
) -> tuple[bool, object]:
    if obj is None:
        return False, None
    outcome = _lookup(obj, path, _case_rule(ignore_case))
    if isinstance(outcome, Failed):
        get_logger().debug("try_get_value: %s", outcome.error)
        return False, None
    return True, outcome.value


def try_get_value_as(
    obj: object,
    path: str | None,
    target_type: type[T],
    ignore_case: bool | None = None,
) -> tuple[bool, T | None]:
    if obj is None:
        return False, None
    outcome = _lookup_as(obj, path, target_type, _case_rule(ignore_case))
    if isinstance(outcome, Failed):
        get_logger().debug("try_get_value_as: %s", outcome.error)
        return False, None
    return True, cast("T | None", outcome.value)


def get_value_or_none(
    obj: object, path: str | None, ignore_case: bool | None = None
) -> object:
    """Return the value at ``path``, or ``None`` if it cannot be resolved."""
    _, value = try_get_value(obj, path, ignore_case)
    return value


def clear_caches() -> None:
    """Drop all memoized member, mapping-capability and conversion lookups."""
    get_member_cache().clear_all()
    clear_adapter_cache()


__all__ = [
    "clear_caches",
    "get_value",
    "get_value_as",
    "get_value_or_none",
    "try_get_value",
    "try_get_value_as",
]
