"""Attribute-style views over string-keyed dictionaries."""

from __future__ import annotations

from collections.abc import Mapping


class AttrDict(dict[str, object]):
    """Dictionary with attribute-style access to its keys.

    Keys shadowed by ``dict`` methods (``items``, ``keys``, ...) are still
    reachable with ``d["items"]`` and through path lookups.
    """

    def __getattr__(self, name: str) -> object:
        try:
            return self[name]
        except KeyError as exc:
            raise AttributeError(name) from exc

    def __setattr__(self, name: str, value: object) -> None:
        self[name] = value

    def __delattr__(self, name: str) -> None:
        try:
            del self[name]
        except KeyError as exc:
            raise AttributeError(name) from exc

    def __dir__(self) -> list[str]:
        names = set(super().__dir__())
        names.update(key for key in self if key.isidentifier())
        return sorted(names)


def to_attr_dict(values: Mapping[str, object]) -> AttrDict:
    """Recursively copy ``values`` into ``AttrDict`` instances.

    Nested mappings become ``AttrDict``; lists and tuples are copied as lists
    with their items converted the same way.

    >>> to_attr_dict({"user": {"name": "Kim"}}).user.name
    'Kim'
    """
    return AttrDict({str(key): _to_attr_value(value) for key, value in values.items()})


def _to_attr_value(value: object) -> object:
    if isinstance(value, Mapping):
        return to_attr_dict(value)
    if isinstance(value, (list, tuple)):
        return [_to_attr_value(item) for item in value]
    return value


__all__ = ["AttrDict", "to_attr_dict"]
