"""Uncached structural introspection of record types.

These helpers answer "does type ``cls`` expose a public member called
``name``?" by walking the class hierarchy. They are comparatively expensive
and are memoized per type by ``objpath.cache.MemberLookupCache``.
"""

from __future__ import annotations

import dataclasses
import functools
import inspect
import types
from collections.abc import Iterable, Iterator
from dataclasses import dataclass
from typing import Literal

import chz
from pydantic import BaseModel

MemberKind = Literal["property", "field"]

_PROPERTY_TYPES = (property, functools.cached_property, types.DynamicClassAttribute)
_DESCRIPTOR_FIELD_TYPES = (types.MemberDescriptorType, types.GetSetDescriptorType)


@dataclass(frozen=True)
class MemberAccessor:
    """Public member of a record type, read with ``getattr``."""

    name: str
    kind: MemberKind

    def get(self, obj: object) -> object:
        return getattr(obj, self.name)


@dataclass(frozen=True)
class MappingCapability:
    """Marks a type that is not a ``Mapping`` but can be read like one.

    ``owner`` is the class in the MRO that defines ``keys``.
    """

    owner: type

    def lookup(
        self, container: object, key: str, *, ignore_case: bool
    ) -> tuple[bool, object]:
        keys = list(container.keys())  # type: ignore[attr-defined]
        if key in keys:
            return True, container[key]  # type: ignore[index]
        if ignore_case:
            match = first_casefold_match(keys, key)
            if match is not None:
                return True, container[match]  # type: ignore[index]
        return False, None


def is_public(name: str) -> bool:
    return not name.startswith("_")


def first_casefold_match(candidates: Iterable[object], name: str) -> str | None:
    """Return the first string candidate equal to ``name`` ignoring case."""
    folded = name.casefold()
    for candidate in candidates:
        if isinstance(candidate, str) and candidate.casefold() == folded:
            return candidate
    return None


def _match_name(names: Iterable[str], name: str, *, ignore_case: bool) -> str | None:
    public = [candidate for candidate in dict.fromkeys(names) if is_public(candidate)]
    if name in public:
        return name
    if ignore_case:
        return first_casefold_match(public, name)
    return None


def _class_chain(cls: type) -> Iterator[type]:
    for klass in cls.__mro__:
        if klass is not object:
            yield klass


def _property_names(cls: type) -> Iterator[str]:
    for klass in _class_chain(cls):
        for name, attr in vars(klass).items():
            if isinstance(attr, _PROPERTY_TYPES):
                yield name


def _field_names(cls: type) -> Iterator[str]:
    if dataclasses.is_dataclass(cls):
        for field in dataclasses.fields(cls):
            yield field.name

    if chz.is_chz(cls):
        yield from chz.chz_fields(cls)

    if issubclass(cls, BaseModel):
        yield from cls.model_fields

    if issubclass(cls, tuple):
        named_fields = getattr(cls, "_fields", None)
        if isinstance(named_fields, tuple):
            yield from named_fields

    for klass in _class_chain(cls):
        slots = vars(klass).get("__slots__", ())
        if isinstance(slots, str):
            slots = (slots,)
        yield from slots

        for name, attr in vars(klass).items():
            if isinstance(attr, _DESCRIPTOR_FIELD_TYPES):
                yield name

        yield from inspect.get_annotations(klass)


def find_property(cls: type, name: str, *, ignore_case: bool) -> MemberAccessor | None:
    """Find a property-like member (``property``, ``cached_property``, ...)."""
    match = _match_name(_property_names(cls), name, ignore_case=ignore_case)
    if match is None:
        return None
    return MemberAccessor(name=match, kind="property")


def find_field(cls: type, name: str, *, ignore_case: bool) -> MemberAccessor | None:
    """Find a declared field (dataclass, pydantic, chz, slots, annotations)."""
    match = _match_name(_field_names(cls), name, ignore_case=ignore_case)
    if match is None:
        return None
    return MemberAccessor(name=match, kind="field")


def find_instance_attribute(
    obj: object, name: str, *, ignore_case: bool
) -> tuple[bool, object]:
    """Look ``name`` up among the public attributes stored on ``obj`` itself."""
    try:
        attributes = vars(obj)
    except TypeError:
        return False, None
    match = _match_name(attributes, name, ignore_case=ignore_case)
    if match is None:
        return False, None
    return True, attributes[match]


def find_mapping_capability(cls: type) -> MappingCapability | None:
    keys_owner: type | None = None
    has_getitem = False
    for klass in cls.__mro__:
        namespace = vars(klass)
        if keys_owner is None and callable(namespace.get("keys")):
            keys_owner = klass
        if "__getitem__" in namespace:
            has_getitem = True
    if keys_owner is None or not has_getitem:
        return None
    return MappingCapability(owner=keys_owner)


__all__ = [
    "MappingCapability",
    "MemberAccessor",
    "MemberKind",
    "find_field",
    "find_instance_attribute",
    "find_mapping_capability",
    "find_property",
    "first_casefold_match",
    "is_public",
]
