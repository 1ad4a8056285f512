"""Walks tokenized path segments across records, mappings, sequences and documents."""

from __future__ import annotations

import re
from collections.abc import Mapping, Sequence

from .cache import MemberLookupCache, get_member_cache
from .documents import JsonKind, JsonNode, materialize
from .errors import InvalidObjectPathError, PathErrorKind
from .members import find_instance_attribute, first_casefold_match
from .results import Failed, Outcome, Resolved
from .shapes import ShapeKind, classify, is_indexable

_INDEX_PATTERN = re.compile(r"\s*[+-]?[0-9]+\s*")


def parse_index(segment: str) -> int | None:
    """Return the integer a segment spells, or ``None`` if it is not numeric."""
    if _INDEX_PATTERN.fullmatch(segment) is None:
        return None
    return int(segment)


def resolve(
    root: object,
    segments: Sequence[str],
    *,
    ignore_case: bool,
    path: str,
    cache: MemberLookupCache | None = None,
) -> Outcome:
    """Resolve ``segments`` against ``root``.

    Never raises for path problems: failures come back as ``Failed`` carrying
    an ``InvalidObjectPathError`` whose ``path`` is the full ``path``. A
    ``None`` reached before the last segment ends the walk successfully with
    ``None``.
    """
    if cache is None:
        cache = get_member_cache()

    current = root
    last = len(segments) - 1
    for position, segment in enumerate(segments):
        if current is None:
            return Resolved(None)
        step = _step(
            current,
            segment,
            is_last=position == last,
            ignore_case=ignore_case,
            path=path,
            cache=cache,
        )
        if isinstance(step, Failed):
            return step
        current = step.value
    return Resolved(current)


def _step(
    current: object,
    segment: str,
    *,
    is_last: bool,
    ignore_case: bool,
    path: str,
    cache: MemberLookupCache,
) -> Outcome:
    kind = classify(current, cache)

    if kind is ShapeKind.NULL:
        return Resolved(None)
    if kind is ShapeKind.DOCUMENT_NODE:
        assert isinstance(current, JsonNode)
        return _document_step(
            current, segment, is_last=is_last, ignore_case=ignore_case, path=path
        )
    if kind is ShapeKind.STRING_KEYED_MAPPING:
        assert isinstance(current, Mapping)
        found, value = _mapping_lookup(current, segment, ignore_case=ignore_case)
        return _keyed_result(current, segment, found, value, path=path)
    if kind is ShapeKind.GENERIC_KEYED_CONTAINER:
        capability = cache.lookup_mapping_capability(type(current))
        if capability is None:
            return Failed(_member_not_found(segment, path))
        found, value = capability.lookup(current, segment, ignore_case=ignore_case)
        return _keyed_result(current, segment, found, value, path=path)
    if kind is ShapeKind.INDEXABLE_SEQUENCE:
        assert isinstance(current, Sequence)
        return _positional_step(current, segment, path=path)
    if kind is ShapeKind.STRUCTURED_RECORD:
        return _record_step(
            current, segment, ignore_case=ignore_case, path=path, cache=cache
        )
    if kind is ShapeKind.SCALAR:
        return Failed(_cannot_descend(current, segment, path))
    raise AssertionError(f"unhandled shape kind {kind!r}")


def _document_step(
    node: JsonNode, segment: str, *, is_last: bool, ignore_case: bool, path: str
) -> Outcome:
    kind = node.kind
    if kind is JsonKind.OBJECT:
        child = node.find_property(segment, ignore_case=ignore_case)
        if child is None:
            return Failed(_member_not_found(segment, path))
        return Resolved(materialize(child))

    if kind is JsonKind.ARRAY:
        index = parse_index(segment)
        if index is None or not 0 <= index < len(node):
            return Failed(_invalid_index(segment, path))
        return Resolved(materialize(node.item(index)))

    if is_last:
        return Resolved(materialize(node))
    return Failed(
        InvalidObjectPathError(
            f"Cannot access '{segment}' on non-object/non-array JSON element "
            f"in path '{path}'.",
            kind=PathErrorKind.MEMBER_NOT_FOUND,
            path=path,
        )
    )


def _mapping_lookup(
    mapping: Mapping[object, object], key: str, *, ignore_case: bool
) -> tuple[bool, object]:
    # Membership test first: plain indexing would trigger __missing__ hooks.
    if key in mapping:
        return True, mapping[key]
    if ignore_case:
        match = first_casefold_match(iter(mapping), key)
        if match is not None:
            return True, mapping[match]
    return False, None


def _keyed_result(
    container: object, segment: str, found: bool, value: object, *, path: str
) -> Outcome:
    if found:
        return Resolved(value)
    if parse_index(segment) is not None and is_indexable(container):
        assert isinstance(container, Sequence)
        return _positional_step(container, segment, path=path)
    return Failed(_member_not_found(segment, path))


def _positional_step(sequence: Sequence[object], segment: str, *, path: str) -> Outcome:
    index = parse_index(segment)
    if index is None or not 0 <= index < len(sequence):
        return Failed(_invalid_index(segment, path))
    return Resolved(sequence[index])


def _record_step(
    record: object,
    segment: str,
    *,
    ignore_case: bool,
    path: str,
    cache: MemberLookupCache,
) -> Outcome:
    if parse_index(segment) is not None and is_indexable(record):
        assert isinstance(record, Sequence)
        return _positional_step(record, segment, path=path)

    accessor = cache.lookup_member(type(record), segment, ignore_case)
    if accessor is not None:
        try:
            return Resolved(accessor.get(record))
        except AttributeError:
            # Fields may be declared but never assigned (annotation-only or
            # empty slot); property bodies raising AttributeError are bugs.
            if accessor.kind != "field":
                raise

    found, value = find_instance_attribute(record, segment, ignore_case=ignore_case)
    if found:
        return Resolved(value)

    return Failed(
        InvalidObjectPathError(
            f"Property or field '{segment}' not found in path '{path}'.",
            kind=PathErrorKind.MEMBER_NOT_FOUND,
            path=path,
        )
    )


def _member_not_found(segment: str, path: str) -> InvalidObjectPathError:
    return InvalidObjectPathError(
        f"Property '{segment}' not found in path '{path}'.",
        kind=PathErrorKind.MEMBER_NOT_FOUND,
        path=path,
    )


def _invalid_index(segment: str, path: str) -> InvalidObjectPathError:
    return InvalidObjectPathError(
        f"Invalid array index '{segment}' in path '{path}'.",
        kind=PathErrorKind.INVALID_INDEX,
        path=path,
    )


def _cannot_descend(value: object, segment: str, path: str) -> InvalidObjectPathError:
    kind = (
        PathErrorKind.INVALID_INDEX
        if parse_index(segment) is not None
        else PathErrorKind.MEMBER_NOT_FOUND
    )
    return InvalidObjectPathError(
        f"Cannot access '{segment}' on value of type '{type(value).__name__}' "
        f"in path '{path}'.",
        kind=kind,
        path=path,
    )


__all__ = ["parse_index", "resolve"]
