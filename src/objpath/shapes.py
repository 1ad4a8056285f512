from __future__ import annotations

import enum
import numbers
from collections.abc import Mapping, Sequence
from typing import TYPE_CHECKING

from .documents import JsonNode

if TYPE_CHECKING:
    from .cache import MemberLookupCache

_SCALAR_TYPES = (str, bytes, bytearray, memoryview, numbers.Number)


class ShapeKind(enum.Enum):
    DOCUMENT_NODE = "document_node"
    STRING_KEYED_MAPPING = "string_keyed_mapping"
    GENERIC_KEYED_CONTAINER = "generic_keyed_container"
    INDEXABLE_SEQUENCE = "indexable_sequence"
    STRUCTURED_RECORD = "structured_record"
    NULL = "null"
    SCALAR = "scalar"


def is_named_tuple(value: object) -> bool:
    return isinstance(value, tuple) and isinstance(
        getattr(type(value), "_fields", None), tuple
    )


def is_indexable(value: object) -> bool:
    """Whether ``value`` supports integer positional access."""
    return isinstance(value, Sequence) and not isinstance(value, _SCALAR_TYPES)


def classify(value: object, cache: MemberLookupCache) -> ShapeKind:
    """Decide which resolution branch applies to ``value``.

    Probes run from the most specific capability to the least specific one,
    so every value lands in exactly one kind.
    """
    if value is None:
        return ShapeKind.NULL
    if isinstance(value, JsonNode):
        return ShapeKind.DOCUMENT_NODE
    if isinstance(value, _SCALAR_TYPES):
        return ShapeKind.SCALAR
    if isinstance(value, Mapping):
        return ShapeKind.STRING_KEYED_MAPPING
    if cache.lookup_mapping_capability(type(value)) is not None:
        return ShapeKind.GENERIC_KEYED_CONTAINER
    if is_named_tuple(value):
        return ShapeKind.STRUCTURED_RECORD
    if isinstance(value, Sequence):
        return ShapeKind.INDEXABLE_SEQUENCE
    return ShapeKind.STRUCTURED_RECORD


__all__ = ["ShapeKind", "classify", "is_indexable", "is_named_tuple"]
