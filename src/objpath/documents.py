"""Tree-shaped JSON document nodes and leaf materialization."""

from __future__ import annotations

import enum
import json
import math
from collections.abc import Iterator
from decimal import Decimal, InvalidOperation
from typing import TypeAlias

from .members import first_casefold_match

INT64_MIN = -(2**63)
INT64_MAX = 2**63 - 1


class RawNumber(str):
    """Numeric JSON literal kept as its source text."""

    __slots__ = ()


class JsonKind(str, enum.Enum):
    OBJECT = "object"
    ARRAY = "array"
    STRING = "string"
    NUMBER = "number"
    TRUE = "true"
    FALSE = "false"
    NULL = "null"


JsonScalar: TypeAlias = str | int | float | Decimal | bool | None


class JsonNode:
    """Read-only node of a parsed JSON document.

    Unlike plain ``json.loads`` output, a node knows its own JSON kind and keeps
    numbers as source text until they are materialized, so ``42`` and
    ``42.0`` stay distinguishable. Nodes built directly from Python data
    also accept plain ``int`` and ``float`` leaves.

    >>> doc = JsonNode.parse('{"items": [1, 2.5]}')
    >>> doc.kind
    <JsonKind.OBJECT: 'object'>
    >>> materialize(doc.get_property("items").item(1))
    2.5
    """

    __slots__ = ("_raw", "_kind")

    def __init__(self, raw: object) -> None:
        self._kind = _kind_of(raw)
        self._raw = raw

    @classmethod
    def parse(cls, text: str | bytes | bytearray) -> "JsonNode":
        return cls(
            json.loads(
                text,
                parse_int=RawNumber,
                parse_float=RawNumber,
                parse_constant=RawNumber,
            )
        )

    @classmethod
    def from_value(cls, value: object) -> "JsonNode":
        """Build a node from JSON-compatible Python data."""
        return cls.parse(json.dumps(value))

    @property
    def kind(self) -> JsonKind:
        return self._kind

    @property
    def raw(self) -> object:
        return self._raw

    def property_names(self) -> list[str]:
        self._require(JsonKind.OBJECT)
        return list(self._raw)

    def get_property(self, name: str) -> "JsonNode | None":
        self._require(JsonKind.OBJECT)
        if name not in self._raw:
            return None
        return JsonNode(self._raw[name])

    def find_property(self, name: str, *, ignore_case: bool) -> "JsonNode | None":
        """Exact match first, then the first case-insensitive one in document order."""
        found = self.get_property(name)
        if found is not None or not ignore_case:
            return found
        match = first_casefold_match(self._raw, name)
        if match is None:
            return None
        return JsonNode(self._raw[match])

    def item(self, index: int) -> "JsonNode":
        self._require(JsonKind.ARRAY)
        if index < 0:
            raise IndexError(index)
        return JsonNode(self._raw[index])

    def __len__(self) -> int:
        if self.kind not in (JsonKind.OBJECT, JsonKind.ARRAY):
            raise TypeError(f"JSON {self.kind.value} has no length")
        return len(self._raw)

    def __iter__(self) -> Iterator["JsonNode"]:
        self._require(JsonKind.ARRAY)
        return (JsonNode(item) for item in self._raw)

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, JsonNode):
            return NotImplemented
        return self._raw == other._raw

    def __repr__(self) -> str:
        return f"JsonNode({_dump(self._raw)})"

    def _require(self, kind: JsonKind) -> None:
        if self.kind is not kind:
            raise TypeError(f"expected JSON {kind.value}, got {self.kind.value}")


def _kind_of(raw: object) -> JsonKind:
    if raw is None:
        return JsonKind.NULL
    if raw is True:
        return JsonKind.TRUE
    if raw is False:
        return JsonKind.FALSE
    if isinstance(raw, (RawNumber, int, float)):
        return JsonKind.NUMBER
    if isinstance(raw, str):
        return JsonKind.STRING
    if isinstance(raw, dict):
        return JsonKind.OBJECT
    if isinstance(raw, list):
        return JsonKind.ARRAY
    raise TypeError(f"unsupported JSON value of type {type(raw).__name__}")


def _dump(raw: object) -> str:
    if isinstance(raw, RawNumber):
        return str(raw)
    if isinstance(raw, dict):
        body = ", ".join(
            f"{json.dumps(key)}: {_dump(value)}" for key, value in raw.items()
        )
        return "{" + body + "}"
    if isinstance(raw, list):
        return "[" + ", ".join(_dump(item) for item in raw) + "]"
    return json.dumps(raw)


def materialize(node: JsonNode) -> JsonScalar | JsonNode:
    """Convert a leaf node to a native scalar.

    Objects and arrays are returned unchanged.
    """
    kind = node.kind
    if kind is JsonKind.NUMBER:
        return _materialize_number(str(node.raw))
    if kind in (JsonKind.OBJECT, JsonKind.ARRAY):
        return node
    if kind is JsonKind.STRING:
        return str(node.raw)
    return node.raw


def _materialize_number(text: str) -> int | float | Decimal:
    try:
        integer = int(text)
    except ValueError:
        integer = None
    if integer is not None and INT64_MIN <= integer <= INT64_MAX:
        return integer

    try:
        floating = float(text)
    except ValueError:
        floating = None
    if floating is not None and math.isfinite(floating):
        return floating

    try:
        return Decimal(text)
    except InvalidOperation as exc:
        raise ValueError(f"invalid JSON number {text!r}") from exc


__all__ = [
    "INT64_MAX",
    "INT64_MIN",
    "JsonKind",
    "JsonNode",
    "JsonScalar",
    "RawNumber",
    "materialize",
]
