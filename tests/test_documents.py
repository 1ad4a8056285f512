"""Tests for JSON document nodes and scalar materialization."""

from decimal import Decimal

import pytest

from objpath import (
    InvalidObjectPathError,
    JsonKind,
    JsonNode,
    PathErrorKind,
    get_value,
    materialize,
    try_get_value,
)


@pytest.fixture()
def document() -> JsonNode:
    return JsonNode.parse(
        """
        {
            "Small": 42,
            "Big": 9223372036854775807,
            "Huge": 123456789012345678901234567890,
            "Pi": 3.14159,
            "Overflow": 1e400,
            "Flag": true,
            "Nothing": null,
            "Name": "doc",
            "my.key": {"value": "literal"},
            "Items": [{"id": 1}, {"id": 2}, {"id": 3}]
        }
        """
    )


def test_node_reports_kind() -> None:
    node = JsonNode.parse('{"a": [1, "x", true, false, null, 2.5]}')
    items = list(node.get_property("a"))

    assert node.kind is JsonKind.OBJECT
    assert [item.kind for item in items] == [
        JsonKind.NUMBER,
        JsonKind.STRING,
        JsonKind.TRUE,
        JsonKind.FALSE,
        JsonKind.NULL,
        JsonKind.NUMBER,
    ]


def test_materialize_numbers(document: JsonNode) -> None:
    small = get_value(document, "Small")
    big = get_value(document, "Big")
    pi = get_value(document, "Pi")

    assert small == 42 and type(small) is int
    assert big == 9223372036854775807 and type(big) is int
    assert pi == pytest.approx(3.14159) and type(pi) is float


def test_materialize_falls_back_to_float_then_decimal(document: JsonNode) -> None:
    huge = get_value(document, "Huge")
    overflow = get_value(document, "Overflow")

    assert type(huge) is float
    assert overflow == Decimal("1e400")


def test_materialize_other_scalars(document: JsonNode) -> None:
    assert get_value(document, "Flag") is True
    assert get_value(document, "Name") == "doc"
    assert type(get_value(document, "Name")) is str
    assert get_value(document, "Nothing") is None


def test_materialize_leaves_containers_as_nodes(document: JsonNode) -> None:
    items = get_value(document, "Items")

    assert isinstance(items, JsonNode)
    assert items.kind is JsonKind.ARRAY
    assert materialize(items) is items


def test_document_paths(document: JsonNode) -> None:
    assert get_value(document, "Items[1].id") == 2
    assert get_value(document, "items.2.ID") == 3
    assert get_value(document, '["my.key"].value') == "literal"


def test_document_property_lookup_respects_case_rule(document: JsonNode) -> None:
    assert get_value(document, "name") == "doc"
    with pytest.raises(InvalidObjectPathError) as excinfo:
        get_value(document, "name", ignore_case=False)

    assert excinfo.value.kind is PathErrorKind.MEMBER_NOT_FOUND
    assert str(excinfo.value) == "Property 'name' not found in path 'name'."


def test_document_exact_match_wins_over_case_insensitive() -> None:
    node = JsonNode.parse('{"KEY": 1, "key": 2}')

    assert get_value(node, "key") == 2
    assert get_value(node, "Key") == 1


def test_document_array_index_errors(document: JsonNode) -> None:
    for path in ("Items[3]", "Items[-1]", "Items.first"):
        with pytest.raises(InvalidObjectPathError) as excinfo:
            get_value(document, path)
        assert excinfo.value.kind is PathErrorKind.INVALID_INDEX
        assert str(excinfo.value) == (
            f"Invalid array index '{path[6:].strip('[]')}' in path '{path}'."
        )


def test_document_cannot_descend_into_scalar_node() -> None:
    with pytest.raises(InvalidObjectPathError) as excinfo:
        get_value(JsonNode.parse("7"), "a.b")

    assert excinfo.value.kind is PathErrorKind.MEMBER_NOT_FOUND
    assert str(excinfo.value) == (
        "Cannot access 'a' on non-object/non-array JSON element in path 'a.b'."
    )


def test_document_materialized_scalars_are_plain_values(document: JsonNode) -> None:
    with pytest.raises(InvalidObjectPathError) as excinfo:
        get_value(document, "Name.length")

    assert str(excinfo.value) == (
        "Cannot access 'length' on value of type 'str' in path 'Name.length'."
    )


def test_document_scalar_root_passes_through_last_segment() -> None:
    # A scalar document node reached at the last segment is materialized as is.
    assert get_value(JsonNode.parse("7"), "anything") == 7


def test_document_null_property_short_circuits(document: JsonNode) -> None:
    assert try_get_value(document, "Nothing.deeper") == (True, None)


def test_from_value_and_equality() -> None:
    node = JsonNode.from_value({"a": [1, 2.5, "x"]})

    assert node == JsonNode.parse('{"a": [1, 2.5, "x"]}')
    assert repr(node) == 'JsonNode({"a": [1, 2.5, "x"]})'


def test_item_rejects_negative_index() -> None:
    with pytest.raises(IndexError):
        JsonNode.parse("[1, 2]").item(-1)


def test_property_access_requires_object() -> None:
    with pytest.raises(TypeError, match="expected JSON object"):
        JsonNode.parse("[1]").get_property("a")


def test_node_built_from_python_data_classifies_leaves() -> None:
    node = JsonNode({"a": 1, "b": 2.5, "c": [True, None], "d": "x"})

    assert node.get_property("a").kind is JsonKind.NUMBER
    assert node.get_property("b").kind is JsonKind.NUMBER
    assert node.get_property("c").kind is JsonKind.ARRAY
    assert get_value(node, "a") == 1
    assert type(get_value(node, "a")) is int
    assert get_value(node, "b") == 2.5
    assert get_value(node, "c[0]") is True
    assert get_value(node, "d") == "x"


def test_node_built_from_python_data_reports_descent_failures() -> None:
    assert try_get_value(JsonNode({"a": 1}), "a.0") == (False, None)


def test_node_rejects_non_json_values() -> None:
    with pytest.raises(TypeError, match="unsupported JSON value of type tuple"):
        JsonNode((1, 2))
    with pytest.raises(TypeError, match="unsupported JSON value of type object"):
        get_value(JsonNode({"a": object()}), "a")
