"""Tests for attribute-style dictionary views."""

import pytest

from objpath import AttrDict, get_value, to_attr_dict


def test_attr_dict_reads_and_writes_attributes() -> None:
    data = AttrDict(name="Kim")

    assert data.name == "Kim"
    data.city = "Busan"
    assert data["city"] == "Busan"
    del data.city
    assert "city" not in data

    with pytest.raises(AttributeError):
        _ = data.missing
    with pytest.raises(AttributeError):
        del data.missing


def test_attr_dict_keeps_dict_methods() -> None:
    data = AttrDict(items="shadowed")

    assert data["items"] == "shadowed"
    assert callable(data.items)
    assert "items" in dir(data)


def test_to_attr_dict_converts_nested_values() -> None:
    data = to_attr_dict({"user": {"tags": ({"label": "a"}, "b")}})

    assert isinstance(data.user, AttrDict)
    assert data.user.tags[0].label == "a"
    assert data.user.tags[1] == "b"


def test_attr_dict_resolves_as_mapping() -> None:
    data = to_attr_dict({"Order": {"Lines": [{"Sku": "x"}]}})

    assert get_value(data, "order.lines[0].sku") == "x"
