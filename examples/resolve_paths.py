from __future__ import annotations

import enum
from dataclasses import dataclass, field

import objpath


class Status(enum.Enum):
    Open = 1
    Shipped = 2


@dataclass
class Line:
    sku: str
    quantity: int


@dataclass
class Order:
    id: str
    status: str
    lines: list[Line] = field(default_factory=list)
    meta: dict[str, object] = field(default_factory=dict)


def main() -> None:
    objpath.configure_logging("debug")

    order = Order(
        id="9f1c2d3e-4b5a-6978-8a9b-0c1d2e3f4a5b",
        status="shipped",
        lines=[Line("apple", 3), Line("pear", 1)],
        meta={"gift.wrap": True, "Notes": None},
    )
    print("second sku:", objpath.get_value(order, "Lines[1].Sku"))
    print("gift wrap:", objpath.get_value(order, 'meta["gift.wrap"]'))
    print("notes.text:", objpath.get_value(order, "meta.notes.text"))
    print("status:", objpath.get_value_as(order, "status", Status))
    print("missing:", objpath.try_get_value(order, "lines[5].sku"))

    document = objpath.JsonNode.parse('{"totals": {"net": 12.5, "count": 4}}')
    print("net:", objpath.get_value(document, "totals.net"))
    print("count:", objpath.get_value_as(document, "Totals.Count", str))


if __name__ == "__main__":
    main()
