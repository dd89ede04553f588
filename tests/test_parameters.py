import pytest

from actionkit.errors import SchemaError
from actionkit.tools.parameters import ParameterBuilder


def _build(declare):
    return ParameterBuilder("object").build(declare)


def test_scalar_properties_are_collected_in_declaration_order():
    def declare(p):
        p.property("city", type="string", description="City name", required=True)
        p.property("days", type="integer")
        p.property("metric", type="boolean", required=True)
        p.property("unit", type="string", enum=["c", "f"])

    schema = _build(declare)

    assert schema == {
        "type": "object",
        "properties": {
            "city": {"type": "string", "description": "City name"},
            "days": {"type": "integer"},
            "metric": {"type": "boolean"},
            "unit": {"type": "string", "enum": ["c", "f"]},
        },
        "required": ["city", "metric"],
    }
    assert list(schema["properties"]) == ["city", "days", "metric", "unit"]


def test_fluent_declarations():
    schema = _build(lambda p: p.property("a", type="number").property("b", type="string", required=True))

    assert list(schema["properties"]) == ["a", "b"]
    assert schema["required"] == ["b"]


def test_nested_object_replaces_wrapper():
    def declare(p):
        p.property(
            "address",
            type="object",
            description="dropped",
            required=True,
            nested=lambda o: o.property("street", type="string", required=True).property("zip", type="string"),
        )

    schema = _build(declare)

    assert schema["properties"]["address"] == {
        "type": "object",
        "properties": {"street": {"type": "string"}, "zip": {"type": "string"}},
        "required": ["street"],
    }
    assert schema["required"] == ["address"]


def test_array_items():
    def declare(p):
        p.property(
            "tags",
            type="array",
            description="Tags",
            nested=lambda a: a.item(type="string", enum=("x", "y")),
        )

    schema = _build(declare)

    assert schema["properties"]["tags"] == {
        "type": "array",
        "description": "Tags",
        "items": {"type": "string", "enum": ["x", "y"]},
    }


def test_array_of_objects():
    def declare(p):
        p.property(
            "people",
            type="array",
            nested=lambda a: a.item(type="object", nested=lambda o: o.property("name", type="string")),
        )

    items = _build(declare)["properties"]["people"]["items"]

    assert items == {"type": "object", "properties": {"name": {"type": "string"}}, "required": []}


def test_array_item_last_declaration_wins():
    def items(a):
        a.item(type="string")
        a.item(type="integer")

    schema = _build(lambda p: p.property("values", type="array", nested=items))

    assert schema["properties"]["values"]["items"] == {"type": "integer"}


def test_duplicate_property_name_overwrites():
    def declare(p):
        p.property("a", type="string")
        p.property("a", type="integer")

    assert _build(declare)["properties"] == {"a": {"type": "integer"}}


def test_nested_block_ignored_for_scalars():
    schema = _build(lambda p: p.property("a", type="string", nested=lambda x: x.property("b", type="string")))

    assert schema["properties"]["a"] == {"type": "string"}


@pytest.mark.parametrize(
    ("kwargs", "reason"),
    [
        ({"type": "string"}, "missing name"),
        ({"name": 42, "type": "string"}, "invalid name type"),
        ({"name": "a", "type": "float"}, "invalid type"),
        ({"name": "a", "type": "string", "enum": "abc"}, "invalid enum"),
        ({"name": "a", "type": "string", "required": "yes"}, "invalid required flag"),
        ({"name": "a", "type": "object"}, "empty object"),
        ({"name": "a", "type": "object", "nested": lambda o: None}, "empty object"),
        ({"name": "a", "type": "array"}, "empty array items"),
        ({"name": "a", "type": "array", "nested": lambda a: None}, "empty array items"),
    ],
)
def test_invalid_declarations_raise(kwargs, reason):
    with pytest.raises(SchemaError, match=reason):
        _build(lambda p: p.property(**kwargs))


def test_array_items_do_not_need_a_name():
    schema = ParameterBuilder("array").build(lambda a: a.item(type="number"))

    assert schema == {"type": "number"}


def test_invalid_container_type():
    with pytest.raises(SchemaError):
        ParameterBuilder("string")


@pytest.mark.parametrize("name", ["city name", "a-b", "1st"])
def test_property_names_must_be_identifiers(name):
    with pytest.raises(SchemaError, match="invalid name type"):
        _build(lambda p: p.property(name, type="string"))
