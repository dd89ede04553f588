"""Declarative builder for action parameter schemas.

A builder is scoped to the container it fills. An ``object`` builder collects
named properties and the names flagged as required; an ``array`` builder holds
exactly one item schema. Nested object and array properties are built by a
child builder, so a declaration callback mirrors the shape of the resulting
JSON Schema document::

    def declare(p: ParameterBuilder) -> None:
        p.property("city", type="string", description="City name", required=True)
        p.property("days", type="array", nested=lambda a: a.item(type="string", enum=WEEKDAYS))

    schema = ParameterBuilder("object").build(declare)

Every argument is validated when the property is declared, so a malformed
tool definition fails while its module is being imported.
"""

from __future__ import annotations

from typing import Any, Callable

from actionkit.errors import SchemaError

VALID_TYPES = ("object", "array", "string", "number", "integer", "boolean")
CONTAINER_TYPES = ("object", "array")

Declaration = Callable[["ParameterBuilder"], Any]


class ParameterBuilder:
    """Builds one schema node for an ``object`` or ``array`` container."""

    def __init__(self, parent_type: str) -> None:
        if parent_type not in CONTAINER_TYPES:
            raise SchemaError(f"invalid type '{parent_type}' for a parameter container")
        self._parent_type = parent_type
        self._schema: dict[str, Any] = (
            {"type": "object", "properties": {}, "required": []} if parent_type == "object" else {}
        )

    @property
    def parent_type(self) -> str:
        return self._parent_type

    def build(self, declare: Declaration) -> dict[str, Any]:
        """Run ``declare`` against this builder and return the finished node."""

        declare(self)
        return self._schema

    def property(
        self,
        name: str | None = None,
        *,
        type: str,
        description: str | None = None,
        enum: list[Any] | tuple[Any, ...] | None = None,
        required: bool = False,
        nested: Declaration | None = None,
    ) -> ParameterBuilder:
        """Declare one property (or the item schema of an array container)."""

        self._validate(name=name, type_=type, enum=enum, required=required)

        prop: dict[str, Any] = {"type": type}
        if description is not None:
            prop["description"] = description
        if enum is not None:
            prop["enum"] = list(enum)

        if type == "object":
            nested_schema = ParameterBuilder("object").build(nested) if nested else {}
            if not nested_schema.get("properties"):
                raise SchemaError(f"empty object: '{name or type}' must define at least one property")
            # An object property is the nested node itself, not a wrapper around it.
            prop = nested_schema
        elif type == "array":
            items = ParameterBuilder("array").build(nested) if nested else {}
            if not items:
                raise SchemaError(f"empty array items: '{name or type}' must define an item schema")
            prop["items"] = items

        if self._parent_type == "object":
            self._schema["properties"][name] = prop
            if required and name not in self._schema["required"]:
                self._schema["required"].append(name)
        else:
            # Arrays hold a single item schema; the last declaration wins.
            self._schema = prop
        return self

    item = property

    def _validate(
        self,
        *,
        name: Any,
        type_: Any,
        enum: Any,
        required: Any,
    ) -> None:
        if self._parent_type == "object":
            if name is None or name == "":
                raise SchemaError("missing name: properties of an object must be named")
            if not isinstance(name, str):
                raise SchemaError(f"invalid name type: {name!r} must be a string")
            if not name.isidentifier():
                raise SchemaError(f"invalid name type: {name!r} must be an identifier")

        if type_ not in VALID_TYPES:
            raise SchemaError(f"invalid type '{type_}'. Valid types are: {', '.join(VALID_TYPES)}")

        if enum is not None and not isinstance(enum, (list, tuple)):
            raise SchemaError(f"invalid enum {enum!r}: enum must be a list of values")

        if not isinstance(required, bool):
            raise SchemaError(f"invalid required flag {required!r}: required must be a boolean")
