"""Registry for safe tool registration and execution."""

from __future__ import annotations

import logging
from typing import Any, Literal

from pydantic import ConfigDict, Field, ValidationError, create_model

from actionkit.errors import ConfigurationError, ToolArgumentsError, ToolNotFoundError
from actionkit.tools.base import Tool
from actionkit.tools.schemas import ActionSchema, SchemaFormat, render

LOGGER = logging.getLogger(__name__)


class ToolRegistry:
    """Explicit registry of the tools one assistant may call."""

    def __init__(self, tools: list[Tool] | None = None) -> None:
        self._tools: list[Tool] = []
        self._actions: dict[str, tuple[Tool, ActionSchema]] = {}
        for tool in tools or []:
            self.register(tool)

    @property
    def tools(self) -> list[Tool]:
        return list(self._tools)

    def register(self, tool: Tool) -> None:
        if not isinstance(tool, Tool):
            raise ConfigurationError(f"Expected a Tool instance, got {tool!r}")

        qualified = {schema.qualified_name: schema for schema in tool.action_schemas}
        clashes = sorted(name for name in qualified if name in self._actions)
        if clashes:
            raise ConfigurationError(f"Tool '{tool.name}' redefines registered actions: {', '.join(clashes)}")

        self._tools.append(tool)
        for name, schema in qualified.items():
            self._actions[name] = (tool, schema)
        LOGGER.info("Registered tool %s with %d action(s)", tool.name, len(qualified))

    def resolve(self, qualified_name: str) -> tuple[Tool, ActionSchema]:
        try:
            return self._actions[qualified_name]
        except KeyError:
            raise ToolNotFoundError(f"Unknown tool: {qualified_name}") from None

    def to_provider_format(self, fmt: SchemaFormat | str = SchemaFormat.OPENAI) -> list[dict[str, Any]]:
        return render([schema for _, schema in self._actions.values()], fmt)

    def execute(self, qualified_name: str, arguments: dict[str, Any]) -> Any:
        tool, schema = self.resolve(qualified_name)
        validated = _validate_json_schema(schema, arguments)
        LOGGER.debug("Executing %s with %r", qualified_name, validated)
        return tool.execute(schema.action_name, **validated)


def _validate_json_schema(schema: ActionSchema, payload: dict[str, Any]) -> dict[str, Any]:
    if not isinstance(payload, dict):
        raise ToolArgumentsError(f"Arguments for {schema.qualified_name} must be a JSON object, got {payload!r}")

    params = schema.parameters or {"properties": {}, "required": []}
    required = set(params.get("required", []))
    # Property names can clash with pydantic internals (``model_config``, ``_id``),
    # so fields get positional names and the property name as alias.
    fields: dict[str, tuple[Any, Any]] = {}
    for index, (name, config) in enumerate(params["properties"].items()):
        typ = _python_type(config)
        if name in required:
            fields[f"field_{index}"] = (typ, Field(..., alias=name))
        else:
            fields[f"field_{index}"] = (typ | None, Field(None, alias=name))

    model = create_model(
        "ToolInputModel",
        __config__=ConfigDict(extra="forbid"),
        **fields,
    )
    try:
        value = model.model_validate(payload)
    except ValidationError as exc:
        raise ToolArgumentsError(f"Invalid input for {schema.qualified_name}: {exc}") from exc
    return value.model_dump(by_alias=True, exclude_unset=True)


def _python_type(config: dict[str, Any]) -> Any:
    if "enum" in config:
        return Literal[tuple(config["enum"])]
    mapping: dict[str, type[Any]] = {
        "string": str,
        "integer": int,
        "number": float,
        "boolean": bool,
        "object": dict,
        "array": list,
    }
    return mapping.get(config.get("type", "string"), str)
