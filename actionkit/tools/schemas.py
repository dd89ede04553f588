"""Compiled action schemas and their provider-specific renderings."""

from __future__ import annotations

import copy
import logging
from dataclasses import dataclass
from enum import Enum
from typing import Any, Callable, Iterator

from actionkit.errors import SchemaError
from actionkit.tools.parameters import Declaration, ParameterBuilder

LOGGER = logging.getLogger(__name__)

QUALIFIED_NAME_SEPARATOR = "__"


class SchemaFormat(str, Enum):
    """Tool schema shapes understood by the supported chat APIs."""

    OPENAI = "openai"
    ANTHROPIC = "anthropic"
    GEMINI = "gemini"


@dataclass(frozen=True, slots=True)
class ActionSchema:
    """One compiled tool action."""

    tool_name: str
    action_name: str
    description: str
    parameters: dict[str, Any] | None = None

    @property
    def qualified_name(self) -> str:
        return f"{self.tool_name}{QUALIFIED_NAME_SEPARATOR}{self.action_name}"

    def function_spec(self) -> dict[str, Any]:
        spec: dict[str, Any] = {"name": self.qualified_name, "description": self.description}
        if self.parameters is not None:
            spec["parameters"] = copy.deepcopy(self.parameters)
        return spec


def render_openai(schema: ActionSchema) -> dict[str, Any]:
    return {"type": "function", "function": schema.function_spec()}


def render_anthropic(schema: ActionSchema) -> dict[str, Any]:
    spec = schema.function_spec()
    if "parameters" in spec:
        spec["input_schema"] = spec.pop("parameters")
    return spec


def render_gemini(schema: ActionSchema) -> dict[str, Any]:
    return schema.function_spec()


_RENDERERS: dict[SchemaFormat, Callable[[ActionSchema], dict[str, Any]]] = {
    SchemaFormat.OPENAI: render_openai,
    SchemaFormat.ANTHROPIC: render_anthropic,
    SchemaFormat.GEMINI: render_gemini,
}


def render(schemas: list[ActionSchema], fmt: SchemaFormat | str) -> list[dict[str, Any]]:
    """Render ``schemas`` in order for the given provider format."""

    renderer = _RENDERERS[SchemaFormat(fmt)]
    return [renderer(schema) for schema in schemas]


class ActionSchemas:
    """Registry of the actions one tool exposes, in declaration order."""

    def __init__(self, tool_name: str) -> None:
        self._tool_name = tool_name
        self._schemas: dict[str, ActionSchema] = {}

    @property
    def tool_name(self) -> str:
        return self._tool_name

    def add_action(
        self,
        method_name: str,
        description: str,
        parameters: Declaration | None = None,
    ) -> ActionSchema:
        """Compile and store one action.

        ``parameters`` is a declaration callback receiving an object-scoped
        :class:`ParameterBuilder`. Omit it for actions that take no arguments;
        a callback that declares nothing is an error.
        """

        if not isinstance(method_name, str) or not method_name:
            raise SchemaError(f"invalid name type: action name {method_name!r} must be a non-empty string")
        if not isinstance(description, str) or not description.strip():
            raise SchemaError(f"missing description for action '{method_name}'")

        compiled: dict[str, Any] | None = None
        if parameters is not None:
            compiled = ParameterBuilder("object").build(parameters)
            if not compiled["properties"]:
                raise SchemaError(
                    f"action has no parameters: '{method_name}' was given a parameter block "
                    "that declares no properties"
                )

        schema = ActionSchema(
            tool_name=self._tool_name,
            action_name=method_name,
            description=description,
            parameters=compiled,
        )
        self._schemas[method_name] = schema
        LOGGER.debug("Registered action %s", schema.qualified_name)
        return schema

    def get(self, action_name: str) -> ActionSchema | None:
        return self._schemas.get(action_name)

    def __contains__(self, action_name: object) -> bool:
        return action_name in self._schemas

    def __iter__(self) -> Iterator[ActionSchema]:
        return iter(self._schemas.values())

    def __len__(self) -> int:
        return len(self._schemas)

    def to_provider_format(self, fmt: SchemaFormat | str) -> list[dict[str, Any]]:
        return render(list(self), fmt)

    def to_openai_format(self) -> list[dict[str, Any]]:
        return self.to_provider_format(SchemaFormat.OPENAI)

    def to_anthropic_format(self) -> list[dict[str, Any]]:
        return self.to_provider_format(SchemaFormat.ANTHROPIC)

    def to_gemini_format(self) -> list[dict[str, Any]]:
        return self.to_provider_format(SchemaFormat.GEMINI)
