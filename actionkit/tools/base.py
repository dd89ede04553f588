"""Tool contracts."""

from __future__ import annotations

import logging
import re
from typing import Any, ClassVar

from actionkit.errors import ToolNotFoundError
from actionkit.tools.parameters import Declaration
from actionkit.tools.schemas import ActionSchema, ActionSchemas, SchemaFormat

LOGGER = logging.getLogger(__name__)

_WORD_BOUNDARY = re.compile(r"(?<!^)(?=[A-Z])")


def tool_name_for(cls: type) -> str:
    """Return the snake_case tool name derived from a class's qualified name.

    ``WeatherTool`` becomes ``weather_tool`` and a nested ``Outer.Inner``
    becomes ``outer_inner``. Classes defined inside functions are named from
    the part after ``<locals>``.
    """

    qualname = cls.__qualname__.rpartition("<locals>.")[2]
    words = _WORD_BOUNDARY.sub("_", qualname.replace(".", ""))
    return words.lower()


class Tool:
    """Base class for tools exposing one or more actions to an LLM.

    Subclasses declare their actions in :meth:`define_actions`, which runs
    once when the class statement executes, and implement each action as a
    method of the same name::

        class Weather(Tool):
            @classmethod
            def define_actions(cls) -> None:
                cls.define_action(
                    "get_forecast",
                    description="Get the forecast for a city",
                    parameters=lambda p: p.property("city", type="string", required=True),
                )

            def get_forecast(self, city: str) -> str:
                ...
    """

    name: ClassVar[str] = "tool"
    action_schemas: ClassVar[ActionSchemas] = ActionSchemas("tool")

    def __init_subclass__(cls, **kwargs: Any) -> None:
        super().__init_subclass__(**kwargs)
        if "name" not in cls.__dict__:
            cls.name = tool_name_for(cls)
        cls.action_schemas = ActionSchemas(cls.name)
        cls.define_actions()
        if cls.action_schemas:
            LOGGER.info("Tool %s defines actions: %s", cls.name, [s.action_name for s in cls.action_schemas])

    @classmethod
    def define_actions(cls) -> None:
        """Declare this tool's actions. The default declares none."""

    @classmethod
    def define_action(
        cls,
        method_name: str,
        description: str,
        parameters: Declaration | None = None,
    ) -> ActionSchema:
        return cls.action_schemas.add_action(method_name, description, parameters)

    def to_provider_format(self, fmt: SchemaFormat | str) -> list[dict[str, Any]]:
        return self.action_schemas.to_provider_format(fmt)

    def execute(self, action_name: str, /, **kwargs: Any) -> Any:
        """Run ``action_name`` with keyword arguments and return its result."""

        if action_name not in self.action_schemas:
            raise ToolNotFoundError(f"Tool '{self.name}' has no action '{action_name}'")
        method = getattr(self, action_name, None)
        if not callable(method):
            raise ToolNotFoundError(f"Tool '{self.name}' declares '{action_name}' but does not implement it")
        return method(**kwargs)
