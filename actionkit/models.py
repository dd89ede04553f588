"""Core domain models used across layers."""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import Any, Literal, get_args

Role = Literal["system", "user", "assistant", "tool"]
ROLES: tuple[str, ...] = get_args(Role)


@dataclass(slots=True)
class ToolCall:
    """Tool invocation requested by an LLM.

    ``arguments`` is kept as the raw JSON text the model produced; it is only
    decoded when the call is executed.
    """

    id: str
    name: str
    arguments: str = "{}"

    @classmethod
    def from_openai(cls, data: dict[str, Any]) -> ToolCall:
        function_data = data.get("function", {})
        return cls(
            id=data.get("id", ""),
            name=function_data.get("name", ""),
            arguments=function_data.get("arguments") or "{}",
        )

    def to_openai(self) -> dict[str, Any]:
        return {
            "id": self.id,
            "type": "function",
            "function": {"name": self.name, "arguments": self.arguments},
        }


@dataclass(slots=True)
class Message:
    """One turn of a conversation thread."""

    role: Role
    content: str | None = None
    tool_calls: list[ToolCall] = field(default_factory=list)
    tool_call_id: str | None = None

    def __post_init__(self) -> None:
        if self.role not in ROLES:
            raise ValueError(f"Invalid role '{self.role}'. Valid roles are: {', '.join(ROLES)}")
        if self.tool_calls and self.role != "assistant":
            raise ValueError("Only assistant messages can carry tool calls")
        if self.role == "tool" and not self.tool_call_id:
            raise ValueError("Tool messages require a tool_call_id")
        if self.tool_call_id and self.role != "tool":
            raise ValueError("Only tool messages can carry a tool_call_id")

    def to_openai(self) -> dict[str, Any]:
        payload: dict[str, Any] = {"role": self.role, "content": self.content}
        if self.tool_calls:
            payload["tool_calls"] = [tc.to_openai() for tc in self.tool_calls]
        if self.tool_call_id:
            payload["tool_call_id"] = self.tool_call_id
        return payload


@dataclass(slots=True)
class LLMResponse:
    """Result from an LLM chat request.

    A response either asks for tool calls or carries a final answer in
    ``chat_completion``, never both.
    """

    role: Role = "assistant"
    tool_calls: list[ToolCall] = field(default_factory=list)
    chat_completion: str | None = None
    raw: dict[str, Any] | None = None
