"""LLM provider interface."""

from __future__ import annotations

from abc import ABC, abstractmethod
from typing import Any, ClassVar

from actionkit.models import LLMResponse
from actionkit.tools.schemas import SchemaFormat


class LLMProvider(ABC):
    """Abstract chat model used by the assistant.

    ``schema_format`` names the tool schema shape the provider expects.
    """

    schema_format: ClassVar[SchemaFormat] = SchemaFormat.OPENAI

    @abstractmethod
    def chat(
        self,
        messages: list[dict[str, Any]],
        tools: list[dict[str, Any]] | None = None,
        tool_choice: str = "auto",
    ) -> LLMResponse:
        """Send the conversation and return the model's next message."""
