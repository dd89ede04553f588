"""Conversation loop between a user, an LLM and a set of tools."""

from __future__ import annotations

import json
import logging
from typing import Any

from actionkit.errors import ConfigurationError
from actionkit.llm.base import LLMProvider
from actionkit.models import LLMResponse, Message, Role, ToolCall
from actionkit.thread import Thread
from actionkit.tools.base import Tool
from actionkit.tools.registry import ToolRegistry
from actionkit.tools.schemas import SchemaFormat

LOGGER = logging.getLogger(__name__)


class Assistant:
    """Drives one conversation thread until it reaches a stable state.

    After every message the assistant looks at the role of the last message
    in the thread: user and tool messages are answered by the LLM, assistant
    messages requesting tool calls are resolved (when auto-execution is on)
    and anything else ends the run.
    """

    def __init__(
        self,
        llm: LLMProvider,
        thread: Thread | None = None,
        tools: list[Tool] | None = None,
        instructions: str | None = None,
    ) -> None:
        if not isinstance(llm, LLMProvider) and not callable(getattr(llm, "chat", None)):
            raise ConfigurationError("LLM must implement a `chat()` method")
        if thread is None:
            thread = Thread()
        if not isinstance(thread, Thread):
            raise ConfigurationError("Thread must be an instance of actionkit.thread.Thread")
        if tools is None:
            tools = []
        if not isinstance(tools, (list, tuple)) or not all(isinstance(tool, Tool) for tool in tools):
            raise ConfigurationError("Tools must be a list of actionkit.tools.base.Tool instances")

        self._llm = llm
        self._thread = thread
        self._registry = ToolRegistry(list(tools))
        self._instructions = instructions

        if instructions:
            self.add_message(role="system", content=instructions)

    @property
    def llm(self) -> LLMProvider:
        return self._llm

    @property
    def thread(self) -> Thread:
        return self._thread

    @property
    def tools(self) -> list[Tool]:
        return self._registry.tools

    @property
    def instructions(self) -> str | None:
        return self._instructions

    @property
    def messages(self) -> list[Message]:
        return self._thread.messages

    def add_message(
        self,
        content: str | None = None,
        role: Role = "user",
        tool_calls: list[ToolCall] | None = None,
        tool_call_id: str | None = None,
    ) -> Message:
        message = Message(
            role=role,
            content=content,
            tool_calls=list(tool_calls or []),
            tool_call_id=tool_call_id,
        )
        return self._thread.add_message(message)

    def run(self, auto_tool_execution: bool = False) -> list[Message]:
        """Advance the conversation and return the thread's messages.

        With ``auto_tool_execution`` off the run stops at the first assistant
        message that requests tool calls; resolve them with
        :meth:`submit_tool_output` and call :meth:`run` again.
        """

        while True:
            last_message = self._thread.last_message
            if last_message is None or last_message.role == "system":
                break
            if last_message.role == "assistant":
                if last_message.tool_calls and auto_tool_execution:
                    self.run_tools(last_message.tool_calls)
                    continue
                break
            # user and tool messages both wait on the model
            self._chat_with_llm()

        return self._thread.messages

    def add_message_and_run(self, content: str, auto_tool_execution: bool = False) -> list[Message]:
        self.add_message(content=content, role="user")
        return self.run(auto_tool_execution=auto_tool_execution)

    def submit_tool_output(self, tool_call_id: str, output: Any) -> Message:
        """Record the output of a tool call resolved outside the loop."""

        return self.add_message(role="tool", content=_serialize_output(output), tool_call_id=tool_call_id)

    def run_tools(self, tool_calls: list[ToolCall]) -> None:
        """Execute requested tool calls in order, then ask the LLM once."""

        for tool_call in tool_calls:
            arguments = json.loads(tool_call.arguments or "{}")
            LOGGER.info("Running tool call %s (%s)", tool_call.id, tool_call.name)
            output = self._registry.execute(tool_call.name, arguments)
            self.submit_tool_output(tool_call_id=tool_call.id, output=output)

        self._chat_with_llm()

    def _chat_with_llm(self) -> LLMResponse:
        fmt = self._llm.schema_format if isinstance(self._llm, LLMProvider) else SchemaFormat.OPENAI
        tools = self._registry.to_provider_format(fmt)
        LOGGER.info("Calling LLM with %d message(s) and %d tool(s)", len(self._thread), len(tools))
        response = self._llm.chat(
            messages=self._thread.to_openai_messages(),
            tools=tools,
            tool_choice="auto",
        )

        if response.tool_calls:
            self.add_message(role=response.role, tool_calls=response.tool_calls)
        else:
            self.add_message(role=response.role, content=response.chat_completion or "")
        return response


def _serialize_output(output: Any) -> str:
    if isinstance(output, str):
        return output
    return json.dumps(output, default=str)
