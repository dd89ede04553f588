"""OpenRouter implementation of LLMProvider."""

from __future__ import annotations

import logging
import time
from typing import Any

import httpx

from actionkit.config import Settings
from actionkit.llm.base import LLMProvider
from actionkit.models import LLMResponse, ToolCall

_LOGGER = logging.getLogger(__name__)

_RETRY_BACKOFF_SECONDS = [5, 15, 45]


class OpenRouterProvider(LLMProvider):
    """LLM provider using OpenRouter's OpenAI-compatible chat endpoint.

    A caller-owned ``client`` is reused across requests and left open;
    without one, each request opens and closes its own ``httpx.Client``.
    """

    def __init__(self, settings: Settings, client: httpx.Client | None = None) -> None:
        self._settings = settings
        self._client = client

    def chat(
        self,
        messages: list[dict[str, Any]],
        tools: list[dict[str, Any]] | None = None,
        tool_choice: str = "auto",
    ) -> LLMResponse:
        payload: dict[str, Any] = {
            "model": self._settings.openrouter_model,
            "messages": messages,
        }
        if tools:
            payload["tools"] = tools
            payload["tool_choice"] = tool_choice

        if self._client is not None:
            data = self._post(self._client, payload)
        else:
            timeout = httpx.Timeout(self._settings.request_timeout_seconds)
            with httpx.Client(timeout=timeout) as client:
                data = self._post(client, payload)

        choice = data["choices"][0]["message"]
        finish_reason = data["choices"][0].get("finish_reason")
        content = choice.get("content") or ""
        raw_tool_calls = choice.get("tool_calls") or []
        _LOGGER.info(
            "LLM response: finish_reason=%r content=%r tool_calls=%r",
            finish_reason,
            content[:200],
            raw_tool_calls,
        )

        if raw_tool_calls:
            return LLMResponse(
                role=choice.get("role", "assistant"),
                tool_calls=[ToolCall.from_openai(tc) for tc in raw_tool_calls],
                raw=data,
            )
        return LLMResponse(role=choice.get("role", "assistant"), chat_completion=content, raw=data)

    def _post(self, client: httpx.Client, payload: dict[str, Any]) -> dict[str, Any]:
        max_retries = min(self._settings.llm_max_retries, len(_RETRY_BACKOFF_SECONDS))
        url = f"{self._settings.openrouter_base_url.rstrip('/')}/chat/completions"
        for attempt in range(max_retries + 1):
            response = client.post(
                url,
                headers={
                    "Authorization": f"Bearer {self._settings.openrouter_api_key}",
                    "Content-Type": "application/json",
                },
                json=payload,
                timeout=self._settings.request_timeout_seconds,
            )
            if response.status_code == 429 and attempt < max_retries:
                wait = _RETRY_BACKOFF_SECONDS[attempt]
                _LOGGER.warning(
                    "OpenRouter rate limited (429), retrying in %ds (attempt %d/%d)",
                    wait,
                    attempt + 1,
                    max_retries,
                )
                time.sleep(wait)
                continue
            response.raise_for_status()
            break
        return response.json()
