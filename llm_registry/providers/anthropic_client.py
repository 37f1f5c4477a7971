"""Anthropic Messages API client.

This client talks to Anthropic's ``/v1/messages`` endpoint over plain
HTTP.  Chat messages in the OpenAI layout are translated on the way
out: ``system`` messages are joined into the top-level ``system`` field
and everything else is sent as ``user``/``assistant`` turns.  The reply
is wrapped in the same ``choices[0].message.content`` shape the
OpenAI-compatible clients return.

Transport errors (connection resets, timeouts, 5xx) are retried with
exponential backoff before giving up.
"""

from typing import List, Dict, Any, Optional

import requests
from backoff import on_exception, expo

from .llm_client import LLMClient


ANTHROPIC_BASE_URL = "https://api.anthropic.com"
ANTHROPIC_VERSION = "2023-06-01"
DEFAULT_MAX_TOKENS = 1024


def _is_client_error(exc: Exception) -> bool:
    # 4xx answers will not change on retry, except rate limiting
    response = getattr(exc, "response", None)
    if response is None:
        return False
    return 400 <= response.status_code < 500 and response.status_code != 429


class AnthropicClient(LLMClient):
    """Client for the Anthropic Messages API."""

    def __init__(self, api_key: str, base_url: str = ANTHROPIC_BASE_URL, timeout: int = 300) -> None:
        self.api_key = api_key
        self.base_url = base_url.rstrip("/")
        self.timeout = timeout

    def chat_completion(
        self,
        messages: List[Dict[str, Any]],
        model: str,
        temperature: float = 0.0,
        **kwargs: Any,
    ) -> Any:
        system_parts: List[str] = []
        turns: List[Dict[str, Any]] = []
        for msg in messages:
            role = msg.get("role", "user")
            content = msg.get("content", "")
            if role == "system":
                system_parts.append(content)
            elif role == "assistant":
                turns.append({"role": "assistant", "content": content})
            else:
                turns.append({"role": "user", "content": content})

        payload: Dict[str, Any] = {
            "model": model,
            "messages": turns,
            "max_tokens": kwargs.get("max_tokens") or DEFAULT_MAX_TOKENS,
            "temperature": temperature,
        }
        if system_parts:
            payload["system"] = "\n".join(system_parts)
        if kwargs.get("stop"):
            payload["stop_sequences"] = kwargs["stop"]

        # OpenAI-style function descriptors become Anthropic tool specs
        tools = kwargs.get("tools")
        if tools:
            payload["tools"] = [self._convert_tool(tool) for tool in tools]

        try:
            response_json = self._post(payload)
        except Exception as exc:
            raise RuntimeError(f"AnthropicClient error: {exc}") from exc

        text = "".join(
            block.get("text", "")
            for block in response_json.get("content", [])
            if block.get("type") == "text"
        )
        return self._wrap_response(text, usage=self._extract_usage(response_json))

    @on_exception(expo, requests.exceptions.RequestException, max_tries=3, giveup=_is_client_error)
    def _post(self, payload: Dict[str, Any]) -> Dict[str, Any]:
        response = requests.post(
            f"{self.base_url}/v1/messages",
            json=payload,
            headers={
                "x-api-key": self.api_key,
                "anthropic-version": ANTHROPIC_VERSION,
                "content-type": "application/json",
            },
            timeout=self.timeout,
        )
        response.raise_for_status()
        return response.json()

    def _convert_tool(self, tool: Dict[str, Any]) -> Dict[str, Any]:
        function = tool.get("function", tool)
        return {
            "name": function.get("name"),
            "description": function.get("description", ""),
            "input_schema": function.get("parameters", {"type": "object", "properties": {}}),
        }

    def _extract_usage(self, response_json: Dict[str, Any]) -> Dict[str, Optional[int]]:
        usage = response_json.get("usage") or {}
        prompt_tokens = usage.get("input_tokens")
        completion_tokens = usage.get("output_tokens")
        total_tokens = None
        if prompt_tokens is not None and completion_tokens is not None:
            total_tokens = prompt_tokens + completion_tokens
        return {
            "prompt_tokens": prompt_tokens,
            "completion_tokens": completion_tokens,
            "total_tokens": total_tokens,
        }

    def _wrap_response(self, content: str, usage: Optional[Dict[str, Any]] = None) -> Any:
        class Message:
            def __init__(self, content: str) -> None:
                self.content = content
                self.tool_calls = None
        class Choice:
            def __init__(self, message: Message) -> None:
                self.message = message
        class Response:
            def __init__(self, content: str, usage: Optional[Dict[str, Any]]) -> None:
                self.choices = [Choice(Message(content))]
                self.usage = usage
        return Response(content, usage)


__all__ = ["AnthropicClient"]
