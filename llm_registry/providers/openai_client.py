"""OpenAI-compatible client implementation.

:class:`OpenAICompatibleClient` sends chat completion requests through
the ``openai`` SDK to any endpoint speaking the Chat Completions API.
Vendor clients (Gemini, Groq, Mistral) subclass it and only pin their
base URL.  :class:`OpenAIClient` is the generic flavour: it accepts a
``base_url`` override and works without a key, which is what local
servers such as Ollama or LM Studio expect.
"""

from typing import List, Dict, Any, Optional

from openai import OpenAI

from .llm_client import LLMClient

# Sent when no key resolves; the SDK refuses to start without one
NO_API_KEY = "no-key"


class OpenAICompatibleClient(LLMClient):
    """Client for endpoints implementing OpenAI Chat Completions."""

    DEFAULT_BASE_URL: Optional[str] = None
    display_name = "OpenAI-compatible"

    def __init__(self, api_key: Optional[str] = None, base_url: Optional[str] = None) -> None:
        self.api_key = api_key
        self.base_url = base_url or self.DEFAULT_BASE_URL
        self.client = OpenAI(
            api_key=api_key if api_key is not None else NO_API_KEY,
            base_url=self.base_url,
        )

    def chat_completion(
        self,
        messages: List[Dict[str, Any]],
        model: str,
        temperature: float = 0.0,
        **kwargs: Any,
    ) -> Any:
        request_payload: Dict[str, Any] = {
            "model": model,
            "messages": [],
            "temperature": temperature,
        }

        for msg in messages:
            payload_msg: Dict[str, Any] = {
                "role": msg.get("role", "user"),
                "content": msg.get("content", ""),
            }
            tool_calls = msg.get("tool_calls")
            if tool_calls:
                payload_msg["tool_calls"] = tool_calls
            tool_call_id = msg.get("tool_call_id")
            if tool_call_id:
                payload_msg["tool_call_id"] = tool_call_id
            request_payload["messages"].append(payload_msg)

        # Tools support: list of function descriptors
        tools = kwargs.pop("tools", None)
        if tools:
            request_payload["tools"] = tools
            request_payload["tool_choice"] = kwargs.pop("tool_choice", "auto")

        for key in ("max_tokens", "top_p", "stop", "response_format"):
            if kwargs.get(key) is not None:
                request_payload[key] = kwargs[key]

        try:
            response = self.client.chat.completions.create(**request_payload)
        except Exception as exc:
            raise RuntimeError(f"{self.display_name} chat_completion error: {exc}") from exc
        return response


class OpenAIClient(OpenAICompatibleClient):
    """Client for the OpenAI API and servers compatible with it."""

    requires_api_key = False
    supports_base_url = True
    display_name = "OpenAI"


__all__ = ["OpenAICompatibleClient", "OpenAIClient"]
