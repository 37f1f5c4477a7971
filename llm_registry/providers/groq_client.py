"""Groq API client implementation.

Groq serves open-weight models (Llama, Mixtral) behind an
OpenAI-compatible endpoint, so this client only pins the base URL.
"""

from .openai_client import OpenAICompatibleClient


GROQ_OPENAI_BASE_URL = "https://api.groq.com/openai/v1"


class GroqClient(OpenAICompatibleClient):
    """Client for Groq chat completions."""

    DEFAULT_BASE_URL = GROQ_OPENAI_BASE_URL
    display_name = "Groq"


__all__ = ["GroqClient"]
