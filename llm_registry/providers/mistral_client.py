"""Mistral API client implementation."""

from .openai_client import OpenAICompatibleClient


MISTRAL_BASE_URL = "https://api.mistral.ai/v1"


class MistralClient(OpenAICompatibleClient):
    """Client for Mistral chat completions."""

    DEFAULT_BASE_URL = MISTRAL_BASE_URL
    display_name = "Mistral"


__all__ = ["MistralClient"]
