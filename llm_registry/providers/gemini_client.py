"""Gemini API client implementation.

This module provides a :class:`LLMClient` implementation for Google
Gemini models using the OpenAI SDK compatibility endpoint. It sends
OpenAI-style chat completion requests to the Gemini API by configuring
``base_url`` on the OpenAI client.
"""

from .openai_client import OpenAICompatibleClient


GEMINI_OPENAI_BASE_URL = "https://generativelanguage.googleapis.com/v1beta/openai/"


class GeminiClient(OpenAICompatibleClient):
    """Client for Google's Gemini models via OpenAI compatibility."""

    DEFAULT_BASE_URL = GEMINI_OPENAI_BASE_URL
    display_name = "Gemini"


__all__ = ["GeminiClient"]
