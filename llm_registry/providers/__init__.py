"""Built-in clients.

This subpackage contains one module per API format the registry can
build a client for by itself.  The ``BUILTIN_CLIENTS`` mapping associates
each such :class:`llm_registry.schemas.ProviderApiType` with its client
class.  External consumers should go through
``llm_registry.api_registry.ProviderRegistry`` rather than instantiating
these classes directly.

Formats not listed here (the ``synapse`` gateway and any custom type)
are served by factories registered on a ``ProviderRegistry``.
"""

from ..schemas import ProviderApiType
from .llm_client import LLMClient
from .anthropic_client import AnthropicClient
from .openai_client import OpenAIClient, OpenAICompatibleClient
from .gemini_client import GeminiClient
from .groq_client import GroqClient
from .mistral_client import MistralClient


BUILTIN_CLIENTS = {
    ProviderApiType.ANTHROPIC: AnthropicClient,
    ProviderApiType.OPENAI: OpenAIClient,
    ProviderApiType.GOOGLE: GeminiClient,
    ProviderApiType.GROQ: GroqClient,
    ProviderApiType.MISTRAL: MistralClient,
}

__all__ = [
    "BUILTIN_CLIENTS",
    "AnthropicClient",
    "GeminiClient",
    "GroqClient",
    "LLMClient",
    "MistralClient",
    "OpenAIClient",
    "OpenAICompatibleClient",
]
