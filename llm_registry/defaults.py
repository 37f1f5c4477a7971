"""Default provider and model definitions.

Both catalogs are rebuilt on every call, so callers are free to mutate
what they get back.
"""

from typing import Dict, List

from .schemas import ModelInfo, ProviderApiType, ProviderConfig


def default_providers() -> Dict[str, ProviderConfig]:
    """Return the default provider configurations keyed by provider name."""
    return {
        "anthropic": ProviderConfig(
            api_type=ProviderApiType.ANTHROPIC,
            api_key_env="ANTHROPIC_API_KEY",
        ),
        "openai": ProviderConfig(
            api_type=ProviderApiType.OPENAI,
            api_key_env="OPENAI_API_KEY",
        ),
        "ollama": ProviderConfig(
            api_type=ProviderApiType.OPENAI,
            base_url="http://localhost:11434/v1",
        ),
        "lmstudio": ProviderConfig(
            api_type=ProviderApiType.OPENAI,
            base_url="http://localhost:1234/v1",
        ),
        "groq": ProviderConfig(
            api_type=ProviderApiType.GROQ,
            api_key_env="GROQ_API_KEY",
        ),
        "google": ProviderConfig(
            api_type=ProviderApiType.GOOGLE,
            api_key_env="GOOGLE_API_KEY",
        ),
        "mistral": ProviderConfig(
            api_type=ProviderApiType.MISTRAL,
            api_key_env="MISTRAL_API_KEY",
        ),
        "openrouter": ProviderConfig(
            api_type=ProviderApiType.OPENAI,
            base_url="https://openrouter.ai/api/v1",
            api_key_env="OPENROUTER_API_KEY",
        ),
        "together": ProviderConfig(
            api_type=ProviderApiType.OPENAI,
            base_url="https://api.together.xyz/v1",
            api_key_env="TOGETHER_API_KEY",
        ),
        "kimi": ProviderConfig(
            api_type=ProviderApiType.OPENAI,
            base_url="https://api.moonshot.cn/v1",
            api_key_env="MOONSHOT_API_KEY",
        ),
        "synapse": ProviderConfig(
            api_type=ProviderApiType.SYNAPSE,
            base_url="https://gateway.synapse.omni.dev",
            api_key_env="SYNAPSE_API_KEY",
        ),
    }


# (model id, provider name), in catalog order
_DEFAULT_MODELS = [
    # Anthropic
    ("claude-sonnet-4-20250514", "anthropic"),
    ("claude-opus-4-20250514", "anthropic"),
    ("claude-3-5-haiku-20241022", "anthropic"),
    # OpenAI
    ("gpt-4o", "openai"),
    ("gpt-4-turbo", "openai"),
    ("gpt-3.5-turbo", "openai"),
    ("o1", "openai"),
    ("o1-mini", "openai"),
    # Groq (fast inference)
    ("llama-3.3-70b-versatile", "groq"),
    ("llama-3.1-8b-instant", "groq"),
    ("mixtral-8x7b-32768", "groq"),
    # Google
    ("gemini-2.0-flash", "google"),
    ("gemini-1.5-pro", "google"),
    # Mistral
    ("mistral-large-latest", "mistral"),
    ("codestral-latest", "mistral"),
    # Together
    ("meta-llama/Llama-3.3-70B-Instruct-Turbo", "together"),
    ("Qwen/Qwen2.5-Coder-32B-Instruct", "together"),
    # Kimi (Moonshot AI)
    ("kimi-k2.5", "kimi"),
    ("moonshot-v1-128k", "kimi"),
    ("moonshot-v1-32k", "kimi"),
]


def default_models() -> List[ModelInfo]:
    """Return the default model catalog."""
    return [ModelInfo(id=model_id, provider=provider) for model_id, provider in _DEFAULT_MODELS]


__all__ = ["default_models", "default_providers"]
