"""Model lookups.

Helpers that map model identifiers to provider names, either through the
model catalog or, for ids the catalog does not know, through a prefix
heuristic.
"""

from typing import Dict, List, Optional, Sequence

from .defaults import default_models
from .schemas import ModelInfo

# Checked in order; the first matching prefix wins
_PREFIX_PROVIDERS = (
    ("claude", "anthropic"),
    ("gpt", "openai"),
    ("o1", "openai"),
    ("kimi", "kimi"),
    ("moonshot", "kimi"),
    ("gemini", "google"),
    ("llama", "groq"),
    ("mixtral", "groq"),
    ("mistral", "mistral"),
    ("codestral", "mistral"),
)


def detect_provider_by_prefix(model_id: str) -> Optional[str]:
    """Return the provider name whose prefix *model_id* starts with.

    Matching ignores case.  Returns ``None`` when no prefix applies.
    """
    lower = model_id.lower()
    for prefix, provider in _PREFIX_PROVIDERS:
        if lower.startswith(prefix):
            return provider
    return None


def list_models(models: Optional[Sequence[ModelInfo]] = None) -> Dict[str, List[str]]:
    """Return a mapping of provider names to their catalog model ids."""
    if models is None:
        models = default_models()
    grouped: Dict[str, List[str]] = {}
    for info in models:
        grouped.setdefault(info.provider, []).append(info.id)
    return grouped


def provider_for_model(model_id: str, models: Optional[Sequence[ModelInfo]] = None) -> Optional[str]:
    """Return the provider serving *model_id*.

    An exact catalog entry is preferred; otherwise the prefix heuristic is
    used.
    """
    if models is None:
        models = default_models()
    for info in models:
        if info.id == model_id:
            return info.provider
    return detect_provider_by_prefix(model_id)


__all__ = ["detect_provider_by_prefix", "list_models", "provider_for_model"]
