import pytest

from llm_registry.models import detect_provider_by_prefix, list_models, provider_for_model
from llm_registry.schemas import ModelInfo


@pytest.mark.parametrize(
    "model_id, provider",
    [
        ("claude-sonnet-4", "anthropic"),
        ("gpt-4o", "openai"),
        ("o1-mini", "openai"),
        ("kimi-k2.5", "kimi"),
        ("moonshot-v1", "kimi"),
        ("gemini-2.0-flash", "google"),
        ("llama-3.3-70b", "groq"),
        ("mixtral-8x7b", "groq"),
        ("mistral-large", "mistral"),
        ("codestral-latest", "mistral"),
    ],
)
def test_detect_provider_by_prefix_known(model_id, provider):
    assert detect_provider_by_prefix(model_id) == provider


def test_detect_provider_by_prefix_case_insensitive():
    assert detect_provider_by_prefix("CLAUDE-X") == "anthropic"
    assert detect_provider_by_prefix("GPT-4o") == "openai"
    assert detect_provider_by_prefix("KIMI-K2.5") == "kimi"


def test_detect_provider_by_prefix_unknown():
    assert detect_provider_by_prefix("unknown-model") is None
    assert detect_provider_by_prefix("") is None


def test_list_models_groups_by_provider():
    models = list_models()
    assert models["anthropic"][0] == "claude-sonnet-4-20250514"
    assert "gpt-4o" in models["openai"]
    assert models["kimi"] == ["kimi-k2.5", "moonshot-v1-128k", "moonshot-v1-32k"]
    assert sum(len(ids) for ids in models.values()) == 20


def test_provider_for_model_prefers_catalog():
    # Prefix detection would say "groq"; the catalog entry wins
    models = [ModelInfo(id="llama-3.3-70b", provider="together")]
    assert provider_for_model("llama-3.3-70b", models) == "together"


def test_provider_for_model_catalog_entry():
    assert provider_for_model("meta-llama/Llama-3.3-70B-Instruct-Turbo") == "together"


def test_provider_for_model_falls_back_to_prefix():
    assert provider_for_model("claude-future-9") == "anthropic"
    assert provider_for_model("no-such-model") is None
