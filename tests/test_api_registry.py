from types import SimpleNamespace

import pytest

from llm_registry import api_registry
from llm_registry.api_registry import (
    ProviderRegistry,
    get_client,
    get_client_for_model,
    list_providers,
)
from llm_registry.defaults import default_providers
from llm_registry.errors import (
    ConstructionFailedError,
    MissingCredentialError,
    NoFactoryRegisteredError,
    ProviderError,
)
from llm_registry.providers import openai_client
from llm_registry.providers.anthropic_client import AnthropicClient
from llm_registry.providers.gemini_client import GeminiClient
from llm_registry.providers.groq_client import GroqClient
from llm_registry.providers.mistral_client import MistralClient
from llm_registry.providers.openai_client import OpenAIClient
from llm_registry.schemas import CustomApiType, ProviderApiType, ProviderConfig


def test_registry_default_is_empty():
    registry = ProviderRegistry()
    assert registry.registered_types() == []
    assert "synapse" not in registry


def test_register_factory_overwrites():
    registry = ProviderRegistry()
    first, second = object(), object()
    registry.register_factory("test", lambda name, config: first)
    registry.register_factory("test", lambda name, config: second)
    config = ProviderConfig(api_type=CustomApiType("test"))
    assert registry.create_provider("test", config) is second
    assert registry.registered_types() == ["test"]


def test_unregister_factory():
    registry = ProviderRegistry()
    registry.register_factory("test", lambda name, config: object())
    registry.unregister_factory("test")
    registry.unregister_factory("never-registered")
    assert "test" not in registry


def test_custom_type_without_factory_names_the_tag():
    registry = ProviderRegistry()
    config = ProviderConfig(api_type=CustomApiType("acme"))
    with pytest.raises(NoFactoryRegisteredError) as excinfo:
        registry.create_provider("my-provider", config)
    assert excinfo.value.type_name == "acme"
    assert "'acme'" in str(excinfo.value)


def test_custom_factory_receives_name_and_config():
    registry = ProviderRegistry()
    calls = []
    client = SimpleNamespace(kind="fake")

    def factory(name, config):
        calls.append((name, config))
        return client

    registry.register_factory("acme", factory)
    config = ProviderConfig(api_type=CustomApiType("acme"), base_url="http://acme.local")
    assert registry.create_provider("internal", config) is client
    assert calls == [("internal", config)]


def test_custom_factory_error_propagates_unmodified():
    registry = ProviderRegistry()
    failure = LookupError("test factory called")

    def factory(name, config):
        raise failure

    registry.register_factory("test", factory)
    config = ProviderConfig(api_type=CustomApiType("test"))
    with pytest.raises(LookupError) as excinfo:
        registry.create_provider("test", config)
    assert excinfo.value is failure


def test_synapse_without_factory(clean_env):
    clean_env.setenv("SYNAPSE_API_KEY", "sk-synapse")
    registry = ProviderRegistry()
    with pytest.raises(NoFactoryRegisteredError) as excinfo:
        registry.create_provider("synapse", default_providers()["synapse"])
    assert excinfo.value.type_name == "synapse"
    assert "register a factory for 'synapse'" in str(excinfo.value)


def test_synapse_uses_registered_factory():
    registry = ProviderRegistry()
    client = object()
    registry.register_factory("synapse", lambda name, config: client)
    config = ProviderConfig(api_type=ProviderApiType.SYNAPSE)
    assert registry.create_provider("gateway", config) is client


def test_custom_type_named_like_builtin_is_not_coerced():
    # A custom tag only reaches custom factories, never built-in clients
    registry = ProviderRegistry()
    config = ProviderConfig(api_type=CustomApiType("Anthropic"), api_key="sk")
    with pytest.raises(NoFactoryRegisteredError):
        registry.create_provider("x", config)


def test_shadowing_builtin_name_has_no_effect():
    registry = ProviderRegistry()
    registry.register_factory("anthropic", lambda name, config: object())
    client = registry.create_provider("anthropic", ProviderConfig(api_key="sk-ant"))
    assert isinstance(client, AnthropicClient)


@pytest.mark.parametrize("provider", ["anthropic", "groq", "google", "mistral"])
def test_builtin_without_key_raises_missing_credential(clean_env, provider):
    registry = ProviderRegistry()
    with pytest.raises(MissingCredentialError) as excinfo:
        registry.create_provider(provider, default_providers()[provider])
    assert excinfo.value.provider == provider
    assert f"'{provider}'" in str(excinfo.value)


def test_missing_credential_names_given_provider(clean_env):
    registry = ProviderRegistry()
    config = ProviderConfig(api_type=ProviderApiType.ANTHROPIC, api_key_env="ANTHROPIC_API_KEY")
    with pytest.raises(MissingCredentialError, match="'work-claude'"):
        registry.create_provider("work-claude", config)


@pytest.mark.parametrize(
    "provider, env_var, client_cls",
    [
        ("anthropic", "ANTHROPIC_API_KEY", AnthropicClient),
        ("google", "GOOGLE_API_KEY", GeminiClient),
        ("groq", "GROQ_API_KEY", GroqClient),
        ("mistral", "MISTRAL_API_KEY", MistralClient),
        ("openai", "OPENAI_API_KEY", OpenAIClient),
    ],
)
def test_builtin_with_env_key(clean_env, provider, env_var, client_cls):
    clean_env.setenv(env_var, "sk-from-env")
    client = ProviderRegistry().create_provider(provider, default_providers()[provider])
    assert isinstance(client, client_cls)
    assert client.api_key == "sk-from-env"


def test_openai_kind_without_key_gets_base_url(clean_env):
    client = ProviderRegistry().create_provider("ollama", default_providers()["ollama"])
    assert isinstance(client, OpenAIClient)
    assert client.api_key is None
    assert client.base_url == "http://localhost:11434/v1"


def test_base_url_only_forwarded_where_supported():
    config = ProviderConfig(api_type=ProviderApiType.GROQ, api_key="sk", base_url="http://elsewhere")
    client = ProviderRegistry().create_provider("groq", config)
    assert client.base_url == "https://api.groq.com/openai/v1"


def test_builtin_construction_failure(monkeypatch):
    def broken_openai(**kwargs):
        raise ValueError("invalid base url")

    monkeypatch.setattr(openai_client, "OpenAI", broken_openai)
    config = ProviderConfig(api_type=ProviderApiType.OPENAI, base_url="::nope::")
    with pytest.raises(ConstructionFailedError) as excinfo:
        ProviderRegistry().create_provider("broken", config)
    assert str(excinfo.value) == "invalid base url"
    assert excinfo.value.provider == "broken"
    assert isinstance(excinfo.value.__cause__, ValueError)
    assert isinstance(excinfo.value, ProviderError)


def test_builtin_clients_cover_all_named_types_but_synapse():
    from llm_registry.providers import BUILTIN_CLIENTS

    assert set(BUILTIN_CLIENTS) == set(ProviderApiType) - {ProviderApiType.SYNAPSE}


def test_list_providers():
    assert list_providers() == sorted(default_providers())
    assert list_providers({"b": ProviderConfig(), "a": ProviderConfig()}) == ["a", "b"]


def test_get_client_unknown_provider_returns_none():
    assert get_client("not-a-provider") is None


def test_get_client_builtin(clean_env):
    clean_env.setenv("ANTHROPIC_API_KEY", "sk-ant")
    client = get_client("anthropic")
    assert isinstance(client, AnthropicClient)


def test_get_client_uses_given_registry_and_catalog():
    registry = ProviderRegistry()
    client = object()
    registry.register_factory("acme", lambda name, config: client)
    providers = {"internal": ProviderConfig(api_type="acme")}
    assert get_client("internal", registry=registry, providers=providers) is client


def test_get_client_propagates_errors(clean_env):
    with pytest.raises(MissingCredentialError):
        get_client("groq")


def test_get_client_for_model(clean_env):
    clean_env.setenv("MOONSHOT_API_KEY", "sk-moon")
    client = get_client_for_model("moonshot-v1-128k")
    assert isinstance(client, OpenAIClient)
    assert client.base_url == "https://api.moonshot.cn/v1"


def test_get_client_for_unknown_model_returns_none():
    assert get_client_for_model("unknown-model") is None


def test_registry_logs_replacement(caplog):
    registry = ProviderRegistry()
    with caplog.at_level("DEBUG", logger=api_registry.__name__):
        registry.register_factory("acme", lambda name, config: object())
        registry.register_factory("acme", lambda name, config: object())
    assert "Replacing factory for provider type 'acme'" in caplog.text


@pytest.mark.parametrize("type_name", ["acme", "synapse"])
def test_assigned_extension_type_without_factory(type_name):
    config = ProviderConfig()
    config.api_type = type_name
    with pytest.raises(NoFactoryRegisteredError) as excinfo:
        ProviderRegistry().create_provider("x", config)
    assert excinfo.value.type_name == type_name


def test_assigned_custom_type_uses_factory():
    registry = ProviderRegistry()
    client = object()
    registry.register_factory("acme", lambda name, config: client)
    config = ProviderConfig()
    config.api_type = "acme"
    assert registry.create_provider("x", config) is client
