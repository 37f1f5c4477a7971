from types import SimpleNamespace

import pytest

from llm_registry.defaults import default_providers
from llm_registry.env_api_keys import has_api_key


def pytest_configure(config):
    config.addinivalue_line("markers", "integration: talks to a live provider API")


def _build_fake_response(content: str | None = None) -> SimpleNamespace:
    message = SimpleNamespace(content=content, tool_calls=None)
    choice = SimpleNamespace(message=message)
    return SimpleNamespace(choices=[choice])


@pytest.fixture
def fake_response():
    return _build_fake_response


@pytest.fixture
def clean_env(monkeypatch):
    """Remove every catalog API key variable from the environment."""
    for config in default_providers().values():
        if config.api_key_env:
            monkeypatch.delenv(config.api_key_env, raising=False)
    return monkeypatch


def _is_live_enabled(provider: str | None = None) -> bool:
    if provider:
        return has_api_key(provider)
    return True


@pytest.fixture(scope="session")
def live_enabled():
    return _is_live_enabled
