"""Provider registry.

This module turns a named :class:`ProviderConfig` into a live client.
Built-in API types are constructed directly from the resolved API key
(and, where the client supports it, the configured base URL).  The
``synapse`` gateway and custom types are delegated to factories that
consumers register on a :class:`ProviderRegistry`.

It exposes:

* :class:`ProviderRegistry` – holds custom factories and dispatches
  :meth:`ProviderRegistry.create_provider`.
* :func:`list_providers` – return the provider names of a catalog.
* :func:`get_client` – realize a catalog entry by provider name.
* :func:`get_client_for_model` – realize the provider serving a model.

A registry is not locked internally.  Applications sharing one across
threads must serialize registration against dispatch themselves.
"""

from __future__ import annotations

import logging
from typing import Callable, Dict, List, Optional, Sequence

from .defaults import default_providers
from .env_api_keys import resolve_api_key
from .errors import ConstructionFailedError, MissingCredentialError, NoFactoryRegisteredError
from .models import provider_for_model
from .providers import BUILTIN_CLIENTS, LLMClient
from .schemas import CustomApiType, ModelInfo, ProviderApiType, ProviderConfig

logger = logging.getLogger(__name__)

# Factory for custom provider types: (provider name, config) -> client
ProviderFactory = Callable[[str, ProviderConfig], LLMClient]

SYNAPSE_TYPE = ProviderApiType.SYNAPSE.value


class ProviderRegistry:
    """Provider registry with built-in and custom factory support."""

    def __init__(self) -> None:
        self._custom_factories: Dict[str, ProviderFactory] = {}

    def __contains__(self, type_name: object) -> bool:
        return type_name in self._custom_factories

    def __repr__(self) -> str:
        return f"ProviderRegistry(custom_factories={self.registered_types()!r})"

    def register_factory(self, type_name: str, factory: ProviderFactory) -> None:
        """Register *factory* for a custom provider type.

        ``type_name`` should match the string used for the config's
        ``type`` (``"synapse"`` for the gateway).  A previous factory under
        the same name is replaced.
        """
        if type_name in self._custom_factories:
            logger.debug("Replacing factory for provider type '%s'", type_name)
        else:
            logger.debug("Registering factory for provider type '%s'", type_name)
        self._custom_factories[type_name] = factory

    def unregister_factory(self, type_name: str) -> None:
        """Remove the factory for *type_name*, if any."""
        self._custom_factories.pop(type_name, None)

    def registered_types(self) -> List[str]:
        """Return the type names that have a factory, sorted."""
        return sorted(self._custom_factories)

    def create_provider(self, name: str, config: ProviderConfig) -> LLMClient:
        """Create a client for provider *name* from *config*.

        Built-in types are handled directly; ``synapse`` and custom types
        delegate to registered factories.  A factory's return value and
        exceptions are passed through untouched.

        Raises
        ------
        MissingCredentialError
            A built-in type needs an API key and none resolved.
        NoFactoryRegisteredError
            No factory is registered for ``synapse`` or the custom type.
        ConstructionFailedError
            The built-in client constructor raised.
        """
        api_type = config.api_type

        if isinstance(api_type, CustomApiType):
            factory = self._custom_factories.get(api_type.name)
            if factory is None:
                raise NoFactoryRegisteredError(api_type.name)
            logger.debug("Creating provider '%s' via custom factory '%s'", name, api_type.name)
            return factory(name, config)

        if api_type is ProviderApiType.SYNAPSE:
            factory = self._custom_factories.get(SYNAPSE_TYPE)
            if factory is None:
                raise NoFactoryRegisteredError(
                    SYNAPSE_TYPE,
                    "synapse provider not available: register a factory for 'synapse' "
                    "with ProviderRegistry.register_factory()",
                )
            logger.debug("Creating provider '%s' via synapse factory", name)
            return factory(name, config)

        return self._create_builtin(name, config, api_type)

    def _create_builtin(self, name: str, config: ProviderConfig, api_type: ProviderApiType) -> LLMClient:
        client_cls = BUILTIN_CLIENTS[api_type]
        api_key = resolve_api_key(config)
        if api_key is None and client_cls.requires_api_key:
            raise MissingCredentialError(name)

        kwargs = {"api_key": api_key}
        if client_cls.supports_base_url:
            kwargs["base_url"] = config.base_url

        logger.debug("Creating provider '%s' with %s", name, client_cls.__name__)
        try:
            return client_cls(**kwargs)
        except Exception as exc:
            raise ConstructionFailedError(name, str(exc)) from exc


def list_providers(providers: Optional[Dict[str, ProviderConfig]] = None) -> List[str]:
    """Return the provider names of *providers* (the default catalog if omitted)."""
    if providers is None:
        providers = default_providers()
    return sorted(providers)


def get_client(
    provider_name: str,
    registry: Optional[ProviderRegistry] = None,
    providers: Optional[Dict[str, ProviderConfig]] = None,
) -> Optional[LLMClient]:
    """Instantiate and return a client for a catalog provider.

    Parameters
    ----------
    provider_name : str
        The provider identifier (e.g. ``"anthropic"``).
    registry : ProviderRegistry, optional
        Registry holding custom factories.  An empty one is used when
        omitted, so only built-in types can be realized.
    providers : dict, optional
        Provider catalog to look the name up in.  Defaults to
        :func:`llm_registry.defaults.default_providers`.

    Returns
    -------
    LLMClient | None
        The client if the name is in the catalog, otherwise ``None``.
        Creation errors propagate.
    """
    if providers is None:
        providers = default_providers()
    config = providers.get(provider_name)
    if config is None:
        logger.debug("Provider '%s' not found in catalog", provider_name)
        return None
    if registry is None:
        registry = ProviderRegistry()
    return registry.create_provider(provider_name, config)


def get_client_for_model(
    model_id: str,
    registry: Optional[ProviderRegistry] = None,
    providers: Optional[Dict[str, ProviderConfig]] = None,
    models: Optional[Sequence[ModelInfo]] = None,
) -> Optional[LLMClient]:
    """Instantiate the client for the provider serving *model_id*.

    The provider comes from the model catalog, falling back to prefix
    detection.  Returns ``None`` when no provider can be determined or
    the provider is not in the catalog.
    """
    provider_name = provider_for_model(model_id, models)
    if provider_name is None:
        logger.debug("No provider found for model '%s'", model_id)
        return None
    return get_client(provider_name, registry=registry, providers=providers)


__all__ = [
    "ProviderFactory",
    "ProviderRegistry",
    "get_client",
    "get_client_for_model",
    "list_providers",
]
