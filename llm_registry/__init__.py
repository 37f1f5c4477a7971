from .api_registry import (
    ProviderFactory,
    ProviderRegistry,
    get_client,
    get_client_for_model,
    list_providers,
)
from .defaults import default_models, default_providers
from .env_api_keys import has_api_key, resolve_api_key
from .errors import (
    ConstructionFailedError,
    MissingCredentialError,
    NoFactoryRegisteredError,
    ProviderError,
)
from .models import detect_provider_by_prefix, list_models, provider_for_model
from .providers import LLMClient
from .schemas import (
    ApiType,
    CustomApiType,
    ModelInfo,
    ProviderApiType,
    ProviderConfig,
    parse_api_type,
)

__all__ = [
    "ApiType",
    "ConstructionFailedError",
    "CustomApiType",
    "LLMClient",
    "MissingCredentialError",
    "ModelInfo",
    "NoFactoryRegisteredError",
    "ProviderApiType",
    "ProviderConfig",
    "ProviderError",
    "ProviderFactory",
    "ProviderRegistry",
    "default_models",
    "default_providers",
    "detect_provider_by_prefix",
    "get_client",
    "get_client_for_model",
    "has_api_key",
    "list_models",
    "list_providers",
    "parse_api_type",
    "provider_for_model",
    "resolve_api_key",
]
