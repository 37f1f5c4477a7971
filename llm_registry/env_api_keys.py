"""Environment key helpers.

Providers usually need an API key.  A :class:`ProviderConfig` can name
an environment variable holding it (``api_key_env``), store it directly
(``api_key``), or both.  :func:`resolve_api_key` applies the lookup
policy and :func:`has_api_key` tells whether a catalog provider is ready
for use.

A ``.env`` file, when present, is loaded on import.  Variables already
set in the process environment are left untouched.
"""

import logging
import os
from typing import Dict, Optional

from dotenv import load_dotenv

from .defaults import default_providers
from .schemas import ProviderConfig

logger = logging.getLogger(__name__)

if not load_dotenv():
    logger.debug("No .env file found or could not be loaded.")


def resolve_api_key(config: ProviderConfig) -> Optional[str]:
    """Resolve the API key for *config*.

    The environment variable named by ``api_key_env`` wins whenever it is
    set, even to an empty string.  Otherwise the direct ``api_key`` is
    returned, which may be ``None``.  The environment is read on every
    call.
    """
    if config.api_key_env is not None:
        key = os.environ.get(config.api_key_env)
        if key is not None:
            return key
    return config.api_key


def has_api_key(provider: str, providers: Optional[Dict[str, ProviderConfig]] = None) -> bool:
    """Return True if *provider* can be used with the current environment.

    Providers that declare no key at all (local servers such as Ollama)
    and names missing from the catalog are always considered ready.
    """
    if providers is None:
        providers = default_providers()
    config = providers.get(provider)
    if config is None or (config.api_key_env is None and config.api_key is None):
        return True
    return resolve_api_key(config) is not None


__all__ = ["has_api_key", "resolve_api_key"]
