"""Exceptions raised while turning a provider config into a client."""

from typing import Optional


class ProviderError(RuntimeError):
    """Base class for registry failures."""


class MissingCredentialError(ProviderError):
    """A built-in provider needed an API key and none could be resolved."""

    def __init__(self, provider: str) -> None:
        super().__init__(f"API key not set for provider '{provider}'")
        self.provider = provider


class NoFactoryRegisteredError(ProviderError):
    """No factory is registered for an extension provider type."""

    def __init__(self, type_name: str, message: Optional[str] = None) -> None:
        if message is None:
            message = f"no factory registered for custom provider type '{type_name}'"
        super().__init__(message)
        self.type_name = type_name


class ConstructionFailedError(ProviderError):
    """A built-in client constructor raised.

    The message is the constructor's own message; the original exception
    is available as ``__cause__``.
    """

    def __init__(self, provider: str, message: str) -> None:
        super().__init__(message)
        self.provider = provider


__all__ = [
    "ConstructionFailedError",
    "MissingCredentialError",
    "NoFactoryRegisteredError",
    "ProviderError",
]
