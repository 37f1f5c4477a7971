"""Provider registry types.

This module defines the data model shared by the catalogs and the
registry:

* :class:`ProviderApiType` – the wire formats the registry can build a
  client for by itself.
* :class:`CustomApiType` – the catch-all for any other type string.
  Consumers register a factory under that string to support it.
* :class:`ProviderConfig` – connection settings for one provider.
* :class:`ModelInfo` – a model identifier and the provider serving it.

The string form of an API type is also its persisted form, so
``parse_api_type(str(value)) == value`` holds for every value.
"""

from __future__ import annotations

from dataclasses import dataclass
from enum import Enum
from typing import Annotated, Any, Dict, Optional, Union

from pydantic import BaseModel, ConfigDict, Field, PlainSerializer, PlainValidator


class ProviderApiType(str, Enum):
    """Known API formats.  The first member is the default."""

    ANTHROPIC = "anthropic"
    # OpenAI Chat Completions, also spoken by compatible servers
    OPENAI = "openai"
    GOOGLE = "google"
    GROQ = "groq"
    MISTRAL = "mistral"
    # Managed gateway; needs a factory registered under "synapse"
    SYNAPSE = "synapse"

    def __str__(self) -> str:
        return self.value


@dataclass(frozen=True, eq=False)
class CustomApiType:
    """Extension point for consumer-specific providers.

    Compares equal to its tag string, like the named members do.  Canonical
    names are rejected so a custom value never reparses as a named one.
    """

    name: str

    def __post_init__(self) -> None:
        if self.name in _KNOWN_API_TYPES:
            raise ValueError(f"'{self.name}' is a built-in provider type, use ProviderApiType")

    def __str__(self) -> str:
        return self.name

    def __eq__(self, other: object) -> bool:
        if isinstance(other, CustomApiType):
            return self.name == other.name
        if isinstance(other, str):
            return self.name == other
        return NotImplemented

    def __hash__(self) -> int:
        return hash(self.name)


ApiType = Union[ProviderApiType, CustomApiType]

_KNOWN_API_TYPES: Dict[str, ProviderApiType] = {member.value: member for member in ProviderApiType}


def parse_api_type(value: Any) -> ApiType:
    """Return the API type for *value*.

    Strings matching a canonical name exactly (case-sensitive) map to the
    named member; anything else becomes a :class:`CustomApiType` carrying
    the string untouched.  Already parsed values are returned as is.
    """
    if isinstance(value, (ProviderApiType, CustomApiType)):
        return value
    if not isinstance(value, str):
        raise ValueError(f"provider type must be a string, got {type(value).__name__}")
    known = _KNOWN_API_TYPES.get(value)
    if known is not None:
        return known
    return CustomApiType(value)


ApiTypeField = Annotated[
    ApiType,
    PlainValidator(parse_api_type),
    PlainSerializer(str, return_type=str),
]


class ProviderConfig(BaseModel):
    """Individual provider configuration.

    No field is required: an empty config means "protocol defaults, no
    key".  ``api_type`` is stored under the key ``type`` in persisted
    documents.
    """

    model_config = ConfigDict(populate_by_name=True, extra="ignore", validate_assignment=True)

    # Determines which client implementation to use
    api_type: ApiTypeField = Field(default=ProviderApiType.ANTHROPIC, alias="type")
    # Base URL override (for OpenAI-compatible providers)
    base_url: Optional[str] = None
    # Environment variable name for the API key
    api_key_env: Optional[str] = None
    # Direct API key (discouraged, prefer api_key_env)
    api_key: Optional[str] = None

    @classmethod
    def from_dict(cls, data: Dict[str, Any]) -> "ProviderConfig":
        """Build a config from its persisted form."""
        return cls.model_validate(data)

    def to_dict(self) -> Dict[str, Any]:
        """Return the persisted form, omitting unset optional fields."""
        return self.model_dump(by_alias=True, exclude_none=True)


class ModelInfo(BaseModel):
    """Model information with provider association.

    ``provider`` names an entry of the provider catalog but is not
    checked against it.
    """

    model_config = ConfigDict(frozen=True)

    # e.g. "claude-sonnet-4-20250514", "gpt-4o"
    id: str
    # e.g. "anthropic", "openai"
    provider: str


__all__ = [
    "ApiType",
    "CustomApiType",
    "ModelInfo",
    "ProviderApiType",
    "ProviderConfig",
    "parse_api_type",
]
