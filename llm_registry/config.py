"""Provider tables on disk.

A provider table is a JSON object mapping provider names to their
persisted :class:`ProviderConfig` form::

    {
        "ollama": {"type": "openai", "base_url": "http://localhost:11434/v1"},
        "internal": {"type": "acme-gateway", "api_key_env": "ACME_KEY"}
    }

Unset fields are left out when writing and read back as unset.
"""

import json
import logging
from os import PathLike
from typing import Dict, Optional, Union

from pydantic import ValidationError

from .defaults import default_providers
from .schemas import ProviderConfig

logger = logging.getLogger(__name__)

PathType = Union[str, PathLike]


def load_provider_configs(path: PathType) -> Dict[str, ProviderConfig]:
    """Read a provider table from *path*.

    Raises ``ValueError`` if the document is not an object of objects or an
    entry does not validate.
    """
    with open(path, "r", encoding="utf-8") as handle:
        data = json.load(handle)
    if not isinstance(data, dict):
        raise ValueError(f"{path}: provider table must be a JSON object")

    configs: Dict[str, ProviderConfig] = {}
    for name, entry in data.items():
        if not isinstance(entry, dict):
            raise ValueError(f"{path}: provider '{name}' must be a JSON object")
        try:
            configs[name] = ProviderConfig.from_dict(entry)
        except ValidationError as exc:
            raise ValueError(f"{path}: invalid config for provider '{name}': {exc}") from exc
    logger.debug("Loaded %d provider configs from %s", len(configs), path)
    return configs


def dump_provider_configs(configs: Dict[str, ProviderConfig], path: PathType) -> None:
    """Write *configs* to *path* as a provider table."""
    data = {name: config.to_dict() for name, config in configs.items()}
    with open(path, "w", encoding="utf-8") as handle:
        json.dump(data, handle, indent=2)
        handle.write("\n")


def merge_provider_configs(
    overrides: Dict[str, ProviderConfig],
    base: Optional[Dict[str, ProviderConfig]] = None,
) -> Dict[str, ProviderConfig]:
    """Layer *overrides* over *base* (the default catalog if omitted).

    Entries are replaced whole, not merged field by field.
    """
    merged = dict(default_providers() if base is None else base)
    merged.update(overrides)
    return merged


__all__ = ["dump_provider_configs", "load_provider_configs", "merge_provider_configs"]
