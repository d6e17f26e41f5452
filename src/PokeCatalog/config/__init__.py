from __future__ import annotations

"""Public configuration API for PokeCatalog."""

from PokeCatalog.config.api import ApiConfig
from PokeCatalog.config.app import (
    DEFAULT_CONFIG_PATH,
    AppConfig,
    load_config,
    load_config_with_defaults,
    merge_config_dicts,
    parse_config_dict,
)
from PokeCatalog.config.cache import CacheConfig
from PokeCatalog.config.output import OutputConfig
from PokeCatalog.config.runtime import RuntimeConfig
from PokeCatalog.config.search import SearchConfig

__all__ = [
    "RuntimeConfig",
    "ApiConfig",
    "SearchConfig",
    "CacheConfig",
    "OutputConfig",
    "AppConfig",
    "DEFAULT_CONFIG_PATH",
    "load_config",
    "load_config_with_defaults",
    "merge_config_dicts",
    "parse_config_dict",
]
