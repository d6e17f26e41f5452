from __future__ import annotations

"""Application config orchestration and YAML loading entrypoints."""

from dataclasses import dataclass
from pathlib import Path
from typing import Any, Mapping

import yaml

from PokeCatalog.config.api import ApiConfig, check_api, load_api
from PokeCatalog.config.cache import CacheConfig, check_cache, load_cache
from PokeCatalog.config.output import OutputConfig, check_output, load_output
from PokeCatalog.config.runtime import RuntimeConfig, check_runtime, load_runtime
from PokeCatalog.config.search import SearchConfig, check_search, load_search

DEFAULT_CONFIG_PATH = Path("config/default.yml")


@dataclass(frozen=True, slots=True)
class AppConfig:
    """Application root configuration."""

    runtime: RuntimeConfig
    api: ApiConfig
    search: SearchConfig
    cache: CacheConfig
    output: OutputConfig


def parse_config_dict(raw: Mapping[str, Any]) -> AppConfig:
    """Parse a merged mapping into ``AppConfig`` and validate every domain."""
    runtime = load_runtime(raw)
    api = load_api(raw)
    search = load_search(raw)
    cache = load_cache(raw)
    output = load_output(raw)

    check_runtime(runtime)
    check_api(api)
    check_search(search)
    check_cache(cache)
    check_output(output)

    return AppConfig(
        runtime=runtime,
        api=api,
        search=search,
        cache=cache,
        output=output,
    )


def load_config(path: Path) -> AppConfig:
    """Load a YAML config file without default merge."""
    return parse_config_dict(parse_yaml(path.read_text(encoding="utf-8")))


def load_config_with_defaults(
    config_path: Path,
    default_path: Path = DEFAULT_CONFIG_PATH,
    *,
    defaults_text: str | None = None,
) -> AppConfig:
    """Load config by deep-merging an override file over the defaults.

    Args:
        config_path: Override YAML file.
        default_path: Defaults YAML file.
        defaults_text: Defaults given inline; takes precedence over ``default_path``.

    Returns:
        Validated application config.
    """
    if defaults_text is None:
        if config_path == default_path:
            return load_config(config_path)
        defaults_text = default_path.read_text(encoding="utf-8")
    base = parse_yaml(defaults_text)
    override = parse_yaml(config_path.read_text(encoding="utf-8"))
    return parse_config_dict(merge_config_dicts(base, override))


def parse_yaml(text: str) -> dict[str, Any]:
    """Parse raw YAML text into a mapping."""
    data = yaml.safe_load(text) or {}
    if not isinstance(data, Mapping):
        raise ValueError("Config root must be a mapping/object")
    return dict(data)


def merge_config_dicts(base: Mapping[str, Any], override: Mapping[str, Any]) -> dict[str, Any]:
    """Deep-merge two config mappings; lists and scalars are replaced."""
    merged: dict[str, Any] = dict(base)
    for key, value in override.items():
        if key in merged and isinstance(merged[key], Mapping) and isinstance(value, Mapping):
            merged[key] = merge_config_dicts(merged[key], value)
        else:
            merged[key] = value
    return merged
