"""API domain configuration (PokeAPI endpoint and fetch behavior)."""

from __future__ import annotations

import os
from dataclasses import dataclass
from typing import Any, Mapping

from PokeCatalog.config.common import (
    expect_float,
    expect_int,
    expect_str,
    get_optional_value,
    get_section,
)

BASE_URL_ENV = "POKECATALOG_API_BASE_URL"
DEFAULT_BASE_URL = "https://pokeapi.co/api/v2"


@dataclass(frozen=True, slots=True)
class ApiConfig:
    """Store validated PokeAPI settings.

    Attributes:
        base_url: API root without trailing slash.
        limit: Number of entries requested from the list endpoint.
        max_workers: Parallel detail fetches.
        timeout: Per-request timeout in seconds.
        max_attempts: Attempts per request before giving up.
    """

    base_url: str
    limit: int
    max_workers: int
    timeout: float
    max_attempts: int


def load_api(raw: Mapping[str, Any]) -> ApiConfig:
    """Load the ``api`` section.

    ``POKECATALOG_API_BASE_URL`` in the environment overrides ``api.base_url``.

    Raises:
        TypeError: If config types are invalid.
    """
    section = get_section(raw, "api", required=False)
    base_url = expect_str(get_optional_value(section, "base_url", DEFAULT_BASE_URL), "api.base_url")
    env_url = os.getenv(BASE_URL_ENV, "").strip()
    if env_url:
        base_url = env_url
    return ApiConfig(
        base_url=base_url.rstrip("/"),
        limit=expect_int(get_optional_value(section, "limit", 1025), "api.limit"),
        max_workers=expect_int(get_optional_value(section, "max_workers", 16), "api.max_workers"),
        timeout=expect_float(get_optional_value(section, "timeout", 30.0), "api.timeout"),
        max_attempts=expect_int(get_optional_value(section, "max_attempts", 4), "api.max_attempts"),
    )


def check_api(config: ApiConfig) -> None:
    """Validate API constraints.

    Raises:
        ValueError: If values violate API constraints.
    """
    if not config.base_url.startswith(("http://", "https://")):
        raise ValueError("api.base_url must be an http(s) URL")
    if config.limit <= 0:
        raise ValueError("api.limit must be positive")
    if config.max_workers <= 0:
        raise ValueError("api.max_workers must be positive")
    if config.timeout <= 0:
        raise ValueError("api.timeout must be positive")
    if config.max_attempts <= 0:
        raise ValueError("api.max_attempts must be positive")
