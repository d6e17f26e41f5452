from __future__ import annotations

"""Cache domain configuration for ability details."""

from dataclasses import dataclass
from typing import Any, Mapping

from PokeCatalog.config.common import (
    expect_choice,
    expect_str,
    get_optional_value,
    get_section,
)

_ALLOWED_BACKENDS = {"memory", "sqlite"}


@dataclass(frozen=True, slots=True)
class CacheConfig:
    """Ability detail cache configuration."""

    backend: str
    db_path: str


def load_cache(raw: Mapping[str, Any]) -> CacheConfig:
    """Load the ``cache`` section."""
    section = get_section(raw, "cache", required=False)
    return CacheConfig(
        backend=expect_str(get_optional_value(section, "backend", "memory"), "cache.backend").strip().lower(),
        db_path=expect_str(get_optional_value(section, "db_path", "database/abilities.db"), "cache.db_path"),
    )


def check_cache(config: CacheConfig) -> None:
    """Validate cache constraints."""
    expect_choice(config.backend, _ALLOWED_BACKENDS, "cache.backend")
    if config.backend == "sqlite" and not config.db_path.strip():
        raise ValueError("cache.db_path must not be empty when cache.backend=sqlite")
