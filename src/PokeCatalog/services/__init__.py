"""Catalog service layer for PokeCatalog.

Provides the catalog service and the factory that wires it to PokeAPI.
"""

from __future__ import annotations

from typing import TYPE_CHECKING

from PokeCatalog.services.catalog import CatalogService, CatalogSource

if TYPE_CHECKING:
    from PokeCatalog.config import AppConfig
    from PokeCatalog.storage.cache import AbilityCache


def create_catalog_service(config: AppConfig, ability_cache: AbilityCache) -> CatalogService:
    """Create a catalog service backed by PokeAPI.

    Args:
        config: Application configuration containing API settings.
        ability_cache: Cache shared by ability detail lookups.

    Returns:
        Configured, not yet loaded, CatalogService.
    """
    from PokeCatalog.sources.pokeapi.client import PokeApiClient
    from PokeCatalog.sources.pokeapi.source import PokeApiSource

    source = PokeApiSource(
        client=PokeApiClient(
            config.api.base_url,
            timeout=config.api.timeout,
            max_attempts=config.api.max_attempts,
        ),
        limit=config.api.limit,
        max_workers=config.api.max_workers,
        ability_cache=ability_cache,
    )
    return CatalogService(source)


__all__ = [
    "CatalogService",
    "CatalogSource",
    "create_catalog_service",
]
