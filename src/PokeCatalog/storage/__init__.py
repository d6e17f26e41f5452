"""Storage layer for PokeCatalog.

Provides the ability detail caches and their SQLite backing store.
"""

from __future__ import annotations

from pathlib import Path
from typing import TYPE_CHECKING

from PokeCatalog.storage.cache import AbilityCache, InMemoryAbilityCache, SqliteAbilityCache
from PokeCatalog.storage.db import DatabaseManager
from PokeCatalog.utils.log import log

if TYPE_CHECKING:
    from PokeCatalog.config import AppConfig


def create_ability_cache(config: AppConfig) -> tuple[DatabaseManager | None, AbilityCache]:
    """Create the ability cache selected by ``cache.backend``.

    Args:
        config: Application configuration.

    Returns:
        Tuple of (db_manager, cache). ``db_manager`` is None for the memory
        backend; otherwise the caller owns it and must close it.
    """
    if config.cache.backend == "sqlite":
        db_path = Path(config.cache.db_path)
        db_manager = DatabaseManager(db_path)
        log.info("Ability cache: sqlite %s", db_path)
        return db_manager, SqliteAbilityCache(db_manager)

    log.debug("Ability cache: memory")
    return None, InMemoryAbilityCache()


__all__ = [
    "AbilityCache",
    "DatabaseManager",
    "InMemoryAbilityCache",
    "SqliteAbilityCache",
    "create_ability_cache",
]
