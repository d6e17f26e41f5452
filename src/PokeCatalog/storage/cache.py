"""Ability detail caches.

Keys are normalized ability names, so ``"Static"``, ``"static"`` and
``"sta-tic"`` share one entry.
"""

from __future__ import annotations

import threading
from typing import Protocol

from PokeCatalog.core.fuzzy import normalize
from PokeCatalog.core.models import AbilityDetail
from PokeCatalog.storage.db import DatabaseManager


def cache_key(name: str) -> str:
    return normalize(name)


class AbilityCache(Protocol):
    """Key-value store for fetched ability details."""

    def get(self, name: str) -> AbilityDetail | None:
        """Return the cached detail for ``name`` or None."""
        raise NotImplementedError

    def put(self, name: str, detail: AbilityDetail) -> None:
        """Store ``detail`` under ``name``."""
        raise NotImplementedError


class InMemoryAbilityCache:
    """Process-local cache backed by a dict."""

    def __init__(self) -> None:
        self._items: dict[str, AbilityDetail] = {}
        self._lock = threading.Lock()

    def get(self, name: str) -> AbilityDetail | None:
        with self._lock:
            return self._items.get(cache_key(name))

    def put(self, name: str, detail: AbilityDetail) -> None:
        with self._lock:
            self._items[cache_key(name)] = detail

    def __len__(self) -> int:
        return len(self._items)


class SqliteAbilityCache:
    """Persistent cache stored in the ``ability_cache`` table."""

    def __init__(self, db_manager: DatabaseManager) -> None:
        self.db = db_manager
        self._lock = threading.Lock()

    def get(self, name: str) -> AbilityDetail | None:
        with self._lock:
            row = self.db.get_connection().execute(
                """
                SELECT name, effect, short_effect, generation
                FROM ability_cache
                WHERE cache_key = ?
                """,
                (cache_key(name),),
            ).fetchone()
        if row is None:
            return None
        return AbilityDetail(name=row[0], effect=row[1], short_effect=row[2], generation=row[3])

    def put(self, name: str, detail: AbilityDetail) -> None:
        with self._lock:
            conn = self.db.get_connection()
            conn.execute(
                """
                INSERT INTO ability_cache (cache_key, name, effect, short_effect, generation)
                VALUES (?, ?, ?, ?, ?)
                ON CONFLICT(cache_key) DO UPDATE SET
                  name = excluded.name,
                  effect = excluded.effect,
                  short_effect = excluded.short_effect,
                  generation = excluded.generation
                """,
                (cache_key(name), detail.name, detail.effect, detail.short_effect, detail.generation),
            )
            conn.commit()
