"""Tests for ability detail caches."""

import sys
import tempfile
import unittest
from pathlib import Path

REPO_ROOT = Path(__file__).resolve().parents[1]
sys.path.insert(0, str(REPO_ROOT / "src"))

from PokeCatalog.core.models import AbilityDetail
from PokeCatalog.storage.cache import InMemoryAbilityCache, SqliteAbilityCache
from PokeCatalog.storage.db import DatabaseManager


class TestInMemoryAbilityCache(unittest.TestCase):
    def test_get_put_by_normalized_key(self) -> None:
        cache = InMemoryAbilityCache()
        detail = AbilityDetail(name="solar-power", short_effect="Boosts Sp. Atk in sun.")

        self.assertIsNone(cache.get("solar-power"))
        cache.put("solar-power", detail)

        self.assertEqual(cache.get("Solar Power"), detail)
        self.assertEqual(len(cache), 1)


class TestSqliteAbilityCache(unittest.TestCase):
    def test_roundtrip_and_upsert(self) -> None:
        with tempfile.TemporaryDirectory() as tmp:
            db_path = Path(tmp) / "cache" / "abilities.db"
            with DatabaseManager(db_path) as db:
                cache = SqliteAbilityCache(db)
                cache.put("static", AbilityDetail(name="static", effect="old"))
                cache.put("Static", AbilityDetail(name="static", effect="new", generation="generation-iii"))

                detail = cache.get("STATIC")
                missing = cache.get("blaze")

            self.assertTrue(db_path.exists())

        self.assertIsNotNone(detail)
        self.assertEqual(detail.effect, "new")
        self.assertEqual(detail.generation, "generation-iii")
        self.assertFalse(detail.is_placeholder)
        self.assertIsNone(missing)

    def test_persists_across_connections(self) -> None:
        with tempfile.TemporaryDirectory() as tmp:
            db_path = Path(tmp) / "abilities.db"
            with DatabaseManager(db_path) as db:
                SqliteAbilityCache(db).put("blaze", AbilityDetail(name="blaze", short_effect="Fire boost"))
            with DatabaseManager(db_path) as db:
                detail = SqliteAbilityCache(db).get("blaze")

        self.assertEqual(detail, AbilityDetail(name="blaze", short_effect="Fire boost"))


if __name__ == "__main__":
    unittest.main()
