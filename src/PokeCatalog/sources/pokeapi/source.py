"""PokeAPI data source adapter.

Composes HTTP fetching and payload parsing into the two operations the
catalog needs: a bulk record load and a cached ability detail lookup.
"""

from __future__ import annotations

from concurrent.futures import ThreadPoolExecutor, as_completed
from dataclasses import dataclass, field
from typing import Callable

from PokeCatalog.core.exceptions import CatalogLoadError
from PokeCatalog.core.models import AbilityDetail, Pokemon
from PokeCatalog.sources.pokeapi.client import PokeApiClient
from PokeCatalog.sources.pokeapi.parser import parse_ability, parse_pokemon, parse_pokemon_index
from PokeCatalog.storage.cache import AbilityCache, InMemoryAbilityCache
from PokeCatalog.utils.log import log

ProgressCallback = Callable[[int, int], None]

DEFAULT_LIMIT = 1025


@dataclass(slots=True)
class PokeApiSource:
    """Catalog source backed by PokeAPI.

    Attributes:
        client: HTTP client.
        limit: Entries requested from the list endpoint.
        max_workers: Parallel detail fetches during a bulk load.
        ability_cache: Cache consulted before fetching ability details.
    """

    client: PokeApiClient
    name: str = "pokeapi"
    limit: int = DEFAULT_LIMIT
    max_workers: int = 16
    ability_cache: AbilityCache = field(default_factory=InMemoryAbilityCache)

    def load_all_records(self, progress: ProgressCallback | None = None) -> list[Pokemon]:
        """Fetch every record and wait for all detail requests to finish.

        A failing list request aborts the load. A failing detail request only
        drops that record.

        Args:
            progress: Optional ``progress(done, total)`` callback, called from
                the calling thread as details complete.

        Returns:
            Records in list-endpoint order.

        Raises:
            CatalogLoadError: If the list endpoint cannot be fetched or parsed.
        """
        try:
            index = parse_pokemon_index(self.client.fetch_pokemon_list(limit=self.limit))
        except Exception as e:  # noqa: BLE001 - collection-level failure boundary
            raise CatalogLoadError(f"Failed to fetch pokemon list: {e}") from e

        total = len(index)
        log.info("Fetching details for %d pokemon (workers=%d)", total, self.max_workers)

        slots: list[Pokemon | None] = [None] * total
        failed: list[str] = []
        done = 0
        with ThreadPoolExecutor(max_workers=self.max_workers) as executor:
            future_to_pos = {
                executor.submit(self._fetch_record, url): pos
                for pos, (_, url) in enumerate(index)
            }
            for future in as_completed(future_to_pos):
                pos = future_to_pos[future]
                try:
                    slots[pos] = future.result()
                except Exception as e:  # noqa: BLE001 - per-record failure must be isolated
                    failed.append(index[pos][0])
                    log.warning("Error fetching %s: %s", index[pos][0], e)
                done += 1
                if progress is not None:
                    progress(done, total)

        records = [record for record in slots if record is not None]
        log.info("Loaded %d/%d pokemon (failed=%d)", len(records), total, len(failed))
        return records

    def load_ability_detail(self, name: str) -> AbilityDetail:
        """Return the detail for ability ``name``.

        Served from the cache when possible. Fetch failures are not raised;
        a placeholder carrying only ``name`` is returned and nothing is cached.
        """
        cached = self.ability_cache.get(name)
        if cached is not None:
            log.debug("Ability cache hit: %s", name)
            return cached

        try:
            detail = parse_ability(self.client.fetch_ability(name), requested_name=name)
        except Exception as e:  # noqa: BLE001 - degrade to placeholder
            log.warning("Error fetching ability %s: %s", name, e)
            return AbilityDetail.placeholder(name)

        self.ability_cache.put(name, detail)
        return detail

    def close(self) -> None:
        self.client.close()

    def _fetch_record(self, url: str) -> Pokemon:
        payload = self.client.get_json(url)
        species_url = (payload.get("species") or {}).get("url")
        species = self.client.get_json(species_url) if species_url else None
        return parse_pokemon(payload, species)
