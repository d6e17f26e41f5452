"""Catalog service: owns loaded records and serves searches over them."""

from __future__ import annotations

import threading
from typing import Protocol, Sequence

from PokeCatalog.core.exceptions import CatalogBusyError, CatalogNotLoadedError
from PokeCatalog.core.fuzzy import NO_MATCH, record_search_score
from PokeCatalog.core.models import AbilityDetail, Pokemon
from PokeCatalog.core.query import SearchRequest
from PokeCatalog.core.ranking import search
from PokeCatalog.sources.pokeapi.source import ProgressCallback
from PokeCatalog.utils.log import log

_IDLE = "idle"
_LOADING = "loading"
_READY = "ready"


class CatalogSource(Protocol):
    """Protocol for an external catalog data source."""

    name: str

    def load_all_records(self, progress: ProgressCallback | None = None) -> Sequence[Pokemon]:
        """Fetch the full record collection."""
        raise NotImplementedError

    def load_ability_detail(self, name: str) -> AbilityDetail:
        """Fetch one ability detail; never raises."""
        raise NotImplementedError

    def close(self) -> None:
        """Close resources held by the source."""
        raise NotImplementedError


class CatalogService:
    """Application service around an in-memory record collection.

    Loading and searching never overlap: a search or second load issued while
    a load is running is rejected with ``CatalogBusyError``. A failed load
    leaves the previously loaded records (if any) in place.
    """

    def __init__(self, source: CatalogSource) -> None:
        self.source = source
        self._records: tuple[Pokemon, ...] = ()
        self._state = _IDLE
        self._lock = threading.Lock()

    @property
    def is_loaded(self) -> bool:
        return self._state == _READY

    @property
    def records(self) -> tuple[Pokemon, ...]:
        self._ensure_ready()
        return self._records

    def load(self, progress: ProgressCallback | None = None) -> int:
        """Load every record from the source.

        Returns:
            Number of records loaded.

        Raises:
            CatalogBusyError: If a load is already running.
            CatalogLoadError: Propagated from the source on bulk failure.
        """
        with self._lock:
            if self._state == _LOADING:
                raise CatalogBusyError("Catalog is already loading")
            previous = self._state
            self._state = _LOADING

        try:
            records = tuple(self.source.load_all_records(progress))
        except Exception:
            with self._lock:
                self._state = previous
            raise

        with self._lock:
            self._records = records
            self._state = _READY
        log.info("Catalog ready: %d records from %s", len(records), self.source.name)
        return len(records)

    def search(self, request: SearchRequest) -> list[Pokemon]:
        """Filter and rank loaded records for ``request``.

        Raises:
            CatalogBusyError: If a load is running.
            CatalogNotLoadedError: If nothing has been loaded yet.
            ValueError: If the sort key is unknown.
        """
        records = self.records
        results = search(records, request)
        log.debug(
            "Search query=%r type=%s sort=%s -> %d/%d",
            request.query,
            request.type_filter,
            request.sort_key,
            len(results),
            len(records),
        )
        return results

    def find(self, term: str) -> Pokemon | None:
        """Return the single best whole-record match for ``term``, if any."""
        best: Pokemon | None = None
        best_key: tuple[float, str] | None = None
        for record in self.records:
            score = record_search_score(term, record)
            key = (score, record.name)
            if score != NO_MATCH and (best_key is None or key < best_key):
                best, best_key = record, key
        return best

    def ability_details(self, record: Pokemon) -> list[AbilityDetail]:
        """Resolve ability details for ``record`` through the source cache."""
        return [self.source.load_ability_detail(name) for name in record.abilities]

    def close(self) -> None:
        self.source.close()

    def _ensure_ready(self) -> None:
        with self._lock:
            state = self._state
        if state == _LOADING:
            raise CatalogBusyError("Catalog is loading; retry when the load finishes")
        if state != _READY:
            raise CatalogNotLoadedError("Catalog has not been loaded")
