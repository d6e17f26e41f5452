"""Command implementations for PokeCatalog CLI.

Encapsulates the business logic of each command, separated from CLI
parameter handling and output formatting.
"""

from __future__ import annotations

from dataclasses import dataclass

from PokeCatalog.core.query import SearchRequest
from PokeCatalog.renderers import OutputWriter, render_detail
from PokeCatalog.renderers.mapper import map_pokemon_to_view, map_pokemon_to_views
from PokeCatalog.services.catalog import CatalogService
from PokeCatalog.utils.log import log

PROGRESS_STEP = 100


def log_progress(done: int, total: int) -> None:
    """Loading counter, logged every ``PROGRESS_STEP`` records and at the end."""
    if done == total or done % PROGRESS_STEP == 0:
        log.info("Loading %d/%d", done, total)


@dataclass(slots=True)
class SearchCommand:
    """Load the catalog, run one search and hand rows to the writer."""

    catalog: CatalogService
    output_writer: OutputWriter
    request: SearchRequest
    max_results: int = -1

    def execute(self) -> int:
        """Run the search.

        Returns:
            Number of matching records (before the ``max_results`` cap).
        """
        if not self.catalog.is_loaded:
            self.catalog.load(progress=log_progress)

        results = self.catalog.search(self.request)
        log.info("Matched %d/%d pokemon", len(results), len(self.catalog.records))

        shown = results if self.max_results == -1 else results[: self.max_results]
        self.output_writer.write_search_result(map_pokemon_to_views(shown), self.request)
        return len(results)


@dataclass(slots=True)
class ShowCommand:
    """Load the catalog and print the detail block of the best match."""

    catalog: CatalogService
    term: str

    def execute(self) -> bool:
        """Show the best match for ``term``.

        Returns:
            False when nothing matches.
        """
        if not self.catalog.is_loaded:
            self.catalog.load(progress=log_progress)

        record = self.catalog.find(self.term)
        if record is None:
            log.warning("No pokemon matches %r", self.term)
            return False

        abilities = self.catalog.ability_details(record)
        for line in render_detail(map_pokemon_to_view(record), abilities).splitlines():
            log.info(line)
        return True
