"""Command runner for coordinating CLI execution.

Manages component lifecycle, resource cleanup, logging configuration and
error handling for command execution.
"""

from __future__ import annotations

from contextlib import ExitStack

import click

from PokeCatalog.cli.commands import SearchCommand, ShowCommand
from PokeCatalog.config import AppConfig
from PokeCatalog.core.query import SearchRequest
from PokeCatalog.renderers import create_output_writer
from PokeCatalog.services import CatalogService, create_catalog_service
from PokeCatalog.storage import create_ability_cache
from PokeCatalog.utils.log import configure_logging, log


class CommandRunner:
    """Orchestrates command execution with proper resource management."""

    def __init__(self, config: AppConfig) -> None:
        self.config = config

    def run_search(self, action: str, request: SearchRequest) -> None:
        """Execute the search command.

        Args:
            action: The CLI command name (e.g., 'search').
            request: Search request built from config defaults and CLI options.

        Raises:
            click.Abort: When the search fails.
        """
        self._configure_logging(action)
        try:
            with ExitStack() as stack:
                catalog = self._open_catalog(stack)
                output_writer = create_output_writer(self.config)
                SearchCommand(
                    catalog=catalog,
                    output_writer=output_writer,
                    request=request,
                    max_results=self.config.search.max_results,
                ).execute()
                output_writer.finalize(action)
        except Exception as e:  # noqa: BLE001 - cli boundary
            log.error("Search failed: %s", e)
            raise click.Abort from e

    def run_show(self, action: str, term: str) -> None:
        """Execute the show command.

        Raises:
            click.Abort: When loading fails or nothing matches ``term``.
        """
        self._configure_logging(action)
        try:
            with ExitStack() as stack:
                found = ShowCommand(catalog=self._open_catalog(stack), term=term).execute()
        except Exception as e:  # noqa: BLE001 - cli boundary
            log.error("Show failed: %s", e)
            raise click.Abort from e
        if not found:
            raise click.Abort

    def _configure_logging(self, action: str) -> None:
        configure_logging(
            level=self.config.runtime.level,
            action=action,
            log_to_file=self.config.runtime.to_file,
            log_dir=self.config.runtime.dir,
        )

    def _open_catalog(self, stack: ExitStack) -> CatalogService:
        db_manager, ability_cache = create_ability_cache(self.config)
        if db_manager is not None:
            stack.enter_context(db_manager)
        catalog = create_catalog_service(self.config, ability_cache)
        stack.callback(catalog.close)
        return catalog
