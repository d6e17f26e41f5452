"""Base classes for output writers.

Separates search control flow from output formatting.
"""

from __future__ import annotations

from abc import ABC, abstractmethod
from dataclasses import dataclass
from typing import Sequence

from PokeCatalog.core.query import SearchRequest
from PokeCatalog.renderers.view_models import PokemonView


class OutputWriter(ABC):
    """Abstract base class for command output writers."""

    @abstractmethod
    def write_search_result(self, rows: Sequence[PokemonView], request: SearchRequest) -> None:
        """Write the rows produced by one search.

        Args:
            rows: Ranked rows to display.
            request: The request that produced them.
        """

    @abstractmethod
    def finalize(self, action: str) -> None:
        """Finalize output (e.g., write accumulated results to file).

        Args:
            action: The CLI command name (e.g., 'search').
        """


class OutputError(RuntimeError):
    """Raised when output cannot be written."""


@dataclass(slots=True)
class MultiOutputWriter(OutputWriter):
    """Delegate output to multiple writers."""

    writers: Sequence[OutputWriter]

    def write_search_result(self, rows: Sequence[PokemonView], request: SearchRequest) -> None:
        for writer in self.writers:
            writer.write_search_result(rows, request)

    def finalize(self, action: str) -> None:
        for writer in self.writers:
            writer.finalize(action)
