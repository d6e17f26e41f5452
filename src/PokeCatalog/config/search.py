"""Search domain configuration (default sort, type filter and query)."""

from __future__ import annotations

from dataclasses import dataclass
from typing import Any, Mapping

from PokeCatalog.config.common import (
    expect_choice,
    expect_int,
    expect_str,
    get_optional_value,
    get_section,
)
from PokeCatalog.core.query import ALL_TYPES, SORT_ALPHABETIC, SORT_KEYS, SearchRequest


@dataclass(frozen=True, slots=True)
class SearchConfig:
    """Store search defaults used when the CLI does not override them.

    Attributes:
        sort: Default sort key.
        type_filter: Default type filter (``"all"`` disables it).
        query: Default free-text query.
        max_results: Cap on rendered rows, ``-1`` for no cap.
    """

    sort: str
    type_filter: str
    query: str
    max_results: int

    def to_request(
        self,
        *,
        query: str | None = None,
        sort: str | None = None,
        type_filter: str | None = None,
    ) -> SearchRequest:
        """Build a ``SearchRequest`` from these defaults and CLI overrides."""
        return SearchRequest(
            sort_key=sort or self.sort,
            type_filter=(type_filter or self.type_filter).lower(),
            query=self.query if query is None else query,
        )


def load_search(raw: Mapping[str, Any]) -> SearchConfig:
    """Load the ``search`` section.

    Raises:
        TypeError: If config types are invalid.
    """
    section = get_section(raw, "search", required=False)
    return SearchConfig(
        sort=expect_str(get_optional_value(section, "sort", SORT_ALPHABETIC), "search.sort").strip().lower(),
        type_filter=expect_str(
            get_optional_value(section, "type_filter", ALL_TYPES), "search.type_filter"
        ).strip().lower() or ALL_TYPES,
        query=expect_str(get_optional_value(section, "query", ""), "search.query"),
        max_results=expect_int(get_optional_value(section, "max_results", -1), "search.max_results"),
    )


def check_search(config: SearchConfig) -> None:
    """Validate search constraints.

    Raises:
        ValueError: If values violate search constraints.
    """
    expect_choice(config.sort, SORT_KEYS, "search.sort")
    if config.max_results == 0 or config.max_results < -1:
        raise ValueError("search.max_results must be -1 or positive")
