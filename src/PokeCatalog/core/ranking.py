"""Match predicate and ranking for catalog search.

Ordering is decided in three levels: fuzzy relevance first, then the
user-selected sort key, then the name. The levels are applied as successive
stable sorts, least significant first.
"""

from __future__ import annotations

import math
from dataclasses import dataclass
from typing import Callable, Iterable, Sequence

from PokeCatalog.core.fuzzy import NO_MATCH, fuzzy_score, record_search_score
from PokeCatalog.core.models import Pokemon, format_id
from PokeCatalog.core.query import (
    ALL_TYPES,
    SORT_ABILITIES,
    SORT_ABILITIES_REVERSE,
    SORT_ALPHABETIC,
    SORT_ALPHABETIC_REVERSE,
    SORT_NEWEST,
    SORT_OLDEST,
    ParsedQuery,
    SearchRequest,
    parse_search_query,
)

_SORT_ORDERS: dict[str, tuple[Callable[[Pokemon], object], bool]] = {
    SORT_ALPHABETIC: (lambda p: p.name, False),
    SORT_ALPHABETIC_REVERSE: (lambda p: p.name, True),
    SORT_ABILITIES: (lambda p: len(p.abilities), True),
    SORT_ABILITIES_REVERSE: (lambda p: len(p.abilities), False),
    SORT_OLDEST: (lambda p: p.id, False),
    SORT_NEWEST: (lambda p: p.id, True),
}


@dataclass(frozen=True, slots=True)
class MatchScore:
    """Per-group score sums; ``inf`` in a component means a term missed."""

    name_score: float = 0.0
    type_score: float = 0.0
    ability_score: float = 0.0

    @property
    def is_match(self) -> bool:
        return all(
            math.isfinite(score)
            for score in (self.name_score, self.type_score, self.ability_score)
        )

    @property
    def total(self) -> float:
        return self.name_score + self.type_score + self.ability_score


def _best_score(term: str, candidates: Iterable[str]) -> float:
    return min((fuzzy_score(term, candidate) for candidate in candidates), default=NO_MATCH)


def _group_candidates(record: Pokemon) -> tuple[
    tuple[str, ...], tuple[str, ...], tuple[str, ...]
]:
    return (
        (record.name, format_id(record.id)),
        tuple(record.types),
        tuple(record.abilities),
    )


def _group_score(terms: Sequence[str], candidates: Sequence[str]) -> float:
    total = 0.0
    for term in terms:
        best = _best_score(term, candidates)
        if best == NO_MATCH:
            return NO_MATCH
        total += best
    return total


def matches_terms(record: Pokemon, parsed: ParsedQuery) -> bool:
    """Return True if every term of every group matches ``record``.

    Name terms are checked against the name and padded id, type terms against
    each type, ability terms against each ability. Empty groups always pass.
    """
    name_values, type_values, ability_values = _group_candidates(record)
    for terms, values in (
        (parsed.name_terms, name_values),
        (parsed.type_terms, type_values),
        (parsed.ability_terms, ability_values),
    ):
        for term in terms:
            if _best_score(term, values) == NO_MATCH:
                return False
    return True


def compute_match_scores(record: Pokemon, parsed: ParsedQuery) -> MatchScore:
    """Sum the best per-term scores of each group separately."""
    name_values, type_values, ability_values = _group_candidates(record)
    return MatchScore(
        name_score=_group_score(parsed.name_terms, name_values),
        type_score=_group_score(parsed.type_terms, type_values),
        ability_score=_group_score(parsed.ability_terms, ability_values),
    )


def relevance_score(record: Pokemon, parsed: ParsedQuery) -> float:
    """Primary ranking key for ``record`` under ``parsed`` (lower is better).

    A query made only of unprefixed terms is a single-box search and is ranked
    by the whole-record score of each term. Queries that use field prefixes
    are ranked by the sum of their per-group scores.
    """
    if parsed.is_empty:
        return 0.0
    if not parsed.type_terms and not parsed.ability_terms:
        return sum(record_search_score(term, record) for term in parsed.name_terms)
    return compute_match_scores(record, parsed).total


def sort_records(records: Iterable[Pokemon], sort_key: str) -> list[Pokemon]:
    """Order records by the explicit sort key, ties broken by name.

    Raises:
        ValueError: If ``sort_key`` is not a known sort key.
    """
    order = _SORT_ORDERS.get(sort_key)
    if order is None:
        raise ValueError(f"Unknown sort key: {sort_key}")
    key_func, reverse = order

    ordered = sorted(records, key=lambda p: (p.name, p.id))
    ordered.sort(key=key_func, reverse=reverse)
    return ordered


def filter_by_type(records: Iterable[Pokemon], type_filter: str) -> list[Pokemon]:
    """Keep records carrying ``type_filter``; ``"all"`` keeps everything.

    Type names from the API are lowercase, so the filter is lowercased first.
    """
    wanted = (type_filter or "").lower()
    if not wanted or wanted == ALL_TYPES:
        return list(records)
    return [record for record in records if wanted in record.types]


def search(records: Iterable[Pokemon], request: SearchRequest) -> list[Pokemon]:
    """Filter and rank ``records`` for ``request``.

    Args:
        records: Loaded catalog records.
        request: Sort key, type filter and free-text query.

    Returns:
        Matching records, most relevant first. Identical inputs always give
        the same order.

    Raises:
        ValueError: If ``request.sort_key`` is unknown.
    """
    parsed = parse_search_query(request.query)
    candidates = filter_by_type(records, request.type_filter)
    matched = [record for record in candidates if matches_terms(record, parsed)]

    ordered = sort_records(matched, request.sort_key)
    if not parsed.is_empty:
        ordered.sort(key=lambda record: relevance_score(record, parsed))
    return ordered
