from __future__ import annotations

from dataclasses import dataclass
from typing import Sequence

ABILITY_PREFIX = "::"
TYPE_PREFIX = ":"

ALL_TYPES = "all"

SORT_ALPHABETIC = "alphabetic"
SORT_ALPHABETIC_REVERSE = "alphabetic-reverse"
SORT_ABILITIES = "abilities"
SORT_ABILITIES_REVERSE = "abilities-reverse"
SORT_OLDEST = "oldest"
SORT_NEWEST = "newest"

SORT_KEYS = (
    SORT_ALPHABETIC,
    SORT_ALPHABETIC_REVERSE,
    SORT_ABILITIES,
    SORT_ABILITIES_REVERSE,
    SORT_OLDEST,
    SORT_NEWEST,
)


@dataclass(frozen=True, slots=True)
class ParsedQuery:
    """Search terms split by the field they target.

    Terms are kept raw (not normalized); normalization happens in the scorer.
    """

    name_terms: Sequence[str] = ()
    type_terms: Sequence[str] = ()
    ability_terms: Sequence[str] = ()

    @property
    def is_empty(self) -> bool:
        return not (self.name_terms or self.type_terms or self.ability_terms)


@dataclass(frozen=True, slots=True)
class SearchRequest:
    """Everything a single catalog search depends on.

    Attributes:
        sort_key: One of ``SORT_KEYS``; used after relevance.
        type_filter: A type name, or ``"all"`` for no filtering.
        query: Raw free-text query in the prefix micro-syntax.
    """

    sort_key: str = SORT_ALPHABETIC
    type_filter: str = ALL_TYPES
    query: str = ""


def parse_search_query(raw: str | None) -> ParsedQuery:
    """Tokenize a raw query into name/type/ability term groups.

    Tokens are split on whitespace. ``::x`` routes to abilities and ``:x`` to
    types; the prefix is sticky, so following bare tokens go to the same group
    until another prefix appears. A bare ``::`` or ``:`` only switches mode.

    Examples:
        >>> parse_search_query("pika :fire ::static more").ability_terms
        ('static', 'more')

    Args:
        raw: Free-text query. ``None`` is treated as empty.

    Returns:
        ParsedQuery with terms in input order.
    """
    groups: dict[str, list[str]] = {"name": [], "type": [], "ability": []}
    mode = "name"

    for token in (raw or "").split():
        if token.startswith(ABILITY_PREFIX):
            mode = "ability"
            token = token[len(ABILITY_PREFIX):]
        elif token.startswith(TYPE_PREFIX):
            mode = "type"
            token = token[len(TYPE_PREFIX):]
        if token:
            groups[mode].append(token)

    return ParsedQuery(
        name_terms=tuple(groups["name"]),
        type_terms=tuple(groups["type"]),
        ability_terms=tuple(groups["ability"]),
    )
