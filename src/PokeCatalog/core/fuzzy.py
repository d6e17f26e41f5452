"""Fuzzy matching primitives used by catalog search.

Scores are distances: lower is better and ``math.inf`` means no match. The
tiers never overlap:

- ``0``: exact match
- ``2``: prefix match
- ``[10, 100)``: contiguous substring, earlier positions rank better
- ``[100, inf)``: scattered subsequence, tighter clusters rank better
"""

from __future__ import annotations

import math
import re

from PokeCatalog.core.models import Pokemon, format_id

NO_MATCH = math.inf

EXACT_SCORE = 0
PREFIX_SCORE = 2
SUBSTRING_BASE = 10
SUBSEQUENCE_BASE = 100

_NON_ALNUM_RE = re.compile(r"[^a-z0-9]")


def normalize(value: str | None) -> str:
    """Lowercase ``value`` and drop everything outside ``[a-z0-9]``."""
    if not value:
        return ""
    return _NON_ALNUM_RE.sub("", value.lower())


def is_subsequence(needle: str, hay: str) -> bool:
    """Return True if every char of ``needle`` appears in ``hay`` in order.

    An empty needle always matches.
    """
    i = 0
    for ch in hay:
        if i == len(needle):
            break
        if ch == needle[i]:
            i += 1
    return i == len(needle)


def _subsequence_gaps(needle: str, hay: str) -> int:
    # Greedy left-to-right alignment; caller guarantees a match exists.
    gaps = 0
    prev = -1
    pos = 0
    for ch in needle:
        pos = hay.index(ch, pos)
        if prev >= 0:
            gaps += pos - prev - 1
        prev = pos
        pos += 1
    return gaps


def fuzzy_score(term: str | None, text: str | None) -> float:
    """Score how well ``term`` matches ``text``.

    Both sides are normalized first.

    Args:
        term: User-supplied search term.
        text: Candidate field value.

    Returns:
        Score in one of the tiers described in the module docstring, or
        ``NO_MATCH``.
    """
    t = normalize(term)
    x = normalize(text)
    if not t or not x:
        return NO_MATCH
    if x == t:
        return EXACT_SCORE
    if x.startswith(t):
        return PREFIX_SCORE

    idx = x.find(t)
    if idx >= 0:
        # Very long texts must not leak into the subsequence tier.
        return min(SUBSTRING_BASE + idx, SUBSEQUENCE_BASE - 1)

    if is_subsequence(t, x):
        return SUBSEQUENCE_BASE + _subsequence_gaps(t, x)
    return NO_MATCH


def record_search_score(term: str, record: Pokemon) -> float:
    """Best score of ``term`` against any searchable part of ``record``.

    Candidates are the name, the padded id, the joined types and the joined
    abilities.
    """
    candidates = (
        record.name,
        format_id(record.id),
        " ".join(record.types),
        " ".join(record.abilities),
    )
    return min(fuzzy_score(term, candidate) for candidate in candidates)
