"""Console text output renderers.

Renders the catalog table and the detail block as plain text lines that are
emitted through the logger.
"""

from __future__ import annotations

from typing import Iterable, Sequence

from PokeCatalog.core.models import AbilityDetail
from PokeCatalog.core.query import SearchRequest
from PokeCatalog.renderers.base import OutputWriter
from PokeCatalog.renderers.view_models import PokemonView
from PokeCatalog.utils.log import log

_NAME_WIDTH = 14
_TYPES_WIDTH = 18
_ABILITIES_WIDTH = 36
_DESCRIPTION_WIDTH = 60


def _clip(text: str, width: int) -> str:
    if len(text) <= width:
        return text.ljust(width)
    return text[: width - 1] + "…"


def render_table(rows: Iterable[PokemonView]) -> str:
    """Render rows as a fixed-width text table.

    Args:
        rows: Rows in display order.

    Returns:
        Table text with a header line, one line per row.
    """
    header = "  ".join(
        (
            "ID".ljust(5),
            "Name".ljust(_NAME_WIDTH),
            "Types".ljust(_TYPES_WIDTH),
            "Abilities".ljust(_ABILITIES_WIDTH),
            "Description",
        )
    )
    lines = [header, "-" * len(header)]
    for row in rows:
        lines.append(
            "  ".join(
                (
                    row.display_id.ljust(5),
                    _clip(row.name, _NAME_WIDTH),
                    _clip(" ".join(b.label for b in row.types), _TYPES_WIDTH),
                    _clip(", ".join(b.label for b in row.abilities), _ABILITIES_WIDTH),
                    _clip(row.description, _DESCRIPTION_WIDTH).rstrip(),
                )
            ).rstrip()
        )
    return "\n".join(lines) + "\n"


def render_detail(row: PokemonView, abilities: Sequence[AbilityDetail] = ()) -> str:
    """Render the full detail block for one record.

    Ability lines use the fetched short effect when available; placeholders
    show the name only.
    """
    lines = [
        f"{row.display_id} {row.name}",
        f"Types: {' '.join(b.label for b in row.types) or '-'}",
        "",
        "Description",
        f"  {row.description}",
        "",
        "Abilities",
    ]
    details = {detail.name: detail for detail in abilities}
    for badge in row.abilities:
        detail = details.get(badge.label)
        if detail is not None and detail.short_effect:
            lines.append(f"  {badge.label}: {detail.short_effect}")
        else:
            lines.append(f"  {badge.label}")
    lines.extend(
        [
            "",
            "Physical Attributes",
            f"  Height: {row.height_m}",
            f"  Weight: {row.weight_kg}",
            "",
            "Base Stats",
        ]
    )
    for label, value in row.stats:
        lines.append(f"  {label}: {value}")
    return "\n".join(lines).rstrip() + "\n"


class ConsoleOutputWriter(OutputWriter):
    """Write results to console via logging."""

    def write_search_result(self, rows: Sequence[PokemonView], request: SearchRequest) -> None:
        log.info(
            "%d result(s) for query=%r type=%s sort=%s",
            len(rows),
            request.query,
            request.type_filter,
            request.sort_key,
        )
        if not rows:
            return
        for line in render_table(rows).splitlines():
            log.info(line)

    def finalize(self, action: str) -> None:
        """No-op for console output."""
