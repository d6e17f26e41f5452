"""HTML output renderers.

Writes a standalone catalog page: one table per search with colored type and
ability badges.
"""

from __future__ import annotations

import html
from datetime import datetime
from pathlib import Path
from typing import Sequence

from PokeCatalog.core.query import SearchRequest
from PokeCatalog.renderers.base import OutputError, OutputWriter
from PokeCatalog.renderers.view_models import BadgeView, PokemonView
from PokeCatalog.utils.log import log

_STYLE = """
body { font-family: sans-serif; margin: 2rem; background: #f5f5f5; }
table { border-collapse: collapse; width: 100%; background: #fff; margin-bottom: 2rem; }
th, td { padding: .5rem; border-bottom: 1px solid #ddd; text-align: left; vertical-align: top; }
.pokemon-id { color: #888; font-weight: bold; }
.pokemon-image { width: 64px; height: 64px; }
.pokemon-name { text-transform: capitalize; font-weight: bold; }
.type-badge, .ability-badge { display: inline-block; padding: 2px 8px; margin: 2px;
  border-radius: 10px; color: #fff; font-size: .85rem; text-transform: capitalize; }
.empty-state { color: #888; }
"""


def _badges(badges: Sequence[BadgeView], css_class: str) -> str:
    return "".join(
        f'<span class="{css_class}" style="background: {html.escape(b.color, quote=True)};">'
        f"{html.escape(b.label)}</span>"
        for b in badges
    )


def render_row(row: PokemonView) -> str:
    """Render one ``<tr>`` for ``row``."""
    image = ""
    if row.image:
        image = (
            f'<img src="{html.escape(row.image, quote=True)}"'
            f' alt="{html.escape(row.name, quote=True)}" class="pokemon-image">'
        )
    return (
        "<tr>"
        f'<td class="pokemon-id">{html.escape(row.display_id)}</td>'
        f"<td>{image}</td>"
        f'<td class="pokemon-name">{html.escape(row.name)}</td>'
        f'<td><div class="abilities">{_badges(row.types, "type-badge")}</div></td>'
        f'<td><div class="abilities">{_badges(row.abilities, "ability-badge")}</div></td>'
        f'<td class="description">{html.escape(row.description)}</td>'
        "</tr>"
    )


def render_section(rows: Sequence[PokemonView], request: SearchRequest) -> str:
    """Render one search result as a captioned table."""
    caption = (
        f"query={request.query or '-'} type={request.type_filter} "
        f"sort={request.sort_key} ({len(rows)} results)"
    )
    if not rows:
        return (
            f"<section><h2>{html.escape(caption)}</h2>"
            '<p class="empty-state">No pokemon match this search.</p></section>'
        )
    body = "\n".join(render_row(row) for row in rows)
    return (
        f"<section><h2>{html.escape(caption)}</h2>\n"
        "<table>\n<thead><tr><th>ID</th><th>Image</th><th>Name</th><th>Types</th>"
        "<th>Abilities</th><th>Description</th></tr></thead>\n"
        f"<tbody>\n{body}\n</tbody>\n</table></section>"
    )


def render_document(sections: Sequence[str], generated_at: datetime) -> str:
    return (
        "<!DOCTYPE html>\n<html lang=\"en\">\n<head>\n<meta charset=\"utf-8\">\n"
        "<title>PokeCatalog</title>\n"
        f"<style>{_STYLE}</style>\n</head>\n<body>\n"
        f"<h1>PokeCatalog</h1>\n<p>Generated {generated_at:%Y-%m-%d %H:%M:%S}</p>\n"
        + "\n".join(sections)
        + "\n</body>\n</html>\n"
    )


class HtmlFileWriter(OutputWriter):
    """Render HTML sections and write the page during finalization."""

    def __init__(self, base_dir: str) -> None:
        self.output_dir = Path(base_dir) / "html"
        self.pending_sections: list[str] = []

    def write_search_result(self, rows: Sequence[PokemonView], request: SearchRequest) -> None:
        self.pending_sections.append(render_section(rows, request))

    def finalize(self, action: str) -> None:
        """Write ``<base_dir>/html/<action>_<timestamp>.html``.

        Raises:
            OutputError: If the file cannot be written.
        """
        if not self.pending_sections:
            return
        now = datetime.now()
        output_path = self.output_dir / f"{action}_{now:%Y%m%d_%H%M%S}.html"
        try:
            self.output_dir.mkdir(parents=True, exist_ok=True)
            output_path.write_text(render_document(self.pending_sections, now), encoding="utf-8")
        except OSError as exc:
            raise OutputError(f"Failed to write HTML output: {output_path}") from exc
        log.info("HTML saved to %s", output_path)
        self.pending_sections = []
