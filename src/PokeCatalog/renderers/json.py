"""JSON output renderers.

Renders ``PokemonView`` rows into JSON-serializable objects and writes one
file per CLI run.
"""

from __future__ import annotations

import json
from datetime import datetime
from pathlib import Path
from typing import Iterable, Sequence

from PokeCatalog.core.query import SearchRequest
from PokeCatalog.renderers.base import OutputError, OutputWriter
from PokeCatalog.renderers.view_models import PokemonView
from PokeCatalog.utils.log import log


def render_json(rows: Iterable[PokemonView]) -> list[dict]:
    """Render rows into JSON-serializable dicts, preserving order."""
    out: list[dict] = []
    for rank, row in enumerate(rows, start=1):
        out.append(
            {
                "rank": rank,
                "id": row.id,
                "display_id": row.display_id,
                "name": row.name,
                "image": row.image,
                "types": [b.label for b in row.types],
                "abilities": [b.label for b in row.abilities],
                "description": row.description,
                "height": row.height_m,
                "weight": row.weight_kg,
                "stats": {label: value for label, value in row.stats},
            }
        )
    return out


class JsonFileWriter(OutputWriter):
    """Accumulate results and write them to a JSON file on finalize."""

    def __init__(self, base_dir: str) -> None:
        self.output_dir = Path(base_dir) / "json"
        self.all_results: list[dict] = []

    def write_search_result(self, rows: Sequence[PokemonView], request: SearchRequest) -> None:
        self.all_results.append(
            {
                "request": {
                    "query": request.query,
                    "type_filter": request.type_filter,
                    "sort_key": request.sort_key,
                },
                "results": render_json(rows),
            }
        )

    def finalize(self, action: str) -> None:
        """Write accumulated results to ``<base_dir>/json/<action>_<timestamp>.json``.

        Raises:
            OutputError: If the file cannot be written.
        """
        if not self.all_results:
            return
        timestamp = datetime.now().strftime("%Y%m%d_%H%M%S")
        output_path = self.output_dir / f"{action}_{timestamp}.json"
        try:
            self.output_dir.mkdir(parents=True, exist_ok=True)
            output_path.write_text(
                json.dumps(self.all_results, ensure_ascii=False, indent=2),
                encoding="utf-8",
            )
        except OSError as exc:
            raise OutputError(f"Failed to write JSON output: {output_path}") from exc
        log.info("JSON saved to %s", output_path)
