"""Output renderers for command results.

Provides the OutputWriter abstraction, console/JSON/HTML implementations and
a factory that instantiates writers from configuration.
"""

from __future__ import annotations

from PokeCatalog.config import AppConfig
from PokeCatalog.renderers.base import MultiOutputWriter, OutputError, OutputWriter
from PokeCatalog.renderers.console import ConsoleOutputWriter, render_detail, render_table
from PokeCatalog.renderers.html import HtmlFileWriter
from PokeCatalog.renderers.json import JsonFileWriter, render_json


def create_output_writer(config: AppConfig) -> OutputWriter:
    """Create the output writer for ``output.formats``.

    Raises:
        ValueError: If no writer is configured.
    """
    writers: list[OutputWriter] = []
    if "console" in config.output.formats:
        writers.append(ConsoleOutputWriter())
    if "json" in config.output.formats:
        writers.append(JsonFileWriter(config.output.base_dir))
    if "html" in config.output.formats:
        writers.append(HtmlFileWriter(config.output.base_dir))

    if not writers:
        raise ValueError("No output writers configured")
    return MultiOutputWriter(writers)


__all__ = [
    "OutputWriter",
    "OutputError",
    "ConsoleOutputWriter",
    "JsonFileWriter",
    "HtmlFileWriter",
    "MultiOutputWriter",
    "render_detail",
    "render_json",
    "render_table",
    "create_output_writer",
]
