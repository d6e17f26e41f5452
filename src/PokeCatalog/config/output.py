"""Output domain configuration for multi-format rendering."""

from __future__ import annotations

from dataclasses import dataclass
from typing import Any, Mapping

from PokeCatalog.config.common import (
    expect_str,
    expect_str_list,
    get_required_value,
    get_section,
)

_ALLOWED_FORMATS = {"console", "json", "html"}


@dataclass(frozen=True, slots=True)
class OutputConfig:
    """Output configuration."""

    base_dir: str
    formats: tuple[str, ...]


def load_output(raw: Mapping[str, Any]) -> OutputConfig:
    """Load the ``output`` section.

    Raises:
        TypeError: If config types are invalid.
        ValueError: If required keys are missing.
    """
    section = get_section(raw, "output", required=True)
    formats = tuple(
        item.strip().lower()
        for item in expect_str_list(get_required_value(section, "formats", "output.formats"), "output.formats")
    )
    return OutputConfig(
        base_dir=expect_str(get_required_value(section, "base_dir", "output.base_dir"), "output.base_dir"),
        formats=formats,
    )


def check_output(config: OutputConfig) -> None:
    """Validate output constraints.

    Raises:
        ValueError: If values violate output constraints.
    """
    if not config.formats:
        raise ValueError("output.formats must include at least one format")
    unknown = [fmt for fmt in config.formats if fmt not in _ALLOWED_FORMATS]
    if unknown:
        raise ValueError(f"output.formats has unknown formats: {unknown}")
    if not config.base_dir.strip():
        raise ValueError("output.base_dir must not be empty")
