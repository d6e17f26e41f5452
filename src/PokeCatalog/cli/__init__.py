"""CLI package for PokeCatalog command orchestration."""

from __future__ import annotations

__all__ = ["CommandRunner", "main"]

from PokeCatalog.cli.runner import CommandRunner
from PokeCatalog.cli.ui import cli


def main() -> None:
    """Run PokeCatalog CLI.

    Entry point referenced by the console script in pyproject.toml.
    """
    cli()
