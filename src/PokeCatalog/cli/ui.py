"""Click CLI interface definitions.

Defines the command-line interface structure and routes commands to the
runner.
"""

from __future__ import annotations

from pathlib import Path

import click
from dotenv import load_dotenv

from PokeCatalog.cli.runner import CommandRunner
from PokeCatalog.config import DEFAULT_CONFIG_PATH, load_config, load_config_with_defaults
from PokeCatalog.core.query import SORT_KEYS


@click.group(help="PokeCatalog: search the Pokemon catalog from the terminal.")
@click.option(
    "--config",
    "config_path",
    type=click.Path(path_type=Path, dir_okay=False),
    default=DEFAULT_CONFIG_PATH,
    show_default=True,
    help="Path to YAML config file. Merged over the default config when it exists.",
)
@click.pass_context
def cli(ctx: click.Context, config_path: Path) -> None:
    """CLI entry group.

    Loads environment variables from a .env file before reading config, so
    ``POKECATALOG_API_BASE_URL`` can be set there.
    """
    load_dotenv()

    if config_path != DEFAULT_CONFIG_PATH and DEFAULT_CONFIG_PATH.exists():
        ctx.obj = load_config_with_defaults(config_path, DEFAULT_CONFIG_PATH)
    else:
        ctx.obj = load_config(config_path)


@cli.command("search")
@click.argument("query", nargs=-1)
@click.option("--sort", "sort_key", type=click.Choice(SORT_KEYS), default=None, help="Explicit sort order.")
@click.option("--type", "type_filter", default=None, help="Only show pokemon of this type ('all' for every type).")
@click.pass_context
def search_cmd(ctx: click.Context, query: tuple[str, ...], sort_key: str | None, type_filter: str | None) -> None:
    """Search the catalog.

    QUERY uses the prefix syntax: bare words match name or id, ':word' matches
    types and '::word' matches abilities. Prefixes stick to following words.
    """
    cfg = ctx.obj
    request = cfg.search.to_request(
        query=" ".join(query) if query else None,
        sort=sort_key,
        type_filter=type_filter,
    )
    CommandRunner(cfg).run_search(action=ctx.command.name, request=request)


@cli.command("show")
@click.argument("term")
@click.pass_context
def show_cmd(ctx: click.Context, term: str) -> None:
    """Show details and abilities of the best match for TERM."""
    CommandRunner(ctx.obj).run_show(action=ctx.command.name, term=term)
