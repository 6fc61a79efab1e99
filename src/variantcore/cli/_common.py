"""Helpers shared by the CLI commands."""

from __future__ import annotations

import sys

import click

from variantcore.config import EngineConfig, build_engine, load_config
from variantcore.engine.engine import VariantEngine
from variantcore.parser.errors import DeclarationError, VariantError

config_option = click.option(
    "--config",
    "config_path",
    type=click.Path(exists=True, dir_okay=False),
    default=None,
    help="JSON configuration or .css declaration file.",
)


def load_engine(config_path: str | None) -> VariantEngine:
    """Build an engine from *config_path*, exiting with code 2 on bad config."""
    if config_path is None:
        return build_engine(EngineConfig())
    try:
        return build_engine(load_config(config_path))
    except DeclarationError as exc:
        where = f" (line {exc.line}, column {exc.column})" if exc.line else ""
        click.echo(f"Config error: {config_path}{where}: {exc}", err=True)
    except (VariantError, ValueError) as exc:
        click.echo(f"Config error: {config_path}: {exc}", err=True)
    sys.exit(2)
