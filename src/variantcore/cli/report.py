"""CLI command: variantcore report -- summarise the tokens in a text file."""

from __future__ import annotations

from pathlib import Path

import click

from variantcore.cli._common import config_option, load_engine
from variantcore.report import summary_report


@click.command()
@click.argument("tokenfile", type=click.Path(exists=True, dir_okay=False))
@config_option
def report(tokenfile: str, config_path: str | None) -> None:
    """Resolve whitespace-separated tokens from TOKENFILE and print a summary."""
    tokens = Path(tokenfile).read_text(encoding="utf-8").split()
    engine = load_engine(config_path)
    click.echo(summary_report(engine.resolve_many(tokens)), nl=False)
