"""CLI command: variantcore resolve -- resolve tokens and print the results."""

from __future__ import annotations

import json
import sys

import click

from variantcore.cli._common import config_option, load_engine
from variantcore.report import format_result


@click.command()
@click.argument("tokens", nargs=-1, required=True)
@config_option
@click.option("--json", "as_json", is_flag=True, help="Print results as a JSON array.")
def resolve(tokens: tuple[str, ...], config_path: str | None, as_json: bool) -> None:
    """Resolve one or more TOKENS such as sm:hover:bg-blue-500.

    Exits with code 0 if every token resolves, or code 1 if any fails.
    """
    engine = load_engine(config_path)
    results = engine.resolve_many(tokens)

    if as_json:
        click.echo(json.dumps([r.to_dict() for r in results], indent=2))
    else:
        for i, result in enumerate(results):
            if i:
                click.echo()
            click.echo(format_result(result))

    if any(not r.success for r in results):
        sys.exit(1)
