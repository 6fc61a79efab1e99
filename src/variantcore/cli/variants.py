"""CLI command: variantcore variants -- list the known variant names."""

from __future__ import annotations

import click

from variantcore.cli._common import config_option, load_engine
from variantcore.model.kind import VariantKind


@click.command()
@click.option(
    "--kind",
    type=click.Choice([k.name.lower() for k in VariantKind], case_sensitive=False),
    default=None,
    help="Only list variants of this kind.",
)
@config_option
def variants(kind: str | None, config_path: str | None) -> None:
    """List every variant name the registry can resolve.

    Shows the kind and the selector pattern or media query of each name.
    """
    registry = load_engine(config_path).registry
    selected = VariantKind[kind.upper()] if kind else None
    snapshot = registry.snapshot()

    names = registry.names(selected)
    if not names:
        click.echo("No variants.")
        return

    for name in names:
        definition = snapshot.lookup(name)
        if definition is None:
            # Breakpoints have no definition, only a width.
            click.echo(f"{name:<20} {'RESPONSIVE':<13} {snapshot.breakpoint_query(name)}")
            continue
        detail = definition.media_query or definition.selector_pattern
        click.echo(f"{name:<20} {definition.kind.name:<13} {detail}")
