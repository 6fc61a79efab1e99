"""variantcore CLI entry point: Click group with subcommands."""

import logging

import click

from variantcore import __version__


@click.group()
@click.version_option(version=__version__, prog_name="variantcore")
@click.option("--verbose", "-v", is_flag=True, help="Log registry and cache activity.")
def cli(verbose: bool) -> None:
    """variantcore - resolve variant-prefixed utility class tokens."""
    logging.basicConfig(
        level=logging.DEBUG if verbose else logging.WARNING,
        format="%(levelname)s %(name)s: %(message)s",
    )


# Import and register subcommands
from variantcore.cli.resolve import resolve  # noqa: E402
from variantcore.cli.variants import variants  # noqa: E402
from variantcore.cli.report import report  # noqa: E402

cli.add_command(resolve)
cli.add_command(variants)
cli.add_command(report)
