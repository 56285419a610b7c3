"""sitecss CLI entry point: Click group with subcommands."""

import logging

import click

from sitecss import __version__


@click.group()
@click.version_option(version=__version__, prog_name="sitecss")
@click.option("-v", "--verbose", is_flag=True, help="Log every pipeline step")
def cli(verbose: bool) -> None:
    """sitecss - consolidate a generated site's stylesheets into the CSS it uses."""
    logging.basicConfig(
        level=logging.DEBUG if verbose else logging.WARNING,
        format="%(levelname)s %(name)s: %(message)s",
    )


# Import and register subcommands
from sitecss.cli.run import run  # noqa: E402
from sitecss.cli.inspect import inspect  # noqa: E402

cli.add_command(run)
cli.add_command(inspect)
