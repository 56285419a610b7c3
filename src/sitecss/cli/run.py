"""CLI command: sitecss run -- consolidate stylesheets across a generated site."""

from __future__ import annotations

import sys

import click

from sitecss.cli.options import build_config, config_options
from sitecss.errors import ConfigError, SiteCSSError
from sitecss.pipeline.runner import consolidate


@click.command()
@click.argument("output_root", type=click.Path(exists=True, file_okay=False))
@config_options
def run(output_root: str, config_file: str | None, **overrides) -> None:
    """Consolidate the stylesheets linked from pages under OUTPUT_ROOT.

    Runs the analysis tool over every matched page, writes the CSS it returns
    to the destination and points each page at that single stylesheet.
    """
    try:
        config = build_config(config_file, **overrides)
    except ConfigError as exc:
        click.echo(f"Configuration error: {exc}", err=True)
        sys.exit(1)

    try:
        result = consolidate(output_root, config)
    except SiteCSSError as exc:
        click.echo(f"Consolidation failed: {exc}", err=True)
        sys.exit(1)

    click.echo(f"Pages:       {result.page_count}")
    click.echo(f"Stylesheets: {len(result.stylesheets)}")
    for href in result.stylesheets:
        click.echo(f"  - {href}")
    click.echo(f"Wrote {result.css_bytes} bytes to {result.destination}")
    click.echo(f"Rewritten:   {len(result.rewritten)} page(s)")
    click.echo(f"Untouched:   {len(result.untouched)} page(s)")
