"""CLI command: sitecss inspect -- show what a run would send to the tool."""

from __future__ import annotations

import sys

import click

from sitecss.cli.options import build_config, config_options
from sitecss.errors import SiteCSSError
from sitecss.pipeline.extractor import collect_stylesheets
from sitecss.pipeline.invoker import build_command
from sitecss.pipeline.request import build_analysis_config, normalize_ref
from sitecss.pipeline.resolver import resolve_pages


@click.command()
@click.argument("output_root", type=click.Path(exists=True, file_okay=False))
@config_options
def inspect(output_root: str, config_file: str | None, **overrides) -> None:
    """List the pages and stylesheets found under OUTPUT_ROOT.

    Prints the analysis config and command a run would use. Nothing is
    executed or written.
    """
    try:
        config = build_config(config_file, **overrides)
        pages = resolve_pages(config.files, output_root)
        hrefs = collect_stylesheets(pages, workers=config.workers)
    except SiteCSSError as exc:
        click.echo(f"Error: {exc}", err=True)
        sys.exit(1)

    analysis = build_analysis_config(
        hrefs, pages.root, media=config.media, timeout=config.timeout
    )

    click.echo(f"Pages ({len(pages)}):")
    for path in pages:
        click.echo(f"  {pages.relative(path)}")
    click.echo()

    click.echo(f"Stylesheets ({len(hrefs)}):")
    for href in hrefs:
        ref = normalize_ref(href, pages.root)
        kind = "local" if ref.local else "external"
        click.echo(f"  {ref.normalized}  [{kind}]")
    click.echo()

    click.echo("Analysis config:")
    click.echo(analysis.to_json(indent=2))
    click.echo()
    click.echo(f"Destination: {config.destination}")
    click.echo(f"Command: {build_command(config.tool, config.config_flag, '<config>', pages)}")
