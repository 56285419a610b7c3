"""Options shared by the sitecss commands."""

from __future__ import annotations

from dataclasses import replace
from typing import Any, Callable

import click

from sitecss.config import ConsolidationConfig, load_site_config
from sitecss.errors import ConfigError


def config_options(fn: Callable) -> Callable:
    """Attach the options that select and override consolidation settings."""
    options = [
        click.option(
            "--config",
            "config_file",
            type=click.Path(exists=True, dir_okay=False),
            default=None,
            help="TOML build configuration with an [uncss] table",
        ),
        click.option(
            "--files", "-f", multiple=True, help="Page glob relative to the output root (repeatable)"
        ),
        click.option("--media", multiple=True, help="Media type passed to the tool (repeatable)"),
        click.option("--timeout", type=float, default=None, help="Timeout passed to the tool"),
        click.option("--destination", default=None, help="Consolidated stylesheet path"),
        click.option("--tool", default=None, help="Analysis command (default: uncss)"),
        click.option("--config-flag", default=None, help="Flag naming the tool's config file"),
        click.option("--workers", type=click.IntRange(min=1), default=None, help="Parser threads"),
        click.option(
            "--atomic/--no-atomic",
            default=None,
            help="Render every page before writing any (default: atomic)",
        ),
    ]
    for option in reversed(options):
        fn = option(fn)
    return fn


def build_config(
    config_file: str | None,
    files: tuple[str, ...],
    media: tuple[str, ...],
    timeout: float | None,
    destination: str | None,
    tool: str | None,
    config_flag: str | None,
    workers: int | None,
    atomic: bool | None,
) -> ConsolidationConfig:
    """Load the config file, if any, then apply command-line overrides."""
    if not config_file and not files:
        raise ConfigError("pass --config or at least one --files pattern")

    overrides: dict[str, Any] = {}
    if files:
        overrides["files"] = files
    if media:
        overrides["media"] = media
    if timeout is not None:
        overrides["timeout"] = int(timeout) if timeout.is_integer() else timeout
    if destination is not None:
        overrides["destination"] = destination
    if tool is not None:
        overrides["tool"] = tool
    if config_flag is not None:
        overrides["config_flag"] = config_flag
    if workers is not None:
        overrides["workers"] = workers
    if atomic is not None:
        overrides["atomic"] = atomic

    if config_file:
        return replace(load_site_config(config_file), **overrides)
    return ConsolidationConfig.from_mapping(overrides)
