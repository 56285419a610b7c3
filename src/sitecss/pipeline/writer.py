"""Consolidated stylesheet writer."""

from __future__ import annotations

import logging
from pathlib import Path

from sitecss.config import normalize_destination
from sitecss.errors import SiteIOError

logger = logging.getLogger(__name__)


def destination_path(root: str | Path, destination: str | None) -> Path:
    """Return the on-disk path of *destination* under the output root."""
    return Path(root) / normalize_destination(destination).lstrip("/")


def write_stylesheet(css: bytes | str, root: str | Path, destination: str | None) -> Path:
    """Write *css* verbatim to the destination, creating parent directories."""
    target = destination_path(root, destination)
    data = css.encode("utf-8") if isinstance(css, str) else css
    try:
        target.parent.mkdir(parents=True, exist_ok=True)
        target.write_bytes(data)
    except OSError as exc:
        raise SiteIOError(target, exc) from exc

    logger.info("Wrote %d byte(s) to %s", len(data), target)
    return target
