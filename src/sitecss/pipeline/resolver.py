"""Page set resolver: expands file patterns against the output root."""

from __future__ import annotations

import glob
import logging
import os
from pathlib import Path
from typing import Iterable

from sitecss.errors import ConfigError
from sitecss.model.page import PageSet

logger = logging.getLogger(__name__)


def resolve_pages(patterns: Iterable[str], root: str | Path) -> PageSet:
    """Match every pattern under *root* and return the combined page set.

    Results of each pattern are sorted; across patterns the first occurrence
    of a file wins. ``**`` matches any number of directories.
    """
    patterns = list(patterns)
    if not patterns:
        raise ConfigError("no file patterns configured")

    root_path = Path(root)
    if not root_path.is_dir():
        raise ConfigError(f"output root does not exist: {root_path}")
    root_path = root_path.resolve()

    seen: set[Path] = set()
    paths: list[Path] = []
    for pattern in patterns:
        full_pattern = os.path.join(glob.escape(str(root_path)), pattern.lstrip("/"))
        matches = sorted(glob.glob(full_pattern, recursive=True))
        if not matches:
            logger.warning("Pattern %r matched no files under %s", pattern, root_path)
        for match in matches:
            path = Path(match).resolve()
            if not path.is_file() or path in seen:
                continue
            seen.add(path)
            paths.append(path)

    if not paths:
        raise ConfigError(f"file patterns {patterns!r} matched no files under {root_path}")

    logger.info("Resolved %d page(s) under %s", len(paths), root_path)
    return PageSet(root=root_path, paths=tuple(paths))
