"""Analysis request builder: normalises stylesheet refs and assembles the tool config."""

from __future__ import annotations

import logging
from pathlib import Path
from typing import Iterable, Sequence

from sitecss.model.analysis import AnalysisConfig, StylesheetRef

logger = logging.getLogger(__name__)


def normalize_ref(href: str, root: str | Path) -> StylesheetRef:
    """Classify *href* as a file under *root* or an opaque URL.

    A ref naming a regular file inside the output root becomes root-relative
    (``/css/site.css``); anything else is passed through unchanged.
    """
    root_path = Path(root).resolve()
    relative = href.lstrip("/")
    if relative:
        candidate = (root_path / relative).resolve()
        if candidate.is_file() and candidate.is_relative_to(root_path):
            return StylesheetRef(href=href, normalized="/" + relative, local=True)
    return StylesheetRef(href=href, normalized=href)


def build_analysis_config(
    hrefs: Iterable[str],
    root: str | Path,
    media: Sequence[str] | None = None,
    timeout: int | float | None = None,
) -> AnalysisConfig:
    """Assemble the analysis tool's configuration for the given stylesheet hrefs."""
    refs = [normalize_ref(href, root) for href in hrefs]
    for ref in refs:
        if ref.local:
            logger.debug("Stylesheet %s -> %s", ref.href, ref.normalized)
        else:
            logger.debug("Stylesheet %s left as-is (no file under output root)", ref.href)

    return AnalysisConfig(
        htmlroot=str(root),
        stylesheets=[ref.normalized for ref in refs],
        media=list(media) if media is not None else None,
        timeout=timeout,
    )
