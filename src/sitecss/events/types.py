"""Event types emitted around a consolidation run."""

from dataclasses import dataclass, field
from pathlib import Path
from typing import Any, Mapping

from sitecss.model.result import ConsolidationResult


@dataclass(frozen=True)
class SiteWritten:
    """The site generator finished writing every page to *root*."""

    root: Path
    site_config: Mapping[str, Any] = field(default_factory=dict)


@dataclass(frozen=True)
class ConsolidationStarted:
    root: Path
    page_count: int


@dataclass(frozen=True)
class StylesheetsCollected:
    hrefs: tuple[str, ...]


@dataclass(frozen=True)
class StylesheetWritten:
    path: Path
    size: int


@dataclass(frozen=True)
class PageRewritten:
    path: Path


@dataclass(frozen=True)
class ConsolidationCompleted:
    result: ConsolidationResult


@dataclass(frozen=True)
class ConsolidationFailed:
    root: Path
    error: str
