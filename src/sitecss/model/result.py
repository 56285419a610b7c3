"""Result of a completed consolidation run."""

from __future__ import annotations

from dataclasses import dataclass, field
from pathlib import Path


@dataclass
class ConsolidationResult:
    """Summary of what a run read and wrote."""

    root: Path
    destination: str
    output_path: Path
    pages: list[Path] = field(default_factory=list)
    stylesheets: list[str] = field(default_factory=list)
    css_bytes: int = 0
    rewritten: list[Path] = field(default_factory=list)
    untouched: list[Path] = field(default_factory=list)

    @property
    def page_count(self) -> int:
        return len(self.pages)
