"""Page set model: the HTML files a consolidation run reads and rewrites."""

from __future__ import annotations

from dataclasses import dataclass, field
from pathlib import Path
from typing import Iterator


@dataclass(frozen=True)
class PageSet:
    """Ordered, duplicate-free absolute page paths under a single output root."""

    root: Path
    paths: tuple[Path, ...] = field(default_factory=tuple)

    def __iter__(self) -> Iterator[Path]:
        return iter(self.paths)

    def __len__(self) -> int:
        return len(self.paths)

    def __getitem__(self, index: int) -> Path:
        return self.paths[index]

    def relative(self, path: Path) -> str:
        """Return *path* relative to the output root, for display."""
        try:
            return path.relative_to(self.root).as_posix()
        except ValueError:
            return str(path)
