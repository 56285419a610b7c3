"""Consolidation runner: drives one pass of the pipeline over a generated site."""

from __future__ import annotations

import logging
from pathlib import Path

from sitecss.config import ConsolidationConfig
from sitecss.errors import SiteCSSError
from sitecss.events import types as events
from sitecss.events.bus import EventBus
from sitecss.model.result import ConsolidationResult
from sitecss.pipeline.extractor import collect_stylesheets
from sitecss.pipeline.invoker import run_analysis
from sitecss.pipeline.request import build_analysis_config
from sitecss.pipeline.resolver import resolve_pages
from sitecss.pipeline.rewriter import rewrite_pages
from sitecss.pipeline.writer import write_stylesheet

logger = logging.getLogger(__name__)


class Consolidator:
    """Runs resolve, extract, analyse, write and rewrite in order.

    Any failure aborts the run: nothing is written before the analysis tool
    has succeeded, and the exception is re-raised after a
    ``ConsolidationFailed`` event.
    """

    def __init__(
        self,
        config: ConsolidationConfig,
        *,
        event_bus: EventBus | None = None,
    ) -> None:
        self.config = config
        self._event_bus = event_bus or EventBus()

    def run(self, root: str | Path) -> ConsolidationResult:
        root_path = Path(root)
        try:
            return self._run(root_path)
        except SiteCSSError as exc:
            logger.error("Stylesheet consolidation failed: %s", exc)
            self._event_bus.emit(events.ConsolidationFailed(root=root_path, error=str(exc)))
            raise

    def _run(self, root: Path) -> ConsolidationResult:
        cfg = self.config

        # Step 1: Resolve pages
        pages = resolve_pages(cfg.files, root)
        self._event_bus.emit(events.ConsolidationStarted(root=pages.root, page_count=len(pages)))

        # Step 2: Collect stylesheet references
        hrefs = collect_stylesheets(pages, workers=cfg.workers)
        self._event_bus.emit(events.StylesheetsCollected(hrefs=tuple(hrefs)))

        # Step 3: Build the analysis request
        analysis = build_analysis_config(hrefs, pages.root, media=cfg.media, timeout=cfg.timeout)

        # Step 4: Run the analysis tool
        css = run_analysis(analysis, pages, tool=cfg.tool, config_flag=cfg.config_flag)

        # Step 5: Write the consolidated stylesheet
        output_path = write_stylesheet(css, pages.root, cfg.destination)
        self._event_bus.emit(events.StylesheetWritten(path=output_path, size=len(css)))

        # Step 6: Rewrite pages
        rewritten, untouched = rewrite_pages(
            pages, cfg.destination, atomic=cfg.atomic, workers=cfg.workers
        )
        for path in rewritten:
            self._event_bus.emit(events.PageRewritten(path=path))

        result = ConsolidationResult(
            root=pages.root,
            destination=cfg.destination,
            output_path=output_path,
            pages=list(pages),
            stylesheets=hrefs,
            css_bytes=len(css),
            rewritten=rewritten,
            untouched=untouched,
        )
        self._event_bus.emit(events.ConsolidationCompleted(result=result))
        return result


def consolidate(
    root: str | Path,
    config: ConsolidationConfig,
    event_bus: EventBus | None = None,
) -> ConsolidationResult:
    """Run the full pipeline once over the site at *root*."""
    return Consolidator(config, event_bus=event_bus).run(root)
