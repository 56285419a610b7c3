"""Stylesheet consolidation pipeline stages."""

from sitecss.pipeline.extractor import collect_stylesheets, extract_page_hrefs
from sitecss.pipeline.invoker import run_analysis
from sitecss.pipeline.request import build_analysis_config, normalize_ref
from sitecss.pipeline.resolver import resolve_pages
from sitecss.pipeline.rewriter import rewrite_pages, swap_stylesheet_links
from sitecss.pipeline.runner import Consolidator, consolidate
from sitecss.pipeline.writer import write_stylesheet

__all__ = [
    "Consolidator",
    "build_analysis_config",
    "collect_stylesheets",
    "consolidate",
    "extract_page_hrefs",
    "normalize_ref",
    "resolve_pages",
    "rewrite_pages",
    "run_analysis",
    "swap_stylesheet_links",
    "write_stylesheet",
]
