"""Stylesheet reference extractor: collects linked stylesheets across pages."""

from __future__ import annotations

import logging
from concurrent.futures import ThreadPoolExecutor
from pathlib import Path

from bs4 import BeautifulSoup, ParserRejectedMarkup, Tag

from sitecss.errors import PageParseError, SiteIOError
from sitecss.model.page import PageSet

logger = logging.getLogger(__name__)

# ``rel`` is compared as the literal attribute string, not a token list.
_PARSER_OPTIONS = {"multi_valued_attributes": None}


def parse_page(path: Path) -> BeautifulSoup:
    """Read and parse one page.

    The page is handed to BeautifulSoup as bytes so it detects the encoding
    itself; ``soup.original_encoding`` records what it found.
    """
    try:
        markup = path.read_bytes()
    except OSError as exc:
        raise SiteIOError(path, exc) from exc

    try:
        return BeautifulSoup(markup, "lxml", **_PARSER_OPTIONS)
    except ParserRejectedMarkup as exc:
        raise PageParseError(path, f"cannot parse HTML: {exc}") from exc


def find_stylesheet_links(soup: BeautifulSoup) -> list[Tag]:
    """Return every ``<link rel="stylesheet">`` element in document order."""
    return soup.find_all("link", attrs={"rel": "stylesheet"})


def extract_page_hrefs(path: Path) -> list[str]:
    """Return the stylesheet hrefs linked from one page, skipping links without one."""
    soup = parse_page(path)
    hrefs = [
        link["href"]
        for link in find_stylesheet_links(soup)
        if link.get("href") is not None
    ]
    logger.debug("%s: %d stylesheet link(s)", path, len(hrefs))
    return hrefs


def _dedupe(per_page: list[list[str]]) -> list[str]:
    seen: set[str] = set()
    out: list[str] = []
    for hrefs in per_page:
        for href in hrefs:
            if href not in seen:
                seen.add(href)
                out.append(href)
    return out


def collect_stylesheets(pages: PageSet, workers: int = 1) -> list[str]:
    """Return the distinct stylesheet hrefs across *pages* in first-seen order.

    With ``workers > 1`` pages are parsed on a thread pool; results are merged
    in page-set order so the outcome matches a serial pass.
    """
    if workers > 1 and len(pages) > 1:
        with ThreadPoolExecutor(max_workers=workers) as pool:
            per_page = list(pool.map(extract_page_hrefs, pages))
    else:
        per_page = [extract_page_hrefs(path) for path in pages]

    hrefs = _dedupe(per_page)
    logger.info(
        "Found %d distinct stylesheet(s) in %d link(s)",
        len(hrefs),
        sum(len(p) for p in per_page),
    )
    return hrefs
