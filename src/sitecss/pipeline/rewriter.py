"""Page rewriter: swaps each page's stylesheet links for the consolidated one."""

from __future__ import annotations

import logging
from concurrent.futures import ThreadPoolExecutor
from pathlib import Path

from bs4 import BeautifulSoup

from sitecss.errors import SiteIOError
from sitecss.model.page import PageSet
from sitecss.pipeline.extractor import find_stylesheet_links, parse_page

logger = logging.getLogger(__name__)


def swap_stylesheet_links(soup: BeautifulSoup, destination: str) -> bool:
    """Replace every stylesheet link in *soup* with one link to *destination*.

    The new link is placed right after the last existing one before the
    originals are removed, so it takes that link's position. Returns False
    when the document has no stylesheet links.
    """
    links = find_stylesheet_links(soup)
    if not links:
        return False

    link = soup.new_tag("link", attrs={"rel": "stylesheet", "href": destination})
    links[-1].insert_after(link)
    for old in links:
        old.decompose()
    return True


def render_page(path: Path, destination: str) -> bytes | None:
    """Return the rewritten bytes of one page, or None if it needs no change."""
    soup = parse_page(path)
    if not swap_stylesheet_links(soup, destination):
        return None
    return soup.encode(soup.original_encoding or "utf-8")


def _write_page(path: Path, data: bytes) -> None:
    try:
        path.write_bytes(data)
    except OSError as exc:
        raise SiteIOError(path, exc) from exc
    logger.debug("Rewrote %s", path)


def rewrite_pages(
    pages: PageSet,
    destination: str,
    atomic: bool = True,
    workers: int = 1,
) -> tuple[list[Path], list[Path]]:
    """Point every page that links stylesheets at *destination*.

    Pages without stylesheet links are never written. With *atomic* every
    page is parsed and rendered before the first one is written, so a page
    that fails to parse leaves the whole site as it was. Without it pages
    are written as they are processed and earlier writes are kept on failure.

    Returns ``(rewritten, untouched)``.
    """
    rewritten: list[Path] = []
    untouched: list[Path] = []

    if atomic:
        if workers > 1 and len(pages) > 1:
            with ThreadPoolExecutor(max_workers=workers) as pool:
                rendered = list(pool.map(lambda p: render_page(p, destination), pages))
        else:
            rendered = [render_page(path, destination) for path in pages]

        for path, data in zip(pages, rendered):
            if data is None:
                untouched.append(path)
                continue
            _write_page(path, data)
            rewritten.append(path)
    else:
        for path in pages:
            data = render_page(path, destination)
            if data is None:
                untouched.append(path)
                continue
            _write_page(path, data)
            rewritten.append(path)

    logger.info(
        "Rewrote %d page(s), left %d without stylesheet links untouched",
        len(rewritten),
        len(untouched),
    )
    return rewritten, untouched
