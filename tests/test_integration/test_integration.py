"""End-to-end consolidation scenarios over a generated site."""

from __future__ import annotations

from bs4 import BeautifulSoup, Tag

from sitecss.config import ConsolidationConfig
from sitecss.events import EventBus, SiteWritten
from sitecss import hooks
from sitecss.pipeline.runner import consolidate


def _head_tags(html: bytes) -> list[Tag]:
    soup = BeautifulSoup(html, "html.parser")
    return [child for child in soup.head.children if isinstance(child, Tag)]


class TestTwoPageSite:
    def test_full_run(self, site, fake_tool):
        tool = fake_tool(css=b".used{color:red}")
        c_before = (site / "c.html").read_bytes()
        c_mtime = (site / "c.html").stat().st_mtime_ns

        result = consolidate(site, ConsolidationConfig(files=("*.html",), tool=tool.command))

        # Distinct stylesheets, first-seen order
        assert result.stylesheets == ["/css/a.css", "/css/b.css"]
        assert tool.record()["config"]["stylesheets"] == ["/css/a.css", "/css/b.css"]

        # Consolidated stylesheet at the default destination
        assert (site / "assets" / "styles.css").read_bytes() == b".used{color:red}"

        # a.html: one link, where /css/b.css used to be
        a_head = _head_tags((site / "a.html").read_bytes())
        assert [t.name for t in a_head] == ["title", "meta", "link", "script"]
        assert a_head[2]["href"] == "/assets/styles.css"
        assert a_head[2]["rel"] == ["stylesheet"]

        # b.html: one link, where /css/a.css used to be
        b_head = _head_tags((site / "b.html").read_bytes())
        assert [t.name for t in b_head] == ["title", "link", "meta"]
        assert b_head[1]["href"] == "/assets/styles.css"

        # c.html: byte-for-byte untouched, never rewritten
        assert (site / "c.html").read_bytes() == c_before
        assert (site / "c.html").stat().st_mtime_ns == c_mtime

        # Original stylesheets stay on disk
        assert (site / "css" / "a.css").exists()

    def test_site_without_stylesheets(self, make_site, fake_tool):
        root = make_site({"x.html": "<p>x</p>", "y.html": "<html><body>y</body></html>"})
        before = {p.name: p.read_bytes() for p in root.glob("*.html")}
        tool = fake_tool(css=b"")
        result = consolidate(root, ConsolidationConfig(files=("*.html",), tool=tool.command))
        assert result.stylesheets == []
        assert result.rewritten == []
        assert {p.name: p.read_bytes() for p in root.glob("*.html")} == before

    def test_second_run_consolidates_the_consolidated_sheet(self, site, fake_tool):
        cfg = ConsolidationConfig(files=("*.html",), tool=fake_tool(css=b"a{}").command)
        consolidate(site, cfg)

        tool = fake_tool(css=b"b{}")
        consolidate(site, ConsolidationConfig(files=("*.html",), tool=tool.command))
        assert tool.record()["config"]["stylesheets"] == ["/assets/styles.css"]
        assert (site / "assets" / "styles.css").read_bytes() == b"b{}"


class TestBuildLifecycle:
    def test_post_write_event_drives_the_pipeline(self, site, fake_tool):
        tool = fake_tool(css=b"p{}")
        bus = EventBus()
        hooks.register(bus)

        bus.emit(SiteWritten(root=site, site_config={"uncss": {"files": ["**/*.html"], "tool": tool.command}}))

        assert (site / "assets" / "styles.css").read_bytes() == b"p{}"
        assert b'href="/assets/styles.css"' in (site / "a.html").read_bytes()
