"""Shared fixtures: generated-site builder and a stand-in analysis tool."""

from __future__ import annotations

import json
import shlex
import sys
from dataclasses import dataclass
from pathlib import Path
from typing import Any, Callable

import pytest


PAGE_A = """<!DOCTYPE html>
<html>
<head>
<title>A</title>
<link rel="stylesheet" href="/css/a.css">
<meta name="description" content="page a">
<link rel="stylesheet" href="/css/b.css">
<script src="/js/app.js"></script>
</head>
<body><p class="used">A</p></body>
</html>
"""

PAGE_B = """<!DOCTYPE html>
<html>
<head>
<title>B</title>
<link rel="stylesheet" href="/css/a.css">
<meta name="description" content="page b">
</head>
<body><p>B</p></body>
</html>
"""

PAGE_C = """<!DOCTYPE html>
<html>
<head><title>C</title></head>
<body><p>No stylesheets here &amp; none needed.</p></body>
</html>
"""


def write_site(root: Path, files: dict[str, str | bytes]) -> Path:
    """Write *files* (relative path -> content) under *root*."""
    for rel, content in files.items():
        path = root / rel
        path.parent.mkdir(parents=True, exist_ok=True)
        if isinstance(content, bytes):
            path.write_bytes(content)
        else:
            path.write_text(content, encoding="utf-8")
    return root


@pytest.fixture
def site(tmp_path: Path) -> Path:
    """A small generated site: two pages with stylesheets, one without."""
    return write_site(
        tmp_path / "_site",
        {
            "a.html": PAGE_A,
            "b.html": PAGE_B,
            "c.html": PAGE_C,
            "css/a.css": ".used { color: red; }\n.unused { color: blue; }\n",
            "css/b.css": "p { margin: 0; }\n",
        },
    )


_FAKE_TOOL = """\
import json
import sys

flag, config_path, *pages = sys.argv[1:]
with open(config_path, encoding="utf-8") as fh:
    config = json.load(fh)
with open({record!r}, "w", encoding="utf-8") as fh:
    json.dump({{"flag": flag, "config_path": config_path, "config": config, "pages": pages}}, fh)
sys.stderr.write({stderr!r})
sys.stdout.buffer.write({css!r})
sys.exit({exit_code})
"""


@dataclass
class FakeTool:
    """A Python script that behaves like the analysis tool and records its call."""

    command: str
    record_path: Path

    @property
    def called(self) -> bool:
        return self.record_path.exists()

    def record(self) -> dict[str, Any]:
        return json.loads(self.record_path.read_text(encoding="utf-8"))


@pytest.fixture
def fake_tool(tmp_path: Path) -> Callable[..., FakeTool]:
    """Factory for fake analysis tools with a fixed output and exit status."""
    counter = {"n": 0}

    def _make(css: bytes = b".used{color:red}\n", exit_code: int = 0, stderr: str = "") -> FakeTool:
        counter["n"] += 1
        tool_dir = tmp_path / f"tool-{counter['n']}"
        tool_dir.mkdir()
        record = tool_dir / "record.json"
        script = tool_dir / "fake_uncss.py"
        script.write_text(
            _FAKE_TOOL.format(record=str(record), css=css, stderr=stderr, exit_code=exit_code),
            encoding="utf-8",
        )
        command = f"{shlex.quote(sys.executable)} {shlex.quote(str(script))}"
        return FakeTool(command=command, record_path=record)

    return _make


@pytest.fixture
def make_site(tmp_path: Path) -> Callable[..., Path]:
    """Factory writing a site from a ``{relative path: content}`` mapping."""

    def _make(files: dict[str, str | bytes], name: str = "_site") -> Path:
        return write_site(tmp_path / name, files)

    return _make
