"""Analysis invoker: runs the external CSS usage tool over the page set."""

from __future__ import annotations

import logging
import os
import shlex
import subprocess
import tempfile
from pathlib import Path
from typing import Iterable

from sitecss.errors import AnalysisError
from sitecss.model.analysis import AnalysisConfig

logger = logging.getLogger(__name__)


def build_command(tool: str, config_flag: str, config_path: str, pages: Iterable[Path]) -> str:
    """Return the shell command line for one analysis run.

    *tool* is used verbatim so it may carry its own arguments
    (``npx uncss``); the config path and every page path are quoted.
    """
    parts = [tool, config_flag, shlex.quote(config_path)]
    parts.extend(shlex.quote(str(page)) for page in pages)
    return " ".join(parts)


def run_analysis(
    config: AnalysisConfig,
    pages: Iterable[Path],
    tool: str = "uncss",
    config_flag: str = "--uncssrc",
) -> bytes:
    """Run the analysis tool and return its standard output untouched.

    The config is written to a temporary JSON file which is removed once the
    process exits, whether or not it succeeded.
    """
    pages = list(pages)
    handle = tempfile.NamedTemporaryFile(
        "w", prefix="uncssrc-", suffix=".json", encoding="utf-8", delete=False
    )
    try:
        with handle:
            handle.write(config.to_json())

        command = build_command(tool, config_flag, handle.name, pages)
        logger.info("Running %s over %d page(s)", tool, len(pages))
        logger.debug("Command: %s", command)

        try:
            proc = subprocess.run(command, shell=True, capture_output=True)
        except OSError as exc:
            raise AnalysisError(f"could not launch {tool!r}", cause=exc) from exc
    finally:
        os.unlink(handle.name)

    diagnostics = proc.stderr.decode("utf-8", errors="replace")
    if proc.returncode != 0:
        raise AnalysisError(
            f"{tool!r} exited with status {proc.returncode}",
            diagnostics=diagnostics,
            returncode=proc.returncode,
        )
    if diagnostics.strip():
        logger.debug("%s stderr: %s", tool, diagnostics.strip())

    logger.info("Analysis produced %d byte(s) of CSS", len(proc.stdout))
    return proc.stdout
