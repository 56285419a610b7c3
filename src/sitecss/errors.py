"""Error types raised by the consolidation pipeline."""

from __future__ import annotations

from pathlib import Path


class SiteCSSError(Exception):
    """Base class for every failure that aborts a consolidation run."""


class ConfigError(SiteCSSError):
    """Raised when the pipeline configuration is missing or invalid."""


class PageParseError(SiteCSSError):
    """Raised when a page cannot be read or parsed as HTML."""

    def __init__(self, path: str | Path, reason: str) -> None:
        self.path = Path(path)
        self.reason = reason
        super().__init__(f"{self.path}: {reason}")


class AnalysisError(SiteCSSError):
    """Raised when the external analysis tool cannot be run or exits non-zero.

    ``diagnostics`` holds whatever the tool wrote to stderr, ``returncode``
    its exit status when it got as far as exiting.
    """

    def __init__(
        self,
        message: str,
        cause: BaseException | None = None,
        diagnostics: str = "",
        returncode: int | None = None,
    ) -> None:
        self.cause = cause
        self.diagnostics = diagnostics
        self.returncode = returncode
        detail = message
        if cause is not None:
            detail = f"{detail}: {cause}"
        if diagnostics:
            detail = f"{detail} :: {diagnostics.strip()}"
        super().__init__(detail)


class SiteIOError(SiteCSSError):
    """Raised when a file under the output root cannot be read or written."""

    def __init__(self, path: str | Path, cause: OSError) -> None:
        self.path = Path(path)
        self.cause = cause
        super().__init__(f"{self.path}: {cause.strerror or cause}")
