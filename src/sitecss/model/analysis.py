"""Analysis request model: the configuration handed to the external CSS tool."""

from __future__ import annotations

import json
from dataclasses import dataclass, field
from typing import Any


@dataclass(frozen=True)
class StylesheetRef:
    """One distinct stylesheet ``href`` and the form the tool receives.

    ``local`` is True when the href resolved to a file under the output root,
    in which case ``normalized`` is its root-relative form.
    """

    href: str
    normalized: str
    local: bool = False


@dataclass
class AnalysisConfig:
    """Settings serialised for the analysis tool's own configuration file."""

    htmlroot: str
    stylesheets: list[str] = field(default_factory=list)
    media: list[str] | None = None
    timeout: int | float | None = None

    # --- serialisation ----------------------------------------------------------

    def to_dict(self) -> dict[str, Any]:
        """Return the config as a dict, leaving out keys without a value."""
        data: dict[str, Any] = {
            "htmlroot": self.htmlroot,
            "stylesheets": list(self.stylesheets),
            "media": list(self.media) if self.media is not None else None,
            "timeout": self.timeout,
        }
        return {key: value for key, value in data.items() if value is not None}

    def to_json(self, indent: int | None = None) -> str:
        return json.dumps(self.to_dict(), indent=indent)
