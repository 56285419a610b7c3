"""sitecss: consolidate a generated site's stylesheets into the CSS it uses."""

__version__ = "0.1.0"

from sitecss.config import ConsolidationConfig, load_site_config  # noqa: E402
from sitecss.errors import (  # noqa: E402
    AnalysisError,
    ConfigError,
    PageParseError,
    SiteCSSError,
    SiteIOError,
)
from sitecss.pipeline.runner import Consolidator, consolidate  # noqa: E402

__all__ = [
    "__version__",
    "AnalysisError",
    "ConfigError",
    "ConsolidationConfig",
    "Consolidator",
    "PageParseError",
    "SiteCSSError",
    "SiteIOError",
    "consolidate",
    "load_site_config",
]
