"""Event system: bus and event types for the consolidation lifecycle."""

from sitecss.events.bus import EventBus
from sitecss.events.types import (
    ConsolidationCompleted,
    ConsolidationFailed,
    ConsolidationStarted,
    PageRewritten,
    SiteWritten,
    StylesheetsCollected,
    StylesheetWritten,
)

__all__ = [
    "EventBus",
    "ConsolidationCompleted",
    "ConsolidationFailed",
    "ConsolidationStarted",
    "PageRewritten",
    "SiteWritten",
    "StylesheetsCollected",
    "StylesheetWritten",
]
