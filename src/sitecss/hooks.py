"""Build lifecycle integration: run consolidation when the site is written."""

from __future__ import annotations

import logging
from typing import Callable

from sitecss.config import CONFIG_KEY, ConsolidationConfig
from sitecss.events.bus import EventBus
from sitecss.events.types import SiteWritten
from sitecss.pipeline.runner import Consolidator

logger = logging.getLogger(__name__)


def register(
    bus: EventBus,
    key: str = CONFIG_KEY,
    config: ConsolidationConfig | None = None,
) -> Callable[[SiteWritten], None]:
    """Subscribe a consolidation pass to ``SiteWritten`` events on *bus*.

    Without an explicit *config*, each event's site configuration is read
    under *key*. Errors propagate to the emitter so the build fails.
    Returns the registered listener.
    """

    def on_site_written(event: SiteWritten) -> None:
        cfg = config or ConsolidationConfig.from_mapping(event.site_config.get(key))
        logger.info("Site written to %s, consolidating stylesheets", event.root)
        Consolidator(cfg, event_bus=bus).run(event.root)

    bus.subscribe(SiteWritten, on_site_written)
    return on_site_written
