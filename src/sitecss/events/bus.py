"""Synchronous event bus connecting the site build to the consolidation run."""

from __future__ import annotations

import logging
from typing import Any, Callable

logger = logging.getLogger(__name__)

Listener = Callable[[Any], None]


class EventBus:
    """Publish-subscribe bus for build lifecycle and pipeline events.

    Listeners run synchronously in the order they subscribed, global
    listeners first. A listener that raises stops dispatch and the error
    reaches the code that emitted the event, which is how a failed
    consolidation fails the build.
    """

    def __init__(self) -> None:
        self._listeners: dict[type, list[Listener]] = {}
        self._global_listeners: list[Listener] = []

    def subscribe(self, event_type: type, callback: Listener) -> None:
        """Call *callback* for every event of exactly *event_type*."""
        self._listeners.setdefault(event_type, []).append(callback)

    def unsubscribe(self, event_type: type, callback: Listener) -> bool:
        """Remove a listener added with ``subscribe``; False if it was not there."""
        listeners = self._listeners.get(event_type, [])
        if callback not in listeners:
            return False
        listeners.remove(callback)
        return True

    def on_all(self, callback: Listener) -> None:
        """Call *callback* for every event."""
        self._global_listeners.append(callback)

    def emit(self, event: Any) -> None:
        listeners = self._global_listeners + self._listeners.get(type(event), [])
        logger.debug("%s -> %d listener(s)", type(event).__name__, len(listeners))
        for cb in listeners:
            cb(event)
