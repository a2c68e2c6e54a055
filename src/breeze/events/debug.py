"""Debug listener: logs build events with timings and counts."""

from __future__ import annotations

import logging

from breeze.events import types as events
from breeze.events.bus import EventBus, Listener


def attach_debug_logging(bus: EventBus, logger: logging.Logger | None = None) -> Listener:
    """Subscribe a listener that logs every build event at DEBUG level.

    Returns the listener so it can be passed to ``EventBus.unsubscribe``.
    """
    log = logger or logging.getLogger("breeze")

    def listener(event: events.BuildEvent) -> None:
        if isinstance(event, events.BuildStarted):
            log.debug(
                "Build started: changed_files=%d raw_content=%d",
                event.changed_files,
                event.raw_content,
            )
        elif isinstance(event, events.CandidatesExtracted):
            log.debug(
                "Candidates extracted: candidates=%d content_cache=%d in %.2fms",
                event.candidates,
                event.cache_entries,
                event.elapsed * 1000,
            )
        elif isinstance(event, events.RulesGenerated):
            log.debug(
                "Rules generated: rules=%d new_classes=%d in %.2fms",
                event.rules,
                event.new_classes,
                event.elapsed * 1000,
            )
        elif isinstance(event, events.StylesheetAssembled):
            log.debug(
                "Stylesheet %s: rules=%d in %.2fms",
                "rebuilt" if event.rebuilt else "reused",
                event.rules,
                event.elapsed * 1000,
            )
        elif isinstance(event, events.BuildCompleted):
            log.debug("Build completed in %.2fms", event.elapsed * 1000)

    return bus.on_all(listener)
