"""Event system: bus and event types for the build lifecycle."""

from breeze.events.bus import EventBus, Listener
from breeze.events.debug import attach_debug_logging
from breeze.events.types import (
    BuildCompleted,
    BuildEvent,
    BuildStarted,
    CandidatesExtracted,
    RulesGenerated,
    StylesheetAssembled,
)

__all__ = [
    "EventBus",
    "Listener",
    "attach_debug_logging",
    "BuildCompleted",
    "BuildEvent",
    "BuildStarted",
    "CandidatesExtracted",
    "RulesGenerated",
    "StylesheetAssembled",
]
