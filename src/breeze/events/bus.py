"""Synchronous dispatch of build lifecycle events."""

from __future__ import annotations

from typing import Callable

from breeze.events.types import BuildEvent

Listener = Callable[[BuildEvent], None]


class EventBus:
    """Dispatches build events to listeners in registration order.

    Global listeners run before listeners registered for the event's exact
    type. Listener errors are not caught: they abort the invocation that
    emitted the event, like any other fault raised during a build.
    """

    def __init__(self) -> None:
        self._typed: dict[type, list[Listener]] = {}
        self._everything: list[Listener] = []

    def subscribe(self, event_type: type, callback: Listener) -> Listener:
        """Call *callback* for every event of exactly *event_type*."""
        self._typed.setdefault(event_type, []).append(callback)
        return callback

    def on_all(self, callback: Listener) -> Listener:
        """Call *callback* for every event."""
        self._everything.append(callback)
        return callback

    def unsubscribe(self, callback: Listener) -> None:
        """Remove *callback* wherever it is registered. No-op if not found."""
        self._everything = [cb for cb in self._everything if cb is not callback]
        for event_type, listeners in self._typed.items():
            self._typed[event_type] = [cb for cb in listeners if cb is not callback]

    @property
    def active(self) -> bool:
        """Whether any listener is registered."""
        return bool(self._everything) or any(self._typed.values())

    def emit(self, event: BuildEvent) -> None:
        for callback in (*self._everything, *self._typed.get(type(event), ())):
            callback(event)
