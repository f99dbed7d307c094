"""Synchronous named-event emitter.

Usage:
    emitter = EventEmitter()

    def on_data(value):
        print(f"data: {value}")

    emitter.on("data", on_data)
    emitter.emit("data", 42)
"""

from __future__ import annotations

from collections import defaultdict
from collections.abc import Callable
import logging
from typing import Any, Protocol, runtime_checkable

LOGGER = logging.getLogger(__name__)

Listener = Callable[..., Any]


@runtime_checkable
class Emitter(Protocol):
    """Anything that can register listeners and fire named events."""

    def on(self, event_name: str, listener: Listener) -> Any: ...

    def off(self, event_name: str, listener: Listener) -> Any: ...

    def emit(self, event_name: str, *args: Any) -> Any: ...


class EventEmitter:
    """In-process emitter delivering events synchronously to listeners.

    Listeners run in registration order inside ``emit``. The listener list is
    copied before delivery, so listeners added or removed while an event is
    being delivered only see the next emission.
    """

    def __init__(self) -> None:
        self._listeners: defaultdict[str, list[Listener]] = defaultdict(list)

    def on(self, event_name: str, listener: Listener) -> EventEmitter:
        """Register ``listener`` for ``event_name`` and return self."""
        self._listeners[event_name].append(listener)
        return self

    add_listener = on

    def once(self, event_name: str, listener: Listener) -> EventEmitter:
        """Register a listener that removes itself after the first call."""

        def _wrapper(*args: Any) -> Any:
            self.off(event_name, _wrapper)
            return listener(*args)

        _wrapper.listener = listener  # type: ignore[attr-defined]
        return self.on(event_name, _wrapper)

    def off(self, event_name: str, listener: Listener) -> EventEmitter:
        """Remove the most recent registration of ``listener``, if any."""
        items = self._listeners.get(event_name)
        if not items:
            return self
        for index in range(len(items) - 1, -1, -1):
            candidate = items[index]
            if candidate == listener or getattr(candidate, "listener", None) == listener:
                del items[index]
                break
        if not items:
            self._listeners.pop(event_name, None)
        return self

    remove_listener = off

    def remove_all_listeners(self, event_name: str | None = None) -> EventEmitter:
        if event_name is None:
            self._listeners.clear()
        else:
            self._listeners.pop(event_name, None)
        return self

    def listeners(self, event_name: str) -> list[Listener]:
        return list(self._listeners.get(event_name, []))

    def listener_count(self, event_name: str) -> int:
        return len(self._listeners.get(event_name, []))

    def emit(self, event_name: str, *args: Any) -> bool:
        """Call every listener of ``event_name`` with ``args``.

        Returns True when at least one listener ran. An ``"error"`` event
        nobody listens to is logged instead of being dropped silently.
        """
        handlers = list(self._listeners.get(event_name, []))
        if not handlers:
            if event_name == "error":
                LOGGER.warning(
                    "Unhandled error event on %s: %r", type(self).__name__, args
                )
            return False

        for handler in handlers:
            handler(*args)
        return True
