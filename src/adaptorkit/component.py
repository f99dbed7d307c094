"""Base class for adaptors and drivers."""

from __future__ import annotations

from collections.abc import Callable, Iterable, Mapping
from typing import Any

from .events.emitter import Emitter, EventEmitter
from .events.relay import EventRelay, RelayOptions, proxy_methods


class Component(EventEmitter):
    """Event-emitting base for adaptor and driver implementations.

    Adaptors set ``connector`` to whatever object actually talks to the
    hardware; drivers set ``connection`` to the adaptor they run on. Event
    helpers are provided by an ``EventRelay`` bound to this instance.
    """

    def __init__(
        self,
        connector: Emitter | None = None,
        connection: Emitter | None = None,
    ) -> None:
        super().__init__()
        self.connector = connector
        self.connection = connection
        self.relay = EventRelay(self)

    def respond(
        self,
        event_name: str,
        callback: Callable[..., Any] | None,
        error: Any = None,
        *data: Any,
    ) -> None:
        self.relay.respond(event_name, callback, error, *data)

    def define_event(self, options: RelayOptions | Mapping[str, Any]) -> Emitter:
        return self.relay.define_event(options)

    def define_adaptor_event(self, options: str | Mapping[str, Any]) -> Emitter:
        return self.relay.define_adaptor_event(options)

    def define_driver_event(self, options: str | Mapping[str, Any]) -> Emitter:
        return self.relay.define_driver_event(options)

    def proxy_methods(
        self,
        methods: Iterable[str],
        target: Any,
        source: Any,
        force: bool = False,
    ) -> Any:
        return proxy_methods(methods, target, source, force)
