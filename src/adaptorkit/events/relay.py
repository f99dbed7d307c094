"""Event relaying between emitters.

An ``EventRelay`` is attached to a host emitter (an adaptor or driver) and
gives it two helpers:

- ``respond`` emits a completion event and calls an optional callback with the
  same arguments, so callers may use either style.
- ``define_event`` listens for an event on one emitter and re-emits it on
  another, optionally renamed and optionally duplicated as an ``"update"``.
"""

from __future__ import annotations

from collections.abc import Callable, Iterable, Mapping
from dataclasses import dataclass
import logging
from typing import Any

from ..exceptions import MissingConnectorError, RelayDefinitionError
from .emitter import Emitter

LOGGER = logging.getLogger(__name__)

UPDATE_EVENT = "update"
ERROR_EVENT = "error"

_OPTION_ALIASES = {
    "eventName": "event_name",
    "targetEventName": "target_event_name",
    "sendUpdate": "send_update",
}


@dataclass(frozen=True)
class RelayOptions:
    """Options describing a single relay from ``source`` to ``target``."""

    event_name: str
    source: Emitter
    target: Emitter
    target_event_name: str | None = None
    send_update: bool = False

    def __post_init__(self) -> None:
        if not isinstance(self.event_name, str) or not self.event_name:
            raise RelayDefinitionError("event_name must be a non-empty string.")
        if self.source is None:
            raise RelayDefinitionError(f"Relay for {self.event_name!r} has no source.")
        if self.target is None:
            raise RelayDefinitionError(f"Relay for {self.event_name!r} has no target.")
        if not self.target_event_name:
            object.__setattr__(self, "target_event_name", self.event_name)
        object.__setattr__(self, "send_update", bool(self.send_update))

    @classmethod
    def coerce(cls, options: RelayOptions | Mapping[str, Any]) -> RelayOptions:
        """Build options from a mapping, accepting camelCase keys as well."""
        if isinstance(options, cls):
            return options
        if not isinstance(options, Mapping):
            raise RelayDefinitionError(
                f"Relay options must be a mapping, got {type(options).__name__}."
            )
        fields: dict[str, Any] = {}
        for key, value in options.items():
            fields[_OPTION_ALIASES.get(key, key)] = value
        missing = [name for name in ("event_name", "source", "target") if name not in fields]
        if missing:
            raise RelayDefinitionError(f"Relay options missing: {', '.join(missing)}.")
        try:
            return cls(**fields)
        except TypeError as exc:
            raise RelayDefinitionError(f"Invalid relay options: {exc}") from exc


class RelayBinding:
    """Handle for one registered relay; ``cancel`` removes its listener."""

    def __init__(
        self,
        options: RelayOptions,
        on_cancel: Callable[[RelayBinding], None] | None = None,
    ) -> None:
        self.options = options
        self._active = False
        self._listener = self._forward
        self._on_cancel = on_cancel

    @property
    def active(self) -> bool:
        return self._active

    def _forward(self, *args: Any) -> None:
        opts = self.options
        opts.target.emit(opts.target_event_name, *args)
        if opts.send_update:
            opts.target.emit(UPDATE_EVENT, opts.target_event_name, *args)

    def attach(self) -> RelayBinding:
        if not self._active:
            self.options.source.on(self.options.event_name, self._listener)
            self._active = True
        return self

    def cancel(self) -> None:
        """Stop relaying. Calling it more than once is harmless."""
        if not self._active:
            return
        self.options.source.off(self.options.event_name, self._listener)
        self._active = False
        if self._on_cancel is not None:
            self._on_cancel(self)
        LOGGER.debug(
            "Relay cancelled: %s -> %s",
            self.options.event_name,
            self.options.target_event_name,
        )

    def __repr__(self) -> str:
        return (
            f"RelayBinding({self.options.event_name!r} -> "
            f"{self.options.target_event_name!r}, active={self._active})"
        )


class EventRelay:
    """Event helpers bound to a host emitter."""

    def __init__(self, host: Emitter) -> None:
        self.host = host
        self._bindings: list[RelayBinding] = []

    @property
    def bindings(self) -> tuple[RelayBinding, ...]:
        return tuple(self._bindings)

    def respond(
        self,
        event_name: str,
        callback: Callable[..., Any] | None,
        error: Any = None,
        *data: Any,
    ) -> None:
        """Emit ``event_name`` (or ``"error"``) and invoke ``callback``.

        Args:
            event_name: Event emitted from the host when ``error`` is falsy
            callback: Optional callable, always called with ``(error, *data)``
            error: Operation error; when truthy only ``"error"`` is emitted
            *data: Payload passed to both the event and the callback
        """
        if error:
            self.host.emit(ERROR_EVENT, error)
        else:
            self.host.emit(event_name, *data)

        if callable(callback):
            callback(error, *data)

    def bind_event(self, options: RelayOptions | Mapping[str, Any]) -> RelayBinding:
        """Register a relay and return a handle that can cancel it."""
        opts = RelayOptions.coerce(options)
        binding = RelayBinding(opts, on_cancel=self._forget).attach()
        self._bindings.append(binding)
        LOGGER.debug(
            "Relay defined: %s -> %s (send_update=%s)",
            opts.event_name,
            opts.target_event_name,
            opts.send_update,
        )
        return binding

    def define_event(self, options: RelayOptions | Mapping[str, Any]) -> Emitter:
        """Relay an event from ``options.source`` to ``options.target``.

        Returns the source emitter so calls can be chained.
        """
        return self.bind_event(options).options.source

    def define_adaptor_event(self, options: str | Mapping[str, Any]) -> Emitter:
        """Relay an event from the host's ``connector`` to the host."""
        return self._proxy_events(options, self._collaborator("connector"))

    def define_driver_event(self, options: str | Mapping[str, Any]) -> Emitter:
        """Relay an event from the host's ``connection`` to the host."""
        return self._proxy_events(options, self._collaborator("connection"))

    def cancel_all(self) -> None:
        """Cancel every relay registered through this instance."""
        bindings, self._bindings = self._bindings, []
        for binding in bindings:
            binding.cancel()

    def _forget(self, binding: RelayBinding) -> None:
        try:
            self._bindings.remove(binding)
        except ValueError:
            pass

    def _collaborator(self, attribute: str) -> Emitter:
        source = getattr(self.host, attribute, None)
        if source is None:
            raise MissingConnectorError(
                f"{type(self.host).__name__}.{attribute} must be set before defining events."
            )
        return source

    def _proxy_events(self, options: str | Mapping[str, Any], source: Emitter) -> Emitter:
        fields: dict[str, Any] = (
            {"event_name": options} if isinstance(options, str) else dict(options)
        )
        fields["source"] = source
        fields["target"] = self.host
        return self.define_event(fields)


def proxy_methods(
    methods: Iterable[str],
    target: Any,
    source: Any,
    force: bool = False,
) -> Any:
    """Install forwarding methods on ``source`` that call through to ``target``.

    Existing attributes on ``source`` are kept unless ``force`` is true.
    Returns ``source``.
    """
    for name in methods:
        if not force and hasattr(source, name):
            continue
        setattr(source, name, _forwarder(target, name))
    return source


def _forwarder(target: Any, name: str) -> Callable[..., Any]:
    def forward(*args: Any, **kwargs: Any) -> Any:
        return getattr(target, name)(*args, **kwargs)

    forward.__name__ = name
    return forward
