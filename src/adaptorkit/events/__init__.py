"""Event emission and relaying between adaptors, drivers and their connections."""

from .emitter import Emitter, EventEmitter
from .relay import EventRelay, RelayBinding, RelayOptions, proxy_methods

__all__ = [
    "Emitter",
    "EventEmitter",
    "EventRelay",
    "RelayBinding",
    "RelayOptions",
    "proxy_methods",
]
