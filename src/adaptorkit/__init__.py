"""Top-level package for adaptorkit."""

from __future__ import annotations

from typing import TYPE_CHECKING, Any

if TYPE_CHECKING:
    from .component import Component
    from .config import load_settings
    from .events import EventEmitter, EventRelay, RelayBinding, RelayOptions
    from .exceptions import (
        AdaptorKitError,
        ConfigValidationError,
        MissingConnectorError,
        RelayDefinitionError,
    )
    from .logging_utils import bind_logging, configure_logging
    from .store import (
        ConfigStore,
        get_config_store,
        init_config_store,
        teardown_config_store,
    )

__all__ = [
    "AdaptorKitError",
    "Component",
    "ConfigStore",
    "ConfigValidationError",
    "EventEmitter",
    "EventRelay",
    "MissingConnectorError",
    "RelayBinding",
    "RelayDefinitionError",
    "RelayOptions",
    "bind_logging",
    "configure_logging",
    "get_config_store",
    "init_config_store",
    "load_settings",
    "teardown_config_store",
]

_EXPORTS = {
    "Component": ".component",
    "load_settings": ".config",
    "EventEmitter": ".events",
    "EventRelay": ".events",
    "RelayBinding": ".events",
    "RelayOptions": ".events",
    "AdaptorKitError": ".exceptions",
    "ConfigValidationError": ".exceptions",
    "MissingConnectorError": ".exceptions",
    "RelayDefinitionError": ".exceptions",
    "bind_logging": ".logging_utils",
    "configure_logging": ".logging_utils",
    "ConfigStore": ".store",
    "get_config_store": ".store",
    "init_config_store": ".store",
    "teardown_config_store": ".store",
}


def __getattr__(name: str) -> Any:
    """Lazily import symbols so importing the package stays cheap."""
    module_name = _EXPORTS.get(name)
    if module_name is None:
        raise AttributeError(f"module {__name__!r} has no attribute {name!r}")
    from importlib import import_module

    return getattr(import_module(module_name, __name__), name)
