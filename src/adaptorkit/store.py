"""Shared, mutable configuration store with change notification.

Usage:
    store = init_config_store()

    def on_change(delta):
        print(f"config changed: {delta}")

    store.subscribe(on_change)
    store.update({"test_mode": True})
    assert store.test_mode is True
"""

from __future__ import annotations

from collections.abc import Callable, Iterator, Mapping
import logging
from typing import Any

LOGGER = logging.getLogger(__name__)

Subscriber = Callable[[dict[str, Any]], Any]

RESERVED_KEYS = frozenset({"update", "subscribe", "unsubscribe"})


def default_values() -> dict[str, Any]:
    """Return a fresh copy of the values a new store starts with."""
    return {"logging": {}, "test_mode": False}


class ConfigStore:
    """Key/value settings plus an ordered list of change subscribers.

    Subscribers are called synchronously, in registration order, with the
    keys an ``update`` actually applied. Each ``update`` iterates over a
    snapshot of the subscriber list: callbacks that subscribe or unsubscribe
    while being notified only affect the next ``update``. Exceptions raised by
    a subscriber propagate to the ``update`` caller and the remaining
    subscribers are not notified.
    """

    def __init__(self, initial: Mapping[str, Any] | None = None) -> None:
        self._data: dict[str, Any] = default_values()
        self._subscribers: list[Subscriber] = []
        if initial:
            self._data.update(_strip_reserved(initial))

    @classmethod
    def from_settings(cls, settings: Mapping[str, Any]) -> ConfigStore:
        """Create a store seeded from a validated settings mapping."""
        return cls(settings)

    def update(self, data: Mapping[str, Any]) -> None:
        """Merge ``data`` into the store and notify subscribers.

        Reserved keys are dropped. When nothing is left the call has no
        effect. The merge is shallow: nested values are replaced wholesale.
        """
        delta = _strip_reserved(data)
        if not delta:
            return

        self._data.update(delta)
        LOGGER.debug("Config updated: %s", sorted(delta))

        for callback in list(self._subscribers):
            callback(delta)

    def subscribe(self, callback: Subscriber) -> None:
        """Call ``callback`` with every future update. Duplicates are allowed."""
        self._subscribers.append(callback)

    def unsubscribe(self, callback: Subscriber) -> None:
        """Remove the first registration of ``callback``, if any."""
        try:
            self._subscribers.remove(callback)
        except ValueError:
            pass

    @property
    def subscriber_count(self) -> int:
        return len(self._subscribers)

    def close(self) -> None:
        """Drop every subscriber. Stored values are kept."""
        self._subscribers.clear()

    def get(self, key: str, default: Any = None) -> Any:
        return self._data.get(key, default)

    def as_dict(self) -> dict[str, Any]:
        return dict(self._data)

    def __getitem__(self, key: str) -> Any:
        return self._data[key]

    def __contains__(self, key: object) -> bool:
        return key in self._data

    def __iter__(self) -> Iterator[str]:
        return iter(self._data)

    def __len__(self) -> int:
        return len(self._data)

    def __getattr__(self, name: str) -> Any:
        if name.startswith("_"):
            raise AttributeError(name)
        try:
            return self._data[name]
        except KeyError:
            raise AttributeError(
                f"{type(self).__name__!r} has no config value {name!r}"
            ) from None

    def __repr__(self) -> str:
        return f"ConfigStore({self._data!r}, subscribers={len(self._subscribers)})"


def _strip_reserved(data: Mapping[str, Any]) -> dict[str, Any]:
    delta: dict[str, Any] = {}
    for key, value in data.items():
        if key in RESERVED_KEYS:
            LOGGER.debug("Ignoring reserved config key: %s", key)
            continue
        delta[key] = value
    return delta


# Process-wide store; created by init_config_store() or lazily on first use.
_config_store: ConfigStore | None = None


def init_config_store(initial: Mapping[str, Any] | None = None) -> ConfigStore:
    """Create the process-wide store, replacing (and closing) any previous one."""
    global _config_store
    if _config_store is not None:
        _config_store.close()
    _config_store = ConfigStore(initial)
    return _config_store


def get_config_store() -> ConfigStore:
    """Return the process-wide store, creating it with defaults if needed."""
    global _config_store
    if _config_store is None:
        _config_store = ConfigStore()
    return _config_store


def teardown_config_store() -> None:
    """Close and forget the process-wide store."""
    global _config_store
    if _config_store is not None:
        _config_store.close()
    _config_store = None
