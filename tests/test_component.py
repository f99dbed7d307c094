"""Tests for the adaptor/driver base class."""

from __future__ import annotations

from typing import Any
import unittest

from adaptorkit.component import Component
from adaptorkit.events import EventEmitter, EventRelay
from adaptorkit.exceptions import MissingConnectorError


class SerialPort(EventEmitter):
    """Stand-in for a hardware connector."""

    def write(self, payload: bytes) -> int:
        return len(payload)


class SerialAdaptor(Component):
    def __init__(self, port: SerialPort) -> None:
        super().__init__(connector=port)

    def connect(self, callback: Any = None) -> None:
        self.define_adaptor_event({"event_name": "data", "send_update": True})
        self.respond("connect", callback, None)


class LedDriver(Component):
    def __init__(self, adaptor: SerialAdaptor) -> None:
        super().__init__(connection=adaptor)

    def start(self, callback: Any = None) -> None:
        self.define_driver_event({"event_name": "data", "target_event_name": "reading"})
        self.respond("start", callback, None)


class ComponentTests(unittest.TestCase):
    """Validate the helpers exposed to adaptor and driver authors."""

    def test_component_owns_relay_bound_to_itself(self) -> None:
        component = Component()
        self.assertIsInstance(component.relay, EventRelay)
        self.assertIs(component.relay.host, component)
        self.assertIsNone(component.connector)
        self.assertIsNone(component.connection)

    def test_events_flow_from_connector_through_driver(self) -> None:
        port = SerialPort()
        adaptor = SerialAdaptor(port)
        driver = LedDriver(adaptor)
        seen: list[tuple[str, tuple[Any, ...]]] = []
        adaptor.on("update", lambda *args: seen.append(("adaptor.update", args)))
        driver.on("reading", lambda *args: seen.append(("driver.reading", args)))

        callbacks: list[tuple[Any, ...]] = []
        adaptor.connect(lambda *args: callbacks.append(args))
        driver.start(lambda *args: callbacks.append(args))
        port.emit("data", 0x2A)

        self.assertEqual(callbacks, [(None,), (None,)])
        self.assertEqual(
            seen,
            [("driver.reading", (0x2A,)), ("adaptor.update", ("data", 0x2A))],
        )

    def test_respond_error_goes_to_error_event(self) -> None:
        component = Component()
        errors: list[Any] = []
        component.on("error", errors.append)
        failure = OSError("port closed")

        component.respond("connect", None, failure)
        self.assertEqual(errors, [failure])

    def test_define_event_between_foreign_emitters(self) -> None:
        component = Component()
        source, target = EventEmitter(), EventEmitter()
        received: list[Any] = []
        target.on("tick", received.append)

        returned = component.define_event(
            {"event_name": "tick", "source": source, "target": target}
        )
        source.emit("tick", 1)
        self.assertIs(returned, source)
        self.assertEqual(received, [1])

    def test_adaptor_event_requires_connector(self) -> None:
        with self.assertRaises(MissingConnectorError):
            Component().define_adaptor_event("data")

    def test_proxy_methods_forwards_to_connector(self) -> None:
        port = SerialPort()
        adaptor = SerialAdaptor(port)
        adaptor.proxy_methods(["write"], port, adaptor)
        self.assertEqual(adaptor.write(b"abc"), 3)


if __name__ == "__main__":
    unittest.main()
