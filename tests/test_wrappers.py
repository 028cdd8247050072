"""
Tests for the structural wrappers and the facade.

Covers:
1. LegacyAdapter translation and ownership
2. DeviceProxy trace-then-forward ordering and failure propagation
3. HomeFacade declaration-order fan-out and non-transactional failure
4. The light vs. adapted-legacy scenario
"""

from unittest.mock import MagicMock, call

import pytest

from smarthome.capabilities import (
    CapabilityType,
    DeviceProxy,
    HomeFacade,
    LegacyAdapter,
    LegacyDevice,
    SmartLight,
    Switchable,
    create_default_factory,
    wrap_legacy,
    wrap_proxy,
)


# ---------------------------------------------------------------------------
# Adapter
# ---------------------------------------------------------------------------


class TestLegacyAdapter:
    """turn_on/turn_off map onto old_switch_on/old_switch_off."""

    def test_translates_calls(self):
        legacy = MagicMock(spec=LegacyDevice)
        adapter = LegacyAdapter(legacy)
        adapter.turn_on()
        adapter.turn_off()
        assert legacy.mock_calls == [call.old_switch_on(), call.old_switch_off()]

    def test_creates_owned_legacy_device(self, sink, lines):
        adapter = wrap_legacy(sink=sink)
        assert isinstance(adapter.inner, LegacyDevice)
        adapter.turn_on()
        assert adapter.inner.state.is_on is True
        assert lines == ["Legacy device is ON (manual switch)"]

    def test_wraps_given_device(self, sink):
        legacy = LegacyDevice(sink=sink)
        adapter = wrap_legacy(legacy)
        assert adapter.inner is legacy

    def test_given_device_keeps_its_own_sink(self, sink, lines):
        adapter_lines = []
        legacy = LegacyDevice(sink=sink)
        adapter = wrap_legacy(legacy, sink=adapter_lines.append)
        adapter.turn_on()
        assert lines == ["Legacy device is ON (manual switch)"]
        assert adapter_lines == []

    def test_metadata(self):
        adapter = LegacyAdapter()
        assert adapter.device_type == "Legacy"
        assert adapter.capability_type == CapabilityType.LEGACY
        assert adapter.to_dict()["state"] == {"is_on": False}


# ---------------------------------------------------------------------------
# Proxy
# ---------------------------------------------------------------------------


class TestDeviceProxy:
    """The proxy traces first, then forwards exactly once."""

    def _make_real(self, parent: MagicMock) -> MagicMock:
        real = parent.real
        real.device_type = "Kitchen"
        return real

    def test_trace_before_forward_on(self):
        parent = MagicMock()
        real = self._make_real(parent)
        proxy = DeviceProxy(real, sink=parent.sink, log_prefix="[LOG]")

        proxy.turn_on()

        assert parent.mock_calls == [
            call.sink("[LOG] Proxy turning ON Kitchen"),
            call.real.turn_on(),
        ]
        real.turn_on.assert_called_once_with()
        real.turn_off.assert_not_called()

    def test_trace_before_forward_off(self):
        parent = MagicMock()
        real = self._make_real(parent)
        proxy = DeviceProxy(real, sink=parent.sink, log_prefix="[LOG]")

        proxy.turn_off()

        assert parent.mock_calls == [
            call.sink("[LOG] Proxy turning OFF Kitchen"),
            call.real.turn_off(),
        ]

    def test_default_prefix_from_settings(self, sink, lines):
        light = SmartLight("LivingRoom", sink=sink)
        wrap_proxy(light, sink=sink).turn_on()
        assert lines == ["[LOG] Proxy turning ON LivingRoom", "LivingRoom Light ON"]
        assert light.state.is_on is True

    def test_failure_propagates_after_trace(self, sink, lines):
        real = MagicMock()
        real.device_type = "Broken"
        real.turn_on.side_effect = RuntimeError("relay stuck")
        proxy = wrap_proxy(real, sink=sink)

        with pytest.raises(RuntimeError, match="relay stuck"):
            proxy.turn_on()

        real.turn_on.assert_called_once_with()
        assert len(lines) == 1

    def test_proxy_is_switchable(self):
        proxy = wrap_proxy(SmartLight("Hall"))
        assert isinstance(proxy, Switchable)
        assert proxy.device_type == "ProxyDevice"
        assert proxy.capability_type == CapabilityType.PROXY
        assert proxy.to_dict()["target"]["type"] == "Hall"

    def test_execute_action_goes_through_proxy(self, sink, lines):
        light = SmartLight("Hall", sink=sink)
        wrap_proxy(light, sink=sink).execute_action("turn_off")
        assert lines == ["[LOG] Proxy turning OFF Hall", "Hall Light OFF"]


# ---------------------------------------------------------------------------
# Facade
# ---------------------------------------------------------------------------


class TestHomeFacade:
    """Members are switched in declaration order, without rollback."""

    def test_all_on_in_order(self):
        parent = MagicMock()
        facade = HomeFacade(parent.a, parent.b)
        facade.all_on()
        assert parent.mock_calls == [call.a.turn_on(), call.b.turn_on()]

    def test_all_off_in_order(self):
        parent = MagicMock()
        facade = HomeFacade(parent.a, parent.b)
        facade.all_off()
        assert parent.mock_calls == [call.a.turn_off(), call.b.turn_off()]

    def test_failure_stops_later_members(self):
        a, b, c = MagicMock(), MagicMock(), MagicMock()
        b.turn_on.side_effect = RuntimeError("offline")
        facade = HomeFacade(a, b, c)

        with pytest.raises(RuntimeError):
            facade.all_on()

        a.turn_on.assert_called_once_with()
        b.turn_on.assert_called_once_with()
        c.turn_on.assert_not_called()

    def test_members_fixed_at_construction(self):
        members = [SmartLight("A"), SmartLight("B")]
        facade = HomeFacade(*members)
        members.append(SmartLight("C"))
        assert len(facade) == 2
        assert isinstance(facade.members, tuple)

    def test_empty_facade_is_noop(self):
        HomeFacade().all_on()

    def test_real_devices(self, sink, lines):
        light = SmartLight("LivingRoom", sink=sink)
        fan = SmartLight("Bedroom", sink=sink)
        HomeFacade(wrap_proxy(light, sink=sink), fan).all_on()
        assert lines == [
            "[LOG] Proxy turning ON LivingRoom",
            "LivingRoom Light ON",
            "Bedroom Light ON",
        ]
        assert light.state.is_on and fan.state.is_on


# ---------------------------------------------------------------------------
# Scenario
# ---------------------------------------------------------------------------


class TestLightAndLegacyScenario:
    """The same turn_on call yields a direct and a translated effect."""

    def test_distinct_effects(self, sink, lines):
        factory = create_default_factory()
        light = factory.create("light", "LivingRoom", sink=sink)
        legacy = factory.create("legacy", sink=sink)

        for device in (light, legacy):
            device.turn_on()

        assert lines == [
            "LivingRoom Light ON",
            "Legacy device is ON (manual switch)",
        ]
