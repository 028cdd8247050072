"""
Capability system for device-like objects.

This module provides:
- Protocol definitions for capabilities
- Concrete devices and shapes
- A construction registry (factory) for building handles by kind
- Adapter and proxy wrappers, and a facade for grouping devices
"""

from .base import BaseCapability, BaseSwitchCapability
from .devices import Circle, LegacyDevice, SmartLight, Square
from .facade import HomeFacade
from .protocols import Capability, CapabilityType, Drawable, Switchable, SwitchState
from .registry import (
    DeviceFactory,
    create_default_factory,
    create_device,
    device_factory,
    register_device,
)
from .wrappers import DeviceProxy, LegacyAdapter, wrap_legacy, wrap_proxy

__all__ = [
    # Protocols
    "Capability",
    "CapabilityType",
    "Switchable",
    "Drawable",
    "SwitchState",
    "BaseCapability",
    "BaseSwitchCapability",
    # Devices
    "SmartLight",
    "LegacyDevice",
    "Circle",
    "Square",
    # Factory
    "DeviceFactory",
    "device_factory",
    "create_default_factory",
    "create_device",
    "register_device",
    # Wrappers
    "LegacyAdapter",
    "DeviceProxy",
    "wrap_legacy",
    "wrap_proxy",
    # Facade
    "HomeFacade",
]
