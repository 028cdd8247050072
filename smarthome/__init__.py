"""
smarthome - design patterns around a small device capability registry.

Subpackages:
- capabilities: protocols, devices, factory, adapter/proxy wrappers, facade
- events: observer registry
- modes: strategies and state holder

The home controller lives in ``smarthome.controller``.
"""

from .exceptions import (
    CapacityExceededError,
    ResourceError,
    SmartHomeError,
    UnknownDeviceTypeError,
    UnknownStrategyError,
    UnsupportedActionError,
)

__version__ = "0.1.0"

__all__ = [
    "SmartHomeError",
    "ResourceError",
    "UnknownDeviceTypeError",
    "UnsupportedActionError",
    "CapacityExceededError",
    "UnknownStrategyError",
]
