"""
Custom exceptions for the smarthome package.

Provides explicit error types instead of silent failures.
"""

from typing import Optional


class SmartHomeError(Exception):
    """Base exception for all smarthome errors."""

    pass


class ResourceError(SmartHomeError):
    """Raised when a device handle cannot be constructed."""

    def __init__(self, kind: str, cause: Optional[Exception] = None):
        self.kind = kind
        self.cause = cause
        if cause is not None:
            super().__init__(f"Could not construct device '{kind}': {cause}")
        else:
            super().__init__(f"Could not construct device '{kind}'")


class UnknownDeviceTypeError(SmartHomeError, LookupError):
    """Raised when the factory has no constructor for a kind."""

    def __init__(self, kind: str):
        self.kind = kind
        super().__init__(f"Unknown device kind: {kind}")


class UnsupportedActionError(SmartHomeError, ValueError):
    """Raised when an action is not in a handle's supported actions."""

    def __init__(self, action: str, device_type: str):
        self.action = action
        self.device_type = device_type
        super().__init__(f"Action '{action}' not supported by {device_type}")


class CapacityExceededError(SmartHomeError):
    """Raised when registering past an observer registry's capacity."""

    def __init__(self, capacity: int):
        self.capacity = capacity
        super().__init__(f"Observer registry is full (capacity={capacity})")


class UnknownStrategyError(SmartHomeError, LookupError):
    """Raised when a mode strategy name is not registered."""

    def __init__(self, name: str):
        self.name = name
        super().__init__(f"Unknown mode strategy: {name}")
