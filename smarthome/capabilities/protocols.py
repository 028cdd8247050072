"""
Protocol definitions for the capability/device system.

A capability is anything that exposes a fixed set of parameterless
operations: switching a device on and off, drawing a shape, and so on.
Callers hold handles through these protocols and never need the concrete
class.
"""

from dataclasses import dataclass
from enum import Enum
from typing import Any, Protocol, runtime_checkable


class CapabilityType(str, Enum):
    """Classification of capability types."""
    LIGHT = "light"
    LEGACY = "legacy"
    PROXY = "proxy"
    SHAPE = "shape"


@dataclass
class SwitchState:
    """State for binary on/off devices."""
    is_on: bool = False

    def to_dict(self) -> dict[str, Any]:
        return {
            "is_on": self.is_on,
        }


@runtime_checkable
class Capability(Protocol):
    """
    Protocol shared by every handle.

    Operations take no arguments beyond ``self`` and return nothing.
    """

    @property
    def device_type(self) -> str:
        """Display tag used in output and log lines."""
        ...

    @property
    def capability_type(self) -> CapabilityType:
        """Type classification for this capability."""
        ...

    @property
    def supported_actions(self) -> tuple[str, ...]:
        """Names of the operations this handle supports."""
        ...

    def execute_action(self, action: str) -> None:
        """
        Invoke an operation by name.

        Raises:
            UnsupportedActionError: if ``action`` is not supported
        """
        ...

    def to_dict(self) -> dict[str, Any]:
        """Serialize handle metadata for display."""
        ...


@runtime_checkable
class Switchable(Capability, Protocol):
    """A device that can be switched on and off."""

    def turn_on(self) -> None:
        ...

    def turn_off(self) -> None:
        ...


@runtime_checkable
class Drawable(Capability, Protocol):
    """A shape that can render itself."""

    def draw(self) -> None:
        ...
