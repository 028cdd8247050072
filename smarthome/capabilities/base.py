"""
Shared behaviour for capability implementations.
"""

import logging
from typing import Any, Optional

from ..debug import Sink, resolve_sink
from ..exceptions import UnsupportedActionError
from .protocols import CapabilityType

logger = logging.getLogger("smarthome.capabilities.base")


class BaseCapability:
    """
    Base class for capability handles.

    Subclasses set ``SUPPORTED_ACTIONS`` and ``CAPABILITY_TYPE`` and
    implement one method per supported action.
    """

    SUPPORTED_ACTIONS: tuple[str, ...] = ()
    CAPABILITY_TYPE: CapabilityType

    def __init__(self, device_type: str, sink: Optional[Sink] = None):
        self._device_type = device_type
        self._sink = resolve_sink(sink)

    @property
    def device_type(self) -> str:
        return self._device_type

    @property
    def capability_type(self) -> CapabilityType:
        return self.CAPABILITY_TYPE

    @property
    def supported_actions(self) -> tuple[str, ...]:
        return self.SUPPORTED_ACTIONS

    def to_dict(self) -> dict[str, Any]:
        return {
            "type": self.device_type,
            "capability": self.capability_type.value,
            "supported_actions": list(self.supported_actions),
        }

    def execute_action(self, action: str) -> None:
        """Route an action name to the matching method."""
        if action not in self.SUPPORTED_ACTIONS:
            raise UnsupportedActionError(action, self.device_type)
        logger.debug("Dispatching %s.%s()", self.device_type, action)
        getattr(self, action)()

    def _write(self, message: str) -> None:
        self._sink(message)

    def __repr__(self) -> str:
        return f"{type(self).__name__}(device_type={self.device_type!r})"


class BaseSwitchCapability(BaseCapability):
    """Base class for on/off devices."""

    SUPPORTED_ACTIONS = ("turn_on", "turn_off")

    def turn_on(self) -> None:
        raise NotImplementedError

    def turn_off(self) -> None:
        raise NotImplementedError
