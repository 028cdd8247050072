"""
Light device implementation.
"""

import logging
from typing import Any, Optional

from ...debug import Sink
from ..base import BaseSwitchCapability
from ..protocols import CapabilityType, SwitchState

logger = logging.getLogger("smarthome.capabilities.devices.lights")


class SmartLight(BaseSwitchCapability):
    """
    A light identified by its room label.

    The label doubles as the device type shown in output, so
    ``SmartLight("LivingRoom").turn_on()`` writes ``LivingRoom Light ON``.
    """

    CAPABILITY_TYPE = CapabilityType.LIGHT

    def __init__(self, label: str, sink: Optional[Sink] = None):
        super().__init__(label, sink)
        self._state = SwitchState()

    @property
    def state(self) -> SwitchState:
        return self._state

    def to_dict(self) -> dict[str, Any]:
        data = super().to_dict()
        data["state"] = self._state.to_dict()
        return data

    def turn_on(self) -> None:
        self._state.is_on = True
        logger.debug("%s light turned ON", self.device_type)
        self._write(f"{self.device_type} Light ON")

    def turn_off(self) -> None:
        self._state.is_on = False
        logger.debug("%s light turned OFF", self.device_type)
        self._write(f"{self.device_type} Light OFF")
