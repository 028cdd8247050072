"""
Adapter exposing a legacy device through the Switchable protocol.
"""

import logging
from typing import Any, Optional

from ...debug import Sink
from ..base import BaseSwitchCapability
from ..devices.legacy import LegacyDevice
from ..protocols import CapabilityType

logger = logging.getLogger("smarthome.capabilities.wrappers.adapter")


class LegacyAdapter(BaseSwitchCapability):
    """
    Translates ``turn_on``/``turn_off`` into the legacy switch calls.

    The adapter owns its legacy device and writes nothing itself. ``sink``
    is only used for a legacy device the adapter creates when none is given;
    a device passed in keeps its own sink.
    """

    CAPABILITY_TYPE = CapabilityType.LEGACY

    def __init__(self, legacy: Optional[LegacyDevice] = None, sink: Optional[Sink] = None):
        super().__init__("Legacy")
        self._legacy = legacy if legacy is not None else LegacyDevice(sink=sink)

    @property
    def inner(self) -> LegacyDevice:
        """The wrapped legacy device."""
        return self._legacy

    def to_dict(self) -> dict[str, Any]:
        data = super().to_dict()
        data["state"] = self._legacy.state.to_dict()
        return data

    def turn_on(self) -> None:
        logger.debug("Adapter translating turn_on -> old_switch_on")
        self._legacy.old_switch_on()

    def turn_off(self) -> None:
        logger.debug("Adapter translating turn_off -> old_switch_off")
        self._legacy.old_switch_off()


def wrap_legacy(legacy: Optional[LegacyDevice] = None, sink: Optional[Sink] = None) -> LegacyAdapter:
    """Wrap ``legacy`` (or a fresh legacy device) in an adapter."""
    return LegacyAdapter(legacy, sink=sink)
