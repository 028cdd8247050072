"""
Logging proxy for switchable devices.

Each call writes a trace line and then forwards to the real device. The
proxy never suppresses, retries, or alters the forwarded call.
"""

import logging
from typing import Any, Optional

from ...config import settings
from ...debug import Sink
from ..base import BaseSwitchCapability
from ..protocols import CapabilityType, Switchable

logger = logging.getLogger("smarthome.capabilities.wrappers.proxy")


class DeviceProxy(BaseSwitchCapability):
    """Switchable proxy that traces every call before forwarding it."""

    CAPABILITY_TYPE = CapabilityType.PROXY

    def __init__(
        self,
        real_device: Switchable,
        sink: Optional[Sink] = None,
        log_prefix: Optional[str] = None,
    ):
        super().__init__("ProxyDevice", sink)
        self._real_device = real_device
        self._log_prefix = log_prefix if log_prefix is not None else settings.proxy.log_prefix

    @property
    def real_device(self) -> Switchable:
        """The device calls are forwarded to."""
        return self._real_device

    def to_dict(self) -> dict[str, Any]:
        data = super().to_dict()
        data["target"] = self._real_device.to_dict()
        return data

    def _trace(self, verb: str) -> None:
        line = f"{self._log_prefix} Proxy turning {verb} {self._real_device.device_type}"
        logger.info("Proxy turning %s %s", verb, self._real_device.device_type)
        self._write(line)

    def turn_on(self) -> None:
        self._trace("ON")
        self._real_device.turn_on()

    def turn_off(self) -> None:
        self._trace("OFF")
        self._real_device.turn_off()


def wrap_proxy(real_device: Switchable, sink: Optional[Sink] = None) -> DeviceProxy:
    """Wrap ``real_device`` in a logging proxy."""
    return DeviceProxy(real_device, sink=sink)
