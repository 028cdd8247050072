"""
Device state holder.

Transitions are plain assignments to ``StatefulDevice.state``; no
transition table is enforced.
"""

import logging
from enum import Enum
from typing import Optional

from ..debug import Sink, resolve_sink

logger = logging.getLogger("smarthome.modes.state")


class DeviceState(str, Enum):
    """Discrete device power states."""
    OFF = "off"
    ON = "on"
    STANDBY = "standby"


STATE_MESSAGES: dict[DeviceState, str] = {
    DeviceState.OFF: "Device is OFF",
    DeviceState.ON: "Device is ON",
    DeviceState.STANDBY: "Device is in STANDBY",
}


def describe_state(state: DeviceState) -> str:
    """Return the display message for ``state``."""
    return STATE_MESSAGES[DeviceState(state)]


class StatefulDevice:
    """A device whose display depends only on its current state."""

    def __init__(self, state: DeviceState = DeviceState.OFF, sink: Optional[Sink] = None):
        self.state = state
        self._sink = resolve_sink(sink)

    def describe(self) -> str:
        return describe_state(self.state)

    def print_state(self) -> None:
        """Write the current state message to the sink."""
        self._sink(self.describe())
