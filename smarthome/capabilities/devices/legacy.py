"""
Legacy device with a pre-capability switch interface.

``LegacyDevice`` deliberately does not satisfy ``Switchable``; wrap it in
``LegacyAdapter`` to use it wherever a switchable handle is expected.
"""

from typing import Optional

from ...debug import Sink, resolve_sink
from ..protocols import SwitchState


class LegacyDevice:
    """Manually switched device with its own operation names."""

    def __init__(self, sink: Optional[Sink] = None):
        self._sink = resolve_sink(sink)
        self.state = SwitchState()

    def old_switch_on(self) -> None:
        self.state.is_on = True
        self._sink("Legacy device is ON (manual switch)")

    def old_switch_off(self) -> None:
        self.state.is_on = False
        self._sink("Legacy device is OFF (manual switch)")
