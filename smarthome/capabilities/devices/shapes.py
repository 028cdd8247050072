"""
Shape implementations for the ``Drawable`` capability.
"""

from typing import Optional

from ...debug import Sink
from ..base import BaseCapability
from ..protocols import CapabilityType


class BaseShape(BaseCapability):
    """Base class for drawable shapes. Subclasses must set ``SHAPE_NAME``."""

    SUPPORTED_ACTIONS = ("draw",)
    CAPABILITY_TYPE = CapabilityType.SHAPE
    SHAPE_NAME = ""

    def __init__(self, sink: Optional[Sink] = None):
        if not self.SHAPE_NAME:
            raise TypeError(f"{type(self).__name__} does not define SHAPE_NAME")
        super().__init__(self.SHAPE_NAME, sink)

    def draw(self) -> None:
        self._write(f"draw the {self.SHAPE_NAME}")


class Circle(BaseShape):
    SHAPE_NAME = "circle"


class Square(BaseShape):
    SHAPE_NAME = "square"
