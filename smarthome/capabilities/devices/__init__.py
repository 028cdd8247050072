"""
Device implementations for the capability system.

Import implementations here to make them available.
"""

from .legacy import LegacyDevice
from .lights import SmartLight
from .shapes import BaseShape, Circle, Square

__all__ = [
    "SmartLight",
    "LegacyDevice",
    "BaseShape",
    "Circle",
    "Square",
]
