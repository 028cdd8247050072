"""
Structural wrappers: handles that forward to another handle.
"""

from .adapter import LegacyAdapter, wrap_legacy
from .proxy import DeviceProxy, wrap_proxy

__all__ = [
    "LegacyAdapter",
    "DeviceProxy",
    "wrap_legacy",
    "wrap_proxy",
]
