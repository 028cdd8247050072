"""
Process-wide home controller.

``get_controller()`` always returns the same instance until
``reset_controller()`` is called.
"""

import logging
import threading
from typing import Optional

from .config import settings

logger = logging.getLogger("smarthome.controller")


class HomeController:
    """Named controller shared by the whole process."""

    def __init__(self, name: str):
        self.name = name
        logger.info("HomeController initialized: %s", name)

    def __repr__(self) -> str:
        return f"HomeController(name={self.name!r})"


# Global singleton instance
_controller: Optional[HomeController] = None
_controller_lock = threading.Lock()


def get_controller() -> HomeController:
    """Get or create the global home controller."""
    global _controller
    with _controller_lock:
        if _controller is None:
            _controller = HomeController(settings.controller.name)
        return _controller


def reset_controller() -> None:
    """Reset the global home controller."""
    global _controller
    with _controller_lock:
        _controller = None
