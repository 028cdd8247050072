"""Event notification: the observer registry and built-in handlers."""

from .observers import (
    EventHandler,
    ObserverRegistry,
    emergency_shutdown,
    get_observer_registry,
    reset_observer_registry,
)

__all__ = [
    "EventHandler",
    "ObserverRegistry",
    "emergency_shutdown",
    "get_observer_registry",
    "reset_observer_registry",
]
