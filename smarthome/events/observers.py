"""
Observer registry.

Holds an ordered, fixed-capacity list of zero-argument callbacks and
invokes them all when an event fires. Callbacks run synchronously in
registration order; a failing callback propagates to the caller of
``notify()`` and the remaining callbacks are not run.
"""

import logging
import threading
from typing import Callable, Optional

from ..config import settings
from ..debug import Sink, resolve_sink
from ..exceptions import CapacityExceededError

logger = logging.getLogger("smarthome.events.observers")

EventHandler = Callable[[], None]


class ObserverRegistry:
    """Ordered list of event handlers with a hard capacity."""

    def __init__(self, capacity: Optional[int] = None):
        if capacity is None:
            capacity = settings.observer.capacity
        if capacity < 1:
            raise ValueError("capacity must be at least 1")
        self._capacity = capacity
        self._handlers: list[EventHandler] = []
        self._lock = threading.Lock()

    @property
    def capacity(self) -> int:
        return self._capacity

    @property
    def is_full(self) -> bool:
        return len(self._handlers) >= self._capacity

    def __len__(self) -> int:
        return len(self._handlers)

    def register(self, handler: EventHandler) -> None:
        """
        Append ``handler`` to the registry.

        The same handler may be registered more than once and is then
        invoked once per registration.

        Raises:
            CapacityExceededError: the registry is already full
        """
        with self._lock:
            if len(self._handlers) >= self._capacity:
                logger.warning(
                    "Observer registry full (%d), rejecting %r",
                    self._capacity,
                    handler,
                )
                raise CapacityExceededError(self._capacity)
            self._handlers.append(handler)
            logger.debug("Registered observer %r (%d/%d)", handler, len(self._handlers), self._capacity)

    def try_register(self, handler: EventHandler) -> bool:
        """
        Register ``handler`` if there is room.

        Returns True if registered, False if the registry was full.
        """
        try:
            self.register(handler)
        except CapacityExceededError:
            return False
        return True

    def notify(self) -> None:
        """Invoke every registered handler once, in registration order."""
        with self._lock:
            handlers = list(self._handlers)
        logger.debug("Notifying %d observers", len(handlers))
        for handler in handlers:
            handler()

    def clear(self) -> None:
        """Remove all handlers."""
        with self._lock:
            self._handlers.clear()
        logger.debug("Cleared observers")


def emergency_shutdown(sink: Optional[Sink] = None) -> None:
    """Built-in handler announcing an emergency shutdown."""
    resolve_sink(sink)("[OBSERVER] Emergency shutdown triggered!")


# Global registry instance, created on first use
_registry: Optional[ObserverRegistry] = None
_registry_lock = threading.Lock()


def get_observer_registry() -> ObserverRegistry:
    """Get or create the process-wide observer registry."""
    global _registry
    with _registry_lock:
        if _registry is None:
            _registry = ObserverRegistry()
        return _registry


def reset_observer_registry() -> None:
    """Reset the process-wide observer registry."""
    global _registry
    with _registry_lock:
        _registry = None
