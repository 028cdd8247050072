"""
Construction registry for capability handles.

Maps a kind (discriminator) to a constructor and builds a new, independent
handle on every call.
"""

import logging
from typing import Any, Callable, Optional, Type, TypeVar

from ..exceptions import ResourceError, UnknownDeviceTypeError
from .devices import Circle, SmartLight, Square
from .protocols import Capability
from .wrappers import LegacyAdapter

logger = logging.getLogger("smarthome.capabilities.registry")

DeviceConstructor = Callable[..., Capability]
C = TypeVar("C")


class DeviceFactory:
    """
    Registry of device constructors keyed by kind.

    Supports:
    - Constructor registration by kind
    - Class registration through ``register_device``
    - Creation of fresh, uncached handles
    """

    def __init__(self) -> None:
        self._factories: dict[str, DeviceConstructor] = {}

    def register_factory(self, kind: str, factory: DeviceConstructor) -> None:
        """Register a constructor for ``kind``."""
        if kind in self._factories:
            logger.warning("Overwriting device factory: %s", kind)
        self._factories[kind] = factory
        logger.info("Registered device factory: %s", kind)

    def unregister(self, kind: str) -> bool:
        """Remove a kind from the registry."""
        if kind in self._factories:
            del self._factories[kind]
            logger.info("Unregistered device factory: %s", kind)
            return True
        return False

    def available_kinds(self) -> list[str]:
        """Return registered kinds in registration order."""
        return list(self._factories.keys())

    def __contains__(self, kind: object) -> bool:
        return kind in self._factories

    def create(self, kind: str, *args: Any, **kwargs: Any) -> Capability:
        """
        Build a new handle of the given kind.

        Args:
            kind: Registered discriminator, e.g. "light" or "circle"
            *args, **kwargs: Passed through to the constructor

        Raises:
            UnknownDeviceTypeError: no constructor is registered for ``kind``
            ResourceError: the constructor ran out of memory or produced nothing
        """
        factory = self._factories.get(kind)
        if factory is None:
            raise UnknownDeviceTypeError(kind)

        try:
            handle = factory(*args, **kwargs)
        except MemoryError as e:
            logger.error("Out of memory constructing %s", kind)
            raise ResourceError(kind, e) from e

        if handle is None:
            logger.error("Factory for %s returned no handle", kind)
            raise ResourceError(kind)

        logger.debug("Created %s handle: %r", kind, handle)
        return handle


def register_device(
    kind: str,
    factory: Optional[DeviceFactory] = None,
) -> Callable[[Type[C]], Type[C]]:
    """
    Decorator to register a capability class under ``kind``.

    Usage:
        @register_device("lamp")
        class Lamp(BaseSwitchCapability):
            ...
    """
    def decorator(cls: Type[C]) -> Type[C]:
        (factory or device_factory).register_factory(kind, cls)
        return cls
    return decorator


def _register_builtin_devices(factory: DeviceFactory) -> None:
    factory.register_factory("light", SmartLight)
    factory.register_factory("legacy", LegacyAdapter)
    factory.register_factory("circle", Circle)
    factory.register_factory("square", Square)


def create_default_factory() -> DeviceFactory:
    """Return a new factory with the built-in kinds registered."""
    factory = DeviceFactory()
    _register_builtin_devices(factory)
    return factory


# Global factory instance
device_factory = create_default_factory()


def create_device(kind: str, *args: Any, **kwargs: Any) -> Capability:
    """Build a handle through the global factory."""
    return device_factory.create(kind, *args, **kwargs)
