"""
Walkthrough of every pattern in the package.

``run_demo`` runs a fixed sequence and writes each output line to a sink,
so the same sequence serves the CLI and the tests.
"""

import logging
from functools import partial
from typing import Optional

from .capabilities import HomeFacade, wrap_proxy
from .capabilities.registry import DeviceFactory, create_default_factory
from .controller import get_controller
from .debug import DemoConsole, Sink, demo
from .events import ObserverRegistry, emergency_shutdown
from .modes import DeviceState, StatefulDevice, eco_mode, run_strategy, turbo_mode

logger = logging.getLogger("smarthome.demo")


def run_home_demo(
    sink: Sink,
    factory: Optional[DeviceFactory] = None,
    observers: Optional[ObserverRegistry] = None,
) -> None:
    """Run the home automation sequence."""
    factory = factory or create_default_factory()
    observers = observers if observers is not None else ObserverRegistry()

    # Singleton
    controller = get_controller()
    sink(f"Controller: {controller.name}")

    # Factory
    light = factory.create("light", "LivingRoom", sink=sink)
    fan = factory.create("light", "Bedroom", sink=sink)

    # Adapter
    legacy = factory.create("legacy", sink=sink)

    # Proxy
    proxied_light = wrap_proxy(light, sink=sink)

    # Facade
    home = HomeFacade(proxied_light, fan)

    # Observer
    observers.register(partial(emergency_shutdown, sink))
    observers.notify()

    # Strategy
    run_strategy(partial(eco_mode, sink))
    run_strategy(partial(turbo_mode, sink))

    # State
    device = StatefulDevice(DeviceState.ON, sink=sink)
    device.print_state()
    device.state = DeviceState.STANDBY
    device.print_state()

    # Facade usage
    home.all_on()
    home.all_off()

    # Adapter usage
    legacy.turn_on()
    legacy.turn_off()


def run_shape_demo(sink: Sink, factory: Optional[DeviceFactory] = None) -> None:
    """Build one of each shape through the factory and draw it."""
    factory = factory or create_default_factory()
    for kind in ("circle", "square"):
        factory.create(kind, sink=sink).draw()


def run_demo(sink: Optional[Sink] = None, console: Optional[DemoConsole] = None) -> None:
    """
    Run the full walkthrough.

    When ``sink`` is given, output lines go there and no section headers
    are printed. Otherwise lines and headers go to ``console``.
    """
    printer = console or demo
    write = sink or printer.line

    if sink is None:
        printer.section("Home automation")
    run_home_demo(write)

    if sink is None:
        printer.section("Shapes")
    run_shape_demo(write)
    logger.info("Demo complete")
