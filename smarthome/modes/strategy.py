"""
Interchangeable operating-mode strategies.

A strategy is any zero-argument callable. ``run_strategy`` invokes it
immediately; named strategies can also be looked up and run by name.
"""

import logging
from typing import Callable, Optional

from ..debug import Sink, resolve_sink
from ..exceptions import UnknownStrategyError

logger = logging.getLogger("smarthome.modes.strategy")

ModeStrategy = Callable[[], None]


def eco_mode(sink: Optional[Sink] = None) -> None:
    resolve_sink(sink)("Device running in ECO mode")


def turbo_mode(sink: Optional[Sink] = None) -> None:
    resolve_sink(sink)("Device running in TURBO mode")


STRATEGIES: dict[str, ModeStrategy] = {
    "eco": eco_mode,
    "turbo": turbo_mode,
}


def run_strategy(strategy: ModeStrategy) -> None:
    """Invoke ``strategy`` synchronously."""
    logger.debug("Running strategy %s", getattr(strategy, "__name__", repr(strategy)))
    strategy()


def get_strategy(name: str) -> ModeStrategy:
    """Look up a named strategy (case-insensitive)."""
    key = name.lower().strip()
    try:
        return STRATEGIES[key]
    except KeyError:
        logger.warning("Unknown mode strategy: %s", name)
        raise UnknownStrategyError(name) from None


def run_strategy_by_name(name: str) -> None:
    """Run a named strategy, e.g. ``"eco"`` or ``"TURBO"``."""
    run_strategy(get_strategy(name))
