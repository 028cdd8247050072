"""
Device modes: swappable strategies and a simple state holder.
"""

from .state import STATE_MESSAGES, DeviceState, StatefulDevice, describe_state
from .strategy import (
    STRATEGIES,
    ModeStrategy,
    eco_mode,
    get_strategy,
    run_strategy,
    run_strategy_by_name,
    turbo_mode,
)

__all__ = [
    # Strategy
    "ModeStrategy",
    "STRATEGIES",
    "eco_mode",
    "turbo_mode",
    "get_strategy",
    "run_strategy",
    "run_strategy_by_name",
    # State
    "DeviceState",
    "STATE_MESSAGES",
    "StatefulDevice",
    "describe_state",
]
