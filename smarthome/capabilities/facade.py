"""
Facade grouping several switchable devices behind composite operations.
"""

import logging

from .protocols import Switchable

logger = logging.getLogger("smarthome.capabilities.facade")


class HomeFacade:
    """
    Switches a fixed set of devices together.

    Members are called in declaration order. There is no rollback: if a
    member raises, earlier members keep their new state, later members are
    not called, and the exception propagates.
    """

    def __init__(self, *members: Switchable):
        self._members: tuple[Switchable, ...] = tuple(members)

    @property
    def members(self) -> tuple[Switchable, ...]:
        return self._members

    def __len__(self) -> int:
        return len(self._members)

    def all_on(self) -> None:
        """Turn every member on."""
        logger.info("Facade turning ON %d devices", len(self._members))
        for member in self._members:
            member.turn_on()

    def all_off(self) -> None:
        """Turn every member off."""
        logger.info("Facade turning OFF %d devices", len(self._members))
        for member in self._members:
            member.turn_off()
