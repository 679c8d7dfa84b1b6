"""Pellet item.

A pellet is the single collectible a square may hold. Its ``value`` is what
the default scoring listener awards to the player consuming it.
"""

from dataclasses import dataclass

DEFAULT_PELLET_VALUE = 10


@dataclass(frozen=True, eq=False)
class Pellet:
    """Collectible item.

    Pellets compare by identity so that two pellets of equal value on
    different squares remain distinguishable.

    Attributes:
        value: Points awarded on consumption.
    """

    value: int = DEFAULT_PELLET_VALUE
