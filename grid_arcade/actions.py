"""Action enumerations.

Defines the human readable :class:`Action` used by the control layer and a
stable integer :class:`GymAction` mapping for Gymnasium compatibility.

``MOVE_ACTIONS`` lists the directional commands and ``ACTION_DIRECTIONS``
binds each of them to its compass direction; checks like
``if action in MOVE_ACTIONS`` are preferred over enum name comparisons.
"""

from enum import IntEnum, StrEnum, auto
from typing import Dict

from grid_arcade.types import Direction


class Action(StrEnum):
    """String enum of player commands.

    Members:
        UP, DOWN, LEFT, RIGHT: Movement directions.
        WAIT: Spend a turn without moving.
    """

    UP = auto()
    DOWN = auto()
    LEFT = auto()
    RIGHT = auto()
    WAIT = auto()


MOVE_ACTIONS = [Action.UP, Action.DOWN, Action.LEFT, Action.RIGHT]

ACTION_DIRECTIONS: Dict[Action, Direction] = {
    Action.UP: Direction.NORTH,
    Action.DOWN: Direction.SOUTH,
    Action.LEFT: Direction.WEST,
    Action.RIGHT: Direction.EAST,
}


class GymAction(IntEnum):
    """Stable integer mapping for integration with Gymnasium ``Discrete`` spaces."""

    UP = 0  # start at 0 for explicitness
    DOWN = auto()
    LEFT = auto()
    RIGHT = auto()
    WAIT = auto()
