"""Common type aliases and enumerations.

``Direction`` is the key type of every adjacency map on the board. The
``PelletListener`` alias is the extension point through which consumption
events leave the core (scoring, sound, UI collaborators).
"""

from enum import StrEnum, auto
from typing import Callable, Tuple, TYPE_CHECKING


# Forward declarations to avoid circular imports:
if TYPE_CHECKING:
    from grid_arcade.character import Character
    from grid_arcade.pellet import Pellet

EntityID = int

PelletListener = Callable[["Character", "Pellet"], None]


class Direction(StrEnum):
    """Cardinal compass direction used to index square adjacency."""

    NORTH = auto()
    SOUTH = auto()
    EAST = auto()
    WEST = auto()

    @property
    def opposite(self) -> "Direction":
        """The direction pointing back the way this one came."""
        return _OPPOSITES[self]

    @property
    def delta(self) -> Tuple[int, int]:
        """Grid offset ``(dx, dy)``; ``y`` grows downward."""
        return _DELTAS[self]


_OPPOSITES = {
    Direction.NORTH: Direction.SOUTH,
    Direction.SOUTH: Direction.NORTH,
    Direction.EAST: Direction.WEST,
    Direction.WEST: Direction.EAST,
}

_DELTAS = {
    Direction.NORTH: (0, -1),
    Direction.SOUTH: (0, 1),
    Direction.EAST: (1, 0),
    Direction.WEST: (-1, 0),
}


class CharacterKind(StrEnum):
    """Capability tag consulted by square accessibility predicates."""

    PLAYER = auto()
    GHOST = auto()


class MoveResult(StrEnum):
    """Outcome of a single move command.

    Members:
        MOVED: The character now occupies the target square.
        NO_NEIGHBOUR: No square is linked in the requested direction.
        INACCESSIBLE: The target square refused the character's kind.
        GAME_OVER: The game is already won or lost; nothing was evaluated.
    """

    MOVED = auto()
    NO_NEIGHBOUR = auto()
    INACCESSIBLE = auto()
    GAME_OVER = auto()
