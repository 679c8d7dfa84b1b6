"""Mobile actors.

A :class:`Character` knows the square it stands on through a back-reference;
the square's occupant list is the authoritative forward reference. Both sides
are only ever changed together by :meth:`Character.occupy` and
:meth:`Character.leave_square`, so after either call returns, the character
is listed by exactly the square it points to.
"""

from __future__ import annotations

import logging
from abc import ABC, abstractmethod
from typing import TYPE_CHECKING, Optional

from grid_arcade.entity import new_entity_id
from grid_arcade.types import CharacterKind, EntityID

if TYPE_CHECKING:
    from grid_arcade.square import Square

logger = logging.getLogger(__name__)


class Character(ABC):
    """Actor occupying at most one square.

    Attributes:
        kind: Capability tag read by :meth:`Square.is_accessible_to`.
        consumes_pellets: Whether entering a square eats its pellet.
    """

    consumes_pellets: bool = False

    @property
    @abstractmethod
    def kind(self) -> CharacterKind:
        """Capability tag; concrete kinds set it as a class attribute."""

    def __init__(self) -> None:
        self.id: EntityID = new_entity_id()
        self._square: Optional["Square"] = None

    def __repr__(self) -> str:
        return f"{type(self).__name__}(id={self.id})"

    @property
    def square(self) -> Optional["Square"]:
        """The square this character stands on, ``None`` before placement."""
        return self._square

    def has_square(self) -> bool:
        return self._square is not None

    def occupy(self, target: "Square") -> None:
        """Move onto ``target``, leaving the current square if any.

        Raises:
            ValueError: If ``target`` is ``None``.
        """
        if target is None:
            raise ValueError("Cannot occupy an absent square")
        if self._square is not None:
            self._square.remove_occupant(self)
        target.add_occupant(self)
        self._square = target

    def leave_square(self) -> None:
        """Take this character off the board; no-op when not placed."""
        if self._square is not None:
            self._square.remove_occupant(self)
            self._square = None


class Player(Character):
    """Player-controlled character that eats pellets and keeps a score."""

    kind = CharacterKind.PLAYER
    consumes_pellets = True

    def __init__(self) -> None:
        super().__init__()
        self.score: int = 0
        self.alive: bool = True

    def add_points(self, points: int) -> None:
        """Increase the score.

        Raises:
            ValueError: If ``points`` is negative.
        """
        if points < 0:
            raise ValueError(f"Points must be non-negative, got {points}")
        self.score += points

    def die(self) -> None:
        if self.alive:
            logger.debug("%r died on %r", self, self._square)
        self.alive = False


class Ghost(Character):
    """Non-player actor. Movement decisions are made by external collaborators."""

    kind = CharacterKind.GHOST

    def __init__(self, name: str = "ghost") -> None:
        super().__init__()
        self.name = name

    def __repr__(self) -> str:
        return f"Ghost(id={self.id}, name={self.name!r})"
