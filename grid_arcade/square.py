"""Board squares.

A :class:`Square` is a node of the board graph. It holds:

* ``edges``: a map from :class:`~grid_arcade.types.Direction` to the
  neighbouring square in that direction (possibly fewer than four at walls or
  board borders). Links are one-way; the setup collaborator
  (:mod:`grid_arcade.board_factory`) links both directions.
* ``occupants``: characters currently on the square, oldest arrival first.
* an optional single :class:`~grid_arcade.pellet.Pellet`.

Accessibility is decided per square variant through
:meth:`Square.is_accessible_to`; the movement controller depends only on that
predicate, never on the concrete variant.
"""

from __future__ import annotations

from abc import ABC, abstractmethod
from typing import TYPE_CHECKING, Dict, List, Optional

from pyrsistent import PSet, pset

from grid_arcade.entity import new_entity_id
from grid_arcade.pellet import Pellet
from grid_arcade.types import CharacterKind, Direction, EntityID

if TYPE_CHECKING:
    from grid_arcade.character import Character


class Square(ABC):
    """Abstract graph node with occupancy and an optional pellet."""

    def __init__(self) -> None:
        self.id: EntityID = new_entity_id()
        self._occupants: List["Character"] = []
        self._edges: Dict[Direction, Square] = {}
        self._pellet: Optional[Pellet] = None

    def __repr__(self) -> str:
        return f"{type(self).__name__}(id={self.id})"

    def invariant(self) -> bool:
        """Return True iff every occupant has this square as its square."""
        return all(occupant.square is self for occupant in self._occupants)

    # -------- Graph --------

    def add_neighbour(self, square: Square, direction: Direction) -> None:
        """Link ``square`` in ``direction`` as seen from this square.

        Replaces any previous neighbour in that direction. The reverse link is
        not created.
        """
        self._edges[Direction(direction)] = square

    def square_at(self, direction: Direction) -> Optional[Square]:
        """Return the neighbour in ``direction`` or ``None``.

        Raises:
            ValueError: If ``direction`` is not a :class:`Direction` value.
        """
        return self._edges.get(Direction(direction))

    def get_neighbours(self) -> PSet[Square]:
        """Return the distinct neighbouring squares."""
        return pset(self._edges.values())

    def direction_of(self, neighbour: Square) -> Optional[Direction]:
        """Return a direction under which ``neighbour`` is linked, or ``None``.

        When several directions lead to the same square any one of them may be
        returned.
        """
        for direction, square in self._edges.items():
            if square is neighbour:
                return direction
        return None

    # -------- Pellet --------

    @property
    def pellet(self) -> Optional[Pellet]:
        return self._pellet

    def set_pellet(self, pellet: Pellet) -> None:
        """Place ``pellet`` on this square, replacing any existing one.

        Raises:
            ValueError: If ``pellet`` is ``None``; use :meth:`remove_pellet`.
        """
        if pellet is None:
            raise ValueError("Cannot set an absent pellet; use remove_pellet()")
        self._pellet = pellet

    def remove_pellet(self) -> None:
        """Clear the pellet, if any."""
        self._pellet = None

    def get_pellet(self) -> Optional[Pellet]:
        return self._pellet

    # -------- Occupants --------

    def add_occupant(self, occupant: "Character") -> None:
        """Put ``occupant`` on top of this square.

        The occupant's back-reference is not touched; callers should go through
        :meth:`grid_arcade.character.Character.occupy`.

        Raises:
            ValueError: If ``occupant`` is ``None``.
        """
        if occupant is None:
            raise ValueError("Cannot add an absent occupant")
        self._occupants.append(occupant)

    def remove_occupant(self, occupant: "Character") -> None:
        """Remove the first occurrence of ``occupant``; no-op if absent."""
        for i, o in enumerate(self._occupants):
            if o is occupant:
                del self._occupants[i]
                return

    def get_occupants(self) -> List["Character"]:
        """Return a copy of the occupants, first arrival first."""
        return list(self._occupants)

    @abstractmethod
    def is_accessible_to(self, character: "Character") -> bool:
        """Return True iff ``character`` may step onto this square."""


class Ground(Square):
    """Open floor, accessible to every character."""

    def is_accessible_to(self, character: "Character") -> bool:
        return True


class Wall(Square):
    """Solid square nobody may enter."""

    def is_accessible_to(self, character: "Character") -> bool:
        return False


class Gate(Square):
    """Ghost pit gate: ghosts pass through, players are kept out."""

    def is_accessible_to(self, character: "Character") -> bool:
        return character.kind == CharacterKind.GHOST
