"""Collision handling.

After a successful move the game pairs the mover with every other occupant
of its new square and hands each pair to a :class:`CollisionMap`. The default
:class:`PlayerCollisions` implements the classic rule: a player sharing a
square with a ghost dies, whoever moved.
"""

from typing import Protocol

from grid_arcade.character import Character, Player
from grid_arcade.types import CharacterKind


class CollisionMap(Protocol):
    """Collision policy between two characters on the same square."""

    def collide(self, mover: Character, collided_on: Character) -> None: ...


class PlayerCollisions:
    """Players die on contact with ghosts; other pairs are ignored."""

    def collide(self, mover: Character, collided_on: Character) -> None:
        kinds = (mover.kind, collided_on.kind)
        if kinds == (CharacterKind.PLAYER, CharacterKind.GHOST):
            self.player_versus_ghost(mover)
        elif kinds == (CharacterKind.GHOST, CharacterKind.PLAYER):
            self.player_versus_ghost(collided_on)

    def player_versus_ghost(self, player: Character) -> None:
        if isinstance(player, Player):
            player.die()
