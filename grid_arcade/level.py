"""Level aggregate.

A :class:`Level` bundles the board with the characters that start on it. It
only reads square state (remaining pellets, who is alive); all mutations go
through the movement controller in :mod:`grid_arcade.movement`.
"""

from __future__ import annotations

from typing import Iterable

from pyrsistent import PVector, pvector

from grid_arcade.board import Board
from grid_arcade.character import Character, Ghost, Player


class Level:
    """Board plus the session's players and ghosts.

    Args:
        board (Board): Linked board.
        players (Iterable[Player]): Player characters, already placed on ``board``.
        ghosts (Iterable[Ghost]): Ghosts, already placed on ``board``.

    Raises:
        ValueError: If a character does not occupy a square of ``board``.
    """

    def __init__(
        self,
        board: Board,
        players: Iterable[Player],
        ghosts: Iterable[Ghost] = (),
    ) -> None:
        self.board = board
        self._players: PVector[Player] = pvector(players)
        self._ghosts: PVector[Ghost] = pvector(ghosts)
        for character in [*self._players, *self._ghosts]:
            self._check_placed(character)

    def _check_placed(self, character: Character) -> None:
        square = character.square
        if square is None or self.board.position_of(square) is None:
            raise ValueError(f"{character!r} is not placed on the level's board")

    @property
    def players(self) -> PVector[Player]:
        """Read-only snapshot of the player characters."""
        return self._players

    @property
    def ghosts(self) -> PVector[Ghost]:
        return self._ghosts

    def remaining_pellets(self) -> int:
        """Count squares still holding a pellet."""
        return sum(1 for square in self.board.squares() if square.pellet is not None)

    def is_any_player_alive(self) -> bool:
        return any(player.alive for player in self._players)
