"""Game control layer.

:class:`Game` wraps a :class:`~grid_arcade.level.Level` and is the single
entry point for mutating it during play. Each command runs to completion
before the next one is accepted:

1. Short-circuit with :attr:`MoveResult.GAME_OVER` if the level is already won
    or lost.
2. Delegate to :func:`grid_arcade.movement.move`; eaten pellets are forwarded
    to every registered pellet listener (scoring is one of them).
3. Pair the mover with the other occupants of its new square and resolve each
    pair through the :class:`~grid_arcade.collisions.CollisionMap`.
4. Re-evaluate the outcome: no player alive means lost, no pellet left means
    won. A loss takes precedence when both happen on the same move.

:class:`SinglePlayerGame` binds the directional commands to its one player.
"""

import logging
from typing import List, Optional

from grid_arcade.actions import ACTION_DIRECTIONS, MOVE_ACTIONS, Action
from grid_arcade.character import Character, Player
from grid_arcade.collisions import CollisionMap, PlayerCollisions
from grid_arcade.level import Level
from grid_arcade.movement import move
from grid_arcade.pellet import Pellet
from grid_arcade.types import Direction, MoveResult, PelletListener

logger = logging.getLogger(__name__)


def award_points(character: Character, pellet: Pellet) -> None:
    """Default scoring listener: the eating player gains ``pellet.value``."""
    if isinstance(character, Player):
        character.add_points(pellet.value)


class Game:
    """Command layer over a level.

    Args:
        level (Level): Level to play.
        collisions (CollisionMap | None): Collision policy, defaults to
            :class:`PlayerCollisions`.
    """

    def __init__(self, level: Level, collisions: Optional[CollisionMap] = None) -> None:
        self._level = level
        self._collisions: CollisionMap = (
            collisions if collisions is not None else PlayerCollisions()
        )
        self._pellet_listeners: List[PelletListener] = [award_points]
        self.won: bool = False
        self.lost: bool = False

    @property
    def level(self) -> Level:
        return self._level

    def is_over(self) -> bool:
        return self.won or self.lost

    def add_pellet_listener(self, listener: PelletListener) -> None:
        """Register ``listener`` to be told about every eaten pellet."""
        self._pellet_listeners.append(listener)

    def move(self, character: Character, direction: Direction) -> MoveResult:
        """Move ``character`` one square in ``direction``.

        Returns:
            MoveResult: What happened; failed moves leave the level untouched.
        """
        if self.is_over():
            return MoveResult.GAME_OVER

        result = move(character, direction, on_consume=self._consumed)
        if result == MoveResult.MOVED:
            self._collide(character)
            self._update_outcome()
        return result

    def _consumed(self, character: Character, pellet: Pellet) -> None:
        for listener in self._pellet_listeners:
            listener(character, pellet)

    def _collide(self, mover: Character) -> None:
        square = mover.square
        if square is None:
            return
        for other in square.get_occupants():
            if other is not mover:
                self._collisions.collide(mover, other)

    def _update_outcome(self) -> None:
        if not self._level.is_any_player_alive():
            self.lost = True
            logger.info("Level lost")
        elif self._level.remaining_pellets() == 0:
            self.won = True
            logger.info("Level won")


class SinglePlayerGame(Game):
    """A :class:`Game` controlling exactly one player.

    Offers the directional commands :meth:`up`, :meth:`down`, :meth:`left`
    and :meth:`right`, plus :meth:`apply` for :class:`Action` values.

    Raises:
        ValueError: If the level does not contain exactly one player.
    """

    def __init__(self, level: Level, collisions: Optional[CollisionMap] = None) -> None:
        players = level.players
        if len(players) != 1:
            raise ValueError(
                f"Single player game requires exactly one player, got {len(players)}"
            )
        super().__init__(level, collisions)
        self._player: Player = players[0]
        self.turn: int = 0

    @property
    def player(self) -> Player:
        return self._player

    @property
    def score(self) -> int:
        return self._player.score

    def up(self) -> MoveResult:
        """Move the player up 1 square."""
        return self._command(Direction.NORTH)

    def down(self) -> MoveResult:
        """Move the player down 1 square."""
        return self._command(Direction.SOUTH)

    def left(self) -> MoveResult:
        """Move the player left 1 square."""
        return self._command(Direction.WEST)

    def right(self) -> MoveResult:
        """Move the player right 1 square."""
        return self._command(Direction.EAST)

    def apply(self, action: Action) -> Optional[MoveResult]:
        """Run a player command; ``WAIT`` only spends a turn and returns ``None``.

        Raises:
            ValueError: If ``action`` is not an :class:`Action`.
        """
        action = Action(action)
        if action in MOVE_ACTIONS:
            return self._command(ACTION_DIRECTIONS[action])
        if not self.is_over():
            self.turn += 1
        return None

    def _command(self, direction: Direction) -> MoveResult:
        result = self.move(self._player, direction)
        if result != MoveResult.GAME_OVER:
            self.turn += 1
        return result
