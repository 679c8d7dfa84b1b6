"""Movement controller.

Executes a one-square move for a character:

1. Resolve the target through the character's square and the direction. No
    neighbour means no move (:attr:`MoveResult.NO_NEIGHBOUR`).
2. Ask the target whether it admits the character's kind. A refusal means no
    move (:attr:`MoveResult.INACCESSIBLE`).
3. Transfer occupancy with :meth:`Character.occupy`, which updates the source
    list, the target list and the back-reference in one call.
4. If the character eats pellets and the target holds one, clear it and hand
    it to ``on_consume``.

Walking into a wall is ordinary gameplay, so failed moves never raise; the
returned :class:`MoveResult` is the only trace they leave.
"""

import logging
from typing import Optional

from grid_arcade.character import Character
from grid_arcade.types import Direction, MoveResult, PelletListener

logger = logging.getLogger(__name__)


def move(
    character: Character,
    direction: Direction,
    on_consume: Optional[PelletListener] = None,
) -> MoveResult:
    """Move ``character`` one square in ``direction`` if allowed.

    Args:
        character (Character): Actor to move; must be placed on a square.
        direction (Direction): Requested direction.
        on_consume (PelletListener | None): Called with ``(character, pellet)``
            after a pellet has been eaten.

    Returns:
        MoveResult: ``MOVED`` or the reason nothing happened.

    Raises:
        ValueError: If ``character`` has no square.
    """
    source = character.square
    if source is None:
        raise ValueError(f"{character!r} is not on the board")

    target = source.square_at(direction)
    if target is None:
        logger.debug("%r: no neighbour %s of %r", character, direction, source)
        return MoveResult.NO_NEIGHBOUR

    if not target.is_accessible_to(character):
        logger.debug("%r: %r is not accessible", character, target)
        return MoveResult.INACCESSIBLE

    character.occupy(target)

    pellet = target.pellet
    if pellet is not None and character.consumes_pellets:
        target.remove_pellet()
        logger.debug("%r consumed %r on %r", character, pellet, target)
        if on_consume is not None:
            on_consume(character, pellet)

    return MoveResult.MOVED
