"""Procedural sample arena.

Builds a small rectangular :class:`~grid_arcade.game.SinglePlayerGame` for
demos and as the default initial game of
:class:`grid_arcade.gym_env.ArcadeEnv`:

* the player starts on the centre square,
* ghosts start on the corners (clockwise from the top-left),
* a seeded fraction of the remaining squares become walls, never touching the
  player's square or its direct neighbours,
* every other ground square the player can reach holds a pellet.

The layout is deterministic for a given ``seed``.
"""

from __future__ import annotations

import random
from typing import List, Optional, Tuple

from grid_arcade.board_factory import create_board
from grid_arcade.character import Ghost, Player
from grid_arcade.game import SinglePlayerGame
from grid_arcade.level import Level
from grid_arcade.pellet import DEFAULT_PELLET_VALUE, Pellet
from grid_arcade.square import Ground, Square, Wall
from grid_arcade.types import Direction

GHOST_NAMES = ["blinky", "pinky", "inky", "clyde"]


def generate(
    width: int = 7,
    height: int = 7,
    wall_density: float = 0.1,
    ghosts: int = 1,
    seed: Optional[int] = None,
    wrap: bool = False,
    pellet_value: int = DEFAULT_PELLET_VALUE,
) -> SinglePlayerGame:
    """Generate a single player game on a fresh arena.

    Args:
        width (int): Columns, at least 3.
        height (int): Rows, at least 3.
        wall_density (float): Fraction of eligible squares turned into walls.
        ghosts (int): Number of ghosts, at most 4 (one per corner).
        seed (int | None): RNG seed for wall placement.
        wrap (bool): Link borders toroidally.
        pellet_value (int): Points per pellet.

    Returns:
        SinglePlayerGame: Ready-to-play game.

    Raises:
        ValueError: On dimensions below 3x3, an out-of-range density or too many ghosts.
    """
    if width < 3 or height < 3:
        raise ValueError("Arena must be at least 3x3")
    if not 0.0 <= wall_density < 1.0:
        raise ValueError("wall_density must be in [0, 1)")
    if not 0 <= ghosts <= len(GHOST_NAMES):
        raise ValueError(f"ghosts must be between 0 and {len(GHOST_NAMES)}")

    rng = random.Random(seed)
    start = (width // 2, height // 2)
    corners: List[Tuple[int, int]] = [
        (0, 0),
        (width - 1, 0),
        (width - 1, height - 1),
        (0, height - 1),
    ][:ghosts]

    keep_open = {start, *corners}
    keep_open.update(
        (start[0] + d.delta[0], start[1] + d.delta[1]) for d in Direction
    )
    candidates = [
        (x, y) for y in range(height) for x in range(width) if (x, y) not in keep_open
    ]
    walls = set(rng.sample(candidates, int(len(candidates) * wall_density)))

    grid: List[List[Square]] = [
        [Wall() if (x, y) in walls else Ground() for x in range(width)]
        for y in range(height)
    ]
    board = create_board(grid, wrap=wrap)

    player = Player()
    start_square = board.square_at(*start)
    player.occupy(start_square)

    # pellets only where the player can walk
    for square in board.reachable_from(start_square, player):
        if square is not start_square:
            square.set_pellet(Pellet(pellet_value))

    ghost_list: List[Ghost] = []
    for name, (x, y) in zip(GHOST_NAMES, corners):
        ghost = Ghost(name)
        ghost.occupy(board.square_at(x, y))
        ghost_list.append(ghost)

    return SinglePlayerGame(Level(board, [player], ghost_list))
