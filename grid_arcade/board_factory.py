"""Board setup.

Turns a rectangular grid of unlinked squares into a connected :class:`Board`
by linking every square to its four neighbours in both directions. Border
squares either keep fewer than four neighbours or, with ``wrap=True``, link
toroidally to the opposite edge (the classic tunnel).
"""

from typing import Sequence

from grid_arcade.board import Board
from grid_arcade.square import Square
from grid_arcade.types import Direction


def create_board(grid: Sequence[Sequence[Square]], wrap: bool = False) -> Board:
    """Link ``grid[y][x]`` squares mutually and wrap them in a :class:`Board`.

    Args:
        grid (Sequence[Sequence[Square]]): Rows of squares, top row first.
        wrap (bool): Link border squares to the opposite border.

    Returns:
        Board: Board whose squares are linked symmetrically.

    Raises:
        ValueError: If the grid is empty or not rectangular.
    """
    board = Board(grid)
    width, height = board.width, board.height

    for x, y, square in board.positions():
        for direction in Direction:
            dx, dy = direction.delta
            nx, ny = x + dx, y + dy
            if wrap:
                nx, ny = nx % width, ny % height
            elif not board.within_borders(nx, ny):
                continue
            square.add_neighbour(board.square_at(nx, ny), direction)

    return board
