"""Rectangular board container.

The board graph itself lives in the squares' edge maps; :class:`Board` only
keeps the rectangular layout (``grid[y][x]``) so collaborators can address
squares by coordinate, iterate them and validate the setup.
"""

from __future__ import annotations

from collections import deque
from typing import TYPE_CHECKING, Iterator, Optional, Sequence, Tuple

from pyrsistent import PSet, PVector, pset, pvector

from grid_arcade.square import Square
from grid_arcade.types import Direction

if TYPE_CHECKING:
    from grid_arcade.character import Character


class Board:
    """Immutable rectangular arrangement of squares.

    Attributes:
        width: Number of columns.
        height: Number of rows.
    """

    def __init__(self, grid: Sequence[Sequence[Square]]) -> None:
        self._grid: PVector[PVector[Square]] = pvector(pvector(row) for row in grid)
        self.height: int = len(self._grid)
        self.width: int = len(self._grid[0]) if self.height else 0
        if not self.invariant():
            raise ValueError("Board grid must be a non-empty rectangle of squares")

    def invariant(self) -> bool:
        """Return True if the grid is rectangular, complete and consistent."""
        if self.height == 0 or self.width == 0:
            return False
        for row in self._grid:
            if len(row) != self.width:
                return False
            for square in row:
                if square is None or not square.invariant():
                    return False
        return True

    def within_borders(self, x: int, y: int) -> bool:
        return 0 <= x < self.width and 0 <= y < self.height

    def square_at(self, x: int, y: int) -> Square:
        """Return the square at column ``x``, row ``y``.

        Raises:
            IndexError: If the coordinate lies outside the board.
        """
        if not self.within_borders(x, y):
            raise IndexError(
                f"Out of bounds: {(x, y)} for board {self.width}x{self.height}"
            )
        return self._grid[y][x]

    def squares(self) -> Iterator[Square]:
        """Iterate squares row by row, left to right."""
        for row in self._grid:
            yield from row

    def positions(self) -> Iterator[Tuple[int, int, Square]]:
        """Iterate ``(x, y, square)`` triples row by row."""
        for y, row in enumerate(self._grid):
            for x, square in enumerate(row):
                yield x, y, square

    def position_of(self, square: Square) -> Optional[Tuple[int, int]]:
        """Return the ``(x, y)`` of ``square`` or ``None`` if not on this board."""
        for x, y, candidate in self.positions():
            if candidate is square:
                return x, y
        return None

    def is_symmetric(self) -> bool:
        """Return True if every link ``a -d-> b`` is matched by ``b -opposite(d)-> a``."""
        for square in self.squares():
            for direction in Direction:
                neighbour = square.square_at(direction)
                if neighbour is not None and (
                    neighbour.square_at(direction.opposite) is not square
                ):
                    return False
        return True

    def reachable_from(self, origin: Square, character: "Character") -> PSet[Square]:
        """Return every square ``character`` can walk to from ``origin``.

        Breadth-first over neighbour links, entering only squares accessible
        to ``character``. ``origin`` itself is always included.
        """
        seen = {origin}
        queue = deque([origin])
        while queue:
            square = queue.popleft()
            for neighbour in square.get_neighbours():
                if neighbour not in seen and neighbour.is_accessible_to(character):
                    seen.add(neighbour)
                    queue.append(neighbour)
        return pset(seen)
