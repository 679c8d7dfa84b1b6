from typing import List, Tuple

import pytest

from grid_arcade.character import Character, Ghost, Player
from grid_arcade.movement import move
from grid_arcade.pellet import Pellet
from grid_arcade.types import Direction, MoveResult
from tests.test_utils import (
    assert_back_references,
    board_snapshot,
    make_board,
    make_open_board,
    place,
)


def test_move_to_open_neighbour() -> None:
    board = make_open_board(3, 3)
    player = place(Player(), board, (1, 1))
    assert move(player, Direction.EAST) == MoveResult.MOVED
    assert player.square is board.square_at(2, 1)
    assert board.square_at(1, 1).get_occupants() == []
    assert board.square_at(2, 1).get_occupants() == [player]
    assert_back_references(board)


def test_move_without_neighbour_is_noop() -> None:
    board = make_board([".  ", "   "])
    player = place(Player(), board, (0, 0))
    before = board_snapshot(board)
    assert move(player, Direction.NORTH) == MoveResult.NO_NEIGHBOUR
    assert board_snapshot(board) == before
    assert player.square is board.square_at(0, 0)


@pytest.mark.parametrize(
    "rows, character, expected",
    [
        (["  #"], Player(), MoveResult.INACCESSIBLE),
        (["  #"], Ghost(), MoveResult.INACCESSIBLE),
        (["  -"], Player(), MoveResult.INACCESSIBLE),
        (["  -"], Ghost(), MoveResult.MOVED),
    ],
)
def test_move_respects_accessibility(
    rows: List[str], character: Character, expected: MoveResult
) -> None:
    board = make_board(rows)
    place(character, board, (1, 0))
    result = move(character, Direction.EAST)
    assert result == expected
    expected_pos = (2, 0) if expected == MoveResult.MOVED else (1, 0)
    assert character.square is board.square_at(*expected_pos)
    assert_back_references(board)


def test_move_unplaced_character_raises() -> None:
    with pytest.raises(ValueError):
        move(Player(), Direction.NORTH)


def test_player_consumes_pellet_once() -> None:
    board = make_board([" .", "  "])
    player = place(Player(), board, (0, 0))
    eaten: List[Tuple[Character, Pellet]] = []
    pellet = board.square_at(1, 0).pellet

    move(player, Direction.EAST, on_consume=lambda c, p: eaten.append((c, p)))
    assert board.square_at(1, 0).pellet is None
    assert eaten == [(player, pellet)]

    move(player, Direction.WEST, on_consume=lambda c, p: eaten.append((c, p)))
    move(player, Direction.EAST, on_consume=lambda c, p: eaten.append((c, p)))
    assert len(eaten) == 1

    ghost = place(Ghost(), board, (1, 1))
    result = move(ghost, Direction.NORTH, on_consume=lambda c, p: eaten.append((c, p)))
    assert result == MoveResult.MOVED
    assert board.square_at(1, 0).get_occupants() == [player, ghost]
    assert len(eaten) == 1


def test_ghost_does_not_consume_pellet() -> None:
    board = make_board([" ."])
    ghost = place(Ghost(), board, (0, 0))
    eaten: List[Pellet] = []
    move(ghost, Direction.EAST, on_consume=lambda c, p: eaten.append(p))
    assert board.square_at(1, 0).pellet is not None
    assert eaten == []


def test_occupant_order_follows_arrival() -> None:
    board = make_open_board(3, 1)
    a = place(Player(), board, (0, 0))
    b = place(Ghost(), board, (2, 0))
    move(a, Direction.EAST)
    move(b, Direction.WEST)
    assert board.square_at(1, 0).get_occupants() == [a, b]
    assert_back_references(board)


def test_back_references_hold_after_random_walk() -> None:
    board = make_board(["  # ", " -  ", "    "], wrap=True)
    characters: List[Character] = [
        place(Player(), board, (0, 0)),
        place(Ghost(), board, (3, 2)),
        place(Ghost(), board, (0, 2)),
    ]
    directions = list(Direction)
    for i in range(60):
        move(characters[i % 3], directions[(i * 7) % 4])
        assert_back_references(board)
    placed = [c for square in board.squares() for c in square.get_occupants()]
    assert sorted(c.id for c in placed) == sorted(c.id for c in characters)
