from typing import List

import pytest

from grid_arcade.actions import Action
from grid_arcade.character import Ghost, Player
from grid_arcade.game import SinglePlayerGame
from grid_arcade.level import Level
from grid_arcade.pellet import Pellet
from grid_arcade.types import Direction, MoveResult
from tests.test_utils import (
    assert_back_references,
    board_snapshot,
    make_game,
    make_open_board,
    place,
)


def test_scenario_up_twice_on_three_by_three() -> None:
    game, player, _ = make_game([" . ", "   ", "   "], player_pos=(1, 1))
    board = game.level.board
    origin, north = board.square_at(1, 1), board.square_at(1, 0)
    # an extra pellet elsewhere keeps the level from being won
    board.square_at(0, 2).set_pellet(Pellet())

    assert game.up() == MoveResult.MOVED
    assert player.square is north
    assert north.pellet is None
    assert player not in origin.get_occupants()
    assert game.score == 10

    before = board_snapshot(board)
    assert game.up() == MoveResult.NO_NEIGHBOUR
    assert board_snapshot(board) == before
    assert player.square is north
    assert_back_references(board)


@pytest.mark.parametrize(
    "command, expected",
    [
        (SinglePlayerGame.up, (1, 0)),
        (SinglePlayerGame.down, (1, 2)),
        (SinglePlayerGame.left, (0, 1)),
        (SinglePlayerGame.right, (2, 1)),
    ],
)
def test_directional_commands(command, expected) -> None:
    game, player, _ = make_game(["   ", "   ", "   "], player_pos=(1, 1))
    command(game)
    assert player.square is game.level.board.square_at(*expected)


def test_walls_and_gates_block_player() -> None:
    game, player, _ = make_game([" # ", "-  ", "   "], player_pos=(0, 0))
    start = player.square
    assert game.right() == MoveResult.INACCESSIBLE
    assert game.down() == MoveResult.INACCESSIBLE
    assert player.square is start
    assert game.turn == 2


@pytest.mark.parametrize("count", [0, 2])
def test_single_player_game_requires_exactly_one_player(count: int) -> None:
    board = make_open_board(3, 1)
    players = [place(Player(), board, (i, 0)) for i in range(count)]
    with pytest.raises(ValueError):
        SinglePlayerGame(Level(board, players))


def test_eating_last_pellet_wins() -> None:
    game, player, _ = make_game(["  ..", "    "], player_pos=(1, 0))
    game.right()
    assert not game.won
    game.right()
    assert game.won and not game.lost
    assert game.score == 20
    assert game.right() == MoveResult.GAME_OVER
    assert game.turn == 2


def test_moving_onto_ghost_loses() -> None:
    game, player, (ghost,) = make_game([". . "], player_pos=(1, 0), ghost_pos=[(2, 0)])
    game.right()
    assert not player.alive
    assert game.lost and not game.won
    assert game.move(ghost, Direction.WEST) == MoveResult.GAME_OVER
    assert ghost.square is game.level.board.square_at(2, 0)


def test_ghost_moving_onto_player_loses() -> None:
    game, player, (ghost,) = make_game([".  ."], player_pos=(1, 0), ghost_pos=[(2, 0)])
    assert game.move(ghost, Direction.WEST) == MoveResult.MOVED
    assert game.level.board.square_at(1, 0).get_occupants() == [player, ghost]
    assert game.lost


def test_ghost_passes_gate_and_leaves_pellets() -> None:
    game, _, (ghost,) = make_game(["   .", "#-. "], player_pos=(0, 0), ghost_pos=[(1, 0)])
    board = game.level.board
    assert game.move(ghost, Direction.SOUTH) == MoveResult.MOVED
    assert game.move(ghost, Direction.EAST) == MoveResult.MOVED
    assert board.square_at(2, 1).pellet is not None
    assert game.level.remaining_pellets() == 2
    assert not game.is_over()


def test_pellet_listeners_are_notified() -> None:
    game, player, _ = make_game([" ..", "   "], player_pos=(0, 0))
    pellet = game.level.board.square_at(1, 0).pellet
    seen: List[tuple] = []
    game.add_pellet_listener(lambda c, p: seen.append((c, p)))
    game.right()
    assert seen == [(player, pellet)]
    assert game.score == 10


def test_apply_actions() -> None:
    game, player, _ = make_game(["  .", "   "], player_pos=(0, 0))
    assert game.apply(Action.WAIT) is None
    assert game.apply(Action.DOWN) == MoveResult.MOVED
    assert game.apply(Action.RIGHT) == MoveResult.MOVED
    assert player.square is game.level.board.square_at(1, 1)
    assert game.turn == 3
    with pytest.raises(ValueError):
        game.apply("jump")  # type: ignore[arg-type]


def test_wrap_around_tunnel() -> None:
    game, player, _ = make_game(["  .", "   "], player_pos=(0, 0), wrap=True)
    assert game.left() == MoveResult.MOVED
    assert player.square is game.level.board.square_at(2, 0)
    assert game.won


def test_player_ghost_share_square_back_references() -> None:
    game, player, ghosts = make_game(
        [".   ", "    "], player_pos=(3, 1), ghost_pos=[(1, 0), (2, 0)]
    )
    game.move(ghosts[0], Direction.EAST)
    board = game.level.board
    assert board.square_at(2, 0).get_occupants() == [ghosts[1], ghosts[0]]
    assert isinstance(ghosts[0], Ghost)
    assert_back_references(board)
