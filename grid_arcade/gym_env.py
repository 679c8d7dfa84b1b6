"""Gymnasium environment wrapper for grid_arcade.

Exposes a :class:`~grid_arcade.game.SinglePlayerGame` as a Gymnasium ``Env``.
The observation pairs an integer cell-code grid with a small status dict.
Reward is the delta of the player's score per step. ``terminated`` is
``True`` on win, ``truncated`` on lose (mirrors many Gym environments that
differentiate *natural* vs *forced* episode ends).

Observation schema:

``{"grid": np.ndarray(H, W) int8, "info": {"score", "phase", "turn", "pellets"}}``

Cell codes (topmost wins): player > ghost > pellet > square kind, see
:data:`CELL_CODES`.

Usage:

``env = ArcadeEnv(width=9, height=9, ghosts=2, seed=0)``

The environment is purposely *not* vectorized; wrap externally if needed.
"""

import gymnasium as gym
import numpy as np
from typing import Any, Callable, Dict, Optional, Tuple

from grid_arcade.actions import Action, GymAction
from grid_arcade.examples.arena import generate
from grid_arcade.game import SinglePlayerGame
from grid_arcade.square import Gate, Square, Wall
from grid_arcade.types import CharacterKind

ObsType = Dict[str, Any]

CELL_CODES: Dict[str, int] = {
    "ground": 0,
    "wall": 1,
    "gate": 2,
    "pellet": 3,
    "ghost": 4,
    "player": 5,
}

ASCII_GLYPHS: Dict[int, str] = {
    CELL_CODES["ground"]: " ",
    CELL_CODES["wall"]: "#",
    CELL_CODES["gate"]: "-",
    CELL_CODES["pellet"]: ".",
    CELL_CODES["ghost"]: "G",
    CELL_CODES["player"]: "P",
}


def cell_code(square: Square) -> int:
    """Return the observation code of the topmost thing on ``square``."""
    kinds = {occupant.kind for occupant in square.get_occupants()}
    if CharacterKind.PLAYER in kinds:
        return CELL_CODES["player"]
    if CharacterKind.GHOST in kinds:
        return CELL_CODES["ghost"]
    if square.pellet is not None:
        return CELL_CODES["pellet"]
    if isinstance(square, Wall):
        return CELL_CODES["wall"]
    if isinstance(square, Gate):
        return CELL_CODES["gate"]
    return CELL_CODES["ground"]


def grid_observation(game: SinglePlayerGame) -> np.ndarray:
    """Encode the board of ``game`` as an ``(height, width)`` int8 array."""
    board = game.level.board
    grid = np.zeros((board.height, board.width), dtype=np.int8)
    for x, y, square in board.positions():
        grid[y, x] = cell_code(square)
    return grid


def status_observation_dict(game: SinglePlayerGame) -> Dict[str, Any]:
    """Status portion of observation (score, phase, turn, pellets left)."""
    phase = "ongoing"
    if game.won:
        phase = "win"
    elif game.lost:
        phase = "lose"
    return {
        "score": int(game.score),
        "phase": phase,
        "turn": int(game.turn),
        "pellets": int(game.level.remaining_pellets()),
    }


class ArcadeEnv(gym.Env[ObsType, np.integer]):
    """Gymnasium ``Env`` implementation for a single player arcade game.

    The action space is ``Discrete(len(GymAction))``; see
    :mod:`grid_arcade.actions`.
    """

    metadata = {"render_modes": ["ansi"]}

    def __init__(
        self,
        render_mode: str = "ansi",
        initial_game_fn: Callable[..., SinglePlayerGame] = generate,
        **kwargs: Any,
    ):
        """Create a new environment instance.

        Arguments:
            render_mode: Only "ansi" (text frames) is supported.
            initial_game_fn: Callable returning a fresh ``SinglePlayerGame``.
            **kwargs: Forwarded to ``initial_game_fn`` (e.g. size, ghosts, seed).
        """
        from gymnasium import spaces

        self._initial_game_fn = initial_game_fn
        self._initial_game_kwargs = kwargs
        self._render_mode = render_mode

        self.game: Optional[SinglePlayerGame] = None

        # Build once to learn the board shape for the observation space
        game = initial_game_fn(**kwargs)
        height, width = game.level.board.height, game.level.board.width

        def int_box(low: int, high: int) -> spaces.Box:
            return spaces.Box(
                low=np.array(low, dtype=np.int64),
                high=np.array(high, dtype=np.int64),
                shape=(),
                dtype=np.int64,
            )

        self.observation_space = spaces.Dict(
            {
                "grid": spaces.Box(
                    low=0,
                    high=max(CELL_CODES.values()),
                    shape=(height, width),
                    dtype=np.int8,
                ),
                "info": spaces.Dict(
                    {
                        "score": int_box(0, 1_000_000_000),
                        "phase": spaces.Text(max_length=32),
                        "turn": int_box(0, 1_000_000_000),
                        "pellets": int_box(0, height * width),
                    }
                ),
            }
        )
        self.action_space = spaces.Discrete(len(GymAction))

        self.reset()

    def reset(
        self, *, seed: Optional[int] = None, options: Optional[Dict[str, object]] = None
    ) -> Tuple[ObsType, Dict[str, object]]:
        """Start a new episode.

        Arguments:
            seed: Overrides the ``seed`` kwarg of ``initial_game_fn`` when given.
            options: Gymnasium options (unused).

        Returns:
            Observation dict and empty info dict per Gymnasium API.
        """
        super().reset(seed=seed)
        kwargs = dict(self._initial_game_kwargs)
        if seed is not None:
            kwargs["seed"] = seed
        self.game = self._initial_game_fn(**kwargs)
        return self._get_obs(), self._get_info()

    def step(
        self, action: np.integer
    ) -> Tuple[ObsType, float, bool, bool, Dict[str, object]]:
        """Apply one environment step.

        Arguments:
            action: Integer index into the ``GymAction`` enum.

        Returns:
            (observation, reward, terminated, truncated, info)
        """
        assert self.game is not None

        if not 0 <= int(action) < len(GymAction):
            raise ValueError(f"Invalid action: {action}")
        game_action = Action[GymAction(int(action)).name]

        prev_score = self.game.score
        self.game.apply(game_action)
        reward = float(self.game.score - prev_score)
        return (
            self._get_obs(),
            reward,
            self.game.won,
            self.game.lost,
            self._get_info(),
        )

    def render(self, mode: Optional[str] = None) -> str:  # type: ignore
        """Render the current board as text, one line per row."""
        render_mode = mode or self._render_mode
        if render_mode != "ansi":
            raise NotImplementedError(f"Render mode '{render_mode}' not supported.")
        assert self.game is not None
        grid = grid_observation(self.game)
        return "\n".join(
            "".join(ASCII_GLYPHS[int(code)] for code in row) for row in grid
        )

    def _get_obs(self) -> ObsType:
        assert self.game is not None
        return {
            "grid": grid_observation(self.game),
            "info": status_observation_dict(self.game),
        }

    def _get_info(self) -> Dict[str, object]:
        """Return the step info (empty placeholder for compatibility)."""
        return {}

    def close(self) -> None:
        pass
