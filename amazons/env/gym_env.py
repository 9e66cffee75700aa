from __future__ import annotations

from typing import Dict, Optional

import gymnasium as gym
import numpy as np
from gymnasium import spaces

from amazons.core import (
    ACTION_VECTOR_SIZE,
    SIZE,
    Board,
    Move,
    Piece,
    decode_action,
    encode_action,
)
from amazons.features import (
    AUX_VECTOR_SIZE,
    BOARD_CHANNELS,
    build_aux_vector,
    build_board_tensor,
)


class AmazonsEnv(gym.Env):
    metadata = {"render_modes": ["ansi"], "render_fps": 4}

    def __init__(
        self,
        *,
        max_ply: int = 200,
        enforce_legal_actions: bool = True,
        render_mode: Optional[str] = None,
    ) -> None:
        super().__init__()
        self._max_ply = max_ply
        self._enforce_legal = enforce_legal_actions
        self.render_mode = render_mode

        board_shape = (BOARD_CHANNELS, SIZE, SIZE)
        self.observation_space = spaces.Dict(
            {
                "board": spaces.Box(low=0.0, high=1.0, shape=board_shape, dtype=np.float32),
                "aux": spaces.Box(low=0.0, high=1.0, shape=(AUX_VECTOR_SIZE,), dtype=np.float32),
            }
        )
        self.action_space = spaces.Discrete(ACTION_VECTOR_SIZE)

        self._board = Board()
        self._last_info: Dict[str, np.ndarray] = {}

    @property
    def board(self) -> Board:
        return self._board

    def reset(self, *, seed: Optional[int] = None, options: Optional[Dict] = None):
        super().reset(seed=seed)
        if options and "max_ply" in options:
            self._max_ply = int(options["max_ply"])
        self._board = Board()
        observation = self._build_observation()
        info = self._build_info()
        self._last_info = info
        return observation, info

    def step(self, action_index: int):
        if not self.action_space.contains(int(action_index)):
            raise ValueError(f"Action index {action_index} out of bounds.")

        move = decode_action(int(action_index))
        return self.step_move(move)

    def step_move(self, move: Move):
        if self._board.winner is not None:
            raise ValueError("Cannot step a finished game; call reset().")
        if self._enforce_legal and not self._board.is_legal(move):
            raise ValueError("Illegal action provided and enforce_legal_actions=True.")

        self._board.make_move(move)

        observation = self._build_observation()
        info = self._build_info()
        self._last_info = info

        reward = self._compute_reward(self._board.winner)
        terminated = self._board.winner is not None
        truncated = not terminated and self._board.num_moves >= self._max_ply

        return observation, reward, terminated, truncated, info

    def legal_action_mask(self) -> np.ndarray:
        mask = np.zeros(self.action_space.n, dtype=np.int8)
        if self._board.winner is not None:
            return mask
        for move in self._board.legal_moves():
            mask[encode_action(move)] = 1
        return mask

    def render(self):
        if self.render_mode != "ansi":
            raise NotImplementedError("Only 'ansi' render mode is supported.")
        return str(self._board)

    # ------------------------------------------------------------------
    # Helpers
    # ------------------------------------------------------------------
    def _build_observation(self) -> Dict[str, np.ndarray]:
        board = build_board_tensor(self._board)
        aux = build_aux_vector(self._board)
        return {"board": board, "aux": aux}

    def _build_info(self) -> Dict[str, np.ndarray]:
        return {"legal_action_mask": self.legal_action_mask()}

    def _compute_reward(self, winner: Optional[Piece]) -> float:
        if winner == Piece.WHITE:
            return 1.0
        if winner == Piece.BLACK:
            return -1.0
        return 0.0
