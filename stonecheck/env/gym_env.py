from __future__ import annotations

from typing import Dict, Optional

import gymnasium as gym
import numpy as np
from gymnasium import spaces

from stonecheck.core import Game, GameConfig, GameResult, MoveCodec, PlayerId
from stonecheck.features import AUX_VECTOR_SIZE, PIECE_CHANNELS, game_to_numpy


class StonecheckEnv(gym.Env):
    """Both players act through ``step``; observations are from player A's side."""

    metadata = {"render_modes": ["ansi"], "render_fps": 4}

    def __init__(
        self,
        config: Optional[GameConfig] = None,
        *,
        enforce_legal_actions: bool = True,
        render_mode: Optional[str] = None,
    ) -> None:
        super().__init__()
        self.config = config or GameConfig()
        self._enforce_legal = enforce_legal_actions
        self.render_mode = render_mode
        self.codec = MoveCodec(self.config.width, self.config.height)

        width, height = self.config.width, self.config.height
        self.observation_space = spaces.Dict(
            {
                "checkers": spaces.Box(low=0.0, high=1.0, shape=(PIECE_CHANNELS, height, width), dtype=np.float32),
                "stones": spaces.Box(
                    low=0.0, high=1.0, shape=(PIECE_CHANNELS, height + 1, width + 1), dtype=np.float32
                ),
                "aux": spaces.Box(low=0.0, high=1.0, shape=(AUX_VECTOR_SIZE,), dtype=np.float32),
            }
        )
        self.action_space = spaces.Discrete(self.codec.size)

        self._game = Game(config=self.config)

    @property
    def game(self) -> Game:
        return self._game

    def reset(self, *, seed: Optional[int] = None, options: Optional[Dict] = None):
        super().reset(seed=seed)
        self._game.reset()
        if seed is not None:
            self._game.board.reseed(seed)
        observation = game_to_numpy(self._game)
        return observation, self._build_info()

    def step(self, action_index: int):
        if not self.action_space.contains(action_index):
            raise ValueError(f"Action index {action_index} out of bounds.")
        if self._game.is_over:
            raise ValueError("Episode is over; call reset() first.")

        if self._enforce_legal and not self.legal_action_mask()[action_index]:
            raise ValueError("Illegal action provided and enforce_legal_actions=True.")

        self._game.play_move(self.codec.decode(int(action_index)))
        while (
            not self._game.is_over
            and not self._game.stalled
            and self._game.legal_moves(self._game.current_player).is_empty
        ):
            self._game.pass_turn()

        terminated = self._game.is_over
        limit = self.config.max_turns
        truncated = not terminated and (
            self._game.stalled or (limit is not None and self._game.turn_count >= limit)
        )
        reward = self._compute_reward(self._game.result)
        return game_to_numpy(self._game), reward, terminated, truncated, self._build_info()

    def legal_action_mask(self) -> np.ndarray:
        mask = np.zeros(self.action_space.n, dtype=np.int8)
        if self._game.is_over:
            return mask
        for move in self._game.legal_moves(self._game.current_player):
            mask[self.codec.encode(move)] = 1
        return mask

    def render(self):
        if self.render_mode != "ansi":
            raise NotImplementedError("Only 'ansi' render mode is supported.")
        return self._game.board.as_string()

    # ------------------------------------------------------------------
    # Helpers
    # ------------------------------------------------------------------
    def _build_info(self) -> Dict[str, object]:
        return {
            "legal_action_mask": self.legal_action_mask(),
            "current_player": self._game.current_player,
        }

    def _compute_reward(self, result: GameResult) -> float:
        if result.winner == PlayerId.A:
            return 1.0
        if result.winner == PlayerId.B:
            return -1.0
        return 0.0
