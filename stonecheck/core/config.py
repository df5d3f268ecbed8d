from __future__ import annotations

from dataclasses import dataclass
from typing import Optional

DEFAULT_WIDTH = 8
DEFAULT_HEIGHT = 6
STARTING_STONES = 32
MIN_BOARD_DIM = 4  # both starting clusters need two columns and four rows


@dataclass
class GameConfig:
    width: int = DEFAULT_WIDTH
    height: int = DEFAULT_HEIGHT
    starting_stones: int = STARTING_STONES
    seed: Optional[int] = None
    max_turns: Optional[int] = None

    def __post_init__(self) -> None:
        if self.width < MIN_BOARD_DIM or self.height < MIN_BOARD_DIM:
            raise ValueError(
                f"Board must be at least {MIN_BOARD_DIM}x{MIN_BOARD_DIM}, got {self.width}x{self.height}."
            )
        if self.starting_stones < 0:
            raise ValueError("starting_stones must be non-negative.")
        if self.max_turns is not None and self.max_turns <= 0:
            raise ValueError("max_turns must be positive when given.")
