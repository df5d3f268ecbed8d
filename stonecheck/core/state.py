from __future__ import annotations

from dataclasses import dataclass, field
from enum import Enum, IntEnum
from typing import Optional, Tuple

MAX_CHECKER_HEIGHT = 3


@dataclass(frozen=True)
class Vec2:
    x: int
    y: int

    def __add__(self, other: "Vec2") -> "Vec2":
        return Vec2(self.x + other.x, self.y + other.y)

    def __sub__(self, other: "Vec2") -> "Vec2":
        return Vec2(self.x - other.x, self.y - other.y)

    def __mul__(self, factor: int) -> "Vec2":
        return Vec2(self.x * factor, self.y * factor)

    __rmul__ = __mul__

    def up(self) -> "Vec2":
        return self + UP

    def down(self) -> "Vec2":
        return self + DOWN

    def left(self) -> "Vec2":
        return self + LEFT

    def right(self) -> "Vec2":
        return self + RIGHT

    def as_tuple(self) -> Tuple[int, int]:
        return (self.x, self.y)


UP = Vec2(0, -1)
DOWN = Vec2(0, 1)
LEFT = Vec2(-1, 0)
RIGHT = Vec2(1, 0)

CARDINAL_DIRECTIONS: Tuple[Vec2, ...] = (UP, DOWN, LEFT, RIGHT)
ALL_DIRECTIONS: Tuple[Vec2, ...] = CARDINAL_DIRECTIONS + (
    Vec2(-1, -1),
    Vec2(1, -1),
    Vec2(-1, 1),
    Vec2(1, 1),
)


class PlayerId(IntEnum):
    EMPTY = 0
    A = 1
    B = 2

    @property
    def opponent(self) -> "PlayerId":
        if self == PlayerId.EMPTY:
            raise ValueError("The empty player has no opponent.")
        return PlayerId.B if self == PlayerId.A else PlayerId.A


PLAYERS: Tuple[PlayerId, PlayerId] = (PlayerId.A, PlayerId.B)


class GameResult(Enum):
    ONGOING = "ongoing"
    PLAYER_A_WIN = "player_a_win"
    PLAYER_B_WIN = "player_b_win"

    @property
    def winner(self) -> Optional[PlayerId]:
        if self == GameResult.PLAYER_A_WIN:
            return PlayerId.A
        if self == GameResult.PLAYER_B_WIN:
            return PlayerId.B
        return None

    @staticmethod
    def for_winner(player: PlayerId) -> "GameResult":
        if player == PlayerId.A:
            return GameResult.PLAYER_A_WIN
        if player == PlayerId.B:
            return GameResult.PLAYER_B_WIN
        raise ValueError("The empty player cannot win.")


class WinReason(Enum):
    BREAKTHROUGH = "breakthrough"
    CIRCULARITY = "circularity"
    CONNECTION = "connection"


@dataclass(frozen=True)
class Checker:
    owner: PlayerId = PlayerId.EMPTY
    height: int = 0

    def __post_init__(self) -> None:
        if not 0 <= self.height <= MAX_CHECKER_HEIGHT:
            raise ValueError(f"Checker height {self.height} outside 0..{MAX_CHECKER_HEIGHT}.")
        if (self.height == 0) != (self.owner == PlayerId.EMPTY):
            raise ValueError("A checker is empty exactly when its height is zero.")

    @staticmethod
    def empty() -> "Checker":
        return Checker(PlayerId.EMPTY, 0)

    @property
    def is_empty(self) -> bool:
        return self.owner == PlayerId.EMPTY


@dataclass(frozen=True)
class Stone:
    owner: PlayerId = PlayerId.EMPTY

    @staticmethod
    def empty() -> "Stone":
        return Stone(PlayerId.EMPTY)

    @property
    def is_empty(self) -> bool:
        return self.owner == PlayerId.EMPTY


@dataclass
class Player:
    id: PlayerId
    max_stones: int
    stones_remaining: int = field(init=False)

    def __post_init__(self) -> None:
        self.stones_remaining = self.max_stones

    def take_stone(self) -> Optional[Stone]:
        """Debit one stone from the inventory; ``None`` once it is exhausted."""
        if self.stones_remaining <= 0:
            return None
        self.stones_remaining -= 1
        return Stone(self.id)

    def reset(self) -> None:
        self.stones_remaining = self.max_stones
