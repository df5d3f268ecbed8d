"""Core game logic for Stonecheck."""

from .board import Board, FireOutcome, starting_layout
from .config import GameConfig, STARTING_STONES
from .errors import (
    BlockedError,
    BoardError,
    IllegalMoveError,
    NegationError,
    NoAttackersError,
    OccupiedError,
    OutOfBoundsError,
)
from .moves import (
    FireChecker,
    Move,
    MoveCandidates,
    MoveChecker,
    MoveCodec,
    PlaceStone,
    SlideStone,
)
from .rules import Game, MoveRecord
from .state import (
    ALL_DIRECTIONS,
    CARDINAL_DIRECTIONS,
    DOWN,
    LEFT,
    PLAYERS,
    RIGHT,
    UP,
    Checker,
    GameResult,
    Player,
    PlayerId,
    Stone,
    Vec2,
    WinReason,
)

__all__ = [
    "Board",
    "FireOutcome",
    "starting_layout",
    "GameConfig",
    "STARTING_STONES",
    "BoardError",
    "OutOfBoundsError",
    "OccupiedError",
    "NegationError",
    "BlockedError",
    "NoAttackersError",
    "IllegalMoveError",
    "Move",
    "MoveCandidates",
    "MoveChecker",
    "FireChecker",
    "PlaceStone",
    "SlideStone",
    "MoveCodec",
    "Game",
    "MoveRecord",
    "Vec2",
    "UP",
    "DOWN",
    "LEFT",
    "RIGHT",
    "CARDINAL_DIRECTIONS",
    "ALL_DIRECTIONS",
    "PlayerId",
    "PLAYERS",
    "Checker",
    "Stone",
    "Player",
    "GameResult",
    "WinReason",
]
