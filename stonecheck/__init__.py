"""Stonecheck rules engine package."""

from . import choosers, core, env, evaluation, features
from .choosers import MoveChooser, RandomChooser, ScriptedChooser
from .core import Board, Game, GameConfig, GameResult, PlayerId, Vec2
from .env import StonecheckEnv
from .evaluation import EvaluationResult, evaluate_choosers
from .features import build_checker_planes, build_stone_planes, game_to_numpy

__all__ = [
    "choosers",
    "core",
    "env",
    "evaluation",
    "features",
    "Board",
    "Game",
    "GameConfig",
    "GameResult",
    "PlayerId",
    "Vec2",
    "MoveChooser",
    "RandomChooser",
    "ScriptedChooser",
    "StonecheckEnv",
    "EvaluationResult",
    "evaluate_choosers",
    "build_checker_planes",
    "build_stone_planes",
    "game_to_numpy",
]
