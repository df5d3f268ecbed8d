from __future__ import annotations

from typing import Dict

import numpy as np

from stonecheck.core import Board, Game, PlayerId
from stonecheck.core.state import MAX_CHECKER_HEIGHT

PIECE_CHANNELS = 2  # own pieces, opponent pieces
AUX_VECTOR_SIZE = 4  # current player one-hot (2) + stones remaining (2)


def build_checker_planes(board: Board, perspective: PlayerId) -> np.ndarray:
    """Return checker heights scaled to [0, 1], shape (2, height, width)."""
    planes = np.zeros((PIECE_CHANNELS, board.height, board.width), dtype=np.float32)
    scaled = board.heights.astype(np.float32) / MAX_CHECKER_HEIGHT
    planes[0] = np.where(board.owners == int(perspective), scaled, 0.0)
    planes[1] = np.where(board.owners == int(perspective.opponent), scaled, 0.0)
    return planes


def build_stone_planes(board: Board, perspective: PlayerId) -> np.ndarray:
    """Return stone occupancy, shape (2, height + 1, width + 1)."""
    planes = np.zeros((PIECE_CHANNELS, board.height + 1, board.width + 1), dtype=np.float32)
    planes[0] = board.stones == int(perspective)
    planes[1] = board.stones == int(perspective.opponent)
    return planes


def build_aux_vector(game: Game, perspective: PlayerId) -> np.ndarray:
    aux = np.zeros((AUX_VECTOR_SIZE,), dtype=np.float32)
    aux[0 if game.current_player == perspective else 1] = 1.0
    max_stones = max(1, game.config.starting_stones)
    aux[2] = game.players[perspective].stones_remaining / max_stones
    aux[3] = game.players[perspective.opponent].stones_remaining / max_stones
    return aux


def game_to_numpy(game: Game, perspective: PlayerId = PlayerId.A) -> Dict[str, np.ndarray]:
    return {
        "checkers": build_checker_planes(game.board, perspective),
        "stones": build_stone_planes(game.board, perspective),
        "aux": build_aux_vector(game, perspective),
    }
