"""Feature extraction helpers for Stonecheck."""

from .observation import (
    AUX_VECTOR_SIZE,
    PIECE_CHANNELS,
    build_aux_vector,
    build_checker_planes,
    build_stone_planes,
    game_to_numpy,
)

__all__ = [
    "AUX_VECTOR_SIZE",
    "PIECE_CHANNELS",
    "build_aux_vector",
    "build_checker_planes",
    "build_stone_planes",
    "game_to_numpy",
]
