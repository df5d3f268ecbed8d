from __future__ import annotations

from typing import Iterable, Iterator, Optional

import numpy as np

from stonecheck.core import Move, MoveCandidates


class MoveChooser:
    """Decision source picking one move out of the candidates offered for a turn."""

    def choose(self, candidates: MoveCandidates) -> Move:
        raise NotImplementedError

    def spawn(self, seed: Optional[int] = None) -> "MoveChooser":
        """Return a copy of this chooser for an independent game."""
        return self


class RandomChooser(MoveChooser):
    def __init__(self, rng: Optional[np.random.Generator] = None) -> None:
        self.rng = rng or np.random.default_rng()

    def choose(self, candidates: MoveCandidates) -> Move:
        moves = candidates.all()
        if not moves:
            raise ValueError(f"No candidate moves offered to player {candidates.player.name}.")
        return moves[int(self.rng.integers(len(moves)))]

    def spawn(self, seed: Optional[int] = None) -> "RandomChooser":
        return RandomChooser(np.random.default_rng(seed))


class ScriptedChooser(MoveChooser):
    """Plays a fixed sequence of moves, refusing any the game does not offer."""

    def __init__(self, moves: Iterable[Move]) -> None:
        self._moves: Iterator[Move] = iter(moves)

    def choose(self, candidates: MoveCandidates) -> Move:
        move = next(self._moves, None)
        if move is None:
            raise ValueError("Scripted moves exhausted.")
        if move not in candidates:
            raise ValueError(f"Scripted move {move} is not legal for player {candidates.player.name}.")
        return move
