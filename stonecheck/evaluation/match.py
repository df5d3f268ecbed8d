from __future__ import annotations

import logging
from dataclasses import dataclass
from typing import Optional

from stonecheck.choosers import MoveChooser
from stonecheck.core import Game, GameConfig, PlayerId

logger = logging.getLogger(__name__)


@dataclass
class EvaluationResult:
    games_played: int
    a_wins: int
    b_wins: int
    undecided: int
    average_length: float

    def winrate_a(self) -> float:
        return self.a_wins / max(1, self.games_played)

    def winrate_b(self) -> float:
        return self.b_wins / max(1, self.games_played)


def evaluate_choosers(
    chooser_a: MoveChooser,
    chooser_b: MoveChooser,
    *,
    episodes: int,
    config: Optional[GameConfig] = None,
) -> EvaluationResult:
    """Play ``episodes`` games on one reused game object, resetting in between."""
    game = Game(chooser_a, chooser_b, config)

    a_wins = 0
    b_wins = 0
    undecided = 0
    total_turns = 0

    for episode in range(episodes):
        game.reset()
        winner = game.play()
        total_turns += game.turn_count
        if winner == PlayerId.A:
            a_wins += 1
        elif winner == PlayerId.B:
            b_wins += 1
        else:
            undecided += 1
        logger.debug(
            "episode %d finished after %d turns: winner=%s reason=%s",
            episode,
            game.turn_count,
            winner.name if winner is not None else None,
            game.win_reason.value if game.win_reason is not None else None,
        )

    return EvaluationResult(
        games_played=episodes,
        a_wins=a_wins,
        b_wins=b_wins,
        undecided=undecided,
        average_length=total_turns / max(1, episodes),
    )
