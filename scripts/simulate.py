#!/usr/bin/env python3
"""Play a batch of random-vs-random games and print a JSON summary."""

import argparse
import json
import logging
from pathlib import Path

import numpy as np
import yaml

from stonecheck.choosers import RandomChooser
from stonecheck.core import GameConfig
from stonecheck.evaluation import evaluate_choosers


def main() -> None:
    parser = argparse.ArgumentParser()
    parser.add_argument("--config", type=str, default="configs/default.yaml")
    parser.add_argument("--episodes", type=int)
    parser.add_argument("--width", type=int)
    parser.add_argument("--height", type=int)
    parser.add_argument("--starting-stones", type=int)
    parser.add_argument("--max-turns", type=int)
    parser.add_argument("--seed", type=int)
    parser.add_argument("--log-level", default="WARNING")
    args = parser.parse_args()

    logging.basicConfig(level=args.log_level.upper(), format="%(asctime)s %(name)s %(levelname)s %(message)s")

    cfg = {}
    if args.config:
        cfg_path = Path(args.config)
        if cfg_path.exists():
            cfg = yaml.safe_load(cfg_path.read_text(encoding="utf-8")) or {}
    episodes = args.episodes if args.episodes is not None else cfg.get("episodes", 10)

    game_cfg = cfg.get("game", {})
    overrides = {
        "width": args.width,
        "height": args.height,
        "starting_stones": args.starting_stones,
        "max_turns": args.max_turns,
        "seed": args.seed,
    }
    game_cfg.update({key: value for key, value in overrides.items() if value is not None})
    config = GameConfig(**game_cfg)

    base = RandomChooser()
    seed_a, seed_b = (int(seed) for seed in np.random.SeedSequence(config.seed).generate_state(2))
    result = evaluate_choosers(
        base.spawn(seed_a),
        base.spawn(seed_b),
        episodes=episodes,
        config=config,
    )

    output = {
        "games": result.games_played,
        "player_a_wins": result.a_wins,
        "player_b_wins": result.b_wins,
        "undecided": result.undecided,
        "average_length": result.average_length,
        "player_a_winrate": result.winrate_a(),
        "player_b_winrate": result.winrate_b(),
    }
    print(json.dumps(output, indent=2))


if __name__ == "__main__":
    main()
