"""Self-play CLI for matches between agent modes"""
from __future__ import annotations

import argparse
import logging
import pathlib
import random
import sys
from typing import Optional

import orjson

from ..config import ConfigError
from ..engine.policies import Agent, AgentMode
from ..logging_setup import setup_logging
from ..selfplay.runner import play_game
from .cli import load_cli_settings

MODES = [m.value for m in AgentMode]


def main(argv: Optional[list[str]] = None) -> None:
    parser = argparse.ArgumentParser(prog="reversi-selfplay", description="Play local games between agent modes")
    parser.add_argument("--black", choices=MODES, default=AgentMode.TOURNAMENT.value)
    parser.add_argument("--white", choices=MODES, default=AgentMode.RANDOM.value)
    parser.add_argument("--black-depth", type=int, default=None)
    parser.add_argument("--white-depth", type=int, default=None)
    parser.add_argument("--games", type=int, default=10, help="Number of games (default: 10)")
    parser.add_argument("--seed", type=int, default=None, help="Random seed for reproducibility")
    parser.add_argument("--config", default=None)
    parser.add_argument("--output", help="Output file for game results (JSON)")
    args = parser.parse_args(argv)

    try:
        settings = load_cli_settings(args.config)
    except ConfigError as e:
        parser.error(str(e))
    setup_logging(level=settings.log_level, log_file=settings.log_file, overwrite=False)
    log = logging.getLogger(__name__)

    rng = random.Random(args.seed)
    black = Agent.for_mode(AgentMode(args.black), args.black_depth, settings.budgets, rng)
    white = Agent.for_mode(AgentMode(args.white), args.white_depth, settings.budgets, rng)

    wins = {1: 0, -1: 0, 0: 0}
    records = []
    try:
        for i in range(args.games):
            record = play_game(black, white)
            wins[record.result] += 1
            records.append(record)
            log.info("game %d: %d-%d %s", i + 1, record.black_disks, record.white_disks, record.transcript)
    except KeyboardInterrupt:
        log.info("Self-play interrupted by user")
        sys.exit(1)

    log.info("%s (black) vs %s (white): %dW %dL %dD", args.black, args.white, wins[1], wins[-1], wins[0])

    if args.output:
        output_data = {
            "config": {"black": args.black, "white": args.white, "games": args.games, "seed": args.seed},
            "games": [
                {
                    "moves": r.transcript,
                    "black_disks": r.black_disks,
                    "white_disks": r.white_disks,
                    "result": r.result,
                }
                for r in records
            ],
        }
        pathlib.Path(args.output).write_bytes(orjson.dumps(output_data, option=orjson.OPT_INDENT_2))
        log.info("Results saved to %s", args.output)


if __name__ == "__main__":
    main()
