from __future__ import annotations

import argparse
import logging
import pathlib
import random
import sys
from typing import Optional

from ..config import ConfigError, Settings, ensure_config, load_settings
from ..duel.session import DuelSession
from ..engine.policies import Agent, AgentMode
from ..logging_setup import setup_logging


def load_cli_settings(config: Optional[str]) -> Settings:
    if config is None:
        ensure_config()
        return load_settings()
    return load_settings(pathlib.Path(config))


def main(argv: Optional[list[str]] = None) -> None:
    p = argparse.ArgumentParser(prog="reversi-agent", description="Reversi agent for the duel referee")
    p.add_argument("--config", default=None, help="Path to a TOML config (default ~/.reversi_agent/config.toml)")
    p.add_argument("--log-file", default=None, help="Override the log file from the config")
    p.add_argument("--seed", type=int, default=None, help="Seed for the random mode")
    sub = p.add_subparsers(dest="mode", required=True)
    sub.add_parser(AgentMode.RANDOM.value, help="Chooses a legal move with equal probability")
    for mode, text in (
        (AgentMode.MINIMAX, "Negamax with alpha-beta pruning"),
        (AgentMode.MINIMAX_SORTED, "Negamax with alpha-beta pruning and move ordering"),
        (AgentMode.TOURNAMENT, "Move ordering, depth and budget chosen from the game phase"),
    ):
        sp = sub.add_parser(mode.value, help=text)
        sp.add_argument("-d", "--depth", type=int, default=None, help="Start depth of the search")
    args = p.parse_args(argv)

    try:
        settings = load_cli_settings(args.config)
    except ConfigError as e:
        p.error(str(e))
    setup_logging(level=settings.log_level, log_file=args.log_file or settings.log_file)

    mode = AgentMode(args.mode)
    depth = getattr(args, "depth", None)
    if depth is not None and depth < 1:
        p.error("--depth must be >= 1")
    if depth is None and mode in (AgentMode.MINIMAX, AgentMode.MINIMAX_SORTED):
        depth = settings.minimax_depth
    agent = Agent.for_mode(mode, depth, settings.budgets, rng=random.Random(args.seed))
    logging.getLogger(__name__).info("Starting duel session mode=%s depth=%s", mode.value, depth)
    sys.exit(DuelSession(agent).run())


if __name__ == "__main__":
    main()
