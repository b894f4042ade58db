from __future__ import annotations

import random

import orjson

from reversi_agent.engine.agent import EngineConfig
from reversi_agent.engine.board import Player
from reversi_agent.engine.notation import string_to_moves
from reversi_agent.engine.perft import play_moves
from reversi_agent.engine.policies import Agent, AgentMode
from reversi_agent.selfplay.runner import play_game
from reversi_agent.tools import bench_cli, perft_cli, selfplay_cli


def test_random_game_runs_to_completion():
    rng = random.Random(11)
    record = play_game(Agent(AgentMode.RANDOM, rng=rng), Agent(AgentMode.RANDOM, rng=rng))
    assert record.black_disks + record.white_disks <= 64
    assert record.result in (-1, 0, 1)
    assert string_to_moves(record.transcript) == record.moves
    board, _ = play_moves(record.moves)
    assert board.count(Player.BLACK) == record.black_disks
    assert board.count(Player.WHITE) == record.white_disks


def test_search_agent_plays_a_full_game():
    searcher = Agent(AgentMode.MINIMAX_SORTED, EngineConfig(start_depth=1, node_budget=0, use_ordering=True))
    record = play_game(Agent(AgentMode.RANDOM, rng=random.Random(5)), searcher)
    assert record.white == "minimax-sorted"
    board, _ = play_moves(record.moves)
    assert board.stones() == record.black_disks + record.white_disks
    assert len([m for m in record.moves if m is not None]) == board.stones() - 4


def test_perft_cli(capsys):
    perft_cli.main(["--depth", "2"])
    assert capsys.readouterr().out.startswith("perft(d=2)=12 ")


def test_bench_cli(capsys):
    bench_cli.main(["--positions", "2", "--plies", "6", "--depth", "2"])
    lines = capsys.readouterr().out.splitlines()
    assert len(lines) == 3
    assert "best-first" in lines[1]


def test_selfplay_cli_writes_json(tmp_path, monkeypatch):
    monkeypatch.setattr(selfplay_cli, "setup_logging", lambda **kwargs: None)
    cfg = tmp_path / "config.toml"
    cfg.write_text("[engine]\nminimax_depth = 1\n", encoding="utf-8")
    out = tmp_path / "games.json"
    selfplay_cli.main([
        "--black", "random", "--white", "random", "--games", "2", "--seed", "4",
        "--config", str(cfg), "--output", str(out),
    ])
    data = orjson.loads(out.read_bytes())
    assert data["config"]["games"] == 2
    assert len(data["games"]) == 2
    assert all(g["black_disks"] + g["white_disks"] <= 64 for g in data["games"])
