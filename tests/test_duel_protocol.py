from __future__ import annotations

import io
import random

import pytest

from reversi_agent.duel.messages import (
    Bye,
    HeDid,
    OneMore,
    ProtocolError,
    Ugo,
    format_move,
    parse_message,
)
from reversi_agent.duel.session import DuelSession
from reversi_agent.engine.agent import EngineConfig
from reversi_agent.engine.board import Player
from reversi_agent.engine.movegen import IllegalMoveError
from reversi_agent.engine.policies import Agent, AgentMode


class TestParseMessage:
    def test_onemore_and_bye(self):
        assert parse_message("ONEMORE") == OneMore()
        assert parse_message("ONEMORE-1234") == OneMore()
        assert parse_message("BYE") == Bye()
        assert parse_message("BYE\n") == Bye()

    def test_ugo(self):
        assert parse_message("UGO 59.6969 0.0") == Ugo(59.6969, 0.0)
        assert parse_message("UGO 59.25 16.5\n") == Ugo(59.25, 16.5)

    @pytest.mark.parametrize("line", ["UGO 59.6969", "UGO     ", " UGO 1 2", "", "HELLO", "HEDID 1 2 3"])
    def test_rejects(self, line):
        with pytest.raises(ProtocolError):
            parse_message(line)

    def test_hedid_transposes_to_row_col(self):
        assert parse_message("HEDID 59.25 16.5 0 0") == HeDid(59.25, 16.5, (0, 0))
        assert parse_message("HEDID 1 2 3 5") == HeDid(1.0, 2.0, (5, 3))
        assert parse_message("HEDID 59.25 16.5 -1 -1") == HeDid(59.25, 16.5, None)

    def test_format_move(self):
        assert format_move((2, 3)) == "IDO 3 2"
        assert format_move(None) == "IDO -1 -1"


def _session(script: str, mode: AgentMode = AgentMode.MINIMAX):
    if mode is AgentMode.RANDOM:
        agent = Agent(mode, rng=random.Random(1))
    else:
        agent = Agent(mode, EngineConfig(start_depth=1, node_budget=0))
    out = io.StringIO()
    return DuelSession(agent, io.StringIO(script), out), out


class TestDuelSession:
    def test_moves_first_after_ugo(self):
        session, out = _session("UGO 10 100\nBYE\n")
        assert session.run() == 0
        assert out.getvalue().splitlines() == ["RDY", "IDO 3 2"]
        assert session.player is Player.BLACK
        assert session.board.count(Player.BLACK) == 4

    def test_replies_after_opponent_move(self):
        session, out = _session("HEDID 10 100 3 2\nBYE\n")
        assert session.run() == 0
        lines = out.getvalue().splitlines()
        assert lines[0] == "RDY"
        assert lines[1].startswith("IDO ") and lines[1] != "IDO -1 -1"
        assert session.player is Player.WHITE
        assert session.board.stones() == 6

    def test_onemore_resets_the_game(self):
        session, out = _session("UGO 1 1\nONEMORE\nHEDID 1 1 4 5\nBYE\n", AgentMode.RANDOM)
        assert session.run() == 0
        lines = out.getvalue().splitlines()
        assert lines[0] == "RDY" and lines[2] == "RDY"
        assert session.games == 2
        assert session.player is Player.WHITE

    def test_invalid_message_exits_with_error(self):
        session, out = _session("HELLO\n")
        assert session.run() == 1
        assert out.getvalue().splitlines() == ["RDY"]

    def test_closed_input_exits_with_error(self):
        session, _ = _session("")
        assert session.run() == 1

    def test_illegal_opponent_move_is_fatal(self):
        session, _ = _session("HEDID 1 1 0 0\n")
        with pytest.raises(IllegalMoveError):
            session.run()
