import pytest

from reversi_agent.engine.board import START_FIRST, START_SECOND, Player
from reversi_agent.engine.notation import string_to_moves
from reversi_agent.engine.perft import perft, perft_board, play_moves


def test_perft_depths():
    assert perft(START_FIRST, START_SECOND, 1) == 4
    assert perft(START_FIRST, START_SECOND, 2) == 12
    assert perft(START_FIRST, START_SECOND, 3) == 56
    # Classical Othello perft counts from start
    assert perft(START_FIRST, START_SECOND, 4) == 244
    assert perft(START_FIRST, START_SECOND, 5) == 1396
    assert perft(START_FIRST, START_SECOND, 6) == 8200


def test_play_moves_and_perft_board():
    board, player = play_moves(string_to_moves("d3c5"))
    assert player is Player.BLACK
    assert board.stones() == 6
    # every reply to the diagonal opening
    assert perft_board(board, player, 1) > 0


def test_play_moves_rejects_pass_with_legal_moves():
    with pytest.raises(ValueError):
        play_moves([None])
