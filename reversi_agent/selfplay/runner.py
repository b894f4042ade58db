from __future__ import annotations

import logging
from dataclasses import dataclass, field
from typing import List, Optional

from ..engine.board import Board, Player, has_valid_move, is_game_over, make_move, start_board
from ..engine.notation import moves_to_string
from ..engine.policies import Agent
from ..logging_setup import log_event

log = logging.getLogger(__name__)


@dataclass
class GameRecord:
    black: str
    white: str
    moves: List[Optional[int]] = field(default_factory=list)  # None = pass
    black_disks: int = 0
    white_disks: int = 0

    @property
    def result(self) -> int:
        """+1 black win, -1 white win, 0 draw."""
        diff = self.black_disks - self.white_disks
        return 1 if diff > 0 else (-1 if diff < 0 else 0)

    @property
    def transcript(self) -> str:
        return moves_to_string(self.moves)


def play_game(black: Agent, white: Agent, board: Optional[Board] = None) -> GameRecord:
    b = start_board() if board is None else board
    agents = {Player.BLACK: black, Player.WHITE: white}
    record = GameRecord(black.mode.value, white.mode.value)
    player = Player.BLACK
    while not is_game_over(b):
        move = agents[player].move(b, player)
        if move is None:
            assert not has_valid_move(b, player)
            record.moves.append(None)
        else:
            make_move(b, player, *move)
            record.moves.append(move[0] * 8 + move[1])
        player = player.enemy
    record.black_disks = b.count(Player.BLACK)
    record.white_disks = b.count(Player.WHITE)
    log_event(
        "selfplay", "game_end",
        black=record.black, white=record.white,
        score=[record.black_disks, record.white_disks], moves=record.transcript,
    )
    return record
