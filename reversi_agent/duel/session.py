from __future__ import annotations

import logging
import sys
import time
from typing import Optional, TextIO

from ..engine.board import Board, Player, make_move, start_board
from ..engine.policies import Agent
from ..logging_setup import log_event
from .messages import READY, Bye, HeDid, OneMore, ProtocolError, Ugo, format_move, parse_message

log = logging.getLogger(__name__)


class DuelSession:
    """Plays games against a referee over a line protocol.

    The side is decided by the first message of each game: ``UGO`` means we
    move first, a leading ``HEDID`` means the opponent did.
    """

    def __init__(self, agent: Agent, infile: Optional[TextIO] = None, outfile: Optional[TextIO] = None) -> None:
        self.agent = agent
        self.infile = infile if infile is not None else sys.stdin
        self.outfile = outfile if outfile is not None else sys.stdout
        self.board: Board = start_board()
        self.player: Optional[Player] = None
        self.games = 0

    def _send(self, line: str) -> None:
        self.outfile.write(line + "\n")
        self.outfile.flush()

    def reset(self) -> None:
        self.board = start_board()
        self.player = None
        self.games += 1
        log_event("duel", "game_start", game=self.games)
        self._send(READY)

    def run(self) -> int:
        self.reset()
        while True:
            line = self.infile.readline()
            if not line:
                log.error("Referee closed the input stream")
                return 1
            try:
                msg = parse_message(line)
            except ProtocolError:
                log.exception("Invalid message received, quitting")
                return 1

            if isinstance(msg, OneMore):
                self.reset()
                continue
            if isinstance(msg, Bye):
                log.info("Finished playing %d game(s), goodbye", self.games)
                return 0
            if isinstance(msg, Ugo):
                self.player = Player.BLACK
                log_event("duel", "first_move", turn_time=msg.turn_time, game_time=msg.game_time)
            elif isinstance(msg, HeDid):
                if self.player is None:
                    self.player = Player.WHITE
                log_event("duel", "opponent_move", move=msg.move, turn_time=msg.turn_time, game_time=msg.game_time)
                if msg.move is not None:
                    make_move(self.board, self.player.enemy, *msg.move)
            self._play_turn()

    def _play_turn(self) -> None:
        assert self.player is not None
        t0 = time.perf_counter()
        move = self.agent.move(self.board, self.player)
        elapsed_ms = int((time.perf_counter() - t0) * 1000)
        if move is not None:
            make_move(self.board, self.player, *move)
        log_event("duel", "move", player=self.player.name, move=move, ms=elapsed_ms)
        log.debug("board after move:\n%s", self.board)
        self._send(format_move(move))
