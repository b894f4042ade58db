from __future__ import annotations

from typing import Optional, Tuple

import pytest

from reversi_agent.engine.bitboard import iter_squares
from reversi_agent.engine.eval import evaluate
from reversi_agent.engine.movegen import generate_moves, resolve_move
from reversi_agent.engine.search import SCORE_INF

# Own disc on a2, opponent fills the a-file below it: own cannot move, opponent can
PASS_OWN = 1 << 8
PASS_OPP = sum(1 << (8 * r) for r in range(2, 8))


class LeafCounter:
    def __init__(self) -> None:
        self.leaves = 0

    def negamax(self, own: int, opp: int, depth: int) -> Tuple[int, Optional[int]]:
        """Full-width negamax without pruning."""
        own_moves = generate_moves(own, opp)
        opp_moves = generate_moves(opp, own)
        if own_moves == 0 and opp_moves != 0:
            score, _ = self.negamax(opp, own, depth)
            return -score, None
        if (own_moves == 0 and opp_moves == 0) or depth == 0:
            self.leaves += 1
            return evaluate(own, opp, own_moves, opp_moves), None
        best, best_move = -SCORE_INF, None
        for sq in iter_squares(own_moves):
            own2, opp2 = resolve_move(own, opp, sq)
            score, _ = self.negamax(opp2, own2, depth - 1)
            if -score > best:
                best, best_move = -score, sq
        return best, best_move


@pytest.fixture
def leaf_counter():
    return LeafCounter


@pytest.fixture
def pass_position():
    """(own, opp) where the side to move must pass."""
    return PASS_OWN, PASS_OPP
