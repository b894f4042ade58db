from __future__ import annotations

import logging
from dataclasses import dataclass, field
from enum import Enum
from typing import List, Optional, Tuple

from .bitboard import FULL, iter_squares, popcount
from .eval import DEFAULT_WEIGHTS, WIN_THRESHOLD, EvalWeights, Phase, evaluate, phase_for_stones
from .movegen import generate_moves, resolve_move

log = logging.getLogger(__name__)

# Negating -SCORE_INF must stay a valid 32-bit score
SCORE_INF = (1 << 31) - 1

PHASE_DEPTHS = {Phase.OPENING: 2, Phase.MIDGAME: 4, Phase.ENDGAME: 8}


class MoveOrder(Enum):
    NONE = "none"
    BEST_FIRST = "best-first"
    WORST_FIRST = "worst-first"


@dataclass(frozen=True)
class BudgetTable:
    """Evaluation budget of one move, by iterative-deepening start depth.

    A depth pass runs to completion once started, so deep budgets are capped
    to keep a single move inside the turn clock.
    """

    shallow: int = 1_000
    mid: int = 2_000
    deep: int = 20_000
    cap: int = 50_000

    def for_depth(self, depth: int) -> int:
        if depth <= 2:
            budget = self.shallow
        elif depth <= 4:
            budget = self.mid
        else:
            budget = self.deep
        return min(budget, self.cap)


DEFAULT_BUDGETS = BudgetTable()


def depth_for_stones(stones: int) -> int:
    return PHASE_DEPTHS[phase_for_stones(stones)]


def budget_for_depth(depth: int, budgets: BudgetTable = DEFAULT_BUDGETS) -> int:
    return budgets.for_depth(depth)


@dataclass
class PassStats:
    depth: int
    score: int
    best_move: Optional[int]
    evaluations: int


@dataclass
class SearchResult:
    best_move: Optional[int]
    score: int
    depth: int
    evaluations: int
    passes: List[PassStats] = field(default_factory=list)

    @property
    def decided(self) -> bool:
        return abs(self.score) >= WIN_THRESHOLD


Child = Tuple[int, int, int]  # (square, new_own, new_opp)


class Searcher:
    def __init__(self, ordering: MoveOrder = MoveOrder.NONE, weights: EvalWeights = DEFAULT_WEIGHTS) -> None:
        self.ordering = ordering
        self.weights = weights
        self.evaluations = 0

    def search(self, own: int, opp: int, start_depth: int, node_budget: int) -> SearchResult:
        """Iterative deepening from `start_depth` until the budget is spent.

        The budget is checked between passes only, so the last pass may run
        past it. The result is the one of the last completed pass.
        """
        if start_depth < 1:
            raise ValueError(f"start_depth must be >= 1, got {start_depth}")
        self.evaluations = 0
        empties = popcount(~(own | opp) & FULL)
        passes: List[PassStats] = []
        depth = start_depth
        while True:
            before = self.evaluations
            score, move = self.negamax(own, opp, depth, -SCORE_INF, SCORE_INF)
            passes.append(PassStats(depth, score, move, self.evaluations - before))
            log.debug("pass depth=%d score=%d move=%s evals=%d", depth, score, move, self.evaluations - before)
            # >= also stops on one-disc wins, which sit exactly on the threshold
            if abs(score) >= WIN_THRESHOLD:
                break
            # Every line already reaches the end of the game
            if depth >= empties:
                break
            if self.evaluations >= node_budget:
                break
            depth += 1
        last = passes[-1]
        return SearchResult(last.best_move, last.score, last.depth, self.evaluations, passes)

    def negamax(self, own: int, opp: int, depth: int, alpha: int, beta: int) -> Tuple[int, Optional[int]]:
        own_moves = generate_moves(own, opp)
        opp_moves = generate_moves(opp, own)

        if own_moves == 0 and opp_moves != 0:
            score, _ = self.negamax(opp, own, depth, -beta, -alpha)
            return -score, None

        if (own_moves == 0 and opp_moves == 0) or depth == 0:
            self.evaluations += 1
            return evaluate(own, opp, own_moves, opp_moves, self.weights), None

        best_score = -SCORE_INF
        best_move: Optional[int] = None
        for sq, new_own, new_opp in self._children(own, opp, own_moves):
            score, _ = self.negamax(new_opp, new_own, depth - 1, -beta, -alpha)
            score = -score
            if score > best_score:
                best_score = score
                best_move = sq
            if best_score > alpha:
                alpha = best_score
            if alpha >= beta:
                break
        return best_score, best_move

    def _children(self, own: int, opp: int, moves: int) -> List[Child]:
        if self.ordering is MoveOrder.NONE:
            return [(sq, *resolve_move(own, opp, sq)) for sq in iter_squares(moves)]
        return self.order_moves(own, opp, moves)

    def order_moves(self, own: int, opp: int, moves: int) -> List[Child]:
        """Children scored from the mover's side, best first unless WORST_FIRST."""
        scored = []
        for sq in iter_squares(moves):
            new_own, new_opp = resolve_move(own, opp, sq)
            value = evaluate(
                new_own,
                new_opp,
                generate_moves(new_own, new_opp),
                generate_moves(new_opp, new_own),
                self.weights,
            )
            scored.append((value, (sq, new_own, new_opp)))
        # sort is stable, equal values keep square order
        scored.sort(key=lambda item: item[0], reverse=self.ordering is MoveOrder.BEST_FIRST)
        return [child for _, child in scored]


def search(
    own: int,
    opp: int,
    start_depth: int,
    node_budget: int,
    use_ordering: bool = False,
    weights: EvalWeights = DEFAULT_WEIGHTS,
) -> SearchResult:
    ordering = MoveOrder.BEST_FIRST if use_ordering else MoveOrder.NONE
    return Searcher(ordering, weights).search(own, opp, start_depth, node_budget)
