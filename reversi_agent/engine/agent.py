from __future__ import annotations

import logging
import random
from dataclasses import dataclass, field
from typing import Dict, Optional, Tuple

from .bitboard import iter_squares, popcount
from .board import Board, Player, legal_moves
from .eval import DEFAULT_WEIGHTS, EvalWeights
from .movegen import resolve_move
from .search import (
    DEFAULT_BUDGETS,
    SCORE_INF,
    BudgetTable,
    MoveOrder,
    SearchResult,
    Searcher,
    depth_for_stones,
)

log = logging.getLogger(__name__)

RowCol = Tuple[int, int]


@dataclass(frozen=True)
class EngineConfig:
    start_depth: Optional[int] = None  # None: pick from the stone count
    node_budget: Optional[int] = None  # per move, shared by the root moves; None: pick from the start depth
    use_ordering: bool = False
    budgets: BudgetTable = DEFAULT_BUDGETS
    weights: EvalWeights = DEFAULT_WEIGHTS

    def __post_init__(self) -> None:
        if self.start_depth is not None and self.start_depth < 1:
            raise ValueError(f"start_depth must be >= 1, got {self.start_depth}")
        if self.node_budget is not None and self.node_budget < 0:
            raise ValueError(f"node_budget must be >= 0, got {self.node_budget}")


@dataclass
class RootResult:
    """Outcome of a root search: the chosen square and one result per root move."""

    best_move: Optional[int]
    value: int
    start_depth: int
    budget: int
    searches: Dict[int, SearchResult] = field(default_factory=dict)

    @property
    def evaluations(self) -> int:
        return sum(r.evaluations for r in self.searches.values())


def search_root(board: Board, player: Player, config: EngineConfig = EngineConfig()) -> RootResult:
    """Search every root move of `player`; the move's budget is shared between them.

    Each root move gets its own searcher and an equal slice of the budget, so a
    move costs the budget plus at most one extra depth pass per root move.
    """
    own, opp = board.own_opp(player)
    moves = legal_moves(board, player)
    depth = config.start_depth if config.start_depth is not None else depth_for_stones(board.stones())
    budget = config.node_budget if config.node_budget is not None else config.budgets.for_depth(depth)
    result = RootResult(None, -SCORE_INF, depth, budget)
    if moves == 0:
        return result

    per_root = budget // popcount(moves)
    ordering = MoveOrder.BEST_FIRST if config.use_ordering else MoveOrder.NONE
    for sq in iter_squares(moves):
        new_own, new_opp = resolve_move(own, opp, sq)
        found = Searcher(ordering, config.weights).search(new_opp, new_own, depth, per_root)
        result.searches[sq] = found
        value = -found.score
        log.debug("root sq=%d value=%d depth=%d evals=%d", sq, value, found.depth, found.evaluations)
        if value > result.value:
            result.value = value
            result.best_move = sq
    return result


def choose_move(board: Board, player: Player, config: EngineConfig = EngineConfig()) -> Optional[RowCol]:
    """Pick a move for `player`, or None when the player must pass."""
    result = search_root(board, player, config)
    if result.best_move is None:
        return None
    move = divmod(result.best_move, 8)
    log.info(
        "%s plays %s value=%d start_depth=%d budget=%d evals=%d",
        player.name, move, result.value, result.start_depth, result.budget, result.evaluations,
    )
    return move


def pick_random_move(board: Board, player: Player, rng: Optional[random.Random] = None) -> Optional[RowCol]:
    moves = list(iter_squares(legal_moves(board, player)))
    if not moves:
        return None
    sq = (rng or random).choice(moves)
    return divmod(sq, 8)
