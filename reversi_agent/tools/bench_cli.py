"""Compare evaluation counts of the move orders on random positions."""
from __future__ import annotations

import argparse
import random
from time import perf_counter
from typing import List, Optional, Tuple

from ..engine.bitboard import iter_squares
from ..engine.board import START_FIRST, START_SECOND
from ..engine.movegen import generate_moves, resolve_move
from ..engine.search import SCORE_INF, MoveOrder, Searcher


def random_positions(count: int, plies: int, rng: random.Random) -> List[Tuple[int, int]]:
    """Positions reached by `plies` random moves, side to move first."""
    out = []
    while len(out) < count:
        own, opp = START_FIRST, START_SECOND
        for _ in range(plies):
            moves = list(iter_squares(generate_moves(own, opp)))
            if not moves:
                own, opp = opp, own
                continue
            own, opp = resolve_move(own, opp, rng.choice(moves))
            own, opp = opp, own
        if generate_moves(own, opp):
            out.append((own, opp))
    return out


def count_evaluations(order: MoveOrder, positions: List[Tuple[int, int]], depth: int) -> int:
    """Leaf evaluations of a fixed-depth search over `positions` with `order`."""
    searcher = Searcher(order)
    for own, opp in positions:
        searcher.negamax(own, opp, depth, -SCORE_INF, SCORE_INF)
    return searcher.evaluations


def main(argv: Optional[list[str]] = None) -> None:
    p = argparse.ArgumentParser(prog="reversi-bench")
    p.add_argument("--positions", type=int, default=20)
    p.add_argument("--plies", type=int, default=20, help="Random plies played to reach each position")
    p.add_argument("--depth", type=int, default=4)
    p.add_argument("--seed", type=int, default=1)
    args = p.parse_args(argv)

    positions = random_positions(args.positions, args.plies, random.Random(args.seed))
    for order in MoveOrder:
        t0 = perf_counter()
        total = count_evaluations(order, positions, args.depth)
        dt = perf_counter() - t0
        print(f"{order.value:>12}: {total} evaluations, {total / len(positions):.0f}/position, {dt:.2f}s")


if __name__ == "__main__":
    main()
