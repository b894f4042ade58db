from __future__ import annotations

import argparse
from time import perf_counter
from typing import Optional

from ..engine.notation import string_to_moves
from ..engine.perft import perft_board, play_moves


def main(argv: Optional[list[str]] = None) -> None:
    p = argparse.ArgumentParser(prog="reversi-perft")
    p.add_argument("--depth", type=int, required=True)
    p.add_argument("--moves", type=str, default="", help="sequence like f5d6c3 ('--' for a pass)")
    args = p.parse_args(argv)

    try:
        board, player = play_moves(string_to_moves(args.moves))
    except ValueError as e:
        p.error(str(e))
    t0 = perf_counter()
    n = perft_board(board, player, args.depth)
    dt = perf_counter() - t0
    print(f"perft(d={args.depth})={n} in {dt:.3f}s")


if __name__ == "__main__":
    main()
